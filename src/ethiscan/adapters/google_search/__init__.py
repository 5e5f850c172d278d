"""Google Custom Search adapter."""

from __future__ import annotations

from .client import GoogleWebSearch
from .schema import SearchItem, SearchResponse

__all__ = ["GoogleWebSearch", "SearchItem", "SearchResponse"]
