"""Ethical Consumer site-search adapter."""

from __future__ import annotations

from .client import EthicalConsumerSearch
from .translator import translate_search_page

__all__ = ["EthicalConsumerSearch", "translate_search_page"]
