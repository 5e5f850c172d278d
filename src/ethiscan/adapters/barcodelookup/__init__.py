"""BarcodeLookup retailer directory adapter."""

from __future__ import annotations

from .client import BarcodeLookupDirectory
from .schema import ProductPayload, ProductsResponse

__all__ = ["BarcodeLookupDirectory", "ProductPayload", "ProductsResponse"]
