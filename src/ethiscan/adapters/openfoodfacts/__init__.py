"""Open Food Facts product catalog adapter."""

from __future__ import annotations

from .client import OpenFoodFactsCatalog, should_cache_payload
from .schema import ProductPayload, ProductResponse
from .translator import translate_product

__all__ = [
    "OpenFoodFactsCatalog",
    "ProductPayload",
    "ProductResponse",
    "should_cache_payload",
    "translate_product",
]
