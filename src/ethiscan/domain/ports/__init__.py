"""Domain port definitions for adapters."""

from __future__ import annotations

from .lookups import (
    BrandRating,
    BrandRatingDataset,
    EthicalIndexSearch,
    LookupPort,
    MalformedResponseError,
    ProductCatalog,
    ProviderError,
    RetailerDirectory,
    SearchHit,
    TransportError,
    WebSearch,
)

__all__ = [
    "BrandRating",
    "BrandRatingDataset",
    "EthicalIndexSearch",
    "LookupPort",
    "MalformedResponseError",
    "ProductCatalog",
    "ProviderError",
    "RetailerDirectory",
    "SearchHit",
    "TransportError",
    "WebSearch",
]
