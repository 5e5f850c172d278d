"""Ports for querying external product and brand data.

Every provider exposes the same capability: ``query(request)`` returns a typed
result, ``None`` when the source has no record, or raises a
:class:`ProviderError` when the source could not be consulted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ethiscan.domain.model import ProductRecord, ProviderId


class ProviderError(RuntimeError):
    """Base class for failures while consulting an external provider."""

    def __init__(self, message: str, *, provider: ProviderId | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class TransportError(ProviderError):
    """Network, timeout, HTTP status or provider-reported failure."""


class MalformedResponseError(TransportError):
    """The provider answered with a payload of an unexpected shape."""


@dataclass(frozen=True, slots=True)
class BrandRating:
    rating: str
    comment: str = ""


@dataclass(frozen=True, slots=True)
class SearchHit:
    title: str
    link: str

    def describe(self) -> str:
        if not self.link:
            return self.title
        if not self.title:
            return self.link
        return f"{self.title} ({self.link})"


@runtime_checkable
class LookupPort[RequestT, ResultT](Protocol):
    """Uniform capability implemented by every provider adapter."""

    @property
    def provider(self) -> ProviderId: ...

    def query(self, request: RequestT, /) -> ResultT | None: ...


type ProductCatalog = LookupPort[str, ProductRecord]
"""Barcode → product facts."""

type BrandRatingDataset = LookupPort[str, BrandRating]
"""Exact brand name → rating record."""

type RetailerDirectory = LookupPort[str, str]
"""Barcode → manufacturer name."""

type EthicalIndexSearch = LookupPort[str, SearchHit]
"""Brand → first site-search result."""

type WebSearch = LookupPort[str, str]
"""Free-text query → first result snippet."""
