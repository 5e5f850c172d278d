"""Resolution output: ethical findings, source visits and the final report."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import LookupOutcome, ProviderId

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .product import ProductRecord


@dataclass(frozen=True, slots=True, eq=False)
class EthicalFinding(Mapping[str, str]):
    """Ordered label → text mapping attributed to a single provider.

    The first entry is the primary one. A finding compares equal to a plain
    mapping holding the same items, and to another finding only when the
    source matches as well.
    """

    source: ProviderId
    entries: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_items(
        cls,
        source: ProviderId,
        items: Mapping[str, str] | Iterable[tuple[str, str]],
    ) -> EthicalFinding:
        pairs = items.items() if isinstance(items, Mapping) else items
        return cls(source=source, entries=tuple((str(k), str(v)) for k, v in pairs))

    def __getitem__(self, key: str) -> str:
        for label, text in self.entries:
            if label == key:
                return text
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return (label for label, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EthicalFinding):
            return self.source == other.source and self.entries == other.entries
        if isinstance(other, Mapping):
            return dict(self.entries) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, object]:
        return {"source": str(self.source), "findings": dict(self.entries)}


@dataclass(frozen=True, slots=True)
class SourceVisit:
    provider: ProviderId
    outcome: LookupOutcome


@dataclass(frozen=True, slots=True)
class ResolutionReport:
    """Immutable result of resolving one barcode.

    Reports are unhashable, like the findings they hold.
    ``manufacturer`` is set when the retailer directory named one.
    """

    barcode: str
    product: ProductRecord | None = None
    manufacturer: str | None = None
    ethical: tuple[EthicalFinding, ...] = ()
    visits: tuple[SourceVisit, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    @property
    def source_trail(self) -> tuple[ProviderId, ...]:
        return tuple(visit.provider for visit in self.visits)

    @property
    def is_degraded(self) -> bool:
        return self.product is None or not self.ethical

    def outcome_for(self, provider: ProviderId) -> LookupOutcome | None:
        """Return the outcome of the last visit to ``provider``, if any."""

        for visit in reversed(self.visits):
            if visit.provider is provider:
                return visit.outcome
        return None

    def to_dict(self) -> dict[str, object]:
        return {
            "barcode": self.barcode,
            "product": self.product.as_display() if self.product is not None else None,
            "manufacturer": self.manufacturer,
            "ethical": [finding.to_dict() for finding in self.ethical],
            "source_trail": [
                {"provider": str(visit.provider), "outcome": str(visit.outcome)}
                for visit in self.visits
            ],
        }

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
