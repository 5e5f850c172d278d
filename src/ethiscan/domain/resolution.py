"""Barcode resolution pipeline.

Consults the product catalog, classifies the product and picks one ethical
lookup strategy: the brand rating dataset for apparel and personal care, a
keyword heuristic for food, and a fallback chain of search providers for
everything else. Provider failures never escape :meth:`ResolutionPipeline.resolve`;
they are logged and recorded as ``failed`` visits on the report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from ethiscan.domain.classification import classify
from ethiscan.domain.model import (
    Domain,
    EthicalFinding,
    FindingLabel,
    LookupOutcome,
    ProviderId,
    ResolutionReport,
    SourceVisit,
    normalize_barcode,
)
from ethiscan.domain.ports.lookups import ProviderError

if TYPE_CHECKING:
    from threading import Event

    from ethiscan.domain.ports.lookups import (
        BrandRatingDataset,
        EthicalIndexSearch,
        LookupPort,
        ProductCatalog,
        RetailerDirectory,
        WebSearch,
    )

log = getLogger(__name__)

FOOD_FRIENDLY_KEYWORDS: Final[tuple[str, ...]] = ("organic", "fair")
FOOD_FRIENDLY_STATUS: Final[str] = "Organic / Fair Trade friendly"
FOOD_STANDARD_STATUS: Final[str] = "Standard food product"
WEB_SEARCH_SUFFIX: Final[str] = " ethical rating"


class ResolutionCancelledError(RuntimeError):
    """Raised when the caller cancels a resolution between provider calls."""

    def __init__(self, barcode: str, visits: tuple[SourceVisit, ...]) -> None:
        super().__init__(f"Resolution of {barcode} cancelled after {len(visits)} provider call(s)")
        self.barcode = barcode
        self.visits = visits


def food_heuristic(brand: str) -> EthicalFinding:
    """Rate a food product from keywords in its brand name."""

    lowered = brand.casefold()
    friendly = any(keyword in lowered for keyword in FOOD_FRIENDLY_KEYWORDS)
    status = FOOD_FRIENDLY_STATUS if friendly else FOOD_STANDARD_STATUS
    return EthicalFinding.from_items(ProviderId.FOOD_HEURISTIC, {FindingLabel.STATUS: status})


@dataclass(slots=True)
class _ResolutionRun:
    """Mutable bookkeeping for a single ``resolve`` call."""

    barcode: str
    cancel_event: Event | None = None
    manufacturer: str | None = None
    visits: list[SourceVisit] = field(default_factory=list["SourceVisit"])

    def consult[RequestT, ResultT](
        self,
        port: LookupPort[RequestT, ResultT],
        request: RequestT,
    ) -> ResultT | None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise ResolutionCancelledError(self.barcode, tuple(self.visits))

        provider = port.provider
        try:
            result = port.query(request)
        except ProviderError as exc:
            log.warning("%s lookup failed for %s: %s", provider, self.barcode, exc)
            self._record(provider, LookupOutcome.FAILED)
            return None
        except Exception:  # noqa: BLE001
            log.exception("Unexpected %s adapter error for %s", provider, self.barcode)
            self._record(provider, LookupOutcome.FAILED)
            return None

        if result is None:
            log.info("%s has no record for %r (barcode %s)", provider, request, self.barcode)
            self._record(provider, LookupOutcome.NOT_FOUND)
            return None

        self._record(provider, LookupOutcome.FOUND)
        return result

    def _record(self, provider: ProviderId, outcome: LookupOutcome) -> None:
        self.visits.append(SourceVisit(provider=provider, outcome=outcome))


@dataclass(frozen=True, slots=True)
class ResolutionPipeline:
    """Resolve a barcode into a :class:`ResolutionReport` using injected providers.

    The pipeline holds no mutable state, so one instance can serve concurrent
    resolutions from several threads.
    """

    catalog: ProductCatalog
    ratings: BrandRatingDataset
    retailer: RetailerDirectory
    ethical_index: EthicalIndexSearch
    web_search: WebSearch

    def resolve(self, barcode: str, *, cancel_event: Event | None = None) -> ResolutionReport:
        """Resolve ``barcode``; raises only for invalid input or cancellation."""

        code = normalize_barcode(barcode)
        run = _ResolutionRun(barcode=code, cancel_event=cancel_event)

        product = run.consult(self.catalog, code)
        brand = (product.brand or "").strip() if product is not None else ""
        domain = classify(product.category) if product is not None else Domain.OTHER
        log.debug("Barcode %s classified as %s (brand=%r)", code, domain, brand)

        finding: EthicalFinding | None = None
        if domain is Domain.FOOD:
            finding = food_heuristic(brand)
        elif domain is Domain.APPAREL_OR_PERSONAL_CARE and brand:
            finding = self._rated_brand(run, brand)

        if finding is None:
            finding = self._fallback_chain(run, brand)

        report = ResolutionReport(
            barcode=code,
            product=product,
            manufacturer=run.manufacturer,
            ethical=(finding,) if finding is not None else (),
            visits=tuple(run.visits),
        )
        log.info(
            "Resolved %s: product=%s, finding=%s, trail=%s",
            code,
            product is not None,
            finding.source if finding is not None else None,
            ",".join(report.source_trail),
        )
        return report

    def _rated_brand(self, run: _ResolutionRun, brand: str) -> EthicalFinding | None:
        record = run.consult(self.ratings, brand)
        if record is None:
            return None
        return EthicalFinding.from_items(
            self.ratings.provider,
            {FindingLabel.RATING: record.rating, FindingLabel.COMMENT: record.comment},
        )

    def _fallback_chain(self, run: _ResolutionRun, brand: str) -> EthicalFinding | None:
        if brand:
            finding = self._ethical_index(run, brand)
            if finding is not None:
                return finding
        else:
            # Single indirection: a manufacturer stands in for the missing brand.
            brand = (run.consult(self.retailer, run.barcode) or "").strip()
            run.manufacturer = brand or None
            if brand:
                finding = self._ethical_index(run, brand)
                if finding is not None:
                    return finding

        if not brand:
            return None
        snippet = (run.consult(self.web_search, f"{brand}{WEB_SEARCH_SUFFIX}") or "").strip()
        if not snippet:
            return None
        return EthicalFinding.from_items(self.web_search.provider, {FindingLabel.SNIPPET: snippet})

    def _ethical_index(self, run: _ResolutionRun, brand: str) -> EthicalFinding | None:
        hit = run.consult(self.ethical_index, brand)
        if hit is None:
            return None
        return EthicalFinding.from_items(
            self.ethical_index.provider, {FindingLabel.TOP_MATCH: hit.describe()}
        )
