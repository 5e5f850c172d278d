"""Application wiring entry points."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import cache
from logging import getLogger
from typing import TYPE_CHECKING

from ethiscan.adapters.barcodelookup import BarcodeLookupDirectory
from ethiscan.adapters.brand_ratings import JsonBrandRatings
from ethiscan.adapters.ethicalconsumer import EthicalConsumerSearch
from ethiscan.adapters.google_search import GoogleWebSearch
from ethiscan.adapters.openfoodfacts import OpenFoodFactsCatalog
from ethiscan.config import BrandRatingsConfig, get_resolver_config
from ethiscan.domain.model import normalize_barcode
from ethiscan.domain.resolution import ResolutionPipeline

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path
    from threading import Event

    from ethiscan.adapters.http_resilience import ClientFactory
    from ethiscan.config import ResolverConfig
    from ethiscan.domain.model import ResolutionReport

log = getLogger(__name__)

DEFAULT_MAX_WORKERS = 4


@cache
def shared_brand_ratings(path: Path) -> JsonBrandRatings:
    """Return the process-wide dataset adapter for ``path``; the file is read once."""

    return JsonBrandRatings(config=BrandRatingsConfig(path=path))


def build_resolver(
    config: ResolverConfig | None = None,
    *,
    client_factory: ClientFactory | None = None,
) -> ResolutionPipeline:
    """Wire the HTTP and file adapters into a :class:`ResolutionPipeline`.

    Raises :class:`~ethiscan.config.ConfigurationError` when required
    environment values are missing.
    """

    effective = config or get_resolver_config()
    return ResolutionPipeline(
        catalog=OpenFoodFactsCatalog(config=effective.openfoodfacts, client_factory=client_factory),
        ratings=shared_brand_ratings(effective.brand_ratings.path),
        retailer=BarcodeLookupDirectory(
            config=effective.barcodelookup, client_factory=client_factory
        ),
        ethical_index=EthicalConsumerSearch(
            config=effective.ethicalconsumer, client_factory=client_factory
        ),
        web_search=GoogleWebSearch(config=effective.google_search, client_factory=client_factory),
    )


def close_resolver(pipeline: ResolutionPipeline) -> None:
    """Stop the HTTP sessions held by the adapters of ``pipeline``."""

    for port in (pipeline.catalog, pipeline.retailer, pipeline.ethical_index, pipeline.web_search):
        close = getattr(port, "close", None)
        if callable(close):
            close()


def resolve_barcode(
    barcode: str,
    *,
    pipeline: ResolutionPipeline | None = None,
    cancel_event: Event | None = None,
) -> ResolutionReport:
    """Resolve a single barcode with the configured adapters."""

    effective = pipeline or build_resolver()
    try:
        return effective.resolve(barcode, cancel_event=cancel_event)
    finally:
        if pipeline is None:
            close_resolver(effective)


def resolve_barcodes(
    barcodes: Iterable[str],
    *,
    pipeline: ResolutionPipeline | None = None,
    max_workers: int = DEFAULT_MAX_WORKERS,
    cancel_event: Event | None = None,
) -> list[ResolutionReport]:
    """Resolve ``barcodes`` in parallel threads, returning reports in input order.

    Every barcode is validated before the first provider call, so one bad entry
    rejects the whole batch with :class:`~ethiscan.domain.model.InvalidBarcodeError`.
    """

    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")

    codes = [normalize_barcode(barcode) for barcode in barcodes]
    if not codes:
        return []

    effective = pipeline or build_resolver()
    log.info("Resolving %d barcode(s) with %d worker(s)", len(codes), max_workers)
    try:
        with ThreadPoolExecutor(
            max_workers=min(max_workers, len(codes)), thread_name_prefix="ethiscan"
        ) as executor:
            return list(
                executor.map(lambda code: effective.resolve(code, cancel_event=cancel_event), codes)
            )
    finally:
        if pipeline is None:
            close_resolver(effective)
