"""Domain model for barcode resolution."""

from __future__ import annotations

from .enums import Domain, FindingLabel, LookupOutcome, ProviderId
from .product import MISSING_VALUE, InvalidBarcodeError, ProductRecord, normalize_barcode
from .report import EthicalFinding, ResolutionReport, SourceVisit

__all__ = [
    "MISSING_VALUE",
    "Domain",
    "EthicalFinding",
    "FindingLabel",
    "InvalidBarcodeError",
    "LookupOutcome",
    "ProductRecord",
    "ProviderId",
    "ResolutionReport",
    "SourceVisit",
    "normalize_barcode",
]
