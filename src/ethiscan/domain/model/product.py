"""Product facts and barcode validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

MISSING_VALUE: Final[str] = "N/A"


class InvalidBarcodeError(ValueError):
    """Raised when a decoded symbol is not a usable barcode."""


def normalize_barcode(value: str) -> str:
    """Return ``value`` stripped, or raise if it is not a non-empty digit string."""

    if not isinstance(value, str):
        raise InvalidBarcodeError(f"Barcode must be a string, got {type(value).__name__}")
    barcode = value.strip()
    if not barcode:
        raise InvalidBarcodeError("Barcode must not be empty")
    if not (barcode.isascii() and barcode.isdigit()):
        raise InvalidBarcodeError(f"Barcode must contain only digits: {value!r}")
    return barcode


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProductRecord:
    """Commercial facts about a product; every field is optional."""

    name: str | None = None
    brand: str | None = None
    category: str | None = None
    labels: str | None = None
    ingredients_text: str | None = None
    nutriscore: str | None = None

    def __post_init__(self) -> None:
        for attr in ("name", "brand", "category", "labels", "ingredients_text"):
            object.__setattr__(self, attr, _blank_to_none(getattr(self, attr)))
        grade = _blank_to_none(self.nutriscore)
        object.__setattr__(self, "nutriscore", grade.upper() if grade is not None else None)

    def as_display(self) -> dict[str, str]:
        return {
            "Product Name": self.name or MISSING_VALUE,
            "Brand": self.brand or MISSING_VALUE,
            "Category": self.category or MISSING_VALUE,
            "Labels": self.labels or MISSING_VALUE,
            "Ingredients Info": self.ingredients_text or MISSING_VALUE,
            "Nutri-Score": self.nutriscore or MISSING_VALUE,
        }
