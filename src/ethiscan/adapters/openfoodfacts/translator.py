"""Translate Open Food Facts payloads into domain product records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ethiscan.domain.model import ProductRecord

if TYPE_CHECKING:
    from .schema import ProductPayload


def translate_product(payload: ProductPayload) -> ProductRecord:
    return ProductRecord(
        name=payload.product_name,
        brand=payload.brands,
        category=payload.categories,
        labels=payload.labels,
        ingredients_text=payload.ingredients_text,
        nutriscore=payload.nutriscore_grade,
    )
