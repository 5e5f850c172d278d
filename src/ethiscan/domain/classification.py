"""Map free-text product categories onto lookup domains."""

from __future__ import annotations

from typing import Final

from ethiscan.domain.model import Domain

# Evaluated in order; the first rule with a matching keyword wins.
CATEGORY_RULES: Final[tuple[tuple[Domain, tuple[str, ...]], ...]] = (
    (Domain.APPAREL_OR_PERSONAL_CARE, ("clothing", "personal care")),
    (Domain.FOOD, ("food",)),
)


def classify(raw_category: str | None) -> Domain:
    """Return the domain for ``raw_category`` using case-insensitive substring rules.

    ``"Clothing, Food"`` resolves to :attr:`Domain.APPAREL_OR_PERSONAL_CARE`
    because the apparel rule is checked first. Blank, missing and ``"N/A"``
    categories fall through to :attr:`Domain.OTHER`.
    """

    if not raw_category:
        return Domain.OTHER
    category = raw_category.casefold()
    for domain, keywords in CATEGORY_RULES:
        if any(keyword in category for keyword in keywords):
            return domain
    return Domain.OTHER
