"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ProviderId(StrEnum):
    OPENFOODFACTS = "openfoodfacts"
    BRAND_RATINGS = "brand_ratings"
    BARCODELOOKUP = "barcodelookup"
    ETHICAL_CONSUMER = "ethical_consumer"
    GOOGLE_SEARCH = "google_search"

    # Tags findings derived locally; never appears in a source trail.
    FOOD_HEURISTIC = "food_heuristic"


class Domain(StrEnum):
    """Classification bucket that selects the ethical-lookup strategy."""

    FOOD = "food"
    APPAREL_OR_PERSONAL_CARE = "apparel_or_personal_care"
    OTHER = "other"


class LookupOutcome(StrEnum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class FindingLabel(StrEnum):
    RATING = "Rating"
    COMMENT = "Comment"
    STATUS = "Status"
    TOP_MATCH = "Top Match"
    SNIPPET = "Snippet"
