from __future__ import annotations

import pytest

from ethiscan.domain.classification import classify
from ethiscan.domain.model import Domain


@pytest.mark.parametrize(
    ("category", "expected"),
    [
        ("Clothing, Food", Domain.APPAREL_OR_PERSONAL_CARE),
        ("en:Personal Care, Shampoos", Domain.APPAREL_OR_PERSONAL_CARE),
        ("CLOTHING", Domain.APPAREL_OR_PERSONAL_CARE),
        ("Plant-based foods and beverages", Domain.FOOD),
        ("Seafood", Domain.FOOD),
        ("Electronics", Domain.OTHER),
        ("N/A", Domain.OTHER),
        ("", Domain.OTHER),
        (None, Domain.OTHER),
    ],
)
def test_classify(category: str | None, expected: Domain) -> None:
    assert classify(category) is expected
