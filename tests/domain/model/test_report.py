from __future__ import annotations

import json

import pytest

from ethiscan.domain.model import (
    EthicalFinding,
    LookupOutcome,
    ProductRecord,
    ProviderId,
    ResolutionReport,
    SourceVisit,
)


def _report() -> ResolutionReport:
    return ResolutionReport(
        barcode="0123",
        product=ProductRecord(name="Tee", brand="Acme", category="Clothing", nutriscore="b"),
        ethical=(
            EthicalFinding.from_items(
                ProviderId.BRAND_RATINGS, {"Rating": "Good", "Comment": "Ça va"}
            ),
        ),
        visits=(
            SourceVisit(ProviderId.OPENFOODFACTS, LookupOutcome.FOUND),
            SourceVisit(ProviderId.BRAND_RATINGS, LookupOutcome.FOUND),
        ),
    )


def test_finding_behaves_like_an_ordered_mapping() -> None:
    finding = EthicalFinding.from_items(
        ProviderId.BRAND_RATINGS, [("Rating", "Good"), ("Comment", "")]
    )

    assert list(finding) == ["Rating", "Comment"]
    assert finding["Rating"] == "Good"
    assert finding.get("Missing") is None
    assert len(finding) == 2
    with pytest.raises(KeyError):
        finding["Missing"]


def test_finding_equality_respects_source_between_findings() -> None:
    rated = EthicalFinding.from_items(ProviderId.ETHICAL_CONSUMER, {"Top Match": "x"})
    searched = EthicalFinding.from_items(ProviderId.GOOGLE_SEARCH, {"Top Match": "x"})

    assert rated == {"Top Match": "x"}
    assert rated != searched
    assert rated == EthicalFinding.from_items(ProviderId.ETHICAL_CONSUMER, {"Top Match": "x"})


def test_report_to_dict_is_json_ready_and_ordered() -> None:
    data = _report().to_dict()

    assert list(data) == ["barcode", "product", "manufacturer", "ethical", "source_trail"]
    assert data["product"] == {
        "Product Name": "Tee",
        "Brand": "Acme",
        "Category": "Clothing",
        "Labels": "N/A",
        "Ingredients Info": "N/A",
        "Nutri-Score": "B",
    }
    assert data["manufacturer"] is None
    assert data["ethical"] == [
        {"source": "brand_ratings", "findings": {"Rating": "Good", "Comment": "Ça va"}}
    ]
    assert data["source_trail"] == [
        {"provider": "openfoodfacts", "outcome": "found"},
        {"provider": "brand_ratings", "outcome": "found"},
    ]


def test_report_to_json_round_trips_and_keeps_unicode() -> None:
    text = _report().to_json()

    assert "Ça va" in text
    assert json.loads(text) == _report().to_dict()


def test_report_accessors() -> None:
    report = _report()

    assert report.source_trail == (ProviderId.OPENFOODFACTS, ProviderId.BRAND_RATINGS)
    assert report.outcome_for(ProviderId.BRAND_RATINGS) is LookupOutcome.FOUND
    assert report.outcome_for(ProviderId.GOOGLE_SEARCH) is None
    assert not report.is_degraded
    assert ResolutionReport(barcode="1").is_degraded
    assert ResolutionReport(barcode="1").to_dict()["product"] is None


def test_report_carries_manufacturer() -> None:
    report = ResolutionReport(barcode="1", manufacturer="Acme Corp")

    assert report.to_dict()["manufacturer"] == "Acme Corp"
    assert '"manufacturer": "Acme Corp"' in report.to_json()


def test_reports_are_unhashable_with_or_without_findings() -> None:
    with pytest.raises(TypeError):
        hash(_report())
    with pytest.raises(TypeError):
        hash(ResolutionReport(barcode="1"))
    assert _report() == _report()
