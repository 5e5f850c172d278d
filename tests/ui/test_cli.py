from __future__ import annotations

import json

import pytest

from ethiscan.config import MissingConfigurationError
from ethiscan.domain.model import (
    InvalidBarcodeError,
    LookupOutcome,
    ProviderId,
    ResolutionReport,
    SourceVisit,
)
from ethiscan.ui import cli


def _report(barcode: str) -> ResolutionReport:
    return ResolutionReport(
        barcode=barcode,
        visits=(SourceVisit(ProviderId.OPENFOODFACTS, LookupOutcome.NOT_FOUND),),
    )


def test_prints_one_json_report_per_line(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}

    def fake_resolve(barcodes: list[str], *, max_workers: int) -> list[ResolutionReport]:
        captured["barcodes"] = barcodes
        captured["max_workers"] = max_workers
        return [_report(code) for code in barcodes]

    monkeypatch.setattr(cli, "resolve_barcodes", fake_resolve)

    cli.main(["111", "222", "--workers", "2"])

    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)["barcode"] for line in lines] == ["111", "222"]
    assert captured == {"barcodes": ["111", "222"], "max_workers": 2}


@pytest.mark.parametrize(
    "error",
    [InvalidBarcodeError("bad"), MissingConfigurationError(["ETHISCAN_GOOGLE_API_KEY"])],
)
def test_invalid_input_or_configuration_exits_with_usage_code(
    monkeypatch: pytest.MonkeyPatch, error: Exception
) -> None:
    def fake_resolve(*_: object, **__: object) -> list[ResolutionReport]:
        raise error

    monkeypatch.setattr(cli, "resolve_barcodes", fake_resolve)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["123"])

    assert excinfo.value.code == 2


def test_non_digit_barcode_is_rejected_without_configuration(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("ETHISCAN_GOOGLE_API_KEY", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["not-a-barcode"])

    assert excinfo.value.code == 2


def test_unexpected_errors_exit_with_failure_code(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_resolve(*_: object, **__: object) -> list[ResolutionReport]:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "resolve_barcodes", fake_resolve)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["123"])

    assert excinfo.value.code == 1


@pytest.mark.parametrize("argv", [[], ["123", "--workers", "0"], ["123", "--log-level", "LOUD"]])
def test_invalid_arguments_exit_with_usage_code(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)

    assert excinfo.value.code == 2


def test_sigint_exits_with_interrupted_code() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.sigint_handler(2, None)

    assert excinfo.value.code == 130
