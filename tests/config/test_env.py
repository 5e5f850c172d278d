from __future__ import annotations

import pytest

from ethiscan.config import (
    ConfigurationError,
    MissingConfigurationError,
    optional_env_var,
    require_env_var,
    require_env_vars,
)
from ethiscan.config.env import env_float


def test_require_env_vars_returns_stripped_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_names_every_missing_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_B", raising=False)
    monkeypatch.setenv("MISSING_A", "")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)
    assert exc.value.variables == ("MISSING_A", "MISSING_B")


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " ")

    assert optional_env_var("EXAMPLE_VAR") is None


def test_env_float_defaults_and_parses(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_TIMEOUT", raising=False)
    assert env_float("EXAMPLE_TIMEOUT", 5.0) == 5.0

    monkeypatch.setenv("EXAMPLE_TIMEOUT", "2.5")
    assert env_float("EXAMPLE_TIMEOUT", 5.0) == 2.5


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_env_float_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("EXAMPLE_TIMEOUT", value)

    with pytest.raises(ConfigurationError):
        env_float("EXAMPLE_TIMEOUT", 5.0)
