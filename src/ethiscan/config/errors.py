"""Errors raised while reading ethiscan settings from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """An environment value is present but unusable."""

    def __init__(self, message: str, *, variables: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.variables = tuple(variables)


class MissingConfigurationError(ConfigurationError):
    """Required environment values are absent or blank."""

    def __init__(self, variables: Iterable[str]) -> None:
        names = tuple(sorted(variables))
        super().__init__(f"Missing configuration for: {', '.join(names)}", variables=names)
