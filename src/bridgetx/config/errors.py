"""Errors raised while reading bridgetx settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when a setting is present but unusable."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required environment variables are unset or blank.

    ``names`` lists every missing variable, sorted, so one run reports all of them.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")
