"""Error hierarchy for flowlint."""
from __future__ import annotations


class FlowlintError(Exception):
    """Base error for all flowlint errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(FlowlintError):
    """Fatal configuration problem. Never downgraded to an empty rule run."""


class ConfigValidationError(ConfigurationError):
    """Imported rule configuration failed validation.

    ``problems`` lists every individual issue found, so callers can report
    them all at once instead of fixing one at a time.
    """

    def __init__(
        self,
        message: str,
        *,
        problems: list[str] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.problems = list(problems or [])


class PresetResolutionError(ConfigurationError):
    """No preset could be resolved (e.g. none are registered)."""


# ---------------------------------------------------------------------------
# Host errors
# ---------------------------------------------------------------------------


class HostError(FlowlintError):
    """The host data source failed in a way that aborts the scan."""
