"""ChainException hierarchy for controlled chain aborts."""

from __future__ import annotations


class ChainException(Exception):
    """Base for all chain exceptions."""


class ChainAbort(ChainException):
    """Controlled abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class ConfigurationUnavailable(ChainAbort):
    """Request-scoped configuration is missing or malformed (500)."""

    def __init__(self, detail: str = "Configuration not found in context") -> None:
        super().__init__(detail, status_code=500)


class ChainInternalError(ChainException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
