"""
Scaler exceptions.

Every error raised by the scaler derives from ScalerError so the host can
catch the whole family in one place.
"""

from __future__ import annotations


class ScalerError(Exception):
    """Base class for scaler errors."""

    pass


class ConfigurationError(ScalerError):
    """Invalid or incomplete trigger configuration, raised at construction."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ScalerConnectionError(ScalerError):
    """The search engine could not be reached or rejected the request."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DeadlineExceeded(ScalerConnectionError):
    """The round trip did not finish before the caller's deadline."""

    pass


class InvalidValueType(ScalerError):
    """The value found at valueLocation cannot be read as an integer."""

    def __init__(self, found: str) -> None:
        super().__init__(
            f"valueLocation must point to value of type number but got: '{found}'"
        )
        self.found = found


__all__ = [
    "ConfigurationError",
    "DeadlineExceeded",
    "InvalidValueType",
    "ScalerConnectionError",
    "ScalerError",
]
