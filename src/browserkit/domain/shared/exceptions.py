"""Base exception classes for browserkit errors."""

from __future__ import annotations


class BrowserkitError(Exception):
    """Base exception for all browserkit errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class UrlTooLongError(BrowserkitError):
    """Raised when a beacon URL exceeds the maximum allowed length."""

    def __init__(self, length: int, limit: int, message: str | None = None) -> None:
        msg = message or f"URL length {length} is longer than {limit}"
        super().__init__(msg, code="URL_TOO_LONG")
        self.length = length
        self.limit = limit


class ConfigurationError(BrowserkitError):
    """Raised when logging options cannot be turned into a handler setup."""

    def __init__(self, option: str, message: str | None = None) -> None:
        msg = message or f"Invalid logging option: {option}"
        super().__init__(msg, code="CONFIGURATION_ERROR")
        self.option = option
