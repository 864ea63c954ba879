"""
Shared Kernel

Contains exceptions, messages and constants shared by the formatting and
styling packages.
"""

from browserkit.domain.shared.exceptions import (
    BrowserkitError,
    ConfigurationError,
    UrlTooLongError,
)

__all__ = [
    "BrowserkitError",
    "ConfigurationError",
    "UrlTooLongError",
]
