"""Centralized message constants for errors and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    INVALID_LEVEL = "Invalid log level: {level}"
    NEGATIVE_LEVEL = "Log level must be non-negative"
    INVALID_URL_SCHEME = "Beacon URL must start with http:// or https://"


class LogTemplates:
    """Log message templates used by the library itself."""

    HANDLER_INSTALLED = "Installed %s with %s on logger %r"
    LEVEL_SET = "Logger %r level set to %s"
