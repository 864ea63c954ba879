"""Infrastructure layer - stdlib logging integration.

This layer contains:
- Formatters (console, stylish console, query string)
- Console rendering and the console handler
- Beacon delivery over HTTP (httpx)
"""

from browserkit.infrastructure.beacon import BeaconHandler, BeaconSender, HttpxBeaconSender
from browserkit.infrastructure.console import ConsoleHandler, ConsoleRenderer
from browserkit.infrastructure.formatters import (
    ConsoleFormatter,
    FormattedRecord,
    QueryStringFormatter,
    StylishConsoleFormatter,
)

__all__ = [
    "BeaconHandler",
    "BeaconSender",
    "ConsoleFormatter",
    "ConsoleHandler",
    "ConsoleRenderer",
    "FormattedRecord",
    "HttpxBeaconSender",
    "QueryStringFormatter",
    "StylishConsoleFormatter",
]
