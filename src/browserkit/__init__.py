"""Styled console formatting and beacon delivery for stdlib logging."""

from browserkit.config.setup import basic_config
from browserkit.domain.styling.resolver import StylingCapability
from browserkit.infrastructure.beacon import BeaconHandler, HttpxBeaconSender
from browserkit.infrastructure.console import ConsoleHandler
from browserkit.infrastructure.formatters import (
    ConsoleFormatter,
    QueryStringFormatter,
    StylishConsoleFormatter,
)

__all__ = [
    "BeaconHandler",
    "ConsoleFormatter",
    "ConsoleHandler",
    "HttpxBeaconSender",
    "QueryStringFormatter",
    "StylingCapability",
    "StylishConsoleFormatter",
    "basic_config",
]
