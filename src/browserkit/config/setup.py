"""One-call logging setup for console or beacon output."""

from __future__ import annotations

import logging
from typing import Any, TextIO

from pydantic import ValidationError

from browserkit.config.settings import BrowserkitSettings, get_settings
from browserkit.domain.shared.exceptions import ConfigurationError
from browserkit.domain.shared.messages import LogTemplates
from browserkit.domain.styling.resolver import StylingCapability
from browserkit.infrastructure.beacon import BeaconHandler, BeaconSender
from browserkit.infrastructure.console import ConsoleHandler
from browserkit.infrastructure.formatters import QueryStringFormatter, StylishConsoleFormatter

logger = logging.getLogger(__name__)


def _load_settings(options: dict[str, Any]) -> BrowserkitSettings:
    if not options:
        return get_settings()
    try:
        return BrowserkitSettings(**options)
    except ValidationError as e:
        errors = e.errors()
        option = ".".join(str(part) for part in errors[0]["loc"]) if errors else "options"
        raise ConfigurationError(option, str(e)) from e


def basic_config(
    settings: BrowserkitSettings | None = None,
    *,
    target: logging.Logger | None = None,
    stream: TextIO | None = None,
    sender: BeaconSender | None = None,
    **options: Any,
) -> logging.Handler:
    """Attach a console or beacon handler to ``target`` (the root logger).

    A configured ``url`` selects beacon delivery with a query-string
    formatter; otherwise records go to ``stream`` through the stylish
    console formatter. Keyword ``options`` override environment settings.
    A level of 0 (``NOTSET``) leaves the level of ``target`` unchanged.
    """
    if settings is None:
        settings = _load_settings(options)
    target = target or logging.getLogger()
    time_format = settings.time_format or None

    handler: logging.Handler
    if settings.url:
        handler = BeaconHandler(settings.url, sender=sender)
        handler.setFormatter(QueryStringFormatter(settings.format, time_format))
    else:
        capability = StylingCapability.probe(stream)
        handler = ConsoleHandler(stream, grouping=settings.grouping, capability=capability)
        handler.setFormatter(
            StylishConsoleFormatter(
                settings.format,
                time_format,
                styles=settings.styles,
                capability=capability,
            )
        )

    target.addHandler(handler)
    logger.debug(
        LogTemplates.HANDLER_INSTALLED,
        type(handler).__name__,
        type(handler.formatter).__name__,
        target.name,
    )

    level = settings.level_number
    if level:
        target.setLevel(level)
        logger.debug(LogTemplates.LEVEL_SET, target.name, logging.getLevelName(level))
    return handler
