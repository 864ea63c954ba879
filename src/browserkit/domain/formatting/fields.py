"""Field lookup and coercion for directive substitution."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from browserkit.domain.formatting.grammar import DirectiveType, FormatDirective
from browserkit.domain.shared.constants import ERROR_KEY

Record = logging.LogRecord | Mapping[str, Any]


def fields_of(record: Record) -> Mapping[str, Any]:
    """Return a read-only view of the record's fields.

    A ``LogRecord`` that has not been through a formatter yet has no
    ``message`` attribute; it is derived from ``getMessage()`` without
    touching the record.
    """
    if isinstance(record, Mapping):
        return MappingProxyType(dict(record))
    fields = dict(vars(record))
    if "message" not in fields and isinstance(record, logging.LogRecord):
        fields["message"] = record.getMessage()
    return MappingProxyType(fields)


def error_of(fields: Mapping[str, Any]) -> Any:
    """Return the record's error value, or None."""
    error = fields.get(ERROR_KEY)
    if error:
        return error
    exc_info = fields.get("exc_info")
    if isinstance(exc_info, tuple) and len(exc_info) == 3 and exc_info[1] is not None:
        return exc_info[1]
    if isinstance(exc_info, BaseException):
        return exc_info
    return None


def pad(text: str, flag: str, width: int | None, precision: int | None) -> str:
    """Apply printf-style string precision (truncation) and width (padding)."""
    if precision is not None:
        text = text[:precision]
    if width:
        text = text.ljust(width) if flag == "-" else text.rjust(width)
    return text


class FieldResolver:
    """Resolves directive values against a record's fields."""

    def __init__(self, time_format: str) -> None:
        self.time_format = time_format

    def format_time(self, fields: Mapping[str, Any]) -> str:
        created = fields.get("created")
        if isinstance(created, datetime):
            return created.strftime(self.time_format)
        if not isinstance(created, int | float):
            created = time.time()
        return time.strftime(self.time_format, time.localtime(created))

    def resolve(self, fields: Mapping[str, Any], directive: FormatDirective) -> Any:
        """Return the display value for ``directive``.

        Missing or falsy fields resolve to an empty string.
        """
        if directive.is_time:
            return self.format_time(fields)
        value = fields.get(directive.key)
        if not value:
            return ""
        if directive.type is DirectiveType.STRING:
            return pad(str(value), directive.flag, directive.width, directive.precision)
        return value
