"""Console rendering of native templates and the console handler."""

from __future__ import annotations

import logging
import pprint
import re
import traceback
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from browserkit.domain.formatting.fields import error_of, fields_of
from browserkit.domain.shared.constants import ERROR_SPECIFIER
from browserkit.domain.styling.resolver import StylingCapability
from browserkit.utils.ansi import RESET, css_to_ansi

_SPECIFIER = re.compile(
    r"%(?:(?P<escape>%)|(?P<width>\d*)(?:\.(?P<precision>\d+))?(?P<type>[sdifoOc]))"
)

_GROUP_INDENT = "    "


def inspect_value(value: Any, expanded: bool = False) -> str:
    """Render a value the way ``%o``/``%O`` show it in a console.

    Exceptions start on a new line with their full traceback.
    """
    if isinstance(value, BaseException):
        return "\n" + "".join(traceback.format_exception(value)).rstrip("\n")
    if isinstance(value, str):
        return repr(value)
    if expanded:
        return pprint.pformat(value)
    return repr(value)


def _number(spec: str, value: Any, convert: type) -> str:
    if isinstance(value, str) and not value:
        return ""
    try:
        return spec % convert(value)
    except (TypeError, ValueError, OverflowError):
        return "NaN"


class ConsoleRenderer:
    """Applies a console template (``%s %d %f %o %O %c``) to its values.

    Specifiers without a matching value are left as they are and surplus
    values are appended space-separated, as browser consoles do.
    """

    def __init__(self, capability: StylingCapability = StylingCapability.UNSUPPORTED) -> None:
        self.capability = capability

    def render(self, template: str, values: Iterable[Any]) -> str:
        remaining: Iterator[Any] = iter(values)
        style_open = False
        parts: list[str] = []
        position = 0

        for match in _SPECIFIER.finditer(template):
            parts.append(template[position : match.start()])
            position = match.end()
            if match.group("escape"):
                parts.append("%")
                continue
            try:
                value = next(remaining)
            except StopIteration:
                parts.append(match.group(0))
                continue
            kind = match.group("type")
            if kind == "c":
                if self.capability.enabled:
                    sequence = css_to_ansi(str(value))
                    if sequence:
                        style_open = sequence != RESET
                    parts.append(sequence)
                continue
            parts.append(self._convert(match, kind, value))

        parts.append(template[position:])
        parts.extend(" " + self._loose(value) for value in remaining)
        if style_open:
            parts.append(RESET)
        return "".join(parts)

    @staticmethod
    def _convert(match: re.Match[str], kind: str, value: Any) -> str:
        width = match.group("width") or ""
        precision = match.group("precision")
        precision = f".{precision}" if precision else ""
        if kind in ("d", "i"):
            return _number(f"%{width}{precision}d", value, int)
        if kind == "f":
            return _number(f"%{width}{precision}f", value, float)
        if kind == "o":
            return inspect_value(value)
        if kind == "O":
            return inspect_value(value, expanded=True)
        return str(value)

    @staticmethod
    def _loose(value: Any) -> str:
        if isinstance(value, str):
            return value
        return inspect_value(value)


class ConsoleHandler(logging.StreamHandler):
    """Stream handler that prints ``(template, values)`` pairs.

    Formatters exposing ``format_record`` are rendered through a
    :class:`ConsoleRenderer`; any other formatter is used as-is. With
    ``grouping`` enabled, the error block (traceback) is indented under the
    record line; a multi-line message itself is left alone.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        grouping: bool = True,
        capability: StylingCapability | None = None,
    ) -> None:
        super().__init__(stream)
        self.grouping = grouping
        if capability is None:
            capability = StylingCapability.probe(self.stream)
        self.renderer = ConsoleRenderer(capability)

    def format(self, record: logging.LogRecord) -> str:
        head, block = self._split_error(record)
        if self.grouping:
            block = block.replace("\n", "\n" + _GROUP_INDENT)
        return head + block

    def _split_error(self, record: logging.LogRecord) -> tuple[str, str]:
        """Render the record line and its error block separately."""
        format_record = getattr(self.formatter, "format_record", None)
        if format_record is None:
            text = super().format(record)
            start = text.find("\n" + record.exc_text) if record.exc_text else -1
            if start < 0:
                return text, ""
            return text[:start], text[start:]

        template, values = format_record(record)
        if error_of(fields_of(record)) is None or not template.endswith(ERROR_SPECIFIER):
            return self.renderer.render(template, values), ""
        head = self.renderer.render(template[: -len(ERROR_SPECIFIER)], values[:-1])
        return head, self.renderer.render(ERROR_SPECIFIER, values[-1:])
