"""Directive-template formatters for console and beacon output.

Each formatter is a :class:`logging.Formatter`, so it plugs into any stdlib
handler through ``format()``. Console formatters additionally expose
``format_record()``, which returns the native console template and its
ordered values for handlers that render them themselves.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any, NamedTuple
from urllib.parse import urlencode

from browserkit.domain.formatting.compiler import (
    CompiledTemplate,
    TemplateCompiler,
    escape_literal,
)
from browserkit.domain.formatting.fields import FieldResolver, Record, error_of, fields_of
from browserkit.domain.formatting.grammar import DirectiveGrammar
from browserkit.domain.shared.constants import ERROR_KEY, ERROR_SPECIFIER, Defaults
from browserkit.domain.styling.colors import ColorAllocator
from browserkit.domain.styling.resolver import StyleResolver, StylingCapability
from browserkit.domain.styling.rules import StyleRuleSet
from browserkit.infrastructure.console import ConsoleRenderer


class FormattedRecord(NamedTuple):
    """Native console template and the values for its specifiers."""

    template: str
    values: tuple[Any, ...]


def _with_error(template: str, values: list[Any], fields: Mapping[str, Any]) -> FormattedRecord:
    error = error_of(fields)
    if error is not None:
        template += ERROR_SPECIFIER
        values.append(error)
    return FormattedRecord(template, tuple(values))


class ConsoleFormatter(logging.Formatter):
    """Formats records into a template compiled once at construction."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        fmt = fmt or Defaults.CONSOLE_FORMAT
        datefmt = datefmt or Defaults.CONSOLE_TIME_FORMAT
        super().__init__(fmt, datefmt, validate=False)
        self.fields = FieldResolver(datefmt)
        self.compiled: CompiledTemplate = TemplateCompiler().compile(fmt)
        self.renderer = ConsoleRenderer()

    def format_record(self, record: Record) -> FormattedRecord:
        fields = fields_of(record)
        values = [self.fields.resolve(fields, d) for d in self.compiled.directives]
        return _with_error(self.compiled.template, values, fields)

    def format(self, record: logging.LogRecord) -> str:
        return self.renderer.render(*self.format_record(record))


class StylishConsoleFormatter(logging.Formatter):
    """Formats records with per-field, per-value inline styles.

    The template is compiled per record because the specifiers depend on
    which values match a style rule. A styled directive is wrapped as
    ``%c<spec>%c`` with the values ``style, value, ""``.

    Styles are looked up with the raw field value, so ``%(levelname)-8s``
    still matches a rule written for ``"INFO"``.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        styles: Mapping[str, Any] | StyleRuleSet | None = None,
        capability: StylingCapability | None = None,
        rng: random.Random | None = None,
    ) -> None:
        fmt = fmt or Defaults.STYLISH_FORMAT
        datefmt = datefmt or Defaults.STYLISH_TIME_FORMAT
        super().__init__(fmt, datefmt, validate=False)
        if capability is None:
            capability = StylingCapability.probe()
        self.fields = FieldResolver(datefmt)
        self.styles = StyleResolver(
            StyleRuleSet.from_mapping(styles),
            ColorAllocator(rng=rng),
            capability,
        )
        self.renderer = ConsoleRenderer(capability)

    @property
    def capability(self) -> StylingCapability:
        return self.styles.capability

    def format_record(self, record: Record) -> FormattedRecord:
        fields = fields_of(record)
        parts: list[str] = []
        values: list[Any] = []

        for chunk in DirectiveGrammar.split(self._fmt):
            if isinstance(chunk, str):
                parts.append(escape_literal(chunk))
                continue
            specifier = TemplateCompiler.directive_specifier(chunk)
            if not specifier:
                continue
            value = self.fields.resolve(fields, chunk)
            raw = value if chunk.is_time else (fields.get(chunk.key) or value)
            style = self.styles.resolve_style(chunk.key, raw)
            if style:
                parts.append(f"%c{specifier}%c")
                values.extend((style, value, ""))
            else:
                parts.append(specifier)
                values.append(value)

        return _with_error("".join(parts), values, fields)

    def format(self, record: logging.LogRecord) -> str:
        return self.renderer.render(*self.format_record(record))


class QueryStringFormatter(logging.Formatter):
    """Reduces a record to a URL-safe ``key=value&...`` query string.

    Each recognized directive contributes one pair, rendered as the console
    would render it; an error value adds a trailing ``error`` pair.
    """

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        fmt = fmt or Defaults.QUERY_FORMAT
        datefmt = datefmt or Defaults.STYLISH_TIME_FORMAT
        super().__init__(fmt, datefmt, validate=False)
        self.fields = FieldResolver(datefmt)
        self.compiled = TemplateCompiler().compile(fmt)
        self.renderer = ConsoleRenderer()

    def query_pairs(self, record: Record) -> list[tuple[str, str]]:
        fields = fields_of(record)
        pairs = []
        for directive in self.compiled.directives:
            value = self.fields.resolve(fields, directive)
            specifier = TemplateCompiler.directive_specifier(directive)
            pairs.append((directive.key, self.renderer.render(specifier, (value,))))
        error = error_of(fields)
        if isinstance(error, BaseException):
            pairs.append((ERROR_KEY, f"{type(error).__name__}: {error}"))
        elif error is not None:
            pairs.append((ERROR_KEY, str(error)))
        return pairs

    def format(self, record: logging.LogRecord) -> str:
        return urlencode(self.query_pairs(record))
