"""Compilation of directive templates into native console templates."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from browserkit.domain.formatting.grammar import (
    DirectiveGrammar,
    DirectiveType,
    FormatDirective,
)


@dataclass(frozen=True)
class CompiledTemplate:
    """Native positional template plus the directives feeding its slots."""

    template: str
    directives: tuple[FormatDirective, ...]


def escape_literal(text: str) -> str:
    """Escape literal template text so the console reads every ``%`` as-is."""
    return text.replace("%", "%%")


def _numeric_specifier(directive: FormatDirective, letter: str) -> str:
    width = "" if directive.width is None else str(directive.width)
    precision = "" if directive.precision is None else f".{directive.precision}"
    return f"%{width}{precision}{letter}"


class TemplateCompiler:
    """Rewrites ``%(key)...`` directives into console format specifiers."""

    @staticmethod
    def directive_specifier(directive: FormatDirective) -> str:
        """Return the native specifier for ``directive``.

        Unrecognized directive types produce an empty specifier, which drops
        the directive from the output.
        """
        match directive.type:
            case DirectiveType.STRING:
                return "%s"
            case DirectiveType.INT:
                return _numeric_specifier(directive, "d")
            case DirectiveType.FLOAT:
                return _numeric_specifier(directive, "f")
            case DirectiveType.OBJECT:
                return "%o"
            case DirectiveType.INSPECT:
                return "%O"
            case _:
                return ""

    def compile(self, template: str) -> CompiledTemplate:
        return _compile_cached(template)


@lru_cache(maxsize=256)
def _compile_cached(template: str) -> CompiledTemplate:
    parts: list[str] = []
    directives: list[FormatDirective] = []
    for chunk in DirectiveGrammar.split(template):
        if isinstance(chunk, str):
            parts.append(escape_literal(chunk))
            continue
        if not chunk.recognized:
            continue
        parts.append(TemplateCompiler.directive_specifier(chunk))
        directives.append(chunk)
    return CompiledTemplate(template="".join(parts), directives=tuple(directives))
