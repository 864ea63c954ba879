"""Directive grammar, template compilation and field resolution."""

from browserkit.domain.formatting.compiler import CompiledTemplate, TemplateCompiler
from browserkit.domain.formatting.fields import FieldResolver, error_of, fields_of
from browserkit.domain.formatting.grammar import (
    DirectiveGrammar,
    DirectiveType,
    FormatDirective,
)

__all__ = [
    "CompiledTemplate",
    "DirectiveGrammar",
    "DirectiveType",
    "FieldResolver",
    "FormatDirective",
    "TemplateCompiler",
    "error_of",
    "fields_of",
]
