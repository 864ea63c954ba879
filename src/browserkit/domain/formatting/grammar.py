"""Directive grammar for printf-like record templates.

A directive has the shape ``%(key)<flag><width>.<precision><type>``::

    %(levelname)s      %(name)-12s      %(lineno)4d      %(elapsed).3f

``flag`` is one of ``- + 0 #``, ``width`` and ``precision`` are optional
non-negative integers and ``type`` is one of ``s d f o O``; a missing type
means ``s``. Any other type letter still matches, but yields a directive
whose :attr:`FormatDirective.type` is ``None`` so formatters drop it.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from browserkit.domain.shared.constants import ASCTIME_KEY


class DirectiveType(StrEnum):
    """Recognized directive type letters."""

    STRING = "s"
    INT = "d"
    FLOAT = "f"
    OBJECT = "o"
    INSPECT = "O"

    @classmethod
    def parse(cls, letter: str) -> DirectiveType | None:
        """Map a type letter to a member; empty means string, unknown means None."""
        if not letter:
            return cls.STRING
        try:
            return cls(letter)
        except ValueError:
            return None


def parse_count(raw: str | int | None) -> int | None:
    """Return a non-negative width/precision, or None when absent or malformed."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    raw = raw.strip()
    if not raw.isdigit():
        return None
    return int(raw)


@dataclass(frozen=True)
class FormatDirective:
    """One parsed ``%(key)...`` token."""

    key: str
    flag: str = ""
    width: int | None = None
    precision: int | None = None
    type: DirectiveType | None = DirectiveType.STRING
    match: str = ""

    @property
    def is_time(self) -> bool:
        return self.key == ASCTIME_KEY

    @property
    def recognized(self) -> bool:
        return self.type is not None


class DirectiveGrammar:
    """Recognizes directives inside arbitrary template text.

    A directive without a type letter must not be followed directly by a
    letter: in ``%(levelname)Level`` the ``L`` is read as the type, so the
    directive is unrecognized and dropped. Write ``%(levelname)sLevel``.
    """

    PATTERN = re.compile(
        r"%\((?P<key>[^)]+)\)"
        r"(?P<flag>[-+0#]?)"
        r"(?P<width>\d*)"
        r"(?:\.(?P<precision>\d*))?"
        r"(?P<type>[A-Za-z]?)"
    )

    @classmethod
    def directive_from_match(cls, match: re.Match[str]) -> FormatDirective:
        return FormatDirective(
            key=match.group("key"),
            flag=match.group("flag"),
            width=parse_count(match.group("width")),
            precision=parse_count(match.group("precision")),
            type=DirectiveType.parse(match.group("type")),
            match=match.group(0),
        )

    @classmethod
    def iter_directives(cls, template: str) -> Iterator[FormatDirective]:
        """Yield every directive of ``template`` in order of appearance."""
        for match in cls.PATTERN.finditer(template):
            yield cls.directive_from_match(match)

    @classmethod
    def split(cls, template: str) -> Iterator[str | FormatDirective]:
        """Yield literal text chunks and directives in template order.

        Empty literal chunks are skipped, so joining the literal chunks with
        each directive's ``match`` text rebuilds the template exactly.
        """
        position = 0
        for match in cls.PATTERN.finditer(template):
            if match.start() > position:
                yield template[position : match.start()]
            yield cls.directive_from_match(match)
            position = match.end()
        if position < len(template):
            yield template[position:]
