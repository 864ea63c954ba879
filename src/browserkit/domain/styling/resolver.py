"""Style resolution for styled console output."""

from __future__ import annotations

import os
import sys
from enum import StrEnum
from typing import TextIO

from browserkit.domain.shared.constants import COLOR_PLACEHOLDER, UNSTYLED_USER_AGENTS
from browserkit.domain.styling.colors import ColorAllocator, ColorStore
from browserkit.domain.styling.rules import StyleRuleSet


class StylingCapability(StrEnum):
    """Whether the output console can apply inline styles."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"

    @property
    def enabled(self) -> bool:
        return self is StylingCapability.SUPPORTED

    @classmethod
    def probe(
        cls,
        stream: TextIO | None = None,
        user_agent: str | None = None,
    ) -> StylingCapability:
        """Probe the environment once for inline styling support.

        Styling is unsupported for user agents without console CSS (old
        Internet Explorer), when ``NO_COLOR`` is set, or when the output
        stream is not a TTY.
        """
        if user_agent is not None:
            if any(marker in user_agent for marker in UNSTYLED_USER_AGENTS):
                return cls.UNSUPPORTED
            return cls.SUPPORTED
        if os.environ.get("NO_COLOR") is not None:
            return cls.UNSUPPORTED
        stream = stream or sys.stderr
        if hasattr(stream, "isatty") and stream.isatty():
            return cls.SUPPORTED
        return cls.UNSUPPORTED


class StyleResolver:
    """Resolves a ``(key, value)`` pair to a serialized style string."""

    def __init__(
        self,
        rules: StyleRuleSet,
        allocator: ColorAllocator,
        capability: StylingCapability,
        store: ColorStore | None = None,
    ) -> None:
        self.rules = rules
        self.allocator = allocator
        self.capability = capability
        self.store = store if store is not None else ColorStore()

    def resolve_style(self, key: str, value: object) -> str | None:
        """Return ``prop:value`` pairs joined by ``;``, or None for no styling."""
        if not self.capability.enabled:
            return None
        rule = self.rules.rule_for(key, value)
        if rule is None:
            return None
        properties = self.rules.merged(rule)
        pairs = []
        for prop, css in properties.items():
            if COLOR_PLACEHOLDER in css:
                color = self.store.color_for(key, value, self.allocator)
                css = css.replace(COLOR_PLACEHOLDER, color, 1)
            pairs.append(f"{prop}:{css}")
        return ";".join(pairs)
