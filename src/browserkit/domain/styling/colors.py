"""Per-namespace color allocation with an instance-scoped memo."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

PALETTE: tuple[str, ...] = (
    "#37455c",
    "#1da1f2",
    "#cb2027",
    "#ff5700",
    "#848484",
    "#118C4E",
    "#FF9009",
    "#9A2747",
    "#85A40C",
    "#265273",
    "#BF8E40",
    "#CC6666",
    "#000000",
    "#645188",
)


class ColorAllocator:
    """Hands out palette colors in order, independently per namespace.

    Once a namespace has used every palette entry, each further call returns
    a fresh random ``#rrggbb`` color that is not in the palette. Stability of
    those random colors is the job of :class:`ColorStore`.
    """

    def __init__(
        self,
        palette: Sequence[str] = PALETTE,
        rng: random.Random | None = None,
    ) -> None:
        self._palette = tuple(palette)
        self._reserved = {color.lower() for color in self._palette}
        self._rng = rng or random.Random()
        self._counters: dict[str, int] = {}

    @property
    def palette(self) -> tuple[str, ...]:
        return self._palette

    def counter(self, namespace: str) -> int:
        return self._counters.get(namespace, 0)

    def allocate(self, namespace: str) -> str:
        index = self._counters.get(namespace, 0)
        if index < len(self._palette):
            self._counters[namespace] = index + 1
            return self._palette[index]
        return self._random_color()

    def _random_color(self) -> str:
        while True:
            color = f"#{self._rng.randrange(0x1000000):06x}"
            if color not in self._reserved:
                return color


@dataclass
class ColorStore:
    """Append-only memo of ``(namespace, value) -> color``."""

    _colors: dict[tuple[str, str], str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, key: object) -> bool:
        return key in self._colors

    def color_for(self, namespace: str, value: object, allocator: ColorAllocator) -> str:
        key = (namespace, str(value))
        color = self._colors.get(key)
        if color is None:
            color = self._colors[key] = allocator.allocate(namespace)
        return color
