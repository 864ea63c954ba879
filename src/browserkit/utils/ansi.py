"""Translation of CSS-like console styles into ANSI escape sequences."""

from __future__ import annotations

import re

RESET = "\033[0m"

NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "orange": (255, 165, 0),
    "gray": (128, 128, 128),
    "grey": (128, 128, 128),
}

_HEX_COLOR = re.compile(r"#(?P<hex>[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b")


def parse_color(value: str) -> tuple[int, int, int] | None:
    """Parse ``#rgb``, ``#rrggbb`` or a basic color name."""
    value = value.strip()
    match = _HEX_COLOR.search(value)
    if match:
        digits = match.group("hex")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    return NAMED_COLORS.get(value.lower())


def _sgr_codes(prop: str, value: str) -> list[str]:
    value = value.strip()
    if prop == "color":
        rgb = parse_color(value)
        return [f"38;2;{rgb[0]};{rgb[1]};{rgb[2]}"] if rgb else []
    if prop in ("background", "background-color"):
        rgb = parse_color(value)
        return [f"48;2;{rgb[0]};{rgb[1]};{rgb[2]}"] if rgb else []
    if prop == "font-weight":
        if value == "bold" or (value.isdigit() and int(value) >= 600):
            return ["1"]
        return []
    if prop == "font-style" and value in ("italic", "oblique"):
        return ["3"]
    if prop in ("text-decoration", "text-decoration-line") and "underline" in value:
        return ["4"]
    return []


def css_to_ansi(style: str) -> str:
    """Convert ``prop:value;prop:value`` into one ANSI SGR sequence.

    An empty style resets all attributes. Properties without a terminal
    equivalent are ignored; if none remain the result is empty.
    """
    if not style.strip():
        return RESET
    codes: list[str] = []
    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        if not sep:
            continue
        codes.extend(_sgr_codes(prop.strip().lower(), value))
    if not codes:
        return ""
    return f"\033[{';'.join(codes)}m"
