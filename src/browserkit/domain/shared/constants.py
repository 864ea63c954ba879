"""Shared constants for directive formatting, styling and beacon delivery."""

from __future__ import annotations

from typing import Final

ASCTIME_KEY: Final = "asctime"
ERROR_KEY: Final = "error"

WILDCARD: Final = "*"
COMMON_STYLE_KEY: Final = "common"
COLOR_PLACEHOLDER: Final = "%(color)"

MAX_URL_LENGTH: Final = 2048

# Substrings of user agents whose consoles cannot apply inline styles.
UNSTYLED_USER_AGENTS: Final = ("MSIE", "Trident")


class Defaults:
    """Default format and time-format strings per formatter."""

    CONSOLE_FORMAT = "%(name)-s %(message)-s"
    CONSOLE_TIME_FORMAT = "%H:%M:%S"

    STYLISH_FORMAT = "%(message)s"
    STYLISH_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    QUERY_FORMAT = "%(levelname)s %(name)s %(message)s"

    BASIC_FORMAT = "%(levelname)s:%(name)s:%(message)s"

# Appended to a console template for a record's error value.
ERROR_SPECIFIER: Final = "%o"
