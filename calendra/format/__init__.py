"""Date formatting and parsing.

    - Built-in fixed layouts (ISO 8601, YYYYMMDD, DD/MM/YYYY, YYMM, ...)
    - strftime-style custom patterns

Functions:
    format_datetime: Format a DateTime in a built-in layout.
    parse_datetime: Parse text in a built-in layout.
    strftime: Format a DateTime using a strftime pattern.
    strptime: Parse text using a strftime pattern.
"""

from __future__ import annotations

from calendra.format.layouts import (
    AUTO_DETECT_ORDER,
    DateTimeFormat,
    format_datetime,
    parse_datetime,
)
from calendra.format.strftime import strftime, strptime

__all__: list[str] = [
    # Built-in layouts
    "DateTimeFormat",
    "AUTO_DETECT_ORDER",
    "format_datetime",
    "parse_datetime",
    # strftime
    "strftime",
    "strptime",
]
