"""Conversions between calendra values and other representations.

    - JSON-serializable dictionaries with type tags
    - Unix epoch seconds, milliseconds and nanoseconds
    - Standard library timedelta

Examples:
    >>> from calendra.convert import to_unix_seconds, from_unix_seconds
    >>> ts = to_unix_seconds(dt)
    >>> dt2 = from_unix_seconds(ts)
"""

from __future__ import annotations

from calendra.convert.epoch import (
    from_timedelta,
    from_unix_millis,
    from_unix_nanos,
    from_unix_seconds,
    to_timedelta,
    to_unix_millis,
    to_unix_nanos,
    to_unix_seconds,
)
from calendra.convert.json import from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    "to_unix_nanos",
    "from_unix_nanos",
    # timedelta
    "to_timedelta",
    "from_timedelta",
]
