"""JSON serialization and deserialization for calendra values.

The JSON format uses type tags for polymorphic deserialization:

    {"_type": "DateTime", "value": "2024-03-15T14:30:45.000000000Z"}
    {"_type": "Duration", "value": "PT2H30M", "total_nanos": 9000000000000}

Examples:
    >>> dt = DateTime.from_components(2024, 3, 15, 14, 30, 45)
    >>> data = to_json(dt)
    >>> data["_type"]
    'DateTime'
    >>> from_json(data) == dt
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from calendra.errors import ParseError

if TYPE_CHECKING:
    from calendra.core.datetime import DateTime
    from calendra.core.duration import Duration


def to_json(value: Union[DateTime, Duration]) -> dict[str, Any]:
    """Convert a DateTime or Duration to a JSON-serializable dictionary.

    Raises:
        TypeError: If value is not a DateTime or Duration.
    """
    from calendra.core.datetime import DateTime
    from calendra.core.duration import Duration

    if isinstance(value, DateTime):
        return {"_type": "DateTime", "value": value.to_iso8601()}
    if isinstance(value, Duration):
        return {
            "_type": "Duration",
            "value": value.to_iso8601(),
            "total_nanos": value.total_nanos,
        }
    raise TypeError(f"expected DateTime or Duration, got {type(value).__name__}")


def from_json(data: dict[str, Any]) -> Union[DateTime, Duration]:
    """Create a DateTime or Duration from a dictionary made by ``to_json``.

    Duration prefers ``total_nanos`` and falls back to the ISO 8601 value.

    Raises:
        ParseError: If the data is malformed or has an unknown ``_type``.
    """
    from calendra.core.datetime import DateTime
    from calendra.core.duration import Duration

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}", data)

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data", data)

    if type_name == "DateTime":
        value = data.get("value")
        if not value:
            raise ParseError("missing 'value' field for DateTime", data)
        return DateTime.from_iso8601(value)

    if type_name == "Duration":
        total_nanos = data.get("total_nanos")
        if total_nanos is not None:
            if isinstance(total_nanos, bool) or not isinstance(total_nanos, int):
                raise ParseError(f"'total_nanos' must be an integer, got {total_nanos!r}", data)
            return Duration.from_nanos(total_nanos)
        value = data.get("value")
        if not value:
            raise ParseError("missing 'value' or 'total_nanos' field for Duration", data)
        return Duration.from_iso8601(value)

    raise ParseError(f"unknown type tag: {type_name!r}", data)


__all__ = ["to_json", "from_json"]
