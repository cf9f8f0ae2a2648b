"""
Helpers for decoding provider JSON into model objects.

Decoding is strict about required fields and their JSON types, and
lenient about extra fields, which are ignored.
"""

import re
from datetime import datetime, time, timezone
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Type, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

TIME_OF_DAY_FORMAT = "%H:%M"
_TIME_OF_DAY_PATTERN = re.compile(r"\d{2}:\d{2}")

_MISSING = object()


class ModelDecodeError(ValueError):
    """Raised when a response payload does not match the expected model."""

    pass


def ensure_mapping(data: Any, model: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ModelDecodeError(
            f"Expected a JSON object for {model}, got {type(data).__name__}"
        )
    return data


def _require(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or value is None:
        raise ModelDecodeError(f"Missing required field '{key}'")
    return value


def get_str(data: Mapping[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ModelDecodeError(f"Field '{key}' must be a string, got {value!r}")
    return value


def get_optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    """Optional string field: absent and null both decode to None."""
    if data.get(key) is None:
        return None
    return get_str(data, key)


def get_int(data: Mapping[str, Any], key: str) -> int:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ModelDecodeError(f"Field '{key}' must be an integer, got {value!r}")
    return value


def get_float(data: Mapping[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ModelDecodeError(f"Field '{key}' must be a number, got {value!r}")
    return float(value)


def get_bool(data: Mapping[str, Any], key: str) -> bool:
    value = _require(data, key)
    if not isinstance(value, bool):
        raise ModelDecodeError(f"Field '{key}' must be a boolean, got {value!r}")
    return value


def get_list(
    data: Mapping[str, Any], key: str, item: Callable[[Any], T]
) -> List[T]:
    """
    Decode a required list field, applying ``item`` to each element.

    An empty list is a valid value; a missing field is not.
    """
    value = _require(data, key)
    if not isinstance(value, list):
        raise ModelDecodeError(f"Field '{key}' must be a list, got {value!r}")
    return [item(element) for element in value]


def get_str_list(data: Mapping[str, Any], key: str) -> List[str]:
    def _item(element: Any) -> str:
        if not isinstance(element, str):
            raise ModelDecodeError(
                f"Field '{key}' must contain strings, got {element!r}"
            )
        return element

    return get_list(data, key, _item)


def decode_code(enum_cls: Type[E], code: Any) -> E:
    """
    Map a wire code to its enum member, failing closed on unknown codes.

    Every coded enum in the models decodes through here so the lookup
    rules (including rejection of booleans posing as integers) live in
    one place.
    """
    if isinstance(code, bool):
        raise ModelDecodeError(f"Unknown {enum_cls.__name__} code: {code!r}")
    try:
        return enum_cls(code)
    except ValueError:
        raise ModelDecodeError(f"Unknown {enum_cls.__name__} code: {code!r}")


def get_code(data: Mapping[str, Any], key: str, enum_cls: Type[E]) -> E:
    return decode_code(enum_cls, _require(data, key))


def parse_time_of_day(value: Any) -> time:
    """Parse a 24-hour ``HH:MM`` string."""
    if not isinstance(value, str) or not _TIME_OF_DAY_PATTERN.fullmatch(value):
        raise ModelDecodeError(f"Invalid time of day: {value!r}")
    try:
        return datetime.strptime(value, TIME_OF_DAY_FORMAT).time()
    except ValueError as e:
        raise ModelDecodeError(f"Invalid time of day {value!r}: {e}")


def get_time_of_day(data: Mapping[str, Any], key: str) -> time:
    return parse_time_of_day(_require(data, key))


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Timestamps without an offset are taken to be UTC.
    """
    if not isinstance(value, str):
        raise ModelDecodeError(f"Invalid timestamp: {value!r}")
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise ModelDecodeError(f"Invalid timestamp {value!r}: {e}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def get_timestamp(data: Mapping[str, Any], key: str) -> datetime:
    return parse_timestamp(_require(data, key))


def get_optional_timestamp(data: Mapping[str, Any], key: str) -> Optional[datetime]:
    if data.get(key) is None:
        return None
    return get_timestamp(data, key)

