"""Shared numeric conversion helpers for accounting fields."""

import re
from datetime import datetime, timezone

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def safe_int(value, default=None):
    """Safely convert value to integer.

    Only plain decimal integers are accepted; anything else (whitespace,
    underscores, floats) yields the default.

    Args:
        value: Value to convert
        default: Default value if conversion fails

    Returns:
        Integer value or default
    """
    if value is None or value == '':
        return default
    try:
        return parse_int(value)
    except (ValueError, TypeError):
        return default


def parse_int(value: str) -> int:
    """Convert a decimal integer string, rejecting anything else.

    Raises:
        ValueError: If value is not an optionally signed run of digits

    Examples:
        >>> parse_int("42")
        42
        >>> parse_int("-7")
        -7
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return int(value)


def parse_float(value: str) -> float:
    """Convert a decimal or exponent float literal, rejecting anything else.

    ``nan``, ``inf``, surrounding whitespace and digit separators are not
    accepted, so an empty or garbled column never becomes a number.

    Raises:
        ValueError: If value is not a float literal

    Examples:
        >>> parse_float("0.125")
        0.125
        >>> parse_float("1e3")
        1000.0
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"not a number: {value!r}")
    return float(value)


def parse_epoch(value: str) -> datetime:
    """Convert Unix epoch seconds to a UTC datetime.

    Raises:
        ValueError: If value is not an integer, is negative, or is beyond
            the range the platform can represent

    Examples:
        >>> parse_epoch("1769670016")
        datetime.datetime(2026, 1, 29, 7, 0, 16, tzinfo=datetime.timezone.utc)
    """
    seconds = parse_int(value)
    if seconds < 0:
        raise ValueError(f"negative epoch seconds: {seconds}")
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"epoch seconds out of range: {seconds}") from e
