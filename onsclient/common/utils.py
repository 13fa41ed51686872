import re
import typing as t
from datetime import timedelta
from pathlib import Path

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def home_directory() -> t.Optional[Path]:
    """The current user's home directory, ``None`` if it cannot be resolved."""
    try:
        return Path.home()
    except (KeyError, RuntimeError):
        return None


def parse_int32(value: str) -> int:
    """Parse a signed 32-bit ASCII decimal integer, raise ``ValueError`` otherwise."""
    if not isinstance(value, str) or not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid int32 literal: {value!r}")
    number = int(value)
    if number < INT32_MIN or number > INT32_MAX:
        raise ValueError(f"int32 out of range: {value!r}")
    return number


def simple_atoi(value: str) -> t.Optional[int]:
    """Like ``parse_int32``, but ``None`` on any failure."""
    try:
        return parse_int32(value)
    except ValueError:
        return None


def to_millis(duration: t.Union[int, timedelta]) -> int:
    if isinstance(duration, timedelta):
        return duration // timedelta(milliseconds=1)
    return int(duration)
