"""Field coercion for raw table cells.

Every ``try_parse_*`` function returns a :class:`Parsed` outcome instead of
raising, and every ``to_*`` function unwraps that outcome with a
caller-supplied default. Neither family raises on bad input.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DATETIME_FORMAT = "%Y/%m/%d %H:%M:%S"

# strptime, int() and Decimal() accept unpadded fields and non-ASCII digits;
# the wire format does not.
_DATETIME_RE = re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}$", re.ASCII)
_INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_DECIMAL_RE = re.compile(r"^[+-]?(?=[\d,]*\d|\.\d)[\d,]*(\.\d*)?$", re.ASCII)


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """Outcome of a fallible parse."""

    value: T | None = None
    ok: bool = False

    def or_default(self, default: T) -> T:
        """Return the parsed value, or ``default`` when parsing failed."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        return default


_FAILED: Parsed[Any] = Parsed()


def _text(value: Any) -> str | None:
    """Return the stripped string form of ``value``, or None when blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def try_parse_datetime(value: Any) -> Parsed[datetime]:
    """Parse ``YYYY/MM/DD HH:MM:SS`` exactly."""
    text = _text(value)
    if text is None or not _DATETIME_RE.match(text):
        return _FAILED
    try:
        return Parsed(datetime.strptime(text, DATETIME_FORMAT), True)
    except ValueError:
        # Well-formed but out of range, e.g. month 13.
        return _FAILED


def try_parse_int(value: Any) -> Parsed[int]:
    """Parse an optionally signed run of ASCII digits."""
    text = _text(value)
    if text is None or not _INT_RE.match(text):
        return _FAILED
    return Parsed(int(text), True)


def try_parse_decimal(value: Any) -> Parsed[Decimal]:
    """Parse a decimal number with optional ``,`` group separators."""
    text = _text(value)
    if text is None or not _DECIMAL_RE.match(text):
        return _FAILED
    try:
        number = Decimal(text.replace(",", ""))
    except InvalidOperation:
        return _FAILED
    if not number.is_finite():
        return _FAILED
    return Parsed(number, True)


def to_datetime(value: Any, default: datetime = datetime.min) -> datetime:
    """Coerce ``value`` to a datetime, falling back to ``default``."""
    return try_parse_datetime(value).or_default(default)


def to_int(value: Any, default: int = 0) -> int:
    """Coerce ``value`` to an int, falling back to ``default``."""
    return try_parse_int(value).or_default(default)


def to_decimal(value: Any, default: Decimal = Decimal("0")) -> Decimal:
    """Coerce ``value`` to a Decimal, falling back to ``default``."""
    return try_parse_decimal(value).or_default(default)


def to_str(value: Any, default: str = "") -> str:
    """Coerce ``value`` to its string form, falling back to ``default`` for None."""
    if value is None:
        return default
    return str(value)
