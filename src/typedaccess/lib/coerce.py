"""coerce — scalar coercion and shape checks behind the accessor getters.

Each ``coerce_*`` helper takes an already-resolved raw value (stored value or
fallback) and either returns it in the requested type or raises
``ValueError``.  The accessor turns that ``ValueError`` into a
``TypeMismatchError`` carrying the key and path label, so nothing in this
module knows about keys or labels.

Numeric strings are parsed leniently, prefix-first, in the manner of
``parseInt``/``parseFloat``: ``"42px"`` is ``42`` and ``"3.5e2 km"`` is
``350.0``.  A string containing a ``.`` takes the float path, anything else
the integer path (which also understands a ``0x`` prefix).
"""

from __future__ import annotations

import datetime
import email.utils
import math
import numbers
import re
import sys
from collections.abc import Mapping, Sequence
from typing import Any, Union

Number = Union[int, float]

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

_INT_PREFIX = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)

_NOT_SEQUENCES = (str, bytes, bytearray)


# ---------------------------------------------------------------------------
# Shape checks
# ---------------------------------------------------------------------------


def is_number(value: Any) -> bool:
    """Return True for real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_finite(value: Any) -> bool:
    """Return True for real numbers that are neither infinite nor NaN."""
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        # integers beyond the float range count as infinite
        return abs(value) <= sys.float_info.max
    return math.isfinite(value)


def is_sequence(value: Any) -> bool:
    """Return True for ordered sequences other than text and bytes."""
    return isinstance(value, Sequence) and not isinstance(value, _NOT_SEQUENCES)


def is_mapping(value: Any) -> bool:
    """Return True for key-value mappings (None and primitives excluded)."""
    return isinstance(value, Mapping)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def parse_number(text: str) -> Number:
    """Parse the numeric prefix of a string.

    Args:
        text: Raw string, possibly padded or followed by non-numeric text.

    Returns:
        A float when ``text`` contains a ``.``, else an int.

    Raises:
        ValueError: If the string has no numeric prefix.
    """
    if "." in text:
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ValueError(f"no numeric prefix in {text!r}")
        return float(match.group(1))

    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer prefix in {text!r}")
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        if len(digits) == 2:
            raise ValueError(f"no hexadecimal digits in {text!r}")
        value = int(digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def coerce_number(value: Any) -> Number:
    """Return ``value`` as a finite number, parsing strings first.

    Raises:
        ValueError: If the value is not, and does not parse to, a finite
            real number.
    """
    parsed = parse_number(value) if isinstance(value, str) else value
    if not is_finite(parsed):
        raise ValueError(f"not a finite number: {parsed!r}")
    return parsed


# ---------------------------------------------------------------------------
# Booleans
# ---------------------------------------------------------------------------


def coerce_boolean(value: Any) -> bool:
    """Coerce any value to bool using scripting-language truthiness.

    ``None``, ``""``, zero and NaN are false. Everything else is true,
    including ``"0"``, ``"false"`` and empty containers.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, numbers.Number):
        # NaN is the only value not equal to itself
        return not (value == 0 or value != value)
    return True


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def parse_date(text: str) -> datetime.datetime:
    """Parse an ISO 8601 or RFC 2822 date-time string.

    Naive results are interpreted as UTC.

    Raises:
        ValueError: If the string matches neither format.
    """
    stripped = text.strip()
    iso = stripped[:-1] + "+00:00" if stripped[-1:] in ("Z", "z") else stripped
    try:
        parsed = datetime.datetime.fromisoformat(iso)
    except ValueError:
        try:
            parsed = email.utils.parsedate_to_datetime(stripped)
        except (TypeError, ValueError, IndexError):
            raise ValueError(f"unrecognized date: {text!r}") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def from_epoch_millis(millis: Number) -> datetime.datetime:
    """Return the aware UTC datetime ``millis`` milliseconds after the epoch.

    Raises:
        ValueError: If the result falls outside the supported date range.
    """
    try:
        return EPOCH + datetime.timedelta(milliseconds=float(millis))
    except OverflowError as exc:
        raise ValueError(f"timestamp out of range: {millis!r}") from exc


def _require_positive(parsed: datetime.datetime) -> datetime.datetime:
    try:
        positive = parsed.timestamp() > 0
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"unrepresentable date: {parsed!r}") from exc
    if not positive:
        raise ValueError(f"date not after the epoch: {parsed.isoformat()}")
    return parsed


def coerce_date(value: Any) -> datetime.datetime:
    """Return ``value`` as a datetime.

    Accepts datetimes unchanged, plain dates (midnight UTC), date strings and
    positive millisecond timestamps. Converted values must lie strictly after
    the Unix epoch.

    Raises:
        ValueError: If the value cannot be read as a date.
    """
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        midnight = datetime.datetime(
            value.year, value.month, value.day, tzinfo=datetime.timezone.utc
        )
        return _require_positive(midnight)
    if isinstance(value, str):
        return _require_positive(parse_date(value))
    if is_finite(value) and value > 0:
        return _require_positive(from_epoch_millis(value))
    raise ValueError(f"not a date: {value!r}")
