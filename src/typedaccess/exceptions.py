"""Custom exceptions for typedaccess.

Defines the exception hierarchy raised by :class:`typedaccess.TypedAccessor`.
All exceptions are importable from the top-level ``typedaccess`` package and
share the :class:`AccessorError` base so callers can catch every accessor
failure with a single clause.

Exceptions:
    InvalidInputError — Raised when an accessor is built over something that
        is not a mapping. Subclasses TypeError.
    MissingKeyError — Raised when a key is absent and no fallback was
        supplied. Subclasses LookupError.
    TypeMismatchError — Raised when a resolved value fails a getter's type
        or shape validation. Subclasses TypeError.
"""

from __future__ import annotations

from typing import Any

from typedaccess.lib import config
from typedaccess.lib.render import render_value, type_name


class AccessorError(Exception):
    """Base class for all typedaccess errors."""


class InvalidInputError(AccessorError, TypeError):
    """Raised when the data wrapped by an accessor is not a mapping."""

    def __init__(self, label: str, value: Any) -> None:
        """Initialize with the rejected source.

        Args:
            label: Label the accessor would have carried.
            value: The non-mapping object that was supplied.
        """
        self.label = label
        self.value = value
        msg = config.get_str("messages.invalid_input")
        super().__init__(
            msg.format(
                label=label,
                type_name=type_name(value),
                value=render_value(value),
            )
        )


class MissingKeyError(AccessorError, LookupError):
    """Raised when a key is absent and no fallback was supplied.

    Carries the key, accessor label and the type the caller asked for so
    that the operator can see which setting is missing and where.
    """

    def __init__(self, key: str, label: str, expected: str) -> None:
        """Initialize with lookup details.

        Args:
            key: The key that was looked up.
            label: Path label of the accessor.
            expected: Human-readable name of the requested type.
        """
        self.key = key
        self.label = label
        self.expected = expected
        msg = config.get_str("messages.missing_key")
        super().__init__(msg.format(key=key, label=label, expected=expected))


class TypeMismatchError(AccessorError, TypeError):
    """Raised when a resolved value fails a getter's validation."""

    def __init__(self, key: str, label: str, expected: str, value: Any) -> None:
        """Initialize with validation details.

        Args:
            key: The key whose value was rejected.
            label: Path label of the accessor.
            expected: Human-readable name of the requested type.
            value: The offending value (stored value or fallback).
        """
        self.key = key
        self.label = label
        self.expected = expected
        self.value = value
        msg = config.get_str("messages.type_mismatch")
        super().__init__(
            msg.format(
                key=key,
                label=label,
                expected=expected,
                value=render_value(value),
            )
        )
