"""accessor — labelled, read-only typed access to loosely-typed mappings.

A :class:`TypedAccessor` wraps one mapping (environment variables, parsed
JSON or YAML, a configuration blob) together with a path label such as
``"config.server[2]"``.  Every getter follows the same lookup contract:

1. A present key wins, whatever its value (``None``, ``False``, ``0`` and
   ``""`` included).
2. An absent key falls back to the caller's ``fallback`` when one is given.
3. Otherwise :class:`~typedaccess.exceptions.MissingKeyError` is raised.

The resolved value is then validated or coerced by the getter.  Nested
mappings are returned as child accessors whose labels extend the parent's,
so an error deep inside a document names its full path.

Typical usage::

    settings = TypedAccessor("settings", json.loads(raw))
    port = settings.get_number("port", 8080)
    for server in settings.get_object_array("servers"):
        host = server.get_string("host")
"""

from __future__ import annotations

import datetime
import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from typedaccess.exceptions import InvalidInputError, MissingKeyError, TypeMismatchError
from typedaccess.lib import coerce, config

logger = logging.getLogger(__name__)


class _Unset:
    """Sentinel type for "no fallback supplied"."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def _type_name(kind: str) -> str:
    return config.get_str(f"type_names.{kind}")


class TypedAccessor:
    """A labelled, read-only wrapper over a mapping with type-checked getters.

    The mapping is held by reference and never copied or mutated; changes
    the caller makes to it later are visible through the accessor.

    Attributes:
        label: Human-readable position of this mapping, used in errors.
    """

    __slots__ = ("_label", "_data")

    def __init__(self, label: str, data: Mapping[str, Any]) -> None:
        """Wrap ``data`` under ``label``.

        Args:
            label: Name used in error messages, e.g. ``"config.server"``.
            data: The mapping to read from.

        Raises:
            InvalidInputError: If ``data`` is not a mapping.
        """
        if not coerce.is_mapping(data):
            raise InvalidInputError(label, data)
        self._label = label
        self._data = data

    @classmethod
    def env(cls, environ: Optional[Mapping[str, str]] = None) -> TypedAccessor:
        """Return an accessor over the process environment.

        Args:
            environ: Mapping to use instead of ``os.environ`` (for tests).

        Returns:
            An accessor labelled with ``defaults.env_label``.
        """
        return cls(
            config.get_str("defaults.env_label"),
            os.environ if environ is None else environ,
        )

    @property
    def label(self) -> str:
        """Return the path label of this accessor."""
        return self._label

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._label!r})"

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def has(self, key: str) -> bool:
        """Return True if ``key`` is present, whatever its value."""
        return key in self._data

    def get(self, key: str, fallback: Any = UNSET) -> Any:
        """Return the raw value for ``key``.

        Args:
            key: The key to look up.
            fallback: Returned when ``key`` is absent. ``None`` is a valid
                fallback; omit the argument to make absence an error.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
        """
        return self._resolve(key, fallback, _type_name("any"))

    def _resolve(self, key: str, fallback: Any, expected: str) -> Any:
        if self.has(key):
            return self._data[key]
        if fallback is not UNSET:
            logger.debug("Key %r absent in %s, using fallback", key, self._label)
            return fallback
        raise MissingKeyError(key, self._label, expected)

    def _mismatch(self, key: str, expected: str, value: Any) -> TypeMismatchError:
        return TypeMismatchError(key, self._label, expected, value)

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def get_string(self, key: str, fallback: Any = UNSET) -> str:
        """Return the string value for ``key``.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value is not a string.
        """
        expected = _type_name("string")
        value = self._resolve(key, fallback, expected)
        if not isinstance(value, str):
            raise self._mismatch(key, expected, value)
        return value

    def get_string_optional(self, key: str) -> Optional[str]:
        """Return the string value for ``key``, or None if it is absent.

        Raises:
            TypeMismatchError: If the key is present but not a string.
        """
        if not self.has(key):
            return None
        return self.get_string(key)

    def get_number(self, key: str, fallback: Any = UNSET) -> coerce.Number:
        """Return the numeric value for ``key``.

        Strings are parsed: as a float when they contain a ``.``, otherwise
        as an integer.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value is not a finite number and does
                not parse to one.
        """
        expected = _type_name("number")
        value = self._resolve(key, fallback, expected)
        try:
            return coerce.coerce_number(value)
        except ValueError as exc:
            raise self._mismatch(key, expected, value) from exc

    def get_number_optional(self, key: str) -> Optional[coerce.Number]:
        """Return the numeric value for ``key``, or None if it is absent."""
        if not self.has(key):
            return None
        return self.get_number(key)

    def get_boolean(self, key: str, fallback: Any = UNSET) -> bool:
        """Return the value for ``key`` coerced to a boolean.

        Any value is accepted: ``None``, ``""``, zero and NaN are false and
        everything else is true.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
        """
        return coerce.coerce_boolean(self._resolve(key, fallback, _type_name("boolean")))

    def get_boolean_optional(self, key: str) -> Optional[bool]:
        """Return the boolean value for ``key``, or None if it is absent."""
        if not self.has(key):
            return None
        return self.get_boolean(key)

    def get_date(self, key: str, fallback: Any = UNSET) -> datetime.datetime:
        """Return the date value for ``key``.

        Datetimes are returned unchanged. Dates, ISO 8601 / RFC 2822 strings
        and millisecond timestamps are converted and must fall strictly
        after the Unix epoch.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value cannot be read as a date.
        """
        expected = _type_name("date")
        value = self._resolve(key, fallback, expected)
        try:
            return coerce.coerce_date(value)
        except ValueError as exc:
            raise self._mismatch(key, expected, value) from exc

    def get_date_optional(self, key: str) -> Optional[datetime.datetime]:
        """Return the date value for ``key``, or None if it is absent."""
        if not self.has(key):
            return None
        return self.get_date(key)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def get_array(self, key: str, fallback: Any = UNSET) -> Sequence[Any]:
        """Return the sequence stored under ``key``, unconverted.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value is not an ordered sequence.
        """
        expected = _type_name("array")
        value = self._resolve(key, fallback, expected)
        if not coerce.is_sequence(value):
            raise self._mismatch(key, expected, value)
        return value

    def get_object_array(self, key: str, fallback: Any = UNSET) -> list[TypedAccessor]:
        """Return the sequence under ``key`` as a list of child accessors.

        Each element ``i`` is wrapped with the label ``<label>.<key>[i]``.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value is not a sequence, or one of its
                elements is not a mapping.
        """
        items = self.get_array(key, fallback)
        element_format = config.get_str("labels.element_format")
        children: list[TypedAccessor] = []
        for index, item in enumerate(items):
            if not coerce.is_mapping(item):
                raise self._mismatch(key, _type_name("object"), item)
            children.append(
                TypedAccessor(
                    element_format.format(label=self._label, key=key, index=index),
                    item,
                )
            )
        logger.debug("Wrapped %d elements of %r in %s", len(children), key, self._label)
        return children

    def get_object(self, key: str, fallback: Any = UNSET) -> TypedAccessor:
        """Return the mapping under ``key`` as a child accessor.

        The child is labelled ``<label>.<key>``.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value is not a mapping.
        """
        value = self.get_raw_object(key, fallback)
        child_label = config.get_str("labels.child_format").format(
            label=self._label, key=key
        )
        logger.debug("Descending into %s", child_label)
        return TypedAccessor(child_label, value)

    def get_raw_object(self, key: str, fallback: Any = UNSET) -> Mapping[str, Any]:
        """Return the mapping under ``key`` itself, without wrapping it.

        Raises:
            MissingKeyError: If the key is absent and no fallback was given.
            TypeMismatchError: If the value is not a mapping.
        """
        expected = _type_name("object")
        value = self._resolve(key, fallback, expected)
        if not coerce.is_mapping(value):
            raise self._mismatch(key, expected, value)
        return value

    def raw(self) -> Mapping[str, Any]:
        """Return the wrapped mapping by reference."""
        return self._data
