"""config — wording and limits used when an accessor reports a failure.

Every ``MissingKeyError`` / ``TypeMismatchError`` message, the type names it
quotes, the ``parent.key[i]`` label formats and the ``reprlib`` limits used to
render offending values come from ``config/defaults.yaml``.  The file (or the
one named by ``$TYPEDACCESS_DEFAULTS``) is read the first time an accessor
needs it, never at import, and kept for the rest of the process.

``get_str`` and ``get_int`` check the type of what they return: a hand-edited
defaults file with a missing template or a non-integer limit surfaces as a
``KeyError``/``TypeError`` naming the dotted key, rather than as a confusing
``str.format`` failure inside an exception constructor.  Tests that swap the
file call ``reset()`` to drop the cached copy.
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from typedaccess._paths import defaults_path

logger = logging.getLogger(__name__)

_DEFAULTS: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_defaults() -> dict[str, Any]:
    """Load and cache the defaults.yaml configuration file.

    Returns:
        The full configuration dictionary.

    Raises:
        FileNotFoundError: If defaults.yaml is missing.
        yaml.YAMLError: If defaults.yaml contains invalid YAML.
        TypeError: If the top level of the file is not a mapping.
    """
    global _DEFAULTS  # noqa: PLW0603
    if _DEFAULTS is None:
        path = defaults_path()
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        if not isinstance(data, dict):
            msg = f"defaults.yaml must be a YAML mapping, got {type(data).__name__}"
            raise TypeError(msg)
        logger.debug("Loaded typedaccess defaults from %s", path)
        _DEFAULTS = data
    return _DEFAULTS


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def get(dotted_key: str) -> Any:
    """Access a nested config value using dot notation.

    Args:
        dotted_key: A dot-separated path like ``"messages.missing_key"``.

    Returns:
        The value at the specified path.

    Raises:
        KeyError: If any segment of the path is missing.
    """
    node: Any = load_defaults()
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            msg = f"Config key not found: {dotted_key!r} (missing segment: {part!r})"
            raise KeyError(msg)
        node = node[part]
    return node


def get_str(dotted_key: str) -> str:
    """Return a config value as a string.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not a string.
    """
    value = get(dotted_key)
    if not isinstance(value, str):
        msg = f"Expected str for {dotted_key!r}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def get_int(dotted_key: str) -> int:
    """Return a config value as an integer.

    Raises:
        KeyError: If the key is missing.
        TypeError: If the value is not an integer.
    """
    value = get(dotted_key)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Expected int for {dotted_key!r}, got {type(value).__name__}"
        raise TypeError(msg)
    return value


# ---------------------------------------------------------------------------
# Test utilities
# ---------------------------------------------------------------------------


def reset() -> None:
    """Clear the cached config (used by tests)."""
    global _DEFAULTS  # noqa: PLW0603
    _DEFAULTS = None
