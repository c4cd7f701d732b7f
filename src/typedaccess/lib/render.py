"""render — bounded, human-readable rendering of values for error messages.

Offending values can be arbitrarily large (a whole environment, a parsed JSON
document), so they are rendered through :class:`reprlib.Repr` with the limits
from the ``render.*`` section of ``config/defaults.yaml``.  Nested containers
are cut off after ``max_level`` levels and ``max_items`` entries; long strings
and opaque objects are elided in the middle.
"""

from __future__ import annotations

import reprlib
from typing import Any

from typedaccess.lib import config


def _build_repr() -> reprlib.Repr:
    """Return a Repr configured from the rendering defaults."""
    max_items = config.get_int("render.max_items")
    r = reprlib.Repr()
    r.maxlevel = config.get_int("render.max_level")
    r.maxstring = config.get_int("render.max_string")
    r.maxother = config.get_int("render.max_other")
    r.maxlong = config.get_int("render.max_other")
    r.maxlist = max_items
    r.maxtuple = max_items
    r.maxdict = max_items
    r.maxset = max_items
    r.maxfrozenset = max_items
    r.maxdeque = max_items
    r.maxarray = max_items
    return r


def render_value(value: Any) -> str:
    """Render a value for inclusion in an error message.

    Args:
        value: Any object, including ones whose ``repr`` raises.

    Returns:
        A single-line, length-bounded representation.
    """
    return _build_repr().repr(value)


def type_name(value: Any) -> str:
    """Return the short type name of a value (``NoneType`` for None)."""
    return type(value).__name__
