"""typedaccess — defensive, typed reads from loosely-typed mappings.

Stable public API (semver-protected):
    TypedAccessor: Labelled read-only wrapper with typed getters.
    UNSET: Sentinel meaning "no fallback supplied".
    AccessorError: Base class of every accessor failure.
    InvalidInputError: Raised when the wrapped data is not a mapping.
    MissingKeyError: Raised when a key is absent and no fallback was given.
    TypeMismatchError: Raised when a value fails a getter's validation.
"""

__version__ = "0.1.0"

from typedaccess.accessor import UNSET, TypedAccessor
from typedaccess.exceptions import (
    AccessorError,
    InvalidInputError,
    MissingKeyError,
    TypeMismatchError,
)

__all__ = [
    "__version__",
    "TypedAccessor",
    "UNSET",
    "AccessorError",
    "InvalidInputError",
    "MissingKeyError",
    "TypeMismatchError",
]
