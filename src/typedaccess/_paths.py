"""Centralized path resolution for the typedaccess package.

This is the ONLY module that touches __file__ or computes file locations.
To override the packaged defaults, set the $TYPEDACCESS_DEFAULTS environment
variable.

Environment variables:
    TYPEDACCESS_DEFAULTS — Path to a replacement defaults.yaml. Used only
        when it names an existing file; otherwise the packaged copy is read.
"""

import os
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULTS_ENV_VAR = "TYPEDACCESS_DEFAULTS"


def config_dir() -> Path:
    """Return the packaged config/ directory path."""
    return _PACKAGE_DIR / "config"


def defaults_path() -> Path:
    """Return the defaults.yaml path (env override or packaged copy)."""
    env = os.environ.get(DEFAULTS_ENV_VAR)
    if env:
        p = Path(env)
        if p.is_file():
            return p
    return config_dir() / "defaults.yaml"
