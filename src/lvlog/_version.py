"""
Version information for lvlog.

The components below are the only thing to edit for a release; every
version string is derived from them. setup.py reads PIP_VERSION from
this file.

    MAJOR.MINOR.PATCH[-PHASE]    0.1.0-alpha   (shown by lvlog --version)
    PEP 440                      0.1.0a0       (packaging metadata)
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta" or "rcN"

__app_name__ = "lvlog"

# PEP 440 pre-release segment for each phase
_PIP_PHASES = {"alpha": "a0", "beta": "b0"}


def get_base_version():
    """Return MAJOR.MINOR.PATCH."""
    return f"{MAJOR}.{MINOR}.{PATCH}"


def get_version():
    """Return the display version, MAJOR.MINOR.PATCH[-PHASE]."""
    base = get_base_version()
    return f"{base}-{PHASE}" if PHASE else base


def get_pip_version():
    """Return the PEP 440 form: 0.1.0-alpha -> 0.1.0a0, 0.1.0-rc1 -> 0.1.0rc1."""
    base = get_base_version()
    if not PHASE:
        return base
    return base + _PIP_PHASES.get(PHASE, PHASE)


__version__ = get_version()
VERSION = __version__
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
