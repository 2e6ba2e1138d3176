"""Locate executables on the search path the way a shell resolves commands.

``which("git")`` walks ``PATH`` in order and returns the absolute path of the
first match, or ``None``. On Windows-family platforms ``PATHEXT`` extensions
are tried as well. The pytest helpers live in :mod:`cmd_which.pytest_plugin`.
"""

from __future__ import annotations

from .environment import DEFAULT_PATHEXT, SearchEnvironment
from .errors import CmdWhichError, MissingCommandError
from .platform import (
    PLATFORM_OVERRIDE_ENV,
    POSIX,
    WINDOWS,
    PlatformRules,
    is_windows,
    rules_for,
)
from .resolver import PathResolver, is_file_entry, which

__all__ = [
    "DEFAULT_PATHEXT",
    "PLATFORM_OVERRIDE_ENV",
    "POSIX",
    "WINDOWS",
    "CmdWhichError",
    "MissingCommandError",
    "PathResolver",
    "PlatformRules",
    "SearchEnvironment",
    "is_file_entry",
    "is_windows",
    "rules_for",
    "which",
]
