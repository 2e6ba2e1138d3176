"""Exception hierarchy for cmd-which."""

from __future__ import annotations


class CmdWhichError(Exception):
    """Base class for all cmd-which errors."""


class MissingCommandError(CmdWhichError, ValueError):
    """Raised when :func:`cmd_which.which` is called without a command."""


__all__ = ["CmdWhichError", "MissingCommandError"]
