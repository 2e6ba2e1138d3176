"""Locate executables on a search path the way a shell resolves commands."""

from __future__ import annotations

import collections.abc as cabc
import logging
import os
import stat
import typing as t

from ._path_utils import absolute_path, has_separator
from .environment import SearchEnvironment
from .errors import MissingCommandError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import PlatformRules

logger = logging.getLogger(__name__)

Probe: t.TypeAlias = cabc.Callable[[str], bool]


def is_file_entry(path: str) -> bool:
    """Return ``True`` when *path* exists and is not a directory.

    Symbolic links are followed. Any failure to stat the path, including
    permission errors, counts as "does not exist".
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        return False
    return not stat.S_ISDIR(st.st_mode)


class PathResolver:
    """Resolve command names against a :class:`SearchEnvironment`.

    The resolver holds no state between calls; every :meth:`resolve` only
    reads its environment and probes the filesystem.
    """

    def __init__(
        self,
        environment: SearchEnvironment | None = None,
        *,
        probe: Probe = is_file_entry,
    ) -> None:
        if environment is None:
            environment = SearchEnvironment.from_environ()
        self._env = environment
        self._probe = probe

    @property
    def environment(self) -> SearchEnvironment:
        """Return the environment lookups are resolved against."""
        return self._env

    @property
    def rules(self) -> PlatformRules:
        """Return the platform family rules in effect."""
        return self._env.rules

    def resolve(self, command: str | os.PathLike[str] | None) -> str | None:
        """Return the absolute path for *command*, or ``None`` if not found.

        Commands containing a path separator skip the directory search and
        are only checked as given.

        Raises
        ------
        MissingCommandError
            If *command* is ``None`` or empty.
        """
        if command is not None:
            command = os.fspath(command)
        if not command:
            msg = "must specify command"
            raise MissingCommandError(msg)

        if has_separator(command, self.rules):
            logger.debug(
                "Command %r contains a path separator; skipping search", command
            )
        else:
            found = self._search(command)
            if found is not None:
                logger.debug("Resolved %r to %s", command, found)
                return found

        direct = absolute_path(self.rules, self._env.cwd, command)
        if self._probe(direct):
            logger.debug("Resolved %r directly to %s", command, direct)
            return direct

        logger.debug("Command %r not found", command)
        return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _search(self, command: str) -> str | None:
        """Return the first candidate for *command* across the search path."""
        extensions = self._env.extensions()
        for directory in self._env.directories():
            found = self._match_in_directory(directory, command, extensions)
            if found is not None:
                return found
        return None

    def _match_in_directory(
        self, directory: str, command: str, extensions: list[str]
    ) -> str | None:
        """Return the first extension variant of *command* in *directory*."""
        attempt = absolute_path(self.rules, self._env.cwd, directory, command)
        attempt = self.rules.normalise_case(attempt)
        for ext in extensions:
            # A command already carrying a listed extension is accepted as is.
            if ext and attempt.endswith(ext) and self._probe(attempt):
                return attempt
            candidate = attempt + ext
            if self._probe(candidate):
                return candidate
        return None


def which(
    command: str | os.PathLike[str] | None,
    *,
    environ: cabc.Mapping[str, str] | None = None,
    platform: str | PlatformRules | None = None,
    cwd: str | os.PathLike[str] | None = None,
    probe: Probe = is_file_entry,
) -> str | None:
    """Search the ``PATH`` in *environ* for *command*.

    Examples
    --------
    >>> which("python3")  # doctest: +SKIP
    '/usr/bin/python3'

    On Windows-family platforms ``PATHEXT`` extensions are appended when the
    bare name does not resolve. Returns the absolute path, or ``None`` when
    no candidate exists.
    """
    env = SearchEnvironment.from_environ(environ, platform=platform, cwd=cwd)
    return PathResolver(env, probe=probe).resolve(command)


__all__ = ["PathResolver", "Probe", "is_file_entry", "which"]
