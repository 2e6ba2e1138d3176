"""Search environment captured for a single command lookup."""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as t

from ._path_utils import split_search_path
from .platform import POSIX, PlatformRules, rules_for

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc

logger = logging.getLogger(__name__)

# Spellings of the search-path variable, checked in order. Windows treats
# environment names case-insensitively, so any of them may be populated.
SEARCH_PATH_ENV_NAMES: t.Final[tuple[str, ...]] = ("path", "Path", "PATH")
PATHEXT_ENV: t.Final[str] = "PATHEXT"

# XP's system default for PATHEXT, used when the variable is unset (for
# example in a child process spawned with an empty environment).
DEFAULT_PATHEXT: t.Final[str] = ".com;.exe;.bat;.cmd;.vbs;.vbe;.js;.jse;.wsf;.wsh"


def _lookup_search_path(environ: cabc.Mapping[str, str]) -> str:
    """Return the first non-empty search-path value in *environ*."""
    return next(
        (value for name in SEARCH_PATH_ENV_NAMES if (value := environ.get(name))),
        "",
    )


@dc.dataclass(frozen=True, slots=True)
class SearchEnvironment:
    """
    Inputs to a lookup, passed explicitly instead of read from the process.

    Attributes
    ----------
    search_path : str
        Raw search-path string, e.g. the value of ``PATH``.
    pathext : str | None
        Raw executable-extension list. Only consulted for Windows-family
        rules; ``None`` or ``""`` selects :data:`DEFAULT_PATHEXT`.
    rules : PlatformRules
        Platform family conventions.
    cwd : str
        Directory that relative search entries and commands resolve against.
    """

    search_path: str = ""
    pathext: str | None = None
    rules: PlatformRules = POSIX
    cwd: str = dc.field(default_factory=os.getcwd)

    @classmethod
    def from_environ(
        cls,
        environ: cabc.Mapping[str, str] | None = None,
        *,
        platform: str | PlatformRules | None = None,
        cwd: str | os.PathLike[str] | None = None,
    ) -> SearchEnvironment:
        """Build an environment from *environ* (default: ``os.environ``)."""
        if environ is None:
            environ = os.environ
        rules = rules_for(platform)
        env = cls(
            search_path=_lookup_search_path(environ),
            pathext=environ.get(PATHEXT_ENV),
            rules=rules,
            cwd=os.getcwd() if cwd is None else os.fspath(cwd),
        )
        logger.debug(
            "Captured %s search environment with search path %r",
            rules.name,
            env.search_path,
        )
        return env

    def directories(self) -> list[str]:
        """Return the ordered search directories."""
        return split_search_path(self.search_path, self.rules)

    def extensions(self) -> list[str]:
        """Return the ordered extensions appended to each candidate.

        POSIX-family rules yield a single empty extension; executability
        there is not suffix based.
        """
        if not self.rules.uses_extensions:
            return [""]
        pathext = self.pathext or DEFAULT_PATHEXT
        return split_search_path(pathext.upper(), self.rules)


__all__ = [
    "DEFAULT_PATHEXT",
    "PATHEXT_ENV",
    "SEARCH_PATH_ENV_NAMES",
    "SearchEnvironment",
]
