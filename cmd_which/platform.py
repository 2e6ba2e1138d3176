"""Platform rules shared across cmd-which modules.

The resolver never inspects ``sys.platform`` directly. Instead it receives a
:class:`PlatformRules` strategy describing the delimiter, separators,
extension handling and case normalisation of one platform family, so both
families can be exercised from any host.
"""

from __future__ import annotations

import dataclasses as dc
import ntpath
import os
import posixpath
import sys
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types

# Test suites set this override to emulate alternative platforms (for
# example Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "CMD_WHICH_PLATFORM_OVERRIDE"

# Prefixes (as reported by ``sys.platform``) and names (as reported by
# ``os.name``) that select the Windows family.
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("win",)
_WINDOWS_NAMES: t.Final[frozenset[str]] = frozenset({"nt"})


@dc.dataclass(frozen=True, slots=True)
class PlatformRules:
    """
    Path conventions of one platform family.

    Attributes
    ----------
    name : str
        Family name, ``"posix"`` or ``"windows"``.
    delimiter : str
        Separator between entries of the search path and extension list.
    separators : tuple[str, ...]
        Characters marking a command as a path rather than a bare name.
        Only ``/`` on both families; a backslash in a Windows command is
        joined onto each search directory like any other character.
    uses_extensions : bool
        Whether executable extensions from ``PATHEXT`` are tried.
    case_insensitive : bool
        Whether candidates are uppercased before probing.
    path_module : types.ModuleType
        ``posixpath`` or ``ntpath``; used for joins and normalisation.
    """

    name: str
    delimiter: str
    separators: tuple[str, ...]
    uses_extensions: bool
    case_insensitive: bool
    path_module: types.ModuleType = dc.field(repr=False, compare=False)

    def normalise_case(self, path: str) -> str:
        """Return *path* in the form used for comparisons on this family."""
        return path.upper() if self.case_insensitive else path


POSIX: t.Final[PlatformRules] = PlatformRules(
    name="posix",
    delimiter=":",
    separators=("/",),
    uses_extensions=False,
    case_insensitive=False,
    path_module=posixpath,
)

WINDOWS: t.Final[PlatformRules] = PlatformRules(
    name="windows",
    delimiter=";",
    separators=("/",),
    uses_extensions=True,
    case_insensitive=True,
    path_module=ntpath,
)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def is_windows(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current) is Windows-family."""
    platform_name = _current_platform(platform)
    return platform_name in _WINDOWS_NAMES or platform_name.startswith(
        _WINDOWS_PREFIXES
    )


def rules_for(platform: str | PlatformRules | None = None) -> PlatformRules:
    """Return the :class:`PlatformRules` for *platform*.

    ``None`` selects the current platform, honouring
    :data:`PLATFORM_OVERRIDE_ENV`. Passing a :class:`PlatformRules` instance
    returns it unchanged.
    """
    if isinstance(platform, PlatformRules):
        return platform
    return WINDOWS if is_windows(platform) else POSIX


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "POSIX",
    "WINDOWS",
    "PlatformRules",
    "is_windows",
    "rules_for",
]
