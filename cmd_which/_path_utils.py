"""Shared helpers for building candidate paths across platforms."""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import PlatformRules


def split_search_path(value: str | None, rules: PlatformRules) -> list[str]:
    """Split *value* on the family delimiter; empty input yields ``[]``."""
    if not value:
        return []
    return value.split(rules.delimiter)


def has_separator(command: str, rules: PlatformRules) -> bool:
    """Return ``True`` when *command* names a path rather than a bare name."""
    return any(sep in command for sep in rules.separators)


def absolute_path(rules: PlatformRules, cwd: str, *parts: str) -> str:
    """Join *parts* onto *cwd* and return the normalised absolute result.

    Later absolute parts discard earlier ones, matching ``os.path.join``.
    """
    module = rules.path_module
    return module.normpath(module.join(cwd, *parts))
