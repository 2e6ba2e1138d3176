"""In-memory filesystem probe for exercising lookups on any host."""

from __future__ import annotations

import typing as t

from .platform import PlatformRules, rules_for

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import collections.abc as cabc


class FakeFilesystem:
    """Callable probe backed by a set of file paths.

    Instances satisfy :data:`cmd_which.resolver.Probe`. Windows-family rules
    make membership checks case-insensitive and treat ``/`` and ``\\`` as
    the same separator. Every probed path is appended to :attr:`probes` in
    call order.
    """

    def __init__(
        self,
        files: cabc.Iterable[str] = (),
        *,
        platform: str | PlatformRules | None = None,
    ) -> None:
        self.rules = rules_for(platform)
        self.probes: list[str] = []
        self._files: set[str] = set()
        for path in files:
            self.add(path)

    def _key(self, path: str) -> str:
        module = self.rules.path_module
        return self.rules.normalise_case(module.normpath(path))

    def add(self, path: str) -> None:
        """Register *path* as an existing regular file."""
        self._files.add(self._key(path))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self._key(path) in self._files

    def __call__(self, path: str) -> bool:
        self.probes.append(path)
        return path in self


__all__ = ["FakeFilesystem"]
