"""Pytest plugin providing the ``which_sandbox`` fixture."""

from __future__ import annotations

import logging
import typing as t

import pytest

from .environment import SearchEnvironment
from .platform import PLATFORM_OVERRIDE_ENV, PlatformRules, rules_for
from .resolver import PathResolver
from .testing import FakeFilesystem

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from pathlib import Path

logger = logging.getLogger(__name__)


class WhichSandbox:
    """Throwaway directory tree for exercising command lookups.

    Directories and files are created beneath :attr:`root`; relative names
    passed to the helpers are interpreted against it.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def add_dir(self, name: str) -> Path:
        """Create (if needed) and return the directory *name*."""
        path = self.root / name
        path.mkdir(parents=True, exist_ok=True)
        return path

    def add_file(self, directory: str, name: str, *, content: str = "") -> Path:
        """Create a regular file *name* inside *directory*."""
        path = self.add_dir(directory) / name
        path.write_text(content)
        logger.debug("Created sandbox file %s", path)
        return path

    def search_path(
        self, *dirs: str, platform: str | PlatformRules | None = None
    ) -> str:
        """Return a search-path string listing *dirs* in order."""
        rules = rules_for(platform)
        return rules.delimiter.join(str(self.root / d) for d in dirs)

    def environment(
        self,
        *dirs: str,
        platform: str | PlatformRules | None = None,
        pathext: str | None = None,
    ) -> SearchEnvironment:
        """Return a :class:`SearchEnvironment` searching *dirs*."""
        rules = rules_for(platform)
        return SearchEnvironment(
            search_path=self.search_path(*dirs, platform=rules),
            pathext=pathext,
            rules=rules,
            cwd=str(self.root),
        )

    def resolve(
        self,
        command: str,
        *dirs: str,
        platform: str | PlatformRules | None = None,
        pathext: str | None = None,
    ) -> str | None:
        """Resolve *command* against *dirs* inside the sandbox."""
        env = self.environment(*dirs, platform=platform, pathext=pathext)
        return PathResolver(env).resolve(command)


@pytest.fixture
def which_sandbox(tmp_path: Path) -> WhichSandbox:
    """Provide a :class:`WhichSandbox` rooted in a fresh temporary directory."""
    return WhichSandbox(tmp_path / "sandbox")


@pytest.fixture
def fake_filesystem() -> t.Callable[..., FakeFilesystem]:
    """Return a factory building :class:`FakeFilesystem` probes."""

    def _factory(
        *files: str, platform: str | PlatformRules | None = None
    ) -> FakeFilesystem:
        return FakeFilesystem(files, platform=platform)

    return _factory


@pytest.fixture
def platform_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Callable[[str], None]:
    """Return a setter that forces the detected platform for this test."""

    def _set(platform: str) -> None:
        monkeypatch.setenv(PLATFORM_OVERRIDE_ENV, platform)

    return _set


__all__ = [
    "WhichSandbox",
    "fake_filesystem",
    "platform_override",
    "which_sandbox",
]
