"""Unit tests for the pytest plugin fixtures."""

from __future__ import annotations

import typing as t

import pytest

from cmd_which.platform import POSIX, WINDOWS
from cmd_which.testing import FakeFilesystem

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from _pytest.pytester import Pytester

    from cmd_which.pytest_plugin import WhichSandbox

pytest_plugins = ("pytester",)


def test_sandbox_creates_files(which_sandbox: WhichSandbox) -> None:
    """Files land beneath the sandbox root inside their directory."""
    created = which_sandbox.add_file("tools", "run", content="#!/bin/sh\n")
    assert created == which_sandbox.root / "tools" / "run"
    assert created.read_text() == "#!/bin/sh\n"


def test_sandbox_search_path_uses_family_delimiter(
    which_sandbox: WhichSandbox,
) -> None:
    """Search paths are joined with the delimiter of the requested family."""
    root = which_sandbox.root
    assert which_sandbox.search_path("a", "b", platform=POSIX) == (
        f"{root / 'a'}:{root / 'b'}"
    )
    assert which_sandbox.search_path("a", "b", platform=WINDOWS) == (
        f"{root / 'a'};{root / 'b'}"
    )


def test_sandbox_environment(which_sandbox: WhichSandbox) -> None:
    """Environments are anchored at the sandbox root."""
    env = which_sandbox.environment("bin", platform=WINDOWS, pathext=".exe")
    assert env.cwd == str(which_sandbox.root)
    assert env.rules is WINDOWS
    assert env.extensions() == [".EXE"]
    assert env.directories() == [str(which_sandbox.root / "bin")]


@pytest.mark.requires_posix
def test_sandbox_resolve(which_sandbox: WhichSandbox) -> None:
    """The shortcut resolves against real files in the sandbox."""
    tool = which_sandbox.add_file("bin", "tool")
    assert which_sandbox.resolve("tool", "bin", platform=POSIX) == str(tool)
    assert which_sandbox.resolve("other", "bin", platform=POSIX) is None


def test_fake_filesystem_factory(
    fake_filesystem: t.Callable[..., FakeFilesystem],
) -> None:
    """The factory builds probes honouring the family's case rules."""
    windows_fs = fake_filesystem(r"C:\Tools\Foo.exe", platform=WINDOWS)
    assert windows_fs(r"c:\tools\FOO.EXE") is True
    assert windows_fs("C:/tools/foo.exe") is True
    assert windows_fs.probes == [r"c:\tools\FOO.EXE", "C:/tools/foo.exe"]

    posix_fs = fake_filesystem("/usr/bin/Foo", platform=POSIX)
    assert posix_fs("/usr/bin/foo") is False
    assert "/usr/bin/Foo" in posix_fs


def test_plugin_loads_in_external_suite(pytester: Pytester) -> None:
    """Third-party suites can request the fixtures through ``pytest_plugins``."""
    test_file = pytester.makepyfile(
        """
        from cmd_which.platform import POSIX
        from cmd_which.resolver import PathResolver
        from cmd_which.environment import SearchEnvironment

        pytest_plugins = ("cmd_which.pytest_plugin",)

        def test_lookup(fake_filesystem):
            fs = fake_filesystem("/opt/bin/tool", platform=POSIX)
            env = SearchEnvironment(search_path="/opt/bin", rules=POSIX, cwd="/")
            assert PathResolver(env, probe=fs).resolve("tool") == "/opt/bin/tool"
        """
    )

    result = pytester.runpytest(str(test_file))
    result.assert_outcomes(passed=1)
