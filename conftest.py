"""Global test configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

pytest_plugins = ("cmd_which.pytest_plugin",)

_POSIX_HOST = os.name != "nt"


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "requires_posix: mark test as relying on POSIX filesystem semantics",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip tests needing POSIX filesystem semantics on Windows hosts."""
    if _POSIX_HOST:
        return
    skip = pytest.mark.skip(reason="POSIX filesystem semantics are unavailable")
    for item in items:
        if "requires_posix" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def clear_platform_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure an override left in the outer environment cannot leak into tests."""
    monkeypatch.delenv("CMD_WHICH_PLATFORM_OVERRIDE", raising=False)
