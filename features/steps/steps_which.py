"""Step definitions for command lookup behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

from cmd_which.environment import SearchEnvironment
from cmd_which.errors import MissingCommandError
from cmd_which.platform import PlatformRules, rules_for
from cmd_which.resolver import PathResolver
from cmd_which.testing import FakeFilesystem


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    rules: PlatformRules
    cwd: str
    search_path: str
    pathext: str | None
    files: list[str]
    result: str | None
    error: MissingCommandError | None


def _resolver(context: BehaveContext) -> PathResolver:
    env = SearchEnvironment(
        search_path=getattr(context, "search_path", ""),
        pathext=getattr(context, "pathext", None),
        rules=context.rules,
        cwd=context.cwd,
    )
    files = getattr(context, "files", [])
    return PathResolver(env, probe=FakeFilesystem(files, platform=context.rules))


@given('the platform is "{platform}"')
def step_platform(context: BehaveContext, platform: str) -> None:
    """Select the platform family rules."""
    context.rules = rules_for(platform)
    context.files = []


@given('the working directory is "{cwd}"')
def step_cwd(context: BehaveContext, cwd: str) -> None:
    """Anchor relative lookups at *cwd*."""
    context.cwd = cwd


@given('the file "{path}" exists')
def step_file(context: BehaveContext, path: str) -> None:
    """Register *path* in the fake filesystem."""
    context.files.append(path)


@given('the search path is "{search_path}"')
def step_search_path(context: BehaveContext, search_path: str) -> None:
    """Use *search_path* as the raw search-path value."""
    context.search_path = search_path


@given('PATHEXT is "{pathext}"')
def step_pathext(context: BehaveContext, pathext: str) -> None:
    """Use *pathext* as the executable-extension list."""
    context.pathext = pathext


@when('I look up "{command}"')
def step_look_up(context: BehaveContext, command: str) -> None:
    """Resolve *command*."""
    context.result = _resolver(context).resolve(command)


@when("I look up an empty command")
def step_look_up_empty(context: BehaveContext) -> None:
    """Attempt to resolve an empty command and capture the error."""
    context.error = None
    try:
        _resolver(context).resolve("")
    except MissingCommandError as exc:
        context.error = exc


@then('the lookup should return "{expected}"')
def step_check_result(context: BehaveContext, expected: str) -> None:
    """Assert the lookup returned *expected*."""
    assert context.result == expected


@then("the lookup should find nothing")
def step_check_not_found(context: BehaveContext) -> None:
    """Assert the lookup found no candidate."""
    assert context.result is None


@then("a missing command error should be raised")
def step_check_missing_command(context: BehaveContext) -> None:
    """Assert the empty command was rejected."""
    assert context.error is not None
    assert "must specify command" in str(context.error)
