"""BDD step definitions for profiling features."""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from loglens.core.profiling import ProfiledFunction, wrap


class StepFailure(Exception):
    """Error raised by the failing target function."""


@dataclass
class ProfilingScenarioContext:
    """Shared state between steps in a profiling scenario."""

    target: Callable[[], Any] | None = None
    profiled: ProfiledFunction | None = None
    errors: list[BaseException] = field(default_factory=list)


@pytest.fixture
def ctx() -> ProfilingScenarioContext:
    """Fresh scenario context for each test."""
    return ProfilingScenarioContext()


def _profiled(ctx: ProfilingScenarioContext) -> ProfiledFunction:
    assert ctx.profiled is not None
    return ctx.profiled


# === Given ===
@given(
    parsers.parse("a function that sleeps between {low:d} and {high:d} milliseconds")
)
def step_sleeping_function(ctx: ProfilingScenarioContext, low: int, high: int) -> None:
    def target() -> None:
        time.sleep(random.uniform(low, high) / 1000)

    ctx.target = target


@given(parsers.parse("a function that fails after {ms:d} milliseconds"))
def step_failing_function(ctx: ProfilingScenarioContext, ms: int) -> None:
    def target() -> None:
        time.sleep(ms / 1000)
        raise StepFailure("always fails")

    ctx.target = target


# === When ===
@when(parsers.parse("it is called {n:d} times through a profiling wrapper"))
def step_call_n_times(ctx: ProfilingScenarioContext, n: int) -> None:
    assert ctx.target is not None
    ctx.profiled = wrap(ctx.target, name="target")
    for _ in range(n):
        try:
            ctx.profiled()
        except StepFailure as e:
            ctx.errors.append(e)


@when("it is wrapped but never called")
def step_wrap_only(ctx: ProfilingScenarioContext) -> None:
    assert ctx.target is not None
    ctx.profiled = wrap(ctx.target, name="target")


# === Then ===
@then(parsers.parse("the call count is {n:d}"))
def step_call_count(ctx: ProfilingScenarioContext, n: int) -> None:
    assert _profiled(ctx).count() == n


@then(parsers.parse("the minimum duration is at least {ms:d} milliseconds"))
def step_min_duration(ctx: ProfilingScenarioContext, ms: int) -> None:
    assert _profiled(ctx).min() >= ms


@then(parsers.parse("the maximum duration is at most {ms:d} milliseconds"))
def step_max_duration(ctx: ProfilingScenarioContext, ms: int) -> None:
    assert _profiled(ctx).max() <= ms


@then("the mean lies between the minimum and the maximum")
def step_mean_bounds(ctx: ProfilingScenarioContext) -> None:
    profiled = _profiled(ctx)
    assert profiled.min() <= profiled.mean() <= profiled.max()


@then("every call raised the original error")
def step_original_error(ctx: ProfilingScenarioContext) -> None:
    assert len(ctx.errors) == _profiled(ctx).failures
    assert all(str(e) == "always fails" for e in ctx.errors)


@then(parsers.parse("the report mentions {n:d} failed calls"))
def step_report_failures(ctx: ProfilingScenarioContext, n: int) -> None:
    assert f"failed calls: {n}, included" in _profiled(ctx).report()


@then("the report says there are no samples")
def step_report_empty(ctx: ProfilingScenarioContext) -> None:
    assert "no samples" in _profiled(ctx).report()
