"""Shared test fixtures for flowcontrol.

Provides call-tracking execute/condition callables, a recorder for
lifecycle events, and a fixture that replaces the retry sleep.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from flowcontrol import Orchestrator, Task, TaskGroup


# ------------------------------------------------------------------
# Shared test helpers
# ------------------------------------------------------------------


class ExecuteTracker:
    """Async execute callable that counts calls.

    Raises *error* for the first *failures* calls, then returns *result*.
    Pass ``failures=None`` to fail on every call.
    """

    def __init__(self, result: str | None = None, *, failures: int | None = 0,
                 error: Exception | None = None) -> None:
        self.result = result
        self.failures = failures
        self.error = error or RuntimeError("boom")
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.failures is None or self.calls <= self.failures:
            raise self.error
        return self.result


class ConditionTracker:
    """Async condition check returning *values* in sequence (last value repeats)."""

    def __init__(self, *values: bool) -> None:
        self.values = list(values) or [True]
        self.calls = 0

    async def __call__(self) -> bool:
        idx = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[idx]


class EventRecorder:
    """Records every lifecycle event emitted by an orchestrator, in order."""

    def __init__(self, orchestrator: Orchestrator) -> None:
        self.events: list[tuple[str, str]] = []
        orchestrator.on("taskStarted", lambda t: self.events.append(("taskStarted", t.id)))
        orchestrator.on("taskComplete", lambda t: self.events.append(("taskComplete", t.id)))
        orchestrator.on("taskSkipped", lambda t: self.events.append(("taskSkipped", t.id)))
        orchestrator.on("success", lambda msg: self.events.append(("success", msg)))

    def of(self, name: str) -> list[str]:
        return [payload for event, payload in self.events if event == name]


def make_task(task_id: str, result: str | None = None, **kwargs) -> Task:
    """Task with a tracked execute, a passing condition, and no retry delay."""
    kwargs.setdefault("wait_time", 0)
    return Task(task_id, ExecuteTracker(result), ConditionTracker(True), **kwargs)


def make_group(group_id: str, *children) -> TaskGroup:
    group = TaskGroup(group_id)
    for child in children:
        group.add_child(child)
    return group


# ------------------------------------------------------------------
# Fixtures
# ------------------------------------------------------------------


@pytest.fixture
def orchestrator() -> Orchestrator:
    return Orchestrator()


@pytest.fixture
def recorder(orchestrator: Orchestrator) -> EventRecorder:
    return EventRecorder(orchestrator)


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    """Replace the retry sleep; returns the list of requested delays (seconds)."""
    delays: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr("flowcontrol.task.asyncio", SimpleNamespace(sleep=fake_sleep))
    return delays
