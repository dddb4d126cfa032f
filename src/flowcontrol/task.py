"""Task: the atomic unit of work.

A task owns an execute callable, an optional post-execution condition
check, a retry policy, and its own run state. ``run_with_retry`` drives
the retry protocol; the orchestrator decides whether a task runs at all.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Sequence
from typing import Callable, Optional, Union

from pydantic import ValidationError

from flowcontrol.exceptions import (
    ConditionNotMetError,
    InvalidBranchTargetError,
    TaskConfigError,
)
from flowcontrol.models.config import DEFAULT_WAIT_TIME_MS, RetryPolicy
from flowcontrol.models.state import TaskState

logger = logging.getLogger(__name__)

# execute() yields nothing, or the id of the node expected to run next
ExecuteResult = Optional[str]
ExecuteFn = Callable[[], Union[Awaitable[ExecuteResult], ExecuteResult]]
ConditionFn = Callable[[], Union[Awaitable[bool], bool]]


async def _resolve(value):
    if inspect.isawaitable(value):
        return await value
    return value


class Task:
    """A named unit of work with retry and condition-gated completion.

    Usage::

        async def fetch():
            ...

        task = Task("fetch", fetch, retries=2, wait_time=250)
        await task.run_with_retry()
        task.state  # TaskState.COMPLETED
    """

    def __init__(
        self,
        id: str,
        execute: ExecuteFn,
        check_condition: ConditionFn | None = None,
        *,
        next_tasks: Sequence[str] | None = None,
        retries: int = 0,
        wait_time: float = DEFAULT_WAIT_TIME_MS,
    ) -> None:
        try:
            self.policy = RetryPolicy(retries=retries, wait_time=wait_time)
        except ValidationError as exc:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise TaskConfigError(id, reason) from exc

        self.id = id
        self.execute = execute
        self.check_condition = check_condition
        self.next_tasks: tuple[str, ...] | None = (
            tuple(next_tasks) if next_tasks is not None else None
        )
        self.state: TaskState = TaskState.NOT_STARTED
        self.time: float = 0
        self.attempts: int = 0

    @property
    def retries(self) -> int:
        return self.policy.retries

    @property
    def wait_time(self) -> float:
        return self.policy.wait_time

    def __repr__(self) -> str:
        return f"Task(id={self.id!r}, state={self.state.value})"

    def reset(self) -> None:
        """Return the task to its initial run state."""
        self.state = TaskState.NOT_STARTED
        self.time = 0
        self.attempts = 0

    async def attempt(self) -> ExecuteResult:
        """Run execute + condition check once.

        Returns execute's result (None or a branch-target id). Any error
        from execute or the condition check marks the task FAILED and is
        re-raised as is. A result that is neither None nor a non-empty
        str fails the attempt with InvalidBranchTargetError.
        """
        self.state = TaskState.IN_PROGRESS
        start = time.perf_counter()
        try:
            result = await _resolve(self.execute())
            if result is not None and not (isinstance(result, str) and result):
                raise InvalidBranchTargetError(self.id, result)
            if self.check_condition is not None and not await _resolve(
                self.check_condition()
            ):
                raise ConditionNotMetError(self.id)
        except Exception:
            self.state = TaskState.FAILED
            raise

        self.time = (time.perf_counter() - start) * 1000
        self.state = TaskState.COMPLETED
        return result

    async def run_with_retry(self) -> ExecuteResult:
        """Attempt the task up to ``retries + 1`` times.

        Returns the result of the first successful attempt. When every
        attempt fails, the last error is re-raised unchanged.
        """
        policy = self.policy
        self.attempts = 0
        while True:
            self.attempts += 1
            try:
                return await self.attempt()
            except Exception as exc:
                if self.attempts >= policy.max_attempts:
                    logger.warning(
                        "Task %s failed after %d attempt(s): %s",
                        self.id, self.attempts, exc,
                    )
                    raise
                logger.debug(
                    "Task %s attempt %d/%d failed: %s",
                    self.id, self.attempts, policy.max_attempts, exc,
                )
                if policy.wait_time > 0:
                    await asyncio.sleep(policy.wait_seconds)
