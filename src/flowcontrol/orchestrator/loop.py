"""Orchestrator: depth-first traversal with conditional branching.

The orchestrator owns the root task groups, walks each one depth-first in
registration order, runs every task through its retry protocol, and
emits lifecycle events along the way.

Conditional branching: a task's execute may return the id of another
node. From then on every task whose id differs is marked SKIPPED without
running, until a task with the target id is reached. The target is held
in the call's TraversalContext, so it spans group boundaries within one
``run()`` but never leaks between calls.

Failures are not recovered: the first task that exhausts its retries
aborts the whole call and its error propagates to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from flowcontrol.events import EventEmitter, EventName
from flowcontrol.exceptions import TaskNotFoundError
from flowcontrol.group import TaskGroup
from flowcontrol.models.snapshot import NodeSnapshot
from flowcontrol.models.state import TaskState
from flowcontrol.orchestrator.context import TraversalContext
from flowcontrol.serialization import serialize_groups, to_plain
from flowcontrol.task import Task

logger = logging.getLogger(__name__)


class Orchestrator(EventEmitter):
    """Runs registered task groups in order and reports their progress.

    Usage::

        orch = Orchestrator()
        orch.add_group(group)
        orch.on("taskComplete", lambda task: print(task.id, task.time))
        await orch.run()
        orch.get_serialized_state()
    """

    def __init__(self) -> None:
        super().__init__()
        self._task_groups: list[TaskGroup] = []

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def _index_of(self, group_id: str) -> int | None:
        for i, group in enumerate(self._task_groups):
            if group.id == group_id:
                return i
        return None

    def add_group(self, group: TaskGroup) -> None:
        """Register a root group; an existing id is replaced in place."""
        idx = self._index_of(group.id)
        if idx is None:
            self._task_groups.append(group)
        else:
            self._task_groups[idx] = group

    def remove_group(self, group_id: str) -> None:
        idx = self._index_of(group_id)
        if idx is not None:
            del self._task_groups[idx]

    def get_task_group(self, group_id: str) -> TaskGroup | None:
        idx = self._index_of(group_id)
        return self._task_groups[idx] if idx is not None else None

    def get_task_groups(self) -> dict[str, TaskGroup]:
        """Root groups keyed by id, in registration order."""
        return {group.id: group for group in self._task_groups}

    def reset(self) -> None:
        """Reset every task in every root group to NOT_STARTED."""
        for group in self._task_groups:
            group.reset()

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def execute_one(
        self, task: Task, context: TraversalContext | None = None
    ) -> None:
        """Run *task* unless a pending branch target says to skip it."""
        if context is None:
            context = TraversalContext()

        if context.should_skip(task.id):
            logger.debug(
                "Skipping task %s (waiting for %s)", task.id, context.pending_target
            )
            task.state = TaskState.SKIPPED
            context.skipped.append(task.id)
            self.emit(EventName.TASK_SKIPPED, task)
            return

        self.emit(EventName.TASK_STARTED, task)
        result = await task.run_with_retry()
        context.executed.append(task.id)

        if result is not None:
            logger.debug("Task %s branched to %s", task.id, result)
            context.pending_target = result
        elif context.pending_target is not None:
            context.pending_target = None

        self.emit(EventName.TASK_COMPLETE, task)

    async def traverse(
        self, group: TaskGroup, context: TraversalContext | None = None
    ) -> None:
        """Run every child of *group* depth-first, then emit ``success``."""
        if context is None:
            context = TraversalContext()

        for child in group:
            match child:
                case Task():
                    await self.execute_one(child, context)
                case TaskGroup():
                    await self.traverse(child, context)
                case _:
                    raise TypeError(
                        f"Group {group.id!r} contains unsupported child {child!r}"
                    )

        self.emit(EventName.SUCCESS, f"task-group-completed: {group.id}")

    async def run(self) -> TraversalContext:
        """Traverse every root group in registration order.

        Returns the traversal context (executed/skipped ids and any
        branch target still pending at the end).
        """
        context = TraversalContext()
        for group in list(self._task_groups):
            await self.traverse(group, context)
        if context.pending_target is not None:
            logger.warning(
                "Run finished with unreached branch target %s", context.pending_target
            )
        return context

    async def run_task(self, task_id: str) -> Task:
        """Run one task found among the *direct* children of the root groups.

        Nested groups are not searched.

        Raises:
            TaskNotFoundError: No root group has a direct child task with this id.
        """
        for group in self._task_groups:
            child = group.get_child(task_id)
            if isinstance(child, Task):
                await self.execute_one(child, TraversalContext())
                return child
        raise TaskNotFoundError(task_id)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def snapshot(self) -> dict[str, NodeSnapshot]:
        """Point-in-time state of every root group as NodeSnapshot models."""
        return serialize_groups(self._task_groups)

    def get_serialized_state(self) -> dict[str, dict[str, Any]]:
        """Point-in-time state of every root group as JSON-compatible dicts."""
        return to_plain(self.snapshot())

    def pprint(self, *, file: Any = None) -> None:
        """Pretty-print the current state tree using rich."""
        from flowcontrol.formatting import pprint_state

        pprint_state(self.get_serialized_state(), file=file)
