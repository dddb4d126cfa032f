"""Run-state enums shared by tasks, groups, and serialized snapshots."""

from __future__ import annotations

import enum


class TaskState(str, enum.Enum):
    """Lifecycle states of a task.

    Transitions: NOT_STARTED -> IN_PROGRESS -> COMPLETED | FAILED, with
    FAILED -> IN_PROGRESS while retries remain. NOT_STARTED -> SKIPPED
    happens only when the orchestrator skips a task on a pending branch.
    """

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


class NodeType(str, enum.Enum):
    """Kind of a node in a serialized state tree."""

    TASK = "task"
    TASK_GROUP = "task-group"
