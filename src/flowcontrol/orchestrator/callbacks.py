"""Built-in logging listeners for orchestrator lifecycle events.

Subscribe them individually with ``orchestrator.on(...)`` or all at once
with ``attach_logging(orchestrator)``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flowcontrol.events import EventName

if TYPE_CHECKING:
    from flowcontrol.orchestrator.loop import Orchestrator
    from flowcontrol.task import Task

logger = logging.getLogger(__name__)


def log_task_started(task: Task) -> None:
    logger.info("Task %s started", task.id)


def log_task_complete(task: Task) -> None:
    logger.info("Task %s completed in %.1fms", task.id, task.time)


def log_task_skipped(task: Task) -> None:
    logger.info("Task %s skipped", task.id)


def log_group_success(message: str) -> None:
    logger.info("%s", message)


def attach_logging(orchestrator: Orchestrator) -> None:
    """Subscribe the logging listeners to every lifecycle event the core emits."""
    orchestrator.on(EventName.TASK_STARTED, log_task_started)
    orchestrator.on(EventName.TASK_COMPLETE, log_task_complete)
    orchestrator.on(EventName.TASK_SKIPPED, log_task_skipped)
    orchestrator.on(EventName.SUCCESS, log_group_success)
