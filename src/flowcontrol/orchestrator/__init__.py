"""Orchestrator package -- tree traversal, branching, and lifecycle events.

Provides the Orchestrator class, the call-scoped TraversalContext, and
ready-made logging listeners.
"""

from flowcontrol.orchestrator.callbacks import (
    attach_logging,
    log_group_success,
    log_task_complete,
    log_task_skipped,
    log_task_started,
)
from flowcontrol.orchestrator.context import TraversalContext
from flowcontrol.orchestrator.loop import Orchestrator

__all__ = [
    # Core
    "Orchestrator",
    "TraversalContext",
    # Logging listeners
    "attach_logging",
    "log_task_started",
    "log_task_complete",
    "log_task_skipped",
    "log_group_success",
]
