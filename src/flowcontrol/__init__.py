"""flowcontrol: in-process orchestration of task trees.

Define tasks, compose them into (nested) task groups, and run them in
order with retries, condition checks, conditional branching, lifecycle
events, and serializable state snapshots.
"""

from flowcontrol._version import __version__

# Core model
from flowcontrol.task import Task
from flowcontrol.group import Node, TaskGroup

# Orchestration
from flowcontrol.orchestrator import Orchestrator, TraversalContext, attach_logging

# Events
from flowcontrol.events import EventEmitter, EventName

# Models
from flowcontrol.models.config import DEFAULT_WAIT_TIME_MS, RetryPolicy
from flowcontrol.models.snapshot import NodeSnapshot
from flowcontrol.models.state import NodeType, TaskState

# Serialization
from flowcontrol.serialization import derive_group_state, serialize_node

# Exceptions
from flowcontrol.exceptions import (
    ConditionNotMetError,
    FlowControlError,
    InvalidBranchTargetError,
    TaskConfigError,
    TaskNotFoundError,
    UnknownEventError,
)

__all__ = [
    "__version__",
    # Core model
    "Task",
    "TaskGroup",
    "Node",
    # Orchestration
    "Orchestrator",
    "TraversalContext",
    "attach_logging",
    # Events
    "EventEmitter",
    "EventName",
    # Models
    "RetryPolicy",
    "DEFAULT_WAIT_TIME_MS",
    "NodeSnapshot",
    "NodeType",
    "TaskState",
    # Serialization
    "derive_group_state",
    "serialize_node",
    # Exceptions
    "FlowControlError",
    "ConditionNotMetError",
    "InvalidBranchTargetError",
    "TaskConfigError",
    "TaskNotFoundError",
    "UnknownEventError",
]
