"""Render a task tree into serialized state.

Tasks report their own state and time. A group's time is the sum of all
descendant task times, and its state is derived from its rendered
children (which already carry their own derived state):

1. ``in_progress`` if any child is in progress
2. ``failed`` if any child failed
3. ``completed`` if every child is completed or skipped, and at least
   one is completed
4. ``skipped`` if every child was skipped
5. ``not_started`` otherwise, including empty groups
"""

from __future__ import annotations

from collections.abc import Iterable

from flowcontrol.group import Node, TaskGroup
from flowcontrol.models.snapshot import NodeSnapshot
from flowcontrol.models.state import NodeType, TaskState
from flowcontrol.task import Task

_DONE = frozenset({TaskState.COMPLETED, TaskState.SKIPPED})


def derive_group_state(states: Iterable[TaskState]) -> TaskState:
    """Aggregate child states into a group state."""
    states = list(states)
    if not states:
        return TaskState.NOT_STARTED
    if TaskState.IN_PROGRESS in states:
        return TaskState.IN_PROGRESS
    if TaskState.FAILED in states:
        return TaskState.FAILED
    if all(s in _DONE for s in states):
        if TaskState.COMPLETED in states:
            return TaskState.COMPLETED
        return TaskState.SKIPPED
    return TaskState.NOT_STARTED


def serialize_node(node: Node) -> NodeSnapshot:
    """Render a single task or group (recursively) into a NodeSnapshot."""
    match node:
        case Task():
            return NodeSnapshot(
                type=NodeType.TASK,
                state=node.state or TaskState.NOT_STARTED,
                time=node.time or 0,
            )
        case TaskGroup():
            children = serialize_children(node)
            return NodeSnapshot(
                type=NodeType.TASK_GROUP,
                state=derive_group_state(c.state for c in children.values()),
                time=sum(c.time for c in children.values()),
                children=children,
            )
        case _:
            raise TypeError(f"Cannot serialize {type(node).__name__}: {node!r}")


def serialize_children(group: TaskGroup) -> dict[str, NodeSnapshot]:
    """Render the children of *group*, keyed by id, in execution order."""
    return {child.id: serialize_node(child) for child in group}


def serialize_groups(groups: Iterable[TaskGroup]) -> dict[str, NodeSnapshot]:
    """Render root groups, keyed by id."""
    return {group.id: serialize_node(group) for group in groups}


def to_plain(state: dict[str, NodeSnapshot]) -> dict[str, dict]:
    """Convert a snapshot mapping into JSON-compatible nested dicts."""
    return {node_id: node.to_dict() for node_id, node in state.items()}
