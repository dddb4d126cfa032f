"""Serialized state model.

A snapshot is a point-in-time read of a task tree: a mapping from node id
to NodeSnapshot, nested through ``children`` for task groups.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from flowcontrol.models.state import NodeType, TaskState


class NodeSnapshot(BaseModel):
    """State of one task or task group at the time of the snapshot."""

    type: NodeType
    state: TaskState = TaskState.NOT_STARTED
    time: float = 0
    children: Optional[dict[str, NodeSnapshot]] = None

    def to_dict(self) -> dict:
        """Plain JSON-compatible dict; ``children`` is omitted for tasks."""
        return self.model_dump(mode="json", exclude_none=True)


NodeSnapshot.model_rebuild()
