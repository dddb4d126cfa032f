"""TaskGroup: an ordered, nestable container of tasks and groups.

Children are held in a list so traversal order is exactly insertion
order. Re-adding an id replaces the existing entry at its current
position. Groups must not contain themselves (directly or transitively);
this is not checked.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Union

from flowcontrol.task import Task

Node = Union[Task, "TaskGroup"]


class TaskGroup:
    """Named group of tasks and sub-groups executed as a unit."""

    def __init__(self, id: str) -> None:
        self.id = id
        self._children: list[Node] = []

    def __repr__(self) -> str:
        return f"TaskGroup(id={self.id!r}, children={len(self._children)})"

    @property
    def children(self) -> tuple[Node, ...]:
        """Children in execution order."""
        return tuple(self._children)

    def __iter__(self) -> Iterator[Node]:
        return iter(tuple(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __contains__(self, child_id: object) -> bool:
        return self._index_of(child_id) is not None

    def _index_of(self, child_id: object) -> int | None:
        for i, child in enumerate(self._children):
            if child.id == child_id:
                return i
        return None

    def add_child(self, child: Node) -> None:
        """Append *child*, or replace the existing child with the same id in place."""
        idx = self._index_of(child.id)
        if idx is None:
            self._children.append(child)
        else:
            self._children[idx] = child

    def remove_child(self, child_id: str) -> None:
        """Remove the child with *child_id*; no-op if absent."""
        idx = self._index_of(child_id)
        if idx is not None:
            del self._children[idx]

    def get_child(self, child_id: str) -> Node | None:
        idx = self._index_of(child_id)
        return self._children[idx] if idx is not None else None

    def walk(self) -> Iterator[Node]:
        """Yield every descendant depth-first, in execution order."""
        for child in self._children:
            yield child
            if isinstance(child, TaskGroup):
                yield from child.walk()

    def tasks(self) -> Iterator[Task]:
        """Yield every descendant task in execution order."""
        for node in self.walk():
            if isinstance(node, Task):
                yield node

    def reset(self) -> None:
        """Reset the run state of every descendant task."""
        for task in self.tasks():
            task.reset()
