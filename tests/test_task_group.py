"""Tests for TaskGroup: ordered children, replacement, and nested walks."""

from __future__ import annotations

from flowcontrol import TaskGroup, TaskState
from tests.conftest import make_group, make_task


class TestTaskGroup:
    def test_initial_state(self):
        group = TaskGroup("group1")
        assert group.id == "group1"
        assert len(group) == 0
        assert group.children == ()

    def test_add_and_remove_child(self):
        group = TaskGroup("group1")
        task = make_task("testTask")

        group.add_child(task)
        assert task.id in group
        assert group.get_child("testTask") is task

        group.remove_child(task.id)
        assert task.id not in group
        assert group.get_child("testTask") is None

    def test_remove_missing_child_is_noop(self):
        group = make_group("g", make_task("a"))
        group.remove_child("missing")
        assert [c.id for c in group] == ["a"]

    def test_children_keep_insertion_order(self):
        group = make_group("g", make_task("c"), make_task("a"), make_task("b"))
        assert [c.id for c in group.children] == ["c", "a", "b"]

    def test_readding_id_replaces_in_place(self):
        original = make_task("b")
        group = make_group("g", make_task("a"), original, make_task("c"))
        replacement = make_task("b")

        group.add_child(replacement)

        assert [c.id for c in group] == ["a", "b", "c"]
        assert group.get_child("b") is replacement
        assert len(group) == 3

    def test_groups_nest(self):
        inner = make_group("inner", make_task("x"))
        outer = make_group("outer", make_task("a"), inner)

        assert outer.get_child("inner") is inner
        assert [n.id for n in outer.walk()] == ["a", "inner", "x"]
        assert [t.id for t in outer.tasks()] == ["a", "x"]

    def test_reset_clears_descendant_tasks(self):
        x = make_task("x")
        x.state = TaskState.FAILED
        x.time = 12.5
        outer = make_group("outer", make_group("inner", x))

        outer.reset()

        assert x.state == TaskState.NOT_STARTED
        assert x.time == 0
