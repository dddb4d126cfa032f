"""Tests for the synchronous event channel (EventEmitter)."""

from __future__ import annotations

import pytest

from flowcontrol import EventEmitter, EventName
from flowcontrol.exceptions import UnknownEventError


@pytest.fixture
def emitter() -> EventEmitter:
    return EventEmitter()


class TestOn:
    def test_starts_with_no_listeners(self, emitter):
        assert emitter.listeners("taskStarted") == []

    def test_registers_listener(self, emitter):
        def listener(*args):
            pass

        emitter.on("taskStarted", listener)
        assert emitter.listeners(EventName.TASK_STARTED) == [listener]

    def test_multiple_listeners_keep_registration_order(self, emitter):
        def first(*args):
            pass

        def second(*args):
            pass

        emitter.on(EventName.SUCCESS, first)
        emitter.on("success", second)
        assert emitter.listeners("success") == [first, second]

    def test_unknown_event_rejected(self, emitter):
        with pytest.raises(UnknownEventError, match="taskStartd"):
            emitter.on("taskStartd", lambda: None)

    def test_caller_events_accepted(self, emitter):
        emitter.on("error", lambda *a: None)
        emitter.on("info", lambda *a: None)
        assert len(emitter.listeners("error")) == 1
        assert len(emitter.listeners("info")) == 1


class TestEmit:
    def test_calls_listener_with_all_args(self, emitter):
        calls = []
        emitter.on("info", lambda *args: calls.append(args))

        emitter.emit("info", "arg1", 42)

        assert calls == [("arg1", 42)]

    def test_calls_listeners_in_registration_order(self, emitter):
        order = []
        emitter.on("success", lambda msg: order.append(("a", msg)))
        emitter.on("success", lambda msg: order.append(("b", msg)))

        emitter.emit(EventName.SUCCESS, "done")

        assert order == [("a", "done"), ("b", "done")]

    def test_does_not_call_other_events(self, emitter):
        started, completed = [], []
        emitter.on("taskStarted", started.append)
        emitter.on("taskComplete", completed.append)

        emitter.emit("taskStarted", "data")

        assert started == ["data"]
        assert completed == []

    def test_emit_without_listeners_is_noop(self, emitter):
        emitter.emit("success", "nobody listening")

    def test_listener_exception_propagates(self, emitter):
        later = []

        def broken(msg):
            raise ValueError("listener failed")

        emitter.on("success", broken)
        emitter.on("success", later.append)

        with pytest.raises(ValueError, match="listener failed"):
            emitter.emit("success", "x")
        assert later == []

    def test_emit_unknown_event_rejected(self, emitter):
        with pytest.raises(UnknownEventError):
            emitter.emit("nonExistentEvent")


class TestOff:
    def test_removes_listener(self, emitter):
        calls = []
        emitter.on("info", calls.append)
        emitter.off("info", calls.append)

        emitter.emit("info", "x")

        assert calls == []

    def test_removes_only_one_registration(self, emitter):
        calls = []
        emitter.on("info", calls.append)
        emitter.on("info", calls.append)
        emitter.off("info", calls.append)

        emitter.emit("info", "x")

        assert calls == ["x"]

    def test_unknown_listener_is_noop(self, emitter):
        emitter.off("info", lambda: None)
        assert emitter.listeners("info") == []
