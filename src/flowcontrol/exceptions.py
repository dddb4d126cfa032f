"""flowcontrol exception hierarchy.

All flowcontrol-specific exceptions inherit from FlowControlError.
Errors raised by a task's own execute/check_condition callables are
never wrapped; they surface unchanged once retries are exhausted.
"""


class FlowControlError(Exception):
    """Base exception for all flowcontrol errors."""


class ConditionNotMetError(FlowControlError):
    """Raised when a task's condition check resolves falsy after execute."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Condition not met for task: {task_id}")


class TaskConfigError(FlowControlError):
    """Raised when a task is constructed with an invalid retry policy."""

    def __init__(self, task_id: str, reason: str) -> None:
        self.task_id = task_id
        self.reason = reason
        super().__init__(f"Invalid configuration for task '{task_id}': {reason}")


class TaskNotFoundError(FlowControlError):
    """Raised when a task id lookup fails."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class UnknownEventError(FlowControlError):
    """Raised when a listener is registered for an event that does not exist."""

    def __init__(self, event: str) -> None:
        self.event = event
        super().__init__(f"Unknown event: {event!r}")


class InvalidBranchTargetError(FlowControlError, TypeError):
    """Raised when execute returns something other than None or a non-empty id."""

    def __init__(self, task_id: str, result: object) -> None:
        self.task_id = task_id
        self.result = result
        super().__init__(
            f"Task '{task_id}' returned {result!r}; expected None or a non-empty task id"
        )
