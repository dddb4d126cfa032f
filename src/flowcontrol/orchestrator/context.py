"""Call-scoped traversal state.

One TraversalContext is created per ``Orchestrator.run()`` or
``run_task()`` call and passed down every recursive traversal step, so
the pending branch target belongs to that call rather than to the
orchestrator instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TraversalContext:
    """Mutable state of a single traversal.

    Attributes:
        pending_target: Id a previous task asked to jump to. While set,
            every task whose id differs is skipped. Single-shot: cleared
            by the next task that runs and returns no target.
        executed: Ids of tasks that ran, in order.
        skipped: Ids of tasks skipped while a target was pending.
    """

    pending_target: str | None = None
    executed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def should_skip(self, task_id: str) -> bool:
        return self.pending_target is not None and self.pending_target != task_id
