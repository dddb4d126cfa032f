"""Retry configuration for tasks.

RetryPolicy validates the retry count and inter-attempt delay a task is
constructed with. Delays are expressed in milliseconds.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_WAIT_TIME_MS: float = 1000.0


class RetryPolicy(BaseModel):
    """How many extra attempts a task gets and how long to wait between them.

    Attributes:
        retries: Additional attempts after the first one (0 = single attempt).
        wait_time: Milliseconds to sleep before each retry. 0 disables the delay.
    """

    model_config = {"frozen": True}

    retries: int = Field(default=0, ge=0)
    wait_time: float = Field(default=DEFAULT_WAIT_TIME_MS, ge=0, allow_inf_nan=False)

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    @property
    def wait_seconds(self) -> float:
        return self.wait_time / 1000.0
