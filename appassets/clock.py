import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, value: int):
        self.value = value

    def now(self) -> int:
        return self.value
