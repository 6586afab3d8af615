from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Protocol


class PacingPolicy(Protocol):
    def wait(self) -> None:
        ...


@dataclass(frozen=True)
class FixedDelay:
    """Sleep a fixed number of seconds between page requests."""

    seconds: float = 1.0
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False, compare=False)

    def wait(self) -> None:
        if self.seconds > 0:
            self.sleep(self.seconds)


@dataclass(frozen=True)
class NoDelay:
    def wait(self) -> None:
        return None
