"""Tick-based cooldown timers."""

from datetime import timedelta

DEFAULT_TPS = 60


class Timer:
    """Counts game ticks until a duration has elapsed."""

    def __init__(self, duration: timedelta, tps: int = DEFAULT_TPS) -> None:
        self.target_ticks = duration // timedelta(milliseconds=1) * tps // 1000
        self.current_ticks = 0

    def update(self) -> None:
        if self.current_ticks < self.target_ticks:
            self.current_ticks += 1

    def is_ready(self) -> bool:
        return self.current_ticks >= self.target_ticks

    def reset(self) -> None:
        self.current_ticks = 0