"""Clock port and adapters — the source of notification timestamps."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock(Clock):
    """Clock frozen at a given instant, for deterministic tests."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


_current_clock: Clock | None = None


def get_clock() -> Clock:
    global _current_clock
    if _current_clock is None:
        _current_clock = SystemClock()
    return _current_clock


def set_clock(clock: Clock) -> None:
    global _current_clock
    _current_clock = clock


def reset_clock() -> None:
    global _current_clock
    _current_clock = None
