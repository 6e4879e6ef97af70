# core/utils/clock.py

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, UTC
from typing import Optional


class Clock(ABC):
    """Source of the current time for loans and fines."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class SystemClock(Clock):
    """Wall-clock time in UTC"""

    def now(self) -> datetime:
        return datetime.now(UTC)


class ManualClock(Clock):
    """Clock that only moves when told to.

    Lets tests and simulations step through days without sleeping.
    """

    def __init__(self, start: Optional[datetime] = None):
        """
        Initialize the clock.

        Args:
            start: Initial time. Defaults to the current UTC time.
        """
        self._current = start or datetime.now(UTC)

    def now(self) -> datetime:
        return self._current

    def set(self, moment: datetime) -> None:
        self._current = moment

    def advance(self, days: float = 0, hours: float = 0,
                minutes: float = 0, seconds: float = 0) -> datetime:
        """Move the clock forward and return the new time"""
        self._current += timedelta(days=days, hours=hours,
                                   minutes=minutes, seconds=seconds)
        return self._current
