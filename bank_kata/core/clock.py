"""Sources of the current instant.

Accounts stamp every transaction with ``clock.now()``. Production code uses
:class:`SystemClock`; tests pin time with :class:`FixedClock` and move it
forward with :func:`offset`. All clocks are immutable, so one instance can
back any number of accounts.
"""
from datetime import datetime, timedelta, timezone
from typing import Protocol


class Clock(Protocol):  # pylint: disable=too-few-public-methods
    """A source of the current instant."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""


class SystemClock:  # pylint: disable=too-few-public-methods
    """Clock reading the system time in UTC."""

    def now(self) -> datetime:
        """Return the current system time."""
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:  # pylint: disable=too-few-public-methods
    """Clock always returning the same instant."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            raise ValueError(f"A fixed clock needs a timezone-aware instant: {instant}")
        self._instant = instant.astimezone(timezone.utc)

    def now(self) -> datetime:
        """Return the pinned instant."""
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


class OffsetClock:  # pylint: disable=too-few-public-methods
    """Clock reading another clock shifted by a constant duration."""

    def __init__(self, base: Clock, duration: timedelta) -> None:
        self._base = base
        self._duration = duration

    @property
    def base(self) -> Clock:
        """The underlying clock."""
        return self._base

    @property
    def duration(self) -> timedelta:
        """The shift applied to the underlying clock."""
        return self._duration

    def now(self) -> datetime:
        """Return the base clock's instant plus the offset."""
        return self._base.now() + self._duration

    def __repr__(self) -> str:
        return f"OffsetClock({self._base!r}, {self._duration})"


def offset(clock: Clock, duration: timedelta) -> Clock:
    """Return a clock running *duration* ahead of *clock*.

    Offsets of offsets are collapsed onto the innermost clock.
    """
    if isinstance(clock, OffsetClock):
        return OffsetClock(clock.base, clock.duration + duration)
    return OffsetClock(clock, duration)
