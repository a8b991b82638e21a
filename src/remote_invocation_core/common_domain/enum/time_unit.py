from datetime import timedelta
from enum import StrEnum


class TimeUnit(StrEnum):
    """
    Units a caller may use when specifying a timeout; every value is normalized to a timedelta.
    Conversions to a coarser unit truncate toward zero.
    """
    NANOSECONDS = 'nanoseconds'
    MICROSECONDS = 'microseconds'
    MILLISECONDS = 'milliseconds'
    SECONDS = 'seconds'
    MINUTES = 'minutes'
    HOURS = 'hours'
    DAYS = 'days'

    def to_duration(self, amount: int) -> timedelta:
        if self is TimeUnit.NANOSECONDS:
            # timedelta resolution is one microsecond
            return timedelta(microseconds=_truncating_divide(amount, 1000))
        return amount * _UNIT_DURATIONS[self]

    def from_duration(self, duration: timedelta) -> int:
        total_microseconds = duration // _UNIT_DURATIONS[TimeUnit.MICROSECONDS]
        if self is TimeUnit.NANOSECONDS:
            return total_microseconds * 1000
        return _truncating_divide(total_microseconds, _UNIT_DURATIONS[self] // _UNIT_DURATIONS[TimeUnit.MICROSECONDS])


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // divisor
    return -quotient if dividend < 0 else quotient


_UNIT_DURATIONS = {
    TimeUnit.MICROSECONDS: timedelta(microseconds=1),
    TimeUnit.MILLISECONDS: timedelta(milliseconds=1),
    TimeUnit.SECONDS: timedelta(seconds=1),
    TimeUnit.MINUTES: timedelta(minutes=1),
    TimeUnit.HOURS: timedelta(hours=1),
    TimeUnit.DAYS: timedelta(days=1),
}
