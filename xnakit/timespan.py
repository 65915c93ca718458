"""A time interval measured in 100-nanosecond ticks."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import OutOfRangeError

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_OVERFLOW = "TimeSpan overflowed because the duration is too long"


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _rem(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _div(a, b)


def _wrap_i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _float_to_ticks(value: float) -> int:
    """Saturating float to 64-bit integer conversion; NaN becomes zero."""
    if math.isnan(value):
        return 0
    if value >= 2.0**63:
        return _I64_MAX
    if value <= -(2.0**63):
        return _I64_MIN
    return int(value)


def _checked(ticks: int) -> int:
    if ticks > _I64_MAX or ticks < _I64_MIN:
        raise OutOfRangeError(_OVERFLOW + ".")
    return ticks


@dataclass(frozen=True, order=True)
class TimeSpan:
    """An immutable time interval."""

    ticks: int = 0

    NANOSECONDS_PER_TICK = 100
    TICKS_PER_MICROSECOND = 10
    TICKS_PER_MILLISECOND = TICKS_PER_MICROSECOND * 1000
    TICKS_PER_SECOND = TICKS_PER_MILLISECOND * 1000
    TICKS_PER_MINUTE = TICKS_PER_SECOND * 60
    TICKS_PER_HOUR = TICKS_PER_MINUTE * 60
    TICKS_PER_DAY = 36_000_000_000
    TICKS_PER_TENTH_SECOND = TICKS_PER_MILLISECOND * 100

    MICROSECONDS_PER_MILLISECOND = TICKS_PER_MILLISECOND // TICKS_PER_MICROSECOND
    MICROSECONDS_PER_SECOND = TICKS_PER_SECOND // TICKS_PER_MICROSECOND
    MICROSECONDS_PER_MINUTE = TICKS_PER_MINUTE // TICKS_PER_MICROSECOND
    MICROSECONDS_PER_HOUR = TICKS_PER_HOUR // TICKS_PER_MICROSECOND
    MICROSECONDS_PER_DAY = TICKS_PER_DAY // TICKS_PER_MICROSECOND

    MILLISECONDS_PER_SECOND = TICKS_PER_SECOND // TICKS_PER_MILLISECOND
    MILLISECONDS_PER_MINUTE = TICKS_PER_MINUTE // TICKS_PER_MILLISECOND
    MILLISECONDS_PER_HOUR = TICKS_PER_HOUR // TICKS_PER_MILLISECOND
    MILLISECONDS_PER_DAY = TICKS_PER_DAY // TICKS_PER_MILLISECOND

    SECONDS_PER_MINUTE = TICKS_PER_MINUTE // TICKS_PER_SECOND
    SECONDS_PER_HOUR = TICKS_PER_HOUR // TICKS_PER_SECOND
    SECONDS_PER_DAY = TICKS_PER_DAY // TICKS_PER_SECOND

    MINUTES_PER_HOUR = TICKS_PER_HOUR // TICKS_PER_MINUTE
    MINUTES_PER_DAY = TICKS_PER_DAY // TICKS_PER_MINUTE

    HOURS_PER_DAY = 24

    MIN_TICKS = _I64_MIN
    MAX_TICKS = _I64_MAX

    MIN_MICROSECONDS = _div(_I64_MIN, TICKS_PER_MICROSECOND)
    MAX_MICROSECONDS = _div(_I64_MAX, TICKS_PER_MICROSECOND)
    MIN_MILLISECONDS = _div(_I64_MIN, TICKS_PER_MILLISECOND)
    MAX_MILLISECONDS = _div(_I64_MAX, TICKS_PER_MILLISECOND)
    MIN_SECONDS = _div(_I64_MIN, TICKS_PER_SECOND)
    MAX_SECONDS = _div(_I64_MAX, TICKS_PER_SECOND)
    MIN_MINUTES = _div(_I64_MIN, TICKS_PER_MINUTE)
    MAX_MINUTES = _div(_I64_MAX, TICKS_PER_MINUTE)
    MIN_HOURS = _div(_I64_MIN, TICKS_PER_HOUR)
    MAX_HOURS = _div(_I64_MAX, TICKS_PER_HOUR)
    MIN_DAYS = _div(_I64_MIN, TICKS_PER_DAY)
    MAX_DAYS = _div(_I64_MAX, TICKS_PER_DAY)

    # --- construction -------------------------------------------------

    @classmethod
    def from_time(
        cls,
        days: int,
        hours: int,
        minutes: int,
        seconds: int,
        milliseconds: int = 0,
        microseconds: int = 0,
    ) -> "TimeSpan":
        total = (
            days * cls.MICROSECONDS_PER_DAY
            + hours * cls.MICROSECONDS_PER_HOUR
            + minutes * cls.MICROSECONDS_PER_MINUTE
            + seconds * cls.MICROSECONDS_PER_SECOND
            + milliseconds * cls.MICROSECONDS_PER_MILLISECOND
            + microseconds
        )
        if total > cls.MAX_MICROSECONDS or total < cls.MIN_MICROSECONDS:
            raise OutOfRangeError(_OVERFLOW)
        return cls(total * cls.TICKS_PER_MICROSECOND)

    @classmethod
    def max_value(cls) -> "TimeSpan":
        return cls(cls.MAX_TICKS)

    @classmethod
    def min_value(cls) -> "TimeSpan":
        return cls(cls.MIN_TICKS)

    @classmethod
    def from_ticks(cls, value: int) -> "TimeSpan":
        return cls(value)

    @classmethod
    def _from_units(cls, units: int, ticks_per_unit: int, min_units: int, max_units: int) -> "TimeSpan":
        if units > max_units or units < min_units:
            raise OutOfRangeError(_OVERFLOW + ".")
        return cls(units * ticks_per_unit)

    @classmethod
    def from_days(cls, days: int) -> "TimeSpan":
        return cls._from_units(days, cls.TICKS_PER_DAY, cls.MIN_DAYS, cls.MAX_DAYS)

    @classmethod
    def from_hours(cls, hours: int) -> "TimeSpan":
        return cls._from_units(hours, cls.TICKS_PER_HOUR, cls.MIN_HOURS, cls.MAX_HOURS)

    @classmethod
    def from_minutes(cls, minutes: int) -> "TimeSpan":
        return cls._from_units(minutes, cls.TICKS_PER_MINUTE, cls.MIN_MINUTES, cls.MAX_MINUTES)

    @classmethod
    def from_seconds(cls, seconds: int) -> "TimeSpan":
        return cls._from_units(seconds, cls.TICKS_PER_SECOND, cls.MIN_SECONDS, cls.MAX_SECONDS)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> "TimeSpan":
        return cls._from_units(
            microseconds, cls.TICKS_PER_MICROSECOND, cls.MIN_MICROSECONDS, cls.MAX_MICROSECONDS
        )

    @classmethod
    def _from_double_ticks(cls, ticks: float) -> "TimeSpan":
        if ticks > float(cls.MAX_TICKS) or ticks < float(cls.MIN_TICKS):
            raise OutOfRangeError(_OVERFLOW)
        if ticks == float(cls.MAX_TICKS):
            return cls.max_value()
        return cls(_float_to_ticks(ticks))

    @classmethod
    def from_days_f(cls, value: float) -> "TimeSpan":
        return cls._from_double_ticks(value * float(cls.TICKS_PER_DAY))

    @classmethod
    def from_minutes_f(cls, value: float) -> "TimeSpan":
        return cls._from_double_ticks(value * float(cls.TICKS_PER_MICROSECOND))

    # --- components ---------------------------------------------------

    @property
    def days(self) -> int:
        return _wrap_i32(_div(self.ticks, self.TICKS_PER_DAY))

    @property
    def hours(self) -> int:
        return _wrap_i32(_rem(_div(self.ticks, self.TICKS_PER_HOUR), self.HOURS_PER_DAY))

    @property
    def minutes(self) -> int:
        return _wrap_i32(_rem(_div(self.ticks, self.TICKS_PER_MINUTE), self.MINUTES_PER_HOUR))

    @property
    def seconds(self) -> int:
        return _wrap_i32(_rem(_div(self.ticks, self.TICKS_PER_SECOND), self.SECONDS_PER_MINUTE))

    @property
    def milliseconds(self) -> int:
        return _wrap_i32(
            _rem(_div(self.ticks, self.TICKS_PER_MILLISECOND), self.MILLISECONDS_PER_SECOND)
        )

    @property
    def microseconds(self) -> int:
        return _wrap_i32(
            _rem(_div(self.ticks, self.TICKS_PER_MICROSECOND), self.MICROSECONDS_PER_MILLISECOND)
        )

    @property
    def nanoseconds(self) -> int:
        return _wrap_i32(_div(self.ticks, self.TICKS_PER_MICROSECOND) * self.NANOSECONDS_PER_TICK)

    # --- totals -------------------------------------------------------

    @property
    def total_days(self) -> float:
        return float(_div(self.ticks, self.TICKS_PER_DAY))

    @property
    def total_hours(self) -> float:
        return float(_div(self.ticks, self.TICKS_PER_HOUR))

    @property
    def total_minutes(self) -> float:
        return float(_div(self.ticks, self.TICKS_PER_MINUTE))

    @property
    def total_seconds(self) -> float:
        return float(_div(self.ticks, self.TICKS_PER_SECOND))

    @property
    def total_milliseconds(self) -> float:
        value = _div(self.ticks, self.TICKS_PER_MILLISECOND)
        return float(min(max(value, self.MIN_MILLISECONDS), self.MAX_MILLISECONDS))

    @property
    def total_microseconds(self) -> float:
        return float(_div(self.ticks, self.TICKS_PER_MICROSECOND))

    @property
    def total_nanoseconds(self) -> float:
        return float(_div(self.ticks, self.NANOSECONDS_PER_TICK))

    # --- arithmetic ---------------------------------------------------

    def __add__(self, other: "TimeSpan") -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(_checked(self.ticks + other.ticks))

    def __sub__(self, other: "TimeSpan") -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(_checked(self.ticks - other.ticks))

    def __mul__(self, factor: float) -> "TimeSpan":
        if isinstance(factor, TimeSpan) or not isinstance(factor, (int, float)):
            return NotImplemented
        return TimeSpan(_float_to_ticks(float(self.ticks) * float(factor)))

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        """Divide by a number, or by another span giving a span of whole ticks."""
        if isinstance(divisor, TimeSpan):
            if divisor.ticks == 0:
                raise ZeroDivisionError("division by a zero TimeSpan")
            return TimeSpan(_checked(_div(self.ticks, divisor.ticks)))
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        divisor = float(divisor)
        ticks = float(self.ticks)
        if divisor == 0.0:
            if ticks == 0.0:
                quotient = math.nan
            else:
                quotient = math.copysign(math.inf, ticks) * math.copysign(1.0, divisor)
        else:
            quotient = ticks / divisor
        return TimeSpan(_float_to_ticks(quotient))

    def __neg__(self) -> "TimeSpan":
        return TimeSpan(_checked(-self.ticks))

    def duration(self) -> "TimeSpan":
        """Return the absolute value of this span."""
        if self.ticks == self.MIN_TICKS:
            raise OutOfRangeError(
                "The duration cannot be returned for TimeSpan.MinValue because the absolute "
                "value of TimeSpan.MinValue exceeds the value of TimeSpan.MaxValue."
            )
        return TimeSpan(abs(self.ticks))