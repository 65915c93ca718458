import math

import pytest

from xnakit.errors import OutOfRangeError
from xnakit.timespan import TimeSpan


def test_default_is_zero_ticks():
    assert TimeSpan() == TimeSpan.from_ticks(0)


def test_from_time_components_round_trip():
    ts = TimeSpan.from_time(0, 1, 2, 3, 4, 5)
    assert ts.hours == 1
    assert ts.minutes == 2
    assert ts.seconds == 3
    assert ts.milliseconds == 4
    assert ts.microseconds == 5


def test_from_time_out_of_range():
    with pytest.raises(OutOfRangeError):
        TimeSpan.from_time(0, 0, 0, 0, 0, TimeSpan.MAX_MICROSECONDS + 1)


def test_max_and_min_values():
    assert TimeSpan.max_value().ticks == TimeSpan.MAX_TICKS
    assert TimeSpan.min_value().ticks == TimeSpan.MIN_TICKS


def test_one_day_in_ticks():
    assert TimeSpan.from_days(1).ticks == 36_000_000_000


@pytest.mark.parametrize("value", [0, 3, 17, -4])
def test_from_days_round_trip(value):
    assert TimeSpan.from_days(value).days == value
    assert TimeSpan.from_days(value).total_days == float(value)


@pytest.mark.parametrize("value", [0, 7, -9])
def test_from_seconds_total(value):
    ts = TimeSpan.from_seconds(value)
    assert ts.total_seconds == float(value)
    assert ts.ticks == value * TimeSpan.TICKS_PER_SECOND


def test_from_minutes_and_hours_totals():
    assert TimeSpan.from_minutes(45).total_minutes == 45.0
    assert TimeSpan.from_hours(5).total_hours == 5.0
    assert TimeSpan.from_microseconds(123).total_microseconds == 123.0


@pytest.mark.parametrize(
    "factory, limit",
    [
        (TimeSpan.from_days, TimeSpan.MAX_DAYS),
        (TimeSpan.from_hours, TimeSpan.MAX_HOURS),
        (TimeSpan.from_minutes, TimeSpan.MAX_MINUTES),
        (TimeSpan.from_seconds, TimeSpan.MAX_SECONDS),
        (TimeSpan.from_microseconds, TimeSpan.MAX_MICROSECONDS),
    ],
)
def test_from_units_overflow(factory, limit):
    assert factory(limit).ticks <= TimeSpan.MAX_TICKS
    with pytest.raises(OutOfRangeError):
        factory(limit + 1)
    with pytest.raises(OutOfRangeError):
        factory(-limit - 2)


def test_division_truncates_toward_zero():
    assert TimeSpan.from_ticks(-15).total_microseconds == -1.0


def test_total_milliseconds_of_max():
    assert TimeSpan.max_value().total_milliseconds == float(TimeSpan.MAX_MILLISECONDS)


def test_add_and_subtract_round_trip():
    a = TimeSpan.from_seconds(12)
    b = TimeSpan.from_minutes(3)
    assert (a + b) - b == a
    assert a + b == b + a


def test_add_overflow_raises():
    with pytest.raises(OutOfRangeError):
        TimeSpan.max_value() + TimeSpan.from_ticks(1)


def test_multiply_and_divide():
    ts = TimeSpan.from_seconds(6)
    assert ts * 2.0 == ts + ts
    assert (ts * 3.0) / 3.0 == ts
    assert 2 * ts == ts * 2


def test_divide_by_timespan():
    ts = TimeSpan.from_seconds(3)
    assert (ts * 4.0) / ts == TimeSpan(4)


def test_divide_by_zero_timespan_raises():
    with pytest.raises(ZeroDivisionError):
        TimeSpan(10) / TimeSpan(0)


def test_float_divide_by_zero_saturates():
    assert (TimeSpan(10) / 0.0) == TimeSpan.max_value()
    assert (TimeSpan(-10) / 0.0) == TimeSpan.min_value()


def test_negate_and_duration():
    ts = TimeSpan.from_seconds(8)
    assert -(-ts) == ts
    assert (-ts).duration() == ts
    assert ts.duration() == ts


def test_duration_of_min_value_raises():
    with pytest.raises(OutOfRangeError):
        TimeSpan.min_value().duration()


def test_from_days_f_matches_integer_form():
    assert TimeSpan.from_days_f(2.0) == TimeSpan.from_days(2)


def test_from_days_f_overflow():
    with pytest.raises(OutOfRangeError):
        TimeSpan.from_days_f(math.inf)


def test_from_days_f_nan_is_zero():
    assert TimeSpan.from_days_f(math.nan) == TimeSpan()


def test_from_minutes_f_scale():
    assert TimeSpan.from_minutes_f(5.0) == TimeSpan.from_microseconds(5)


def test_ordering():
    assert TimeSpan.from_seconds(1) < TimeSpan.from_seconds(2)
    assert max(TimeSpan(3), TimeSpan(9), TimeSpan(1)) == TimeSpan(9)