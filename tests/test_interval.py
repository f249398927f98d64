from datetime import date, time, timedelta

import pytest

from room_booking.utils.interval import TimeInterval, intervals_overlap

DAY = date(2030, 1, 10)


def iv(start: str, end: str, on: date = DAY) -> TimeInterval:
    return TimeInterval(on, time.fromisoformat(start), time.fromisoformat(end))


@pytest.mark.parametrize("start,end", [("00:00", "01:00"), ("09:00", "10:00"), ("13:30", "16:30")])
def test_identical_intervals_overlap(start, end):
    assert intervals_overlap(iv(start, end), iv(start, end))


@pytest.mark.parametrize("start,end,next_end", [
    ("09:00", "10:00", "11:00"),
    ("13:30", "15:30", "16:30"),
])
def test_touching_intervals_do_not_overlap(start, end, next_end):
    first, second = iv(start, end), iv(end, next_end)
    assert not intervals_overlap(first, second)
    assert not intervals_overlap(second, first)


def test_partial_overlap_is_symmetric():
    a, b = iv("09:00", "10:00"), iv("09:30", "10:30")
    assert a.overlaps(b)
    assert b.overlaps(a)


def test_contained_interval_overlaps():
    outer, inner = iv("08:00", "12:00"), iv("09:00", "10:00")
    assert outer.overlaps(inner)
    assert inner.overlaps(outer)


def test_disjoint_intervals_do_not_overlap():
    assert not iv("08:00", "09:00").overlaps(iv("10:00", "11:00"))


def test_same_times_on_different_dates_do_not_overlap():
    assert not iv("09:00", "10:00").overlaps(iv("09:00", "10:00", on=DAY + timedelta(days=1)))


def test_duration():
    assert iv("09:00", "11:00").duration == timedelta(hours=2)


@pytest.mark.parametrize("start,end,expected", [
    ("09:00", "10:00", True),
    ("09:00", "12:00", True),
    ("09:30", "11:30", True),
    ("09:00", "09:45", False),
    ("09:00", "10:30", False),
    ("09:00", "10:00:30", False),
    ("09:00", "09:00", False),
    ("10:00", "09:00", False),
])
def test_is_whole_hours(start, end, expected):
    assert iv(start, end).is_whole_hours() is expected


def test_starts_before():
    interval = iv("10:00", "11:00")
    assert interval.starts_before(DAY + timedelta(days=1), time(0, 0))
    assert interval.starts_before(DAY, time(10, 0, 1))
    assert not interval.starts_before(DAY, time(10, 0))
    assert not interval.starts_before(DAY - timedelta(days=1), time(23, 59))
