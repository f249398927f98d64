from datetime import date, datetime, time, timedelta
from typing import NamedTuple

ONE_HOUR = timedelta(hours=1)


class TimeInterval(NamedTuple):
    """
    Half-open time range ``[start, end)`` on a single calendar date.

    Two intervals overlap iff ``s1 < e2 and s2 < e1``. Intervals that only
    touch at an endpoint (``e1 == s2``) do not overlap, and intervals on
    different dates never do.
    """
    date:  date
    start: time
    end:   time

    @property
    def duration(self) -> timedelta:
        return datetime.combine(self.date, self.end) - datetime.combine(self.date, self.start)

    def is_whole_hours(self) -> bool:
        """True for 60, 120, 180, … minutes. Zero and negative lengths are False."""
        d = self.duration
        return d >= ONE_HOUR and d % ONE_HOUR == timedelta(0)

    def overlaps(self, other: "TimeInterval") -> bool:
        if self.date != other.date:
            return False
        return self.start < other.end and other.start < self.end

    def starts_before(self, today: date, now: time) -> bool:
        """True when the interval begins strictly earlier than (today, now)."""
        if self.date < today:
            return True
        return self.date == today and self.start < now


def intervals_overlap(a: TimeInterval, b: TimeInterval) -> bool:
    return a.overlaps(b)
