from datetime import date, datetime, time
from typing import Protocol


class Clock(Protocol):
    """Source of the current date and wall-clock time (single implicit zone)."""

    def today(self) -> date: ...

    def now(self) -> time: ...


class SystemClock:
    def today(self) -> date:
        return date.today()

    def now(self) -> time:
        return datetime.now().time()


class FixedClock:
    """Clock pinned to one instant. Used to make "now" deterministic."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def today(self) -> date:
        return self.moment.date()

    def now(self) -> time:
        return self.moment.time()

    def __repr__(self):
        return f"<FixedClock {self.moment.isoformat()}>"


system_clock = SystemClock()
