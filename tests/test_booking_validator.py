from datetime import datetime, time

import pytest

from room_booking.services.booking_validator import BookingValidator
from room_booking.utils.clock import FixedClock
from room_booking.utils.exceptions import (
    BookingOverlapException, ErrorKind, InvalidDurationException, PastScheduleException,
)
from room_booking.utils.interval import TimeInterval

from conftest import NOW, TODAY, TOMORROW, YESTERDAY


def iv(on, start: str, end: str) -> TimeInterval:
    return TimeInterval(on, time.fromisoformat(start), time.fromisoformat(end))


@pytest.fixture
def validator(clock):
    return BookingValidator(clock)


class TestPastSchedule:

    def test_yesterday_is_rejected(self, db, validator, make_room):
        room = make_room("Falcon")
        with pytest.raises(PastScheduleException) as exc:
            validator.validate(db, iv(YESTERDAY, "09:00", "10:00"), room)
        assert exc.value.kind is ErrorKind.PAST_SCHEDULE
        assert exc.value.field == "date"

    def test_today_with_start_before_now_is_rejected(self, db, validator, make_room):
        room = make_room("Falcon")
        with pytest.raises(PastScheduleException) as exc:
            validator.validate(db, iv(TODAY, "11:00", "12:00"), room)
        assert exc.value.field == "startTime"

    def test_today_starting_exactly_now_is_accepted(self, db, validator, make_room):
        room = make_room("Falcon")
        validator.validate(db, iv(TODAY, "12:00", "13:00"), room)

    def test_one_second_late_is_rejected(self, db, make_room):
        room = make_room("Falcon")
        validator = BookingValidator(FixedClock(datetime.combine(TODAY, time(12, 0, 1))))
        with pytest.raises(PastScheduleException):
            validator.validate(db, iv(TODAY, "12:00", "13:00"), room)

    def test_past_check_runs_before_duration_check(self, db, validator, make_room):
        room = make_room("Falcon")
        with pytest.raises(PastScheduleException):
            validator.validate(db, iv(YESTERDAY, "09:00", "09:45"), room)


class TestDuration:

    @pytest.mark.parametrize("start,end", [("09:00", "09:45"), ("09:00", "10:15"), ("09:00", "09:00"), ("10:00", "09:00")])
    def test_non_whole_hours_are_rejected(self, db, validator, make_room, start, end):
        room = make_room("Falcon")
        with pytest.raises(InvalidDurationException) as exc:
            validator.validate(db, iv(TOMORROW, start, end), room)
        assert exc.value.kind is ErrorKind.INVALID_DURATION

    @pytest.mark.parametrize("start,end", [("09:00", "10:00"), ("09:00", "12:00"), ("09:30", "10:30")])
    def test_whole_hours_on_an_empty_day_are_accepted(self, db, validator, make_room, start, end):
        room = make_room("Falcon")
        validator.validate(db, iv(TOMORROW, start, end), room)

    def test_duration_check_runs_before_overlap_check(self, db, validator, make_room, add_booking):
        room = make_room("Falcon")
        add_booking(room, TOMORROW, "09:00", "10:00")
        with pytest.raises(InvalidDurationException):
            validator.validate(db, iv(TOMORROW, "09:00", "09:30"), room)


class TestOverlap:

    def test_partial_overlap_is_rejected(self, db, validator, make_room, add_booking):
        room = make_room("Falcon")
        add_booking(room, TOMORROW, "09:00", "10:00")
        with pytest.raises(BookingOverlapException) as exc:
            validator.validate(db, iv(TOMORROW, "09:30", "10:30"), room)
        assert exc.value.kind is ErrorKind.OVERLAP

    def test_enclosing_interval_is_rejected(self, db, validator, make_room, add_booking):
        room = make_room("Falcon")
        add_booking(room, TOMORROW, "10:00", "11:00")
        with pytest.raises(BookingOverlapException):
            validator.validate(db, iv(TOMORROW, "09:00", "12:00"), room)

    def test_touching_interval_is_accepted(self, db, validator, make_room, add_booking):
        room = make_room("Falcon")
        add_booking(room, TOMORROW, "09:00", "10:00")
        validator.validate(db, iv(TOMORROW, "10:00", "11:00"), room)
        validator.validate(db, iv(TOMORROW, "08:00", "09:00"), room)

    def test_other_rooms_and_dates_are_ignored(self, db, validator, make_room, add_booking):
        falcon, eagle = make_room("Falcon"), make_room("Eagle")
        add_booking(eagle, TOMORROW, "09:00", "10:00")
        add_booking(falcon, TOMORROW.replace(day=11), "09:00", "10:00")
        validator.validate(db, iv(TOMORROW, "09:00", "10:00"), falcon)

    def test_excluded_booking_is_not_compared(self, db, validator, make_room, add_booking):
        room = make_room("Falcon")
        own = add_booking(room, TOMORROW, "09:00", "10:00")
        validator.validate(db, iv(TOMORROW, "09:30", "10:30"), room, excluding_booking_id=own.id)

    def test_exclusion_keeps_other_bookings(self, db, validator, make_room, add_booking):
        room = make_room("Falcon")
        own = add_booking(room, TOMORROW, "09:00", "10:00")
        add_booking(room, TOMORROW, "10:00", "11:00")
        with pytest.raises(BookingOverlapException):
            validator.validate(db, iv(TOMORROW, "09:30", "10:30"), room, excluding_booking_id=own.id)


def test_clock_is_the_only_source_of_now(db, make_room):
    room = make_room("Falcon")
    late = BookingValidator(FixedClock(datetime(2030, 1, 11, 0, 0)))
    with pytest.raises(PastScheduleException):
        late.validate(db, iv(TOMORROW, "09:00", "10:00"), room)
    BookingValidator(FixedClock(NOW)).validate(db, iv(TOMORROW, "09:00", "10:00"), room)
