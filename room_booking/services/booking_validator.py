import logging

from sqlalchemy.orm import Session

from room_booking.models.room import Room
from room_booking.repositories.booking_repository import BookingRepository
from room_booking.utils.clock import Clock, system_clock
from room_booking.utils.exceptions import (
    BookingOverlapException, InvalidDurationException, PastScheduleException,
)
from room_booking.utils.interval import TimeInterval

logger = logging.getLogger(__name__)


class BookingValidator:
    """
    Decides whether a proposed interval may be booked in a room.

    Checks run in a fixed order and stop at the first failure:
    past schedule, then duration, then overlap with the room's other
    bookings on the same date.
    """

    def __init__(self, clock: Clock = system_clock):
        self.clock = clock

    def validate(
        self, db: Session, interval: TimeInterval, room: Room,
        excluding_booking_id: int | None = None,
    ) -> None:
        self.check_not_past(interval)
        self.check_duration(interval)
        self.check_overlap(db, interval, room, excluding_booking_id)

    def check_not_past(self, interval: TimeInterval) -> None:
        today = self.clock.today()
        if interval.date < today:
            raise PastScheduleException()
        if interval.starts_before(today, self.clock.now()):
            raise PastScheduleException("The booking start time cannot be in the past.", field="startTime")

    def check_duration(self, interval: TimeInterval) -> None:
        if not interval.is_whole_hours():
            raise InvalidDurationException()

    def check_overlap(
        self, db: Session, interval: TimeInterval, room: Room,
        excluding_booking_id: int | None = None,
    ) -> None:
        existing = BookingRepository(db).for_room_on(room.id, interval.date, exclude_id=excluding_booking_id)
        for b in existing:
            if interval.overlaps(b.interval):
                logger.info(
                    f"Overlap in room '{room.name}' on {interval.date}: "
                    f"{interval.start}-{interval.end} vs booking #{b.id} {b.startTime}-{b.endTime}"
                )
                raise BookingOverlapException()
