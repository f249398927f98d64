import logging
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from room_booking.models.booking import Booking
from room_booking.repositories.booking_repository import BookingRepository
from room_booking.schemas.booking import BookingRequest
from room_booking.services.booking_validator import BookingValidator
from room_booking.services.room_service import RoomService, room_service as default_room_service
from room_booking.utils.clock import Clock, system_clock
from room_booking.utils.exceptions import (
    NotFoundException, BookingOverlapException, BookingCancellationException,
)

logger = logging.getLogger(__name__)

# Constraint names as PostgreSQL reports them, plus SQLite's column-list form
SLOT_CONSTRAINT_MARKERS = (
    "uq_booking_room_date_start",
    "no_room_overlap",
    "bookings.roomId, bookings.date, bookings.startTime",
)


def _is_slot_violation(e: IntegrityError) -> bool:
    message = str(e.orig)
    return any(marker in message for marker in SLOT_CONSTRAINT_MARKERS)


def _serialize(b: Booking) -> dict:
    return {
        "id":            b.id,
        "roomId":        b.roomId,
        "roomName":      b.room.name if b.room else None,
        "employeeEmail": b.employeeEmail,
        "date":          b.date.isoformat(),
        "startTime":     b.startTime.isoformat(),
        "endTime":       b.endTime.isoformat(),
        "createdAt":     b.createdAt.isoformat() if b.createdAt else None,
        "updatedAt":     b.updatedAt.isoformat() if b.updatedAt else None,
    }


class BookingService:
    """
    Booking lifecycle: create, update, cancel and list.

    Create and update are a single transaction each. The room row is locked
    before validation so that concurrent writers for the same room are
    serialized through the overlap check and the write.
    """

    def __init__(
        self,
        clock: Clock = system_clock,
        rooms: RoomService | None = None,
        reassign_room_on_update: bool = False,
    ):
        self.clock     = clock
        self.rooms     = rooms or default_room_service
        self.validator = BookingValidator(clock)
        self.reassign_room_on_update = reassign_room_on_update

    def find_by_id(self, db: Session, booking_id: int) -> Booking:
        b = BookingRepository(db).get_by_id(booking_id)
        if not b:
            raise NotFoundException("Booking", f"id: {booking_id}")
        return b

    # ─── Queries ──────────────────────────────────────────────────────────────
    def get_booking(self, db: Session, booking_id: int) -> dict:
        return _serialize(self.find_by_id(db, booking_id))

    def list_bookings(self, db: Session, room_name: str, on_date: date) -> list[dict]:
        room = self.rooms.find_by_name(db, room_name)
        return [_serialize(b) for b in BookingRepository(db).for_room_on(room.id, on_date)]

    def list_all_bookings(self, db: Session, page: int, limit: int) -> tuple[list[dict], int]:
        repo = BookingRepository(db)
        items = repo.list(offset=(page - 1) * limit, limit=limit)
        return [_serialize(b) for b in items], repo.count()

    # ─── Mutations ────────────────────────────────────────────────────────────
    def create_booking(self, db: Session, data: BookingRequest) -> dict:
        room = self.rooms.find_by_name(db, data.roomName, lock=True)
        self.validator.validate(db, data.interval, room)

        b = Booking(
            room=room,
            employeeEmail=data.employeeEmail,
            date=data.date,
            startTime=data.startTime,
            endTime=data.endTime,
        )
        self._write(db, b)
        logger.info(f"Booking #{b.id} created: room '{room.name}' {b.date} {b.startTime}-{b.endTime}")
        return _serialize(b)

    def update_booking(self, db: Session, booking_id: int, data: BookingRequest) -> dict:
        b = self.find_by_id(db, booking_id)
        room = self.rooms.find_by_name(db, data.roomName, lock=True)

        self.validator.validate(db, data.interval, room, excluding_booking_id=b.id)

        if room.id != b.roomId:
            if self.reassign_room_on_update:
                logger.info(f"Booking #{b.id} moved from room #{b.roomId} to '{room.name}'")
                b.room = room
            else:
                logger.warning(
                    f"Booking #{b.id} validated against room '{room.name}' "
                    f"but stays linked to room #{b.roomId}"
                )

        b.employeeEmail = data.employeeEmail
        b.date          = data.date
        b.startTime     = data.startTime
        b.endTime       = data.endTime
        self._write(db, b)
        logger.info(f"Booking #{b.id} updated: {b.date} {b.startTime}-{b.endTime}")
        return _serialize(b)

    def cancel_booking(self, db: Session, booking_id: int) -> None:
        b = self.find_by_id(db, booking_id)

        if b.date < self.clock.today():
            logger.info(f"Refused to cancel past booking #{b.id} dated {b.date}")
            raise BookingCancellationException()

        BookingRepository(db).delete(b)
        db.commit()
        logger.info(f"Booking #{booking_id} canceled")

    def _write(self, db: Session, b: Booking) -> None:
        try:
            BookingRepository(db).add(b)
        except IntegrityError as e:
            db.rollback()
            if _is_slot_violation(e):
                # Storage backstop fired: a concurrent writer took the slot
                raise BookingOverlapException()
            raise
        db.commit()
        db.refresh(b)
