from datetime import date

from sqlalchemy.orm import Session

from room_booking.models.booking import Booking


class BookingRepository:
    """
    Booking persistence. Schedule queries are always scoped by room and date
    so that validation never loads more than one room-day into memory.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, booking_id: int) -> Booking | None:
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def for_room_on(self, room_id: int, on_date: date, exclude_id: int | None = None) -> list[Booking]:
        """Bookings of a room on one date, ordered by start time."""
        q = self.db.query(Booking).filter(
            Booking.roomId == room_id,
            Booking.date == on_date,
        )
        if exclude_id is not None:
            q = q.filter(Booking.id != exclude_id)
        return q.order_by(Booking.startTime.asc()).all()

    def exists_for_room(self, room_id: int) -> bool:
        q = self.db.query(Booking.id).filter(Booking.roomId == room_id)
        return self.db.query(q.exists()).scalar()

    def list(self, offset: int = 0, limit: int | None = None) -> list[Booking]:
        q = self.db.query(Booking).order_by(Booking.date, Booking.startTime, Booking.id).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    def count(self) -> int:
        return self.db.query(Booking).count()

    def add(self, booking: Booking) -> Booking:
        self.db.add(booking)
        self.db.flush()
        return booking

    def delete(self, booking: Booking) -> None:
        self.db.delete(booking)
        self.db.flush()
