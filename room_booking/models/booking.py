from sqlalchemy import Column, Integer, String, Date, Time, ForeignKey, TIMESTAMP, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from room_booking.database import Base
from room_booking.utils.interval import TimeInterval


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        # Storage backstop against two writers committing the same slot
        UniqueConstraint("roomId", "date", "startTime", name="uq_booking_room_date_start"),
        Index("ix_bookings_room_date", "roomId", "date"),
    )

    id            = Column(Integer, primary_key=True, index=True)
    roomId        = Column(Integer, ForeignKey("rooms.id", ondelete="RESTRICT"), nullable=False)
    employeeEmail = Column(String(255), nullable=False)
    date          = Column(Date, nullable=False)
    startTime     = Column(Time, nullable=False)
    endTime       = Column(Time, nullable=False)
    createdAt     = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt     = Column(TIMESTAMP(timezone=True), server_default=func.now(),
                           onupdate=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    room = relationship("Room", back_populates="bookings", lazy="joined")

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval(self.date, self.startTime, self.endTime)

    def __repr__(self):
        return (f"<Booking id={self.id} roomId={self.roomId} date={self.date} "
                f"{self.startTime}-{self.endTime}>")
