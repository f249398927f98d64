from sqlalchemy import Column, Integer, String, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from room_booking.database import Base


class Room(Base):
    __tablename__ = "rooms"

    id        = Column(Integer, primary_key=True, index=True)
    name      = Column(String(200), unique=True, nullable=False)
    createdAt = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt = Column(TIMESTAMP(timezone=True), server_default=func.now(),
                       onupdate=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    # No cascade: a room with bookings must not be deleted (FK is RESTRICT)
    bookings = relationship("Booking", back_populates="room", passive_deletes="all",
                            lazy="select")

    def __repr__(self):
        return f"<Room id={self.id} name={self.name}>"
