"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Order matters: import parent tables before child tables.
"""

from room_booking.models.room import Room
from room_booking.models.booking import Booking

__all__ = [
    "Room",
    "Booking",
]
