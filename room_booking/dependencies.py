from fastapi import Depends

from room_booking.config import settings
from room_booking.services.booking_service import BookingService
from room_booking.services.room_service import RoomService, room_service
from room_booking.utils.clock import Clock, system_clock


# ─── Clock ────────────────────────────────────────────────────────────────────
def get_clock() -> Clock:
    """
    Current date/time source for the booking rules.
    Tests override this dependency to pin "now".
    """
    return system_clock


# ─── Services ─────────────────────────────────────────────────────────────────
def get_room_service() -> RoomService:
    return room_service


def get_booking_service(
    clock: Clock = Depends(get_clock),
    rooms: RoomService = Depends(get_room_service),
) -> BookingService:
    return BookingService(
        clock=clock,
        rooms=rooms,
        reassign_room_on_update=settings.REASSIGN_ROOM_ON_UPDATE,
    )
