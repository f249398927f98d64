from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from room_booking.database import get_db
from room_booking.dependencies import get_booking_service
from room_booking.schemas.booking import BookingRequest
from room_booking.schemas.common import success_response, paginated_response, error_responses
from room_booking.services.booking_service import BookingService

router = APIRouter(prefix="/bookings")


@router.get("", summary="List a room's bookings on a date", responses=error_responses(404))
def list_bookings(
    roomName: str            = Query(..., min_length=1),
    on_date:  date           = Query(..., alias="date"),
    db:       Session        = Depends(get_db),
    bookings: BookingService = Depends(get_booking_service),
):
    return success_response("Bookings retrieved successfully", bookings.list_bookings(db, roomName, on_date))


@router.get("/all", summary="List all bookings (paginated)")
def list_all_bookings(
    page:     int            = Query(1, ge=1),
    limit:    int            = Query(20, ge=1, le=100),
    db:       Session        = Depends(get_db),
    bookings: BookingService = Depends(get_booking_service),
):
    data, total = bookings.list_all_bookings(db, page, limit)
    return paginated_response("Bookings retrieved successfully", data, total, page, limit)


@router.get("/{booking_id}", summary="Get booking detail", responses=error_responses(404))
def get_booking(
    booking_id: int,
    db:         Session        = Depends(get_db),
    bookings:   BookingService = Depends(get_booking_service),
):
    return success_response("Booking retrieved", bookings.get_booking(db, booking_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create booking",
             responses=error_responses(400, 404, 409))
def create_booking(
    body:     BookingRequest,
    db:       Session        = Depends(get_db),
    bookings: BookingService = Depends(get_booking_service),
):
    return success_response("Booking created successfully", bookings.create_booking(db, body))


@router.put("/{booking_id}", summary="Update booking", responses=error_responses(400, 404, 409))
def update_booking(
    booking_id: int,
    body:       BookingRequest,
    db:         Session        = Depends(get_db),
    bookings:   BookingService = Depends(get_booking_service),
):
    return success_response("Booking updated successfully", bookings.update_booking(db, booking_id, body))


@router.delete("/{booking_id}", summary="Cancel booking (today or later)",
               responses=error_responses(404, 409))
def cancel_booking(
    booking_id: int,
    db:         Session        = Depends(get_db),
    bookings:   BookingService = Depends(get_booking_service),
):
    bookings.cancel_booking(db, booking_id)
    return success_response("Booking canceled", None)
