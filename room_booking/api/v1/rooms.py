from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from room_booking.database import get_db
from room_booking.dependencies import get_room_service
from room_booking.schemas.common import success_response, paginated_response, error_responses
from room_booking.schemas.room import RoomCreateRequest, RoomUpdateRequest
from room_booking.services.room_service import RoomService

router = APIRouter(prefix="/rooms")


@router.get("", summary="List rooms (paginated)")
def list_rooms(
    page:  int         = Query(1, ge=1),
    limit: int         = Query(20, ge=1, le=100),
    db:    Session     = Depends(get_db),
    rooms: RoomService = Depends(get_room_service),
):
    data, total = rooms.list_rooms(db, page, limit)
    return paginated_response("Rooms retrieved successfully", data, total, page, limit)


@router.get("/lookup", summary="Find room by name", responses=error_responses(404))
def find_room_by_name(
    name:  str         = Query(..., min_length=1),
    db:    Session     = Depends(get_db),
    rooms: RoomService = Depends(get_room_service),
):
    return success_response("Room retrieved", rooms.get_room_by_name(db, name))


@router.get("/{room_id}", summary="Get room by ID", responses=error_responses(404))
def get_room(room_id: int, db: Session = Depends(get_db), rooms: RoomService = Depends(get_room_service)):
    return success_response("Room retrieved", rooms.get_room(db, room_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create room",
             responses=error_responses(409))
def create_room(
    body:  RoomCreateRequest,
    db:    Session     = Depends(get_db),
    rooms: RoomService = Depends(get_room_service),
):
    return success_response("Room created successfully", rooms.create_room(db, body))


@router.put("/{room_id}", summary="Rename room", responses=error_responses(404, 409))
def rename_room(
    room_id: int,
    body:    RoomUpdateRequest,
    db:      Session     = Depends(get_db),
    rooms:   RoomService = Depends(get_room_service),
):
    return success_response("Room updated successfully", rooms.rename_room(db, room_id, body))


@router.delete("/{room_id}", summary="Delete room (only without bookings)",
               responses=error_responses(404, 409))
def delete_room(
    room_id: int,
    db:      Session     = Depends(get_db),
    rooms:   RoomService = Depends(get_room_service),
):
    rooms.delete_room(db, room_id)
    return success_response("Room deleted successfully", None)
