import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from room_booking.config import settings
from room_booking.models.room import Room
from room_booking.repositories.booking_repository import BookingRepository
from room_booking.repositories.room_repository import RoomRepository
from room_booking.schemas.room import RoomCreateRequest, RoomUpdateRequest
from room_booking.utils.exceptions import (
    NotFoundException, RoomAlreadyExistsException, RoomDeletionException,
)

logger = logging.getLogger(__name__)


def _serialize(r: Room) -> dict:
    return {
        "id":        r.id,
        "name":      r.name,
        "createdAt": r.createdAt.isoformat() if r.createdAt else None,
        "updatedAt": r.updatedAt.isoformat() if r.updatedAt else None,
    }


class RoomService:
    """
    Room registry: identity lookups, the unique-name rule and the
    "no bookings left" rule for deletion.
    """

    def __init__(self, allow_self_rename: bool = False):
        self.allow_self_rename = allow_self_rename

    # ─── Lookups ──────────────────────────────────────────────────────────────
    def find_by_id(self, db: Session, room_id: int, lock: bool = False) -> Room:
        r = RoomRepository(db).get_by_id(room_id, lock=lock)
        if not r:
            raise NotFoundException("Room")
        return r

    def find_by_name(self, db: Session, name: str, lock: bool = False) -> Room:
        # Same trimming as the request bodies apply
        r = RoomRepository(db).get_by_name(name.strip(), lock=lock)
        if not r:
            raise NotFoundException("Room")
        return r

    def check_name_available(self, db: Session, name: str, exclude_room_id: int | None = None) -> None:
        if RoomRepository(db).name_taken(name, exclude_id=exclude_room_id):
            raise RoomAlreadyExistsException(name)

    # ─── Queries ──────────────────────────────────────────────────────────────
    def get_room(self, db: Session, room_id: int) -> dict:
        return _serialize(self.find_by_id(db, room_id))

    def get_room_by_name(self, db: Session, name: str) -> dict:
        return _serialize(self.find_by_name(db, name))

    def list_rooms(self, db: Session, page: int, limit: int) -> tuple[list[dict], int]:
        repo = RoomRepository(db)
        items = repo.list(offset=(page - 1) * limit, limit=limit)
        return [_serialize(r) for r in items], repo.count()

    # ─── Mutations ────────────────────────────────────────────────────────────
    def create_room(self, db: Session, data: RoomCreateRequest) -> dict:
        self.check_name_available(db, data.name)

        room = Room(name=data.name)
        try:
            RoomRepository(db).add(room)
        except IntegrityError:
            # Another writer took the name between the check and the insert
            db.rollback()
            raise RoomAlreadyExistsException(data.name)
        db.commit()
        db.refresh(room)
        logger.info(f"Created room #{room.id} '{room.name}'")
        return _serialize(room)

    def rename_room(self, db: Session, room_id: int, data: RoomUpdateRequest) -> dict:
        r = self.find_by_id(db, room_id)

        exclude = r.id if self.allow_self_rename else None
        self.check_name_available(db, data.name, exclude_room_id=exclude)

        old = r.name
        r.name = data.name
        try:
            db.flush()
        except IntegrityError:
            db.rollback()
            raise RoomAlreadyExistsException(data.name)
        db.commit()
        db.refresh(r)
        logger.info(f"Renamed room #{r.id} '{old}' -> '{r.name}'")
        return _serialize(r)

    def delete_room(self, db: Session, room_id: int) -> None:
        r = self.find_by_id(db, room_id, lock=True)

        if BookingRepository(db).exists_for_room(r.id):
            logger.info(f"Refused to delete room #{r.id} '{r.name}': bookings exist")
            raise RoomDeletionException()

        RoomRepository(db).delete(r)
        db.commit()
        logger.info(f"Deleted room #{room_id} '{r.name}'")


room_service = RoomService(allow_self_rename=settings.ALLOW_SELF_RENAME)
