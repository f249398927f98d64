from sqlalchemy.orm import Session

from room_booking.models.room import Room


class RoomRepository:
    """Room persistence. Fetches return None when the room does not exist."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, room_id: int, lock: bool = False) -> Room | None:
        q = self.db.query(Room).filter(Room.id == room_id)
        if lock:
            q = q.with_for_update()
        return q.first()

    def get_by_name(self, name: str, lock: bool = False) -> Room | None:
        q = self.db.query(Room).filter(Room.name == name)
        if lock:
            q = q.with_for_update()
        return q.first()

    def name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        q = self.db.query(Room.id).filter(Room.name == name)
        if exclude_id is not None:
            q = q.filter(Room.id != exclude_id)
        return self.db.query(q.exists()).scalar()

    def list(self, offset: int = 0, limit: int | None = None) -> list[Room]:
        q = self.db.query(Room).order_by(Room.name).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    def count(self) -> int:
        return self.db.query(Room).count()

    def add(self, room: Room) -> Room:
        self.db.add(room)
        self.db.flush()
        return room

    def delete(self, room: Room) -> None:
        self.db.delete(room)
        self.db.flush()
