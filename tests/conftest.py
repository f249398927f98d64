from datetime import date, datetime, time

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import room_booking.models  # noqa: F401 registers models on Base.metadata
from room_booking.database import Base, get_db
from room_booking.dependencies import get_clock
from room_booking.main import create_app
from room_booking.models.booking import Booking
from room_booking.models.room import Room
from room_booking.repositories.booking_repository import BookingRepository
from room_booking.repositories.room_repository import RoomRepository
from room_booking.services.booking_service import BookingService
from room_booking.services.room_service import RoomService
from room_booking.utils.clock import FixedClock

# "Now" for every test: 2030-01-09 12:00
NOW       = datetime(2030, 1, 9, 12, 0)
TODAY     = NOW.date()
YESTERDAY = date(2030, 1, 8)
TOMORROW  = date(2030, 1, 10)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def room_service():
    return RoomService()


@pytest.fixture
def booking_service(clock, room_service):
    return BookingService(clock=clock, rooms=room_service)


@pytest.fixture
def make_room(db):
    """Insert a room directly through the repository."""
    def _make(name: str) -> Room:
        room = RoomRepository(db).add(Room(name=name))
        db.commit()
        return room
    return _make


@pytest.fixture
def add_booking(db):
    """Insert a booking without validation (used for past or fixture data)."""
    def _add(room: Room, on: date, start: str, end: str, email: str = "alice@example.com") -> Booking:
        b = BookingRepository(db).add(Booking(
            room=room,
            employeeEmail=email,
            date=on,
            startTime=time.fromisoformat(start),
            endTime=time.fromisoformat(end),
        ))
        db.commit()
        return b
    return _add


@pytest.fixture
def app(session_factory, clock):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
