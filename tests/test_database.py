import unittest
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from room_booking.database import Base, check_db_connection
import room_booking.models  # noqa: F401


class TestDatabaseConnection(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite://", poolclass=StaticPool)

    def tearDown(self):
        self.engine.dispose()

    def test_database_connection_success(self):
        """The health check reports a reachable database."""
        self.assertTrue(check_db_connection(self.engine))

    def test_database_connection_failure(self):
        """The health check reports an unreachable database instead of raising."""
        broken = create_engine("sqlite:////nonexistent-dir/room_booking.db")
        self.assertFalse(check_db_connection(broken))

    def test_schema_has_booking_backstop(self):
        Base.metadata.create_all(self.engine)
        uniques = inspect(self.engine).get_unique_constraints("bookings")
        self.assertIn(
            ["roomId", "date", "startTime"],
            [u["column_names"] for u in uniques],
        )


if __name__ == '__main__':
    unittest.main()
