"""Create rooms and bookings.

On PostgreSQL an exclusion constraint additionally forbids two bookings of
the same room whose [date+startTime, date+endTime) ranges intersect.
tsrange('[)') uses the same half-open rule as the application check, so
back-to-back bookings are allowed.

Revision ID: 0001_rooms_and_bookings
Revises:
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_rooms_and_bookings"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "rooms",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_rooms_id", "rooms", ["id"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("roomId", sa.Integer(), sa.ForeignKey("rooms.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("employeeEmail", sa.String(length=255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("startTime", sa.Time(), nullable=False),
        sa.Column("endTime", sa.Time(), nullable=False),
        sa.Column("createdAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("roomId", "date", "startTime", name="uq_booking_room_date_start"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_room_date", "bookings", ["roomId", "date"])

    if op.get_bind().dialect.name == "postgresql":
        op.execute("CREATE EXTENSION IF NOT EXISTS btree_gist")
        op.execute(
            'ALTER TABLE bookings ADD CONSTRAINT no_room_overlap EXCLUDE USING gist ('
            '"roomId" WITH =, '
            'tsrange("date" + "startTime", "date" + "endTime", \'[)\') WITH &&)'
        )


def downgrade() -> None:
    if op.get_bind().dialect.name == "postgresql":
        op.execute("ALTER TABLE bookings DROP CONSTRAINT IF EXISTS no_room_overlap")
    op.drop_index("ix_bookings_room_date", table_name="bookings")
    op.drop_index("ix_bookings_id", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_rooms_id", table_name="rooms")
    op.drop_table("rooms")
