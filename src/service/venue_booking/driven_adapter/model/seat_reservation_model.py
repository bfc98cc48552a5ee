import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


SEAT_RESERVATION_UNIQUE_CONSTRAINT = 'uq_seat_reservation_show_seat'


class SeatReservationModel(Base):
    """One row per seat of every CONFIRMED booking; the unique index is the seat lock"""

    __tablename__ = 'seat_reservations'
    __table_args__ = (
        UniqueConstraint('show_id', 'seat_id', name=SEAT_RESERVATION_UNIQUE_CONSTRAINT),
    )

    id: Mapped[uuid.UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    show_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey('shows.id'), nullable=False
    )
    seat_id: Mapped[str] = mapped_column(String(100), nullable=False)
    booking_id: Mapped[uuid.UUID] = mapped_column(
        PG_UUID(as_uuid=True), ForeignKey('bookings.id'), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
