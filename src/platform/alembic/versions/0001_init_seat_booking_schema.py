"""init_seat_booking_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-17

Schema:
- layouts: venue seating templates (structure is the raw layout JSON, legacy or modern)
- shows: scheduled shows with a normalized layout snapshot and lifecycle status
- bookings: one row per booking transaction; seat_code holds the seat set
- tickets: one row per booked seat
- seat_reservations: one row per seat of every confirmed booking, unique per (show, seat)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        'layouts',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('structure', JSONB(), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'shows',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.Time(), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('layout_id', UUID(as_uuid=True), nullable=True),
        sa.Column('layout_snapshot', JSONB(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['layout_id'], ['layouts.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('ACTIVE', 'HOUSE_FULL', 'SHOW_STARTED', 'SHOW_DONE')",
            name='ck_shows_status',
        ),
    )
    op.create_index(op.f('ix_shows_date'), 'shows', ['date'])
    op.create_index(op.f('ix_shows_status'), 'shows', ['status'])

    op.create_table(
        'bookings',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('show_id', UUID(as_uuid=True), nullable=False),
        sa.Column('seat_code', sa.Text(), nullable=False),
        sa.Column('booked_by', sa.String(length=255), nullable=False),
        sa.Column(
            'booking_time',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['show_id'], ['shows.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bookings_show_id'), 'bookings', ['show_id'])

    op.create_table(
        'tickets',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('booking_id', UUID(as_uuid=True), nullable=False),
        sa.Column('show_id', UUID(as_uuid=True), nullable=False),
        sa.Column('seat_code', sa.String(length=100), nullable=False),
        sa.Column('ticket_code', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('generated_by', sa.String(length=255), nullable=True),
        sa.Column('generated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['booking_id'], ['bookings.id']),
        sa.ForeignKeyConstraint(['show_id'], ['shows.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('ticket_code'),
    )
    op.create_index(op.f('ix_tickets_booking_id'), 'tickets', ['booking_id'])
    op.create_index(op.f('ix_tickets_show_id'), 'tickets', ['show_id'])

    op.create_table(
        'seat_reservations',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('show_id', UUID(as_uuid=True), nullable=False),
        sa.Column('seat_id', sa.String(length=100), nullable=False),
        sa.Column('booking_id', UUID(as_uuid=True), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['booking_id'], ['bookings.id']),
        sa.ForeignKeyConstraint(['show_id'], ['shows.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('show_id', 'seat_id', name='uq_seat_reservation_show_seat'),
    )
    op.create_index(
        op.f('ix_seat_reservations_booking_id'), 'seat_reservations', ['booking_id']
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('seat_reservations')
    op.drop_table('tickets')
    op.drop_table('bookings')
    op.drop_table('shows')
    op.drop_table('layouts')
