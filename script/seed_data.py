#!/usr/bin/env python3
"""
Database Seed Script
Populate a demo venue into the database

Features:
1. Create Layouts - one modern per-row layout and one legacy uniform layout
2. Create Shows - upcoming shows on each layout, with their seating snapshot

Notes:
- Run after script/reset_database.py (or alembic upgrade head)
- Run from the repository root: python -m script.seed_data
- Dates are relative to today so the shows are bookable
"""

import asyncio
from datetime import date, time, timedelta
from decimal import Decimal

import attrs

from src.platform.database.orm_db_setting import Database, dispose_engine
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.venue_booking.app.command.create_layout_use_case import CreateLayoutUseCase
from src.service.venue_booking.app.command.create_show_use_case import CreateShowUseCase


@attrs.frozen
class ShowSeed:
    title: str
    days_ahead: int
    start: time
    price: Decimal


MAIN_HALL = {
    'sections': [
        {'name': 'North', 'rows': [{'rowNumber': 1, 'seats': 10}, {'rowNumber': 2, 'seats': 12}]},
        {'name': 'South', 'rows': [{'rowNumber': 1, 'seats': 10}, {'rowNumber': 2, 'seats': 12}]},
    ]
}

# Uniform sections, as older layouts were saved
STUDIO = {'sections': [{'name': 'East', 'rows': 4, 'seatsPerRow': 8}]}

LAYOUT_SHOWS: dict[str, tuple[dict, list[ShowSeed]]] = {
    'Main Hall': (
        MAIN_HALL,
        [
            ShowSeed('Evening Concert', days_ahead=1, start=time(19, 30), price=Decimal('500')),
            ShowSeed('Matinee Play', days_ahead=2, start=time(14, 0), price=Decimal('300')),
        ],
    ),
    'Studio': (
        STUDIO,
        [ShowSeed('Stand-up Night', days_ahead=3, start=time(21, 0), price=Decimal('250'))],
    ),
}


def _uow() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory=Database().session)


async def seed() -> None:
    today = date.today()
    for layout_name, (structure, shows) in LAYOUT_SHOWS.items():
        layout = await CreateLayoutUseCase(uow=_uow()).execute(
            name=layout_name, structure=structure
        )
        print(f"   ✅ Layout '{layout.name}' created ({layout.normalize().seat_count} seats)")

        for seed_show in shows:
            show = await CreateShowUseCase(uow=_uow()).execute(
                title=seed_show.title,
                show_date=today + timedelta(days=seed_show.days_ahead),
                show_time=seed_show.start,
                price=seed_show.price,
                layout_id=layout.id,
            )
            print(f"   🎭 Show '{show.title}' on {show.date} {show.time:%H:%M} ({show.id})")


async def main() -> None:
    print('🌱 Seeding demo venue...')
    print('=' * 50)
    try:
        await seed()
    except Exception as e:
        print(f'❌ Seed failed: {e}')
        exit(1)
    finally:
        await dispose_engine()

    print('=' * 50)
    print('✅ Seed completed!')


if __name__ == '__main__':
    asyncio.run(main())
