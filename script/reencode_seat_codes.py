#!/usr/bin/env python3
"""
Seat Code Re-encode Script
Rewrite legacy booking seat codes as JSON arrays

Features:
1. Scan every booking's seat_code
2. Rewrite single-seat and comma-joined codes as JSON arrays
3. Leave codes that decode to no seats untouched and report them

Notes:
- Safe to run more than once; array-encoded codes are skipped
- Use --dry-run to only report what would change
- Run from the repository root: python -m script.reencode_seat_codes [--dry-run]
"""

import argparse
import asyncio

from src.platform.database.orm_db_setting import Database, dispose_engine
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.venue_booking.app.command.reencode_seat_codes_use_case import (
    ReencodeSeatCodesUseCase,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Re-encode legacy booking seat codes')
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='report what would be rewritten without writing',
    )
    return parser.parse_args()


async def main(*, dry_run: bool) -> None:
    print('🔄 Re-encoding booking seat codes...')
    print('=' * 50)

    use_case = ReencodeSeatCodesUseCase(
        uow=SqlAlchemyUnitOfWork(session_factory=Database().session)
    )
    try:
        report = await use_case.execute(dry_run=dry_run)
    except Exception as e:
        print(f'❌ Re-encode failed: {e}')
        exit(1)
    finally:
        await dispose_engine()

    print(f'   📊 Scanned: {report.scanned}')
    print(f'   ✏️  Rewritten: {report.rewritten}{" (dry run)" if dry_run else ""}')
    print(f'   ⚠️  Unresolvable: {report.unresolvable}')
    print('=' * 50)
    print('✅ Re-encode completed!')


if __name__ == '__main__':
    args = _parse_args()
    asyncio.run(main(dry_run=args.dry_run))
