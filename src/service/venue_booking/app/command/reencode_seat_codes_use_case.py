import attrs

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.venue_booking.domain.seat_code_codec import (
    decode_seat_code,
    encode_seat_code,
    is_array_encoded,
)


@attrs.define
class ReencodeReport:
    scanned: int = 0
    rewritten: int = 0
    unresolvable: int = 0


class ReencodeSeatCodesUseCase:
    """
    One-off migration: rewrite single-seat and comma-joined seat codes as JSON arrays.

    Rows that decode to no seats are left untouched and counted as unresolvable.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @Logger.io
    async def execute(self, *, dry_run: bool = False) -> ReencodeReport:
        report = ReencodeReport()
        async with self.uow:
            records = await self.uow.booking_query_repo.list_all_seat_codes()
            for record in records:
                report.scanned += 1
                if is_array_encoded(record.seat_code):
                    continue
                seat_ids = decode_seat_code(record.seat_code)
                if not seat_ids:
                    report.unresolvable += 1
                    Logger.base.warning(
                        f'⚠️ [REENCODE] Booking {record.booking_id} seat_code '
                        f'{record.seat_code!r} has no seats, left as is'
                    )
                    continue
                report.rewritten += 1
                if not dry_run:
                    await self.uow.booking_command_repo.update_seat_code(
                        booking_id=record.booking_id, seat_code=encode_seat_code(seat_ids)
                    )
            if not dry_run:
                await self.uow.commit()

        Logger.base.info(
            f'🔧 [REENCODE] scanned={report.scanned} rewritten={report.rewritten} '
            f'unresolvable={report.unresolvable} dry_run={dry_run}'
        )
        return report
