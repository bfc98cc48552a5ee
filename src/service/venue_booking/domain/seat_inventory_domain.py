"""
Seat Inventory Domain

Expands a normalized layout into the addressable seat universe of a show.

Seat identifiers are `{section}-{rowLetter}-{seatNumber}` (e.g. `North-A-12`) and are
the join key against booking records, so generation must be deterministic:
the same layout and price always yield the same list in the same order.
Row letters are positional (first row in the section is `A`), not stored.
"""

from decimal import Decimal

import attrs

from src.service.venue_booking.domain.entity.layout_entity import NormalizedLayout


@attrs.frozen
class Seat:
    seat_id: str
    display_name: str
    section: str
    row_letter: str
    row_number: int
    seat_number: int
    price: Decimal


def row_letter_for(row_index: int) -> str:
    return chr(ord('A') + row_index)


def build_seat_id(*, section: str, row_letter: str, seat_number: int) -> str:
    return f'{section}-{row_letter}-{seat_number}'


def is_well_formed_seat_id(seat_id: object) -> bool:
    """`section-rowLetter-seatNumber`; section names may themselves contain '-'"""
    if not isinstance(seat_id, str):
        return False
    parts = seat_id.rsplit('-', 2)
    if len(parts) != 3 or not all(part.strip() for part in parts):
        return False
    return parts[2].isdigit()


def generate_seats(layout: NormalizedLayout, price: Decimal) -> list[Seat]:
    # Every seat is priced at the show's list price; per-section prices are not honored
    seats: list[Seat] = []
    for section in layout.sections:
        for row_index, row in enumerate(section.rows):
            letter = row_letter_for(row_index)
            for seat_number in range(1, row.seats + 1):
                seats.append(
                    Seat(
                        seat_id=build_seat_id(
                            section=section.name, row_letter=letter, seat_number=seat_number
                        ),
                        display_name=f'{section.initial}{letter}{seat_number}',
                        section=section.name,
                        row_letter=letter,
                        row_number=row_index + 1,
                        seat_number=seat_number,
                        price=price,
                    )
                )
    return seats


def capacity_of(layout: NormalizedLayout) -> int:
    return len(generate_seats(layout, Decimal(0)))
