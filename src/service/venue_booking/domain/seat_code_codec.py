"""
Booking seat_code codec

`bookings.seat_code` holds the set of seats of one booking. Three encodings are live
in stored data, oldest first:

    "North-A-1"                  single seat
    "North-A-1, North-A-2"       comma-joined
    '["North-A-1","North-A-2"]'  JSON array (the only format written today)

Decoding never raises: a malformed or empty value decodes to no seats.
"""

from typing import Iterable

import orjson


SEPARATOR = ','


def _split_raw(raw: str) -> list[str]:
    if SEPARATOR in raw:
        return [piece.strip() for piece in raw.split(SEPARATOR) if piece.strip()]
    return [raw.strip()] if raw.strip() else []


def decode_seat_code(seat_code: str | None) -> list[str]:
    if seat_code is None:
        return []
    raw = str(seat_code)
    if not raw.strip():
        return []

    try:
        decoded = orjson.loads(raw)
    except orjson.JSONDecodeError:
        # A truncated or broken array is corrupt, not a comma list
        if raw.lstrip().startswith('['):
            return []
        return _split_raw(raw)

    if isinstance(decoded, list):
        return [item.strip() for item in decoded if isinstance(item, str) and item.strip()]
    if isinstance(decoded, str):
        return _split_raw(decoded)
    # Valid JSON scalar such as 12 or true: fall back to the raw text
    return _split_raw(raw)


def encode_seat_code(seat_ids: Iterable[str]) -> str:
    return orjson.dumps(list(seat_ids)).decode()


def is_array_encoded(seat_code: str | None) -> bool:
    if not seat_code:
        return False
    try:
        return isinstance(orjson.loads(seat_code), list)
    except orjson.JSONDecodeError:
        return False
