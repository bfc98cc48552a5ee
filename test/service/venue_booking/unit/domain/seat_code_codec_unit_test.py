"""
Unit tests for the booking seat_code codec

All three stored encodings must decode, and nothing may raise.
"""

import pytest

from src.service.venue_booking.domain.seat_code_codec import (
    decode_seat_code,
    encode_seat_code,
    is_array_encoded,
)


@pytest.mark.unit
class TestDecodeSeatCode:
    @pytest.mark.parametrize(
        'seat_code, expected',
        [
            ('["A-1-1","A-1-2"]', ['A-1-1', 'A-1-2']),
            ('A-1-1,A-1-2', ['A-1-1', 'A-1-2']),
            ('A-1-1', ['A-1-1']),
        ],
    )
    def test_each_stored_format_keeps_its_own_seat_count(
        self, seat_code: str, expected: list[str]
    ) -> None:
        assert decode_seat_code(seat_code) == expected

    def test_comma_pieces_are_trimmed(self) -> None:
        assert decode_seat_code(' North-A-1 ,  North-A-2 , ') == ['North-A-1', 'North-A-2']

    def test_array_entries_are_trimmed_and_non_strings_dropped(self) -> None:
        assert decode_seat_code('[" North-A-1 ", "", 3, null]') == ['North-A-1']

    def test_json_string_is_split_like_raw_text(self) -> None:
        assert decode_seat_code('"North-A-1, North-A-2"') == ['North-A-1', 'North-A-2']

    def test_json_scalar_falls_back_to_raw_text(self) -> None:
        assert decode_seat_code('12') == ['12']

    @pytest.mark.parametrize('seat_code', [None, '', '   ', '[]', '["North-A-1"', '[,,]', ','])
    def test_malformed_or_empty_decodes_to_nothing(self, seat_code: str | None) -> None:
        assert decode_seat_code(seat_code) == []


@pytest.mark.unit
class TestEncodeSeatCode:
    def test_encodes_as_json_array(self) -> None:
        assert encode_seat_code(['North-A-1', 'North-A-2']) == '["North-A-1","North-A-2"]'

    def test_encoded_value_decodes_back(self) -> None:
        seat_ids = ['North-A-1', 'South-B-10']

        assert decode_seat_code(encode_seat_code(seat_ids)) == seat_ids

    @pytest.mark.parametrize(
        'seat_code, expected',
        [
            ('["A-1-1"]', True),
            ('[]', True),
            ('A-1-1', False),
            ('A-1-1,A-1-2', False),
            (None, False),
        ],
    )
    def test_is_array_encoded(self, seat_code: str | None, expected: bool) -> None:
        assert is_array_encoded(seat_code) is expected
