"""
Venue layout model

A layout is stored as an opaque JSON structure with two section shapes:

    modern: {"name": "North", "rows": [{"rowNumber": 1, "seats": 10}, ...]}
    legacy: {"name": "North", "rows": 3, "seatsPerRow": 10}

`normalize` converts both into the per-row shape. Everything downstream
reads only the normalized view.
"""

from datetime import datetime
from typing import Any, Mapping, Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger


def _non_negative_int(value: Any) -> int:
    # Missing, negative, boolean and non-numeric values count as zero
    if isinstance(value, bool) or value is None:
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return max(number, 0)


@attrs.frozen
class Row:
    row_number: int
    seats: int


@attrs.frozen
class Section:
    name: str
    rows: tuple[Row, ...] = ()

    @property
    def initial(self) -> str:
        return self.name[:1].upper()

    @property
    def seat_count(self) -> int:
        return sum(row.seats for row in self.rows)


@attrs.frozen
class NormalizedLayout:
    sections: tuple[Section, ...] = ()

    @property
    def seat_count(self) -> int:
        return sum(section.seat_count for section in self.sections)

    def to_structure(self) -> dict:
        """Modern-shape JSON structure, used for show snapshots"""
        return {
            'sections': [
                {
                    'name': section.name,
                    'rows': [
                        {'rowNumber': row.row_number, 'seats': row.seats} for row in section.rows
                    ],
                }
                for section in self.sections
            ]
        }


def _normalize_section(raw: Mapping[str, Any]) -> Section:
    name = str(raw.get('name') or '')
    rows = raw.get('rows')

    if isinstance(rows, list):
        return Section(
            name=name,
            rows=tuple(
                Row(
                    row_number=_non_negative_int(row.get('rowNumber')) or index + 1,
                    seats=_non_negative_int(row.get('seats')),
                )
                if isinstance(row, Mapping)
                else Row(row_number=index + 1, seats=0)
                for index, row in enumerate(rows)
            ),
        )

    row_count = _non_negative_int(rows)
    seats_per_row = _non_negative_int(raw.get('seatsPerRow'))
    return Section(
        name=name,
        rows=tuple(Row(row_number=i, seats=seats_per_row) for i in range(1, row_count + 1)),
    )


def normalize(structure: Optional[Mapping[str, Any]]) -> NormalizedLayout:
    """Convert a layout structure of either shape into the per-row shape. Never raises."""
    if not isinstance(structure, Mapping):
        return NormalizedLayout()
    sections = structure.get('sections')
    if not isinstance(sections, list):
        return NormalizedLayout()
    return NormalizedLayout(
        sections=tuple(
            _normalize_section(section) for section in sections if isinstance(section, Mapping)
        )
    )


def _validate_structure(structure: Any) -> None:
    if not isinstance(structure, Mapping) or not isinstance(structure.get('sections'), list):
        raise ValidationError('Layout structure must be an object with a "sections" list')

    seen: set[str] = set()
    for section in structure['sections']:
        if not isinstance(section, Mapping):
            raise ValidationError('Each layout section must be an object')
        name = section.get('name')
        if not isinstance(name, str) or not name.strip():
            raise ValidationError('Each layout section needs a non-empty name')
        if name in seen:
            raise ValidationError(f'Duplicate section name in layout: {name}')
        seen.add(name)

        rows = section.get('rows')
        counts = (
            [row.get('seats') if isinstance(row, Mapping) else None for row in rows]
            if isinstance(rows, list)
            else [rows, section.get('seatsPerRow')]
        )
        for count in counts:
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValidationError(
                    f'Section {name}: seat and row counts must be non-negative integers'
                )


@attrs.define
class Layout:
    id: UUID
    name: str
    structure: dict
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(cls, *, name: str, structure: dict) -> 'Layout':
        if not name or not name.strip():
            raise ValidationError('Layout name cannot be empty')
        _validate_structure(structure)
        return cls(id=uuid7(), name=name.strip(), structure=dict(structure))

    def normalize(self) -> NormalizedLayout:
        return normalize(self.structure)
