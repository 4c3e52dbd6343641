"""Gap-fill helpers for completing parties missing from the master list."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping

from routemanager.core.errors import IndexOutOfRange
from routemanager.core.models import MissingParty, PartyRecord
from routemanager.core.normalize import to_text
from routemanager.ingestion.coordinates import extract_coordinates

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("phone", "address")

# Column labels used by the review table, mapped to entry fields.
EDITOR_COLUMNS = {"Phone No.": "phone", "Address": "address"}


class GapFillSession:
    """Ordered list of missing parties the operator completes by hand."""

    def __init__(self, entries: Iterable[MissingParty] = ()):
        self._entries: List[MissingParty] = [replace(entry) for entry in entries]

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[MissingParty]:
        """Return copies so callers cannot bypass ``update_field``."""

        return [replace(entry) for entry in self._entries]

    def update_field(self, index: int, field: str, value: Any) -> MissingParty:
        """Replace ``phone`` or ``address`` on the entry at ``index``."""

        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' is not editable; choose one of {EDITABLE_FIELDS}")
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRange(f"Index {index} outside 0..{len(self._entries) - 1}")
        updated = replace(self._entries[index], **{field: to_text(value)})
        self._entries[index] = updated
        return updated

    def apply_edits(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """Apply table editor rows positionally, one row per entry."""

        for index, row in enumerate(rows):
            for column, field in EDITOR_COLUMNS.items():
                if column in row:
                    self.update_field(index, field, row[column])

    def incomplete_entries(self) -> List[int]:
        """Indexes of entries whose address is still blank."""

        return [index for index, entry in enumerate(self._entries) if not entry.address.strip()]

    def to_rows(self) -> List[Dict[str, str]]:
        """Rows for the review table, labelled like the source spreadsheets."""

        return [
            {"Party Name": entry.name, "Phone No.": entry.phone, "Address": entry.address}
            for entry in self._entries
        ]

    def finalize(self) -> List[PartyRecord]:
        """Convert every entry into a master record with extracted coordinates.

        Empty addresses do not block; the caller decides whether to warn.
        """

        records = []
        for entry in self._entries:
            coords = extract_coordinates(entry.address)
            records.append(
                PartyRecord(
                    name=entry.name,
                    phone=entry.phone,
                    address=entry.address,
                    latitude=coords.lat,
                    longitude=coords.lng,
                )
            )
        logger.info(
            "Finalized %d gap-filled parties (%d with coordinates)",
            len(records),
            sum(1 for record in records if record.latitude),
        )
        return records
