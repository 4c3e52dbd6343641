"""Data models for parties, sales lines, and route report rows."""
from dataclasses import dataclass, asdict
from typing import Dict, Any, Tuple


@dataclass
class PartyRecord:
    """A master directory entry, keyed by its normalized name."""

    name: str
    phone: str = ""
    address: str = ""
    latitude: str = ""
    longitude: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SalesRecord:
    """A party reference from the sales list; never edited after import."""

    name: str
    phone: str = ""


@dataclass
class MissingParty:
    """Sales party without a master match, pending manual completion."""

    name: str
    phone: str = ""
    address: str = ""


@dataclass
class ReportRow:
    """Single line of the generated route report."""

    name: str
    latitude: str = ""
    longitude: str = ""
    address: str = ""
    phone: str = ""
    group: str = ""
    notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation for tabular rendering."""

        return asdict(self)


@dataclass(frozen=True)
class TemplateColumnSet:
    """Column names read from an uploaded report template."""

    columns: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.columns)

    @property
    def recognized(self) -> bool:
        return bool(self.columns)
