"""Match sales parties against the master directory by normalized name."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from routemanager.core.models import MissingParty, PartyRecord, SalesRecord
from routemanager.core.normalize import normalize_name

logger = logging.getLogger(__name__)


def master_lookup(master: Iterable[PartyRecord]) -> Dict[str, PartyRecord]:
    """Index master records by normalized name; later records overwrite earlier ones."""

    lookup: Dict[str, PartyRecord] = {}
    for party in master:
        lookup[normalize_name(party.name)] = party
    return lookup


def find_missing(master: Sequence[PartyRecord], sales: Sequence[SalesRecord]) -> List[MissingParty]:
    """Return a working entry for every sales record absent from the master list.

    Sales order is preserved and repeated names are not collapsed, so two
    sales lines for the same unknown party produce two entries.
    """

    known = {normalize_name(party.name) for party in master}
    missing = [
        MissingParty(name=sale.name, phone=sale.phone or "", address="")
        for sale in sales
        if normalize_name(sale.name) not in known
    ]
    logger.info(
        "Reconciled %d sales records against %d master records: %d missing",
        len(sales),
        len(master),
        len(missing),
    )
    return missing
