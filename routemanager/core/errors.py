"""Exceptions raised by the reconciliation workflow."""
from __future__ import annotations

from typing import Sequence


class RouteManagerError(Exception):
    """Base class for all route manager failures."""


class ParseFailure(RouteManagerError):
    """An uploaded file could not be read as a table."""


class PrerequisiteMissing(RouteManagerError):
    """A step was requested before the data it needs was loaded."""


class IndexOutOfRange(RouteManagerError, IndexError):
    """A gap-fill edit referenced an entry that does not exist."""


class InvalidTransition(RouteManagerError):
    """A workflow action was attempted from the wrong step."""


class IncompleteData(RouteManagerError):
    """Some missing parties still have no address.

    This is a soft condition: callers confirm with the operator and retry.
    """

    def __init__(self, indexes: Sequence[int]):
        self.indexes = list(indexes)
        super().__init__(f"{len(self.indexes)} party(ies) have empty addresses")
