"""Gap-fill utilities for human-in-the-loop completion of missing parties."""
from routemanager.review.workflow import EDITABLE_FIELDS, GapFillSession

__all__ = ["EDITABLE_FIELDS", "GapFillSession"]
