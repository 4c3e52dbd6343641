"""Best-effort GPS extraction from free-text addresses.

This is a pattern heuristic, not a geocoder. The two numbers are returned
exactly as written and are never checked against valid latitude/longitude
ranges, so an address such as ``"Plot 123.5 456.75"`` yields ``123.5`` /
``456.75``.
"""
from __future__ import annotations

import re
from typing import Any, NamedTuple

# Both parts need digits on either side of a decimal point.
GPS_PATTERN = re.compile(r"(-?\d+\.\d+)[,\s]+(-?\d+\.\d+)", re.ASCII)


class Coordinates(NamedTuple):
    lat: str
    lng: str


EMPTY_COORDINATES = Coordinates("", "")


def extract_coordinates(address: Any) -> Coordinates:
    """Return the first ``lat lng`` or ``lat, lng`` pair found in the address."""

    if not isinstance(address, str) or not address:
        return EMPTY_COORDINATES
    match = GPS_PATTERN.search(address)
    if not match:
        return EMPTY_COORDINATES
    return Coordinates(match.group(1), match.group(2))
