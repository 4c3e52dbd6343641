"""Coordinate extraction is a pattern heuristic and never fails."""
import pytest

from routemanager.ingestion.coordinates import extract_coordinates


@pytest.mark.parametrize("address", ["31.65 74.89", "31.65, 74.89", "31.65,74.89", "Shop 4, 31.65 ,  74.89 near gate"])
def test_extracts_space_or_comma_separated_pairs(address):
    coords = extract_coordinates(address)
    assert coords.lat == "31.65"
    assert coords.lng == "74.89"


def test_keeps_negative_signs_and_precision_verbatim():
    coords = extract_coordinates("-33.868800, 151.209300")
    assert (coords.lat, coords.lng) == ("-33.868800", "151.209300")


@pytest.mark.parametrize("address", ["Main Street", "12 74.89", "31 74", "", None, 31.65])
def test_returns_empty_strings_without_a_match(address):
    coords = extract_coordinates(address)
    assert (coords.lat, coords.lng) == ("", "")


def test_uses_first_pair_only():
    coords = extract_coordinates("1.5 2.5 then 3.5 4.5")
    assert (coords.lat, coords.lng) == ("1.5", "2.5")


def test_does_not_validate_ranges():
    coords = extract_coordinates("Plot 123.5 456.75")
    assert (coords.lat, coords.lng) == ("123.5", "456.75")


def test_only_ascii_digits_count_as_coordinates():
    coords = extract_coordinates("٣١.٦٥ ٧٤.٨٩")
    assert (coords.lat, coords.lng) == ("", "")
