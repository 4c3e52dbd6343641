"""Name keys drive every match between the master and sales lists."""
import pytest

from routemanager.core.normalize import normalize_name, to_text


def test_normalize_trims_lowercases_and_collapses():
    assert normalize_name(" ACME   Corp ") == "acme corp"


def test_normalize_collapses_tabs_and_newlines():
    assert normalize_name("Acme\t\tCorp\nLtd") == "acme corp ltd"


@pytest.mark.parametrize("raw", [" ACME   Corp ", "x", "", "  ", "A\tB  C", 42, None, 3.0])
def test_normalize_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_normalize_handles_empty_and_none():
    assert normalize_name(None) == ""
    assert normalize_name("") == ""
    assert normalize_name("   ") == ""


def test_normalize_coerces_non_strings():
    assert normalize_name(12345) == "12345"
    assert normalize_name(12345.0) == "12345"


def test_to_text_keeps_fractional_floats_and_strings():
    assert to_text(31.5) == "31.5"
    assert to_text(" keep ") == " keep "
    assert to_text(None) == ""
