"""Tests for the workflow transitions shared by the dashboard and the CLI."""
import pytest

from routemanager.core.errors import IncompleteData, InvalidTransition, PrerequisiteMissing
from routemanager.core.models import PartyRecord, SalesRecord, TemplateColumnSet
from routemanager.processing import session as workflow
from routemanager.processing.session import Step

TEMPLATE = TemplateColumnSet(("Name", "Latitude", "Longitude"))


def _loaded(master, sales):
    state = workflow.with_master(workflow.restart(), master)
    return workflow.with_sales(state, sales)


def test_reconcile_requires_both_lists():
    state = workflow.with_master(workflow.restart(), [PartyRecord(name="A")])
    with pytest.raises(PrerequisiteMissing):
        workflow.reconcile(state)
    assert state.step is Step.UPLOAD


def test_reconcile_skips_fix_step_when_nothing_is_missing():
    state = workflow.reconcile(_loaded([PartyRecord(name="A")], [SalesRecord(name="a ")]))
    assert state.step is Step.MAPPING
    assert state.gap_fill is None


def test_full_flow_with_missing_parties():
    start = _loaded([PartyRecord(name="Acme Corp", address="Main")], [SalesRecord(name="Beta LLC", phone="5")])

    state = workflow.reconcile(start)
    assert state.step is Step.FIX_MISSING
    assert len(state.gap_fill) == 1

    state.gap_fill.update_field(0, "address", "12.5 77.25")
    state = workflow.finalize_missing(state)
    assert state.step is Step.MAPPING
    assert [party.name for party in state.master] == ["Acme Corp", "Beta LLC"]
    assert len(start.master) == 1

    state = workflow.generate_report(workflow.with_template(state, TEMPLATE))
    assert state.step is Step.DONE
    assert len(state.report) == 1
    assert (state.report[0].latitude, state.report[0].longitude) == ("12.5", "77.25")
    assert state.report[0].phone == "5"


def test_finalize_with_empty_address_needs_confirmation():
    state = workflow.reconcile(_loaded([PartyRecord(name="A")], [SalesRecord(name="B"), SalesRecord(name="C")]))
    state.gap_fill.update_field(1, "address", "Somewhere")

    with pytest.raises(IncompleteData) as excinfo:
        workflow.finalize_missing(state)
    assert excinfo.value.indexes == [0]

    confirmed = workflow.finalize_missing(state, confirm_incomplete=True)
    assert confirmed.step is Step.MAPPING
    assert len(confirmed.master) == 3


def test_generate_report_requires_template():
    state = workflow.reconcile(_loaded([PartyRecord(name="A")], [SalesRecord(name="A")]))
    with pytest.raises(PrerequisiteMissing):
        workflow.generate_report(state)


def test_back_to_upload_discards_gap_fill():
    state = workflow.reconcile(_loaded([PartyRecord(name="A")], [SalesRecord(name="B")]))
    state = workflow.back_to_upload(state)
    assert state.step is Step.UPLOAD
    assert state.gap_fill is None
    assert state.master and state.sales


def test_done_is_terminal():
    state = workflow.reconcile(_loaded([PartyRecord(name="A")], [SalesRecord(name="A")]))
    state = workflow.generate_report(workflow.with_template(state, TEMPLATE))
    with pytest.raises(InvalidTransition):
        workflow.reconcile(state)
    with pytest.raises(InvalidTransition):
        workflow.with_master(state, [])
    assert workflow.restart().step is Step.UPLOAD


def test_reupload_replaces_collections_wholesale():
    state = _loaded([PartyRecord(name="A"), PartyRecord(name="B")], [SalesRecord(name="A")])
    state = workflow.with_master(state, [PartyRecord(name="C")])
    assert [party.name for party in state.master] == ["C"]
