"""Streamlit wizard to reconcile sales against the master list and export the route report."""
from pathlib import Path
from typing import Callable

import streamlit as st

# Allow running via "streamlit run routemanager/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from routemanager.core.errors import IncompleteData, ParseFailure, PrerequisiteMissing
from routemanager.core.logging import configure_logging
from routemanager.ingestion.common import upload_fingerprint
from routemanager.ingestion.loader import load_master, load_sales, load_template
from routemanager.processing import session as workflow
from routemanager.processing.session import STEP_LABELS, RouteSession, Step
from routemanager.reporting.sinks import REPORT_FILE_NAME, excel_bytes
from routemanager.reporting.templates import report_rows_to_dicts

UPLOAD_TYPES = ["xlsx", "xlsm", "xls", "csv"]
PARSE_ERROR_MESSAGE = "Error parsing file. Please check format."


def _session() -> RouteSession:
    if "route_session" not in st.session_state:
        st.session_state.route_session = workflow.restart()
        st.session_state.loaded_uploads = {}
    return st.session_state.route_session


def _store(state: RouteSession) -> None:
    st.session_state.route_session = state


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _handle_upload(kind: str, upload, apply: Callable[[tuple], None]) -> None:
    """Parse a new upload once; uploads already applied this session are skipped."""

    if upload is None:
        return
    content = upload.getvalue()
    fingerprint = upload_fingerprint(upload.name, content)
    if st.session_state.loaded_uploads.get(kind) == fingerprint:
        return
    try:
        apply((upload.name, content))
    except ParseFailure:
        st.error(PARSE_ERROR_MESSAGE)
        return
    st.session_state.loaded_uploads[kind] = fingerprint


def _progress_tracker(current: Step) -> None:
    steps = list(Step)
    index = steps.index(current)
    st.progress(index / (len(steps) - 1))
    columns = st.columns(len(steps))
    for position, (column, step) in enumerate(zip(columns, steps)):
        marker = "🔵" if position <= index else "⚪"
        column.caption(f"{marker} {position + 1}. {STEP_LABELS[step]}")


def _render_upload(state: RouteSession) -> None:
    st.subheader("Step 1: File Initialization")
    upload_col, guide_col = st.columns(2)

    with upload_col:
        master_upload = st.file_uploader(
            "Master File (Party Name, Number, Address)", type=UPLOAD_TYPES, key="master_upload"
        )
        _handle_upload(
            "master",
            master_upload,
            lambda source: _store(workflow.with_master(_session(), load_master(source))),
        )
        if _session().master:
            st.success(f"✓ Loaded {len(_session().master)} records")

        sales_upload = st.file_uploader(
            "Current Sales File (Party Name, Phone No.)", type=UPLOAD_TYPES, key="sales_upload"
        )
        _handle_upload(
            "sales",
            sales_upload,
            lambda source: _store(workflow.with_sales(_session(), load_sales(source))),
        )
        if _session().sales:
            st.success(f"✓ Loaded {len(_session().sales)} records")

    with guide_col:
        st.markdown("#### System Guide")
        st.markdown(
            "- ✅ Names will be auto-cleaned (lowercase, trimmed).\n"
            "- 📍 GPS Coordinates will be auto-extracted from Address.\n"
            "- 🔍 System will identify parties missing from Master data."
        )
        state = _session()
        ready = bool(state.master and state.sales)
        if st.button("Compare & Proceed", type="primary", disabled=not ready, use_container_width=True):
            try:
                _store(workflow.reconcile(state))
            except PrerequisiteMissing as exc:
                st.warning(str(exc))
                return
            _rerun_app()


def _render_fix_missing(state: RouteSession) -> None:
    gap_fill = state.gap_fill
    st.subheader(f"Step 2: Missing Parties Found ({len(gap_fill)})")
    st.caption(
        "The following parties are in the Sales file but missing from your Master database. "
        "Please add details."
    )

    edited_rows = st.data_editor(
        gap_fill.to_rows(),
        hide_index=True,
        num_rows="fixed",
        use_container_width=True,
        key="missing_editor",
        column_config={
            "Party Name": st.column_config.TextColumn("Party Name"),
            "Phone No.": st.column_config.TextColumn("Phone / Number"),
            "Address": st.column_config.TextColumn(
                "Address (Paste GPS here if available)",
                help="e.g. 31.65 74.89 OR Main Street...",
            ),
        },
        disabled=["Party Name"],
    )
    gap_fill.apply_edits(edited_rows)

    incomplete = gap_fill.incomplete_entries()
    confirmed = False
    if incomplete:
        st.warning(f"{len(incomplete)} party(ies) have empty addresses.")
        confirmed = st.checkbox("Continue anyway with empty addresses", key="confirm_incomplete")

    back_col, _, next_col = st.columns([1, 2, 1])
    with back_col:
        if st.button("Go Back", type="secondary"):
            _store(workflow.back_to_upload(state))
            st.session_state.loaded_uploads = {}
            _rerun_app()
    with next_col:
        if st.button("Update Master & Proceed", type="primary"):
            try:
                _store(workflow.finalize_missing(state, confirm_incomplete=confirmed))
            except IncompleteData:
                st.error("Some parties have empty addresses. Tick the box above to continue anyway.")
                return
            _rerun_app()


def _render_mapping(state: RouteSession) -> None:
    st.subheader("Step 3: Template Mapping")
    st.markdown(
        "All party data is now synchronized. Upload your **Route Template** to generate the final "
        "formatted Excel."
    )
    template_upload = st.file_uploader("Upload Report Template", type=UPLOAD_TYPES, key="template_upload")
    _handle_upload(
        "template",
        template_upload,
        lambda source: _store(workflow.with_template(_session(), load_template(source))),
    )
    state = _session()
    if state.template.recognized:
        st.success(f"✓ Template recognized with {len(state.template)} columns")

    if st.button(
        "Generate & Download Report 🚀",
        type="primary",
        disabled=not state.template.recognized,
        use_container_width=True,
    ):
        with st.spinner("Processing..."):
            try:
                _store(workflow.generate_report(state))
            except PrerequisiteMissing as exc:
                st.warning(str(exc))
                return
        _rerun_app()


def _render_done(state: RouteSession) -> None:
    st.subheader("✅ Workflow Complete!")
    st.markdown(
        "Your Updated Route Report is ready. GPS coordinates were extracted and mismatched names "
        "were synchronized."
    )
    rows = report_rows_to_dicts(state.report)
    st.dataframe(rows, use_container_width=True, hide_index=True, height=320)
    st.download_button(
        "Download Updated Route Report",
        data=excel_bytes(rows),
        file_name=REPORT_FILE_NAME,
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        type="primary",
    )
    if st.button("Start New Task", type="secondary"):
        for key in ("route_session", "loaded_uploads", "confirm_incomplete"):
            st.session_state.pop(key, None)
        _rerun_app()


RENDERERS = {
    Step.UPLOAD: _render_upload,
    Step.FIX_MISSING: _render_fix_missing,
    Step.MAPPING: _render_mapping,
    Step.DONE: _render_done,
}


def main() -> None:
    """Launch the route manager wizard."""

    configure_logging()
    st.set_page_config(page_title="Excel Route Manager", page_icon="📦", layout="wide")
    st.title("📦 Excel Route Manager")

    state = _session()
    _progress_tracker(state.step)
    RENDERERS[state.step](state)


if __name__ == "__main__":
    main()
