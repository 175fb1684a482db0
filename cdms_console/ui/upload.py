"""Upload page: send one report file to the server."""
from __future__ import annotations

import streamlit as st

from cdms_console.uploads.submitter import REPORT_TYPES, UploadSubmitter
from cdms_console.ui import state
from cdms_console.ui.context import AppContext


def render_upload_page(ctx: AppContext) -> None:
    st.header("Upload report")
    st.caption("Send a BC1300, BC1048, outstanding bills, or vendor code report for processing.")

    nonce = st.session_state.setdefault("upload_form_nonce", 0)
    submitter = UploadSubmitter(ctx.client)

    with st.form(key=f"upload_form_{nonce}"):
        report_type = st.selectbox(
            "Report Type",
            options=list(REPORT_TYPES),
            index=None,
            placeholder="Select a report type",
        )
        uploaded = st.file_uploader("File", help="The raw report export as received.")
        submitted = st.form_submit_button("Upload", type="primary")

    if not submitted:
        return

    with st.spinner("Uploading..."):
        outcome = submitter.submit(
            report_type,
            uploaded.name if uploaded is not None else None,
            uploaded.getvalue() if uploaded is not None else None,
        )

    if outcome.ok:
        state.mark_records_stale()
        state.flash(outcome.message)
        # A new form key clears the selected file.
        st.session_state.upload_form_nonce = nonce + 1
        st.session_state.page = "uploads"
        st.rerun()
    elif outcome.sent:
        st.error(outcome.message)
    else:
        st.warning(outcome.message)
