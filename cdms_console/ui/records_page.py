"""One parametric page for every record collection."""
from __future__ import annotations

import streamlit as st

from cdms_console.records.registry import get_record_type
from cdms_console.records.table import build_rows
from cdms_console.reporting.sinks import rows_to_csv_text
from cdms_console.ui import state
from cdms_console.ui.context import AppContext
from cdms_console.ui.detail_panel import render_detail_panel
from cdms_console.ui.table import render_pagination, render_record_table


def _table_key(tag: str, page: int) -> str:
    # Bumping the nonce drops the table's row selection after the panel closes.
    nonce = st.session_state.setdefault(f"{tag}_table_nonce", 0)
    return f"{tag}_table_{page}_{nonce}"


def _reset_table_selection(tag: str) -> None:
    st.session_state[f"{tag}_table_nonce"] = st.session_state.get(f"{tag}_table_nonce", 0) + 1


def render_records_page(ctx: AppContext, tag: str) -> None:
    record_type = get_record_type(tag)
    controller = state.controller_for(ctx, tag)
    selection = state.selection_for(tag)

    state.switch_record_type(ctx, tag)
    controller.ensure_loaded()

    header_cols = st.columns([3, 1])
    with header_cols[0]:
        st.header(record_type.title)
        st.caption(record_type.description)
    with header_cols[1]:
        if st.button("Refresh", key=f"{tag}_refresh"):
            controller.refresh()
            st.rerun()

    if controller.error:
        st.error(f"Failed to fetch {record_type.title.lower()}: {controller.error}")

    render_record_table(
        record_type.columns,
        controller.records,
        key=_table_key(tag, controller.page),
        on_row_click=selection.select,
    )
    render_pagination(
        controller,
        selection,
        key=f"{tag}_pager",
        on_page_change=lambda: _reset_table_selection(tag),
    )

    if controller.records:
        st.download_button(
            "Download page as CSV",
            data=rows_to_csv_text(build_rows(record_type.columns, controller.records)),
            file_name=f"{tag}_page_{controller.page}.csv",
            mime="text/csv",
            key=f"{tag}_download",
        )

    session = state.edit_session_for(tag, selection)
    if session is None:
        return

    closed = render_detail_panel(ctx, session, controller, selection)
    if closed:
        if session.saved_record is not None:
            state.flash(f"{record_type.singular} {session.record_id} saved.")
        _reset_table_selection(tag)
        st.rerun()
