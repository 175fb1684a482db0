"""Streamlit widgets for the record table and its pager."""
from __future__ import annotations

from typing import Callable, Optional, Sequence

import streamlit as st

from cdms_console.core.models import ColumnDescriptor, Record, SelectionState
from cdms_console.records.controller import RecordListController, change_page
from cdms_console.records.table import build_rows, selected_record


def render_record_table(
    columns: Sequence[ColumnDescriptor],
    records: Sequence[Record],
    *,
    key: str,
    on_row_click: Optional[Callable[[Record], None]] = None,
) -> Optional[Record]:
    """Render records as a single-select table.

    Args:
        columns: Ordered column descriptors; their formatters shape each cell.
        records: Current page of records, already fetched by the caller.
        key: Widget key, scoped per record type.
        on_row_click: Optional callback that receives the full clicked record.

    Returns:
        The clicked record, or ``None`` when no row is selected.
    """

    if not records:
        st.info("No records to show.")
        return None

    rows = build_rows(columns, records)
    event = st.dataframe(
        rows,
        key=key,
        hide_index=True,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-row",
        column_order=[column.label for column in columns],
    )

    selected_rows = event.selection.rows if event is not None else []
    record = selected_record(records, selected_rows)
    if record is not None and on_row_click:
        on_row_click(record)
    return record


def render_pagination(
    controller: RecordListController,
    selection: SelectionState,
    *,
    key: str,
    on_page_change: Optional[Callable[[], None]] = None,
) -> None:
    """Previous / page label / next controls driven by the controller's page state.

    Changing page closes the detail panel before the new page is fetched.
    """

    col1, col2, col3 = st.columns([1, 2, 1])

    with col1:
        if st.button("← Previous", key=f"{key}_prev", disabled=controller.page <= 1):
            change_page(controller, selection, controller.page - 1)
            if on_page_change:
                on_page_change()
            st.rerun()

    with col2:
        label = f"Page {controller.page}"
        if controller.total_count is not None:
            label += f" · {controller.total_count:,} records"
        st.markdown(label)

    with col3:
        if st.button("Next →", key=f"{key}_next", disabled=not controller.has_more):
            change_page(controller, selection, controller.page + 1)
            if on_page_change:
                on_page_change()
            st.rerun()
