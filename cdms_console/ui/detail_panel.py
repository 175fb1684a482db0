"""Detail/edit panel for a selected record."""
from __future__ import annotations

from datetime import datetime
from typing import Any, List

import streamlit as st

from cdms_console.core.formatting import format_currency, to_number
from cdms_console.core.models import FieldSpec, SelectionState
from cdms_console.records.controller import RecordListController
from cdms_console.records.registry import MANIFEST_SECTIONS
from cdms_console.review.history import NO_HISTORY_MESSAGE, fetch_status_history
from cdms_console.review.workflow import EditSession, commit_edit
from cdms_console.ui.context import AppContext

SECTION_LABELS = {"main": "Details", "status": "Status", "comments": "Comments"}


def _display(spec: FieldSpec, value: Any) -> str:
    if spec.kind == "currency":
        return format_currency(value)
    return "" if value is None else str(value)


def _widget_key(session: EditSession, spec: FieldSpec) -> str:
    return f"{session.record_type.tag}_{session.record_id}_{spec.key}"


def _render_field(session: EditSession, spec: FieldSpec) -> Any:
    """Render one field and return the widget value (``None`` for read-only fields)."""

    key = _widget_key(session, spec)
    error = session.field_errors.get(spec.key)
    value = session.value(spec.key)

    if not spec.editable:
        st.text_input(spec.label, value=_display(spec, value), key=key, disabled=True)
        return None

    if spec.options is not None:
        options: List[str] = list(spec.options)
        index = options.index(value) if value in options else None
        result = st.selectbox(
            spec.label,
            options=options,
            index=index,
            key=key,
            placeholder="Select a status",
        )
    elif spec.kind == "currency":
        number = to_number(value)
        result = st.number_input(
            spec.label,
            value=number,
            step=0.01,
            format="%.2f",
            key=key,
        )
    else:
        result = st.text_input(spec.label, value="" if value is None else str(value), key=key)

    if error:
        st.caption(f":red[{error}]")
    return result


def _render_history(ctx: AppContext, session: EditSession) -> None:
    result = fetch_status_history(ctx.client, session.record_type, session.record_id)
    if result.error:
        st.error(f"Failed to load status history: {result.error}")
        return
    if result.empty:
        st.info(NO_HISTORY_MESSAGE)
        return
    for entry in result.entries:
        with st.container(border=True):
            st.markdown(f"**Status:** {entry.status}")
            st.markdown(f"**Date:** {_format_timestamp(entry.status_date)}")
            user = entry.user_name or "Unknown user"
            if entry.user_email:
                user = f"{user} ({entry.user_email})"
            st.markdown(f"**User:** {user}")
            st.markdown(f"**Notes:** {entry.notes or ''}")


def _format_timestamp(raw: Any) -> str:
    if isinstance(raw, str) and raw:
        try:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).strftime("%b %d, %Y %H:%M")
        except ValueError:
            return raw
    return "—"


def render_detail_panel(
    ctx: AppContext,
    session: EditSession,
    controller: RecordListController,
    selection: SelectionState,
) -> bool:
    """Render the panel; return True when the panel closed (saved or cancelled).

    A failed save reruns the script with the drafts still in the widgets and
    the error shown above the form.
    """

    record_type = session.record_type
    sections = [name for name in MANIFEST_SECTIONS if record_type.manifest.get(name)]
    tab_labels = [SECTION_LABELS.get(name, name.title()) for name in sections]
    if record_type.history:
        tab_labels.append("History")

    submitted = {}
    with st.container(border=True):
        st.subheader(f"{record_type.singular} Details")
        st.caption(f"View and manage details for this {record_type.singular.lower()}.")
        if session.error:
            st.error(session.error)

        with st.form(key=f"{record_type.tag}_{session.record_id}_form", border=False):
            tabs = st.tabs(tab_labels)
            for tab, name in zip(tabs, sections):
                with tab:
                    for spec in record_type.manifest[name]:
                        submitted[spec.key] = (spec, _render_field(session, spec))
            if record_type.history:
                with tabs[-1]:
                    _render_history(ctx, session)

            if record_type.editable:
                action_cols = st.columns(2)
                with action_cols[0]:
                    save_clicked = st.form_submit_button("Save", type="primary")
                with action_cols[1]:
                    cancel_clicked = st.form_submit_button("Cancel")
            else:
                save_clicked = False
                cancel_clicked = st.form_submit_button("Close")

    if cancel_clicked:
        session.cancel()
        selection.clear()
        return True

    if save_clicked:
        for key, (spec, value) in submitted.items():
            if spec.editable:
                session.set_value(key, value)
        if commit_edit(session, ctx.client, controller, selection):
            return True
        st.rerun()
    return False
