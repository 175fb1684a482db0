"""Session-state helpers for record pages.

Each record type gets its own controller, selection, and edit session, all
kept in ``st.session_state`` so they survive Streamlit reruns.
"""
from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from cdms_console.core.models import SelectionState
from cdms_console.records.controller import RecordListController
from cdms_console.records.registry import get_record_type
from cdms_console.review.workflow import EditSession
from cdms_console.ui.context import AppContext

PAGES = ("dashboard", "chargebacks", "delinquencies", "uploads", "upload_report")


def defaults() -> Dict[str, object]:
    """Return default values for navigation state."""
    return {
        "page": "dashboard",
        "active_record_type": None,
        "controllers": {},
        "selections": {},
        "edit_sessions": {},
        "flash": None,
    }


def init_session_state() -> None:
    for key, value in defaults().items():
        if key not in st.session_state:
            st.session_state[key] = value
    if st.session_state.page not in PAGES:
        st.session_state.page = "dashboard"


def controller_for(ctx: AppContext, tag: str) -> RecordListController:
    controllers = st.session_state.controllers
    if tag not in controllers:
        controllers[tag] = RecordListController(ctx.client, get_record_type(tag))
    return controllers[tag]


def selection_for(tag: str) -> SelectionState:
    selections = st.session_state.selections
    if tag not in selections:
        selections[tag] = SelectionState()
    return selections[tag]


def edit_session_for(tag: str, selection: SelectionState) -> Optional[EditSession]:
    """Return the edit session for the selected record, starting a fresh one on a new selection."""

    sessions = st.session_state.edit_sessions
    if not selection.drawer_open or selection.record is None:
        sessions.pop(tag, None)
        return None
    current = sessions.get(tag)
    if current is None or current.record_id != selection.record.get("id"):
        current = EditSession(get_record_type(tag), selection.record)
        sessions[tag] = current
    return current


def switch_record_type(ctx: AppContext, tag: str) -> bool:
    """Reset pagination to page 1 when the visible record type changes.

    Returns True when a switch happened.
    """
    if st.session_state.active_record_type == tag:
        return False
    st.session_state.active_record_type = tag
    selection_for(tag).clear()
    st.session_state.edit_sessions.pop(tag, None)
    controller_for(ctx, tag).reset()
    return True


def mark_records_stale() -> None:
    """Force every record list to re-fetch on its next render (e.g. after an upload)."""

    for controller in st.session_state.controllers.values():
        controller.loaded = False


def flash(message: str, level: str = "success") -> None:
    """Queue a message to show after the next rerun."""
    st.session_state.flash = {"message": message, "level": level}


def pop_flash() -> Optional[Dict[str, str]]:
    message = st.session_state.get("flash")
    st.session_state.flash = None
    return message
