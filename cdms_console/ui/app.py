"""Streamlit entry point: sidebar navigation and page dispatch."""
from functools import partial
from pathlib import Path

import streamlit as st

# Allow running via "streamlit run cdms_console/ui/app.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from cdms_console.core.logging import configure_logging
from cdms_console.core.utils import get_config_value
from cdms_console.ui import state
from cdms_console.ui.context import AppContext, get_context
from cdms_console.ui.dashboard import render_dashboard_page
from cdms_console.ui.records_page import render_records_page
from cdms_console.ui.upload import render_upload_page

NAV_LABELS = {
    "dashboard": "📊 Dashboard",
    "chargebacks": "💳 Chargebacks",
    "delinquencies": "⏰ Delinquencies",
    "uploads": "📁 Uploads",
    "upload_report": "⬆️ Upload report",
}

# Route mapping: page name -> view function taking the app context
ROUTES = {
    "dashboard": render_dashboard_page,
    "chargebacks": partial(render_records_page, tag="chargebacks"),
    "delinquencies": partial(render_records_page, tag="delinquencies"),
    "uploads": partial(render_records_page, tag="uploads"),
    "upload_report": render_upload_page,
}


def _render_sidebar(ctx: AppContext) -> None:
    with st.sidebar:
        st.title("CDMS")
        st.caption(ctx.settings.api_base_url)
        for page in state.PAGES:
            is_current = st.session_state.page == page
            if st.button(
                NAV_LABELS[page],
                key=f"nav_{page}",
                use_container_width=True,
                type="primary" if is_current else "secondary",
            ):
                if not is_current:
                    st.session_state.page = page
                    st.rerun()
        st.divider()
        st.caption(f"Signed in as: {ctx.user_label}")
        if ctx.user_error:
            st.warning(f"Could not load user: {ctx.user_error}")


def _render_flash() -> None:
    message = state.pop_flash()
    if not message:
        return
    renderer = {"success": st.success, "warning": st.warning, "error": st.error}.get(
        message["level"], st.info
    )
    renderer(message["message"])


def dispatch(ctx: AppContext) -> None:
    """Dispatch to the view for the current page."""
    view = ROUTES.get(st.session_state.page, render_dashboard_page)
    view(ctx)


def main() -> None:
    """Launch the console."""

    st.set_page_config(page_title="CDMS Console", layout="wide", initial_sidebar_state="expanded")
    configure_logging(get_config_value("LOG_LEVEL") or None)
    state.init_session_state()
    ctx = get_context()

    _render_sidebar(ctx)
    _render_flash()
    dispatch(ctx)


if __name__ == "__main__":
    main()
