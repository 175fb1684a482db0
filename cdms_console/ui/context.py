"""Explicit per-session context handed to every page."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import streamlit as st

from cdms_console.api.client import ApiClient
from cdms_console.core.config import Settings, load_settings
from cdms_console.core.errors import ApiError

logger = logging.getLogger(__name__)

ME_PATH = "/api/me"


@dataclass
class AppContext:
    """Settings, API client, and signed-in user for one browser session."""

    settings: Settings
    client: ApiClient
    user: Optional[Dict[str, Any]] = None
    user_error: Optional[str] = None

    @property
    def user_label(self) -> str:
        if not self.user:
            return "Not signed in" if not self.settings.authenticated else "Unknown user"
        name = f"{self.user.get('first_name') or ''} {self.user.get('last_name') or ''}".strip()
        return name or str(self.user.get("email") or "Signed in")


def build_context(settings: Settings, client: Optional[ApiClient] = None) -> AppContext:
    """Create the context and look up the current user when a token is set."""

    context = AppContext(settings=settings, client=client or ApiClient.from_settings(settings))
    if settings.authenticated:
        try:
            user = context.client.get(ME_PATH)
            context.user = user if isinstance(user, dict) else None
        except ApiError as exc:
            logger.warning("Could not load current user: %s", exc)
            context.user_error = str(exc)
    return context


def get_context() -> AppContext:
    """Return the session's context, building it on first use."""

    if "app_context" not in st.session_state:
        st.session_state.app_context = build_context(load_settings())
    return st.session_state.app_context
