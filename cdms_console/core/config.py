"""Runtime settings for talking to the CDMS API."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cdms_console.core.utils import get_config_value, load_env_file

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 30.0
DEFAULT_ENV_FILE = Path("secrets/cdms.env")
_ENV_LOADED = False


@dataclass(frozen=True)
class Settings:
    """Connection settings shared by the dashboard and the CLI."""

    api_base_url: str = DEFAULT_BASE_URL
    api_token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @property
    def authenticated(self) -> bool:
        return bool(self.api_token)


def _ensure_env_file() -> None:
    """Populate API env vars from the local secrets file once per process."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True

    env_path = Path(os.getenv("CDMS_ENV_FILE", DEFAULT_ENV_FILE)).expanduser()
    loaded = load_env_file(env_path)
    if loaded:
        logger.info("Loaded %s from %s", ", ".join(sorted(loaded)), env_path)


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"CDMS_API_TIMEOUT must be a number of seconds, got {raw!r}") from exc
    if timeout <= 0:
        raise ValueError(f"CDMS_API_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings() -> Settings:
    """Resolve settings from Streamlit secrets, the environment, and the env file."""

    _ensure_env_file()
    base_url = get_config_value("CDMS_API_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
    token = get_config_value("CDMS_API_TOKEN", "").strip() or None
    timeout = _parse_timeout(get_config_value("CDMS_API_TIMEOUT", str(DEFAULT_TIMEOUT)))
    log_level = get_config_value("LOG_LEVEL", "INFO").upper()

    if not token:
        logger.info("No CDMS_API_TOKEN configured; requests will be sent unauthenticated")

    return Settings(
        api_base_url=base_url.rstrip("/"),
        api_token=token,
        timeout=timeout,
        log_level=log_level,
    )
