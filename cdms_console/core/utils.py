"""Configuration lookups shared by the Streamlit app and the CLI."""
import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: str = "") -> str:
    """Return ``key`` from ``.streamlit/secrets.toml`` or the process environment.

    The dashboard reads its API token and base URL from Streamlit secrets when
    deployed; the CLI and local runs have no secrets file and use env vars.
    """
    try:
        import streamlit as st
        from streamlit.errors import StreamlitAPIException
    except ImportError:
        return os.getenv(key, default)

    try:
        if key in st.secrets:
            return str(st.secrets[key])
    except (FileNotFoundError, KeyError, StreamlitAPIException):
        logger.debug("No Streamlit secrets available for %s", key)

    return os.getenv(key, default)


def load_env_file(path: Path) -> List[str]:
    """Export ``KEY=value`` lines from ``path`` and return the keys that were set.

    Blank lines, ``#`` comments and lines without ``=`` are skipped. Keys
    already in the environment are left alone, so a shell export always wins
    over the file. A missing or unreadable file sets nothing.
    """
    loaded: List[str] = []
    if not path.is_file():
        return loaded

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.warning("Could not read env file %s: %s", path, exc)
        return loaded

    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key or key in os.environ:
            continue
        os.environ[key] = value.strip().strip("\"'")
        loaded.append(key)
    return loaded
