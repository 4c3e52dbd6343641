"""Configuration helpers for the route manager package."""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")
_ENV_LOADED = False


def load_env_file(path: Path) -> None:
    """Load environment variables from a file if it exists."""
    if not path.exists():
        return

    try:
        with path.open(encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                if not key or key in os.environ:
                    continue
                os.environ[key] = value.strip().strip('"').strip("'")
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)


def _ensure_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True
    load_env_file(Path(os.getenv("ROUTEMANAGER_ENV_FILE", DEFAULT_ENV_FILE)))


def get_config_value(key: str, default: str = "") -> str:
    """Get configuration value from Streamlit secrets or environment variables.

    Streamlit secrets win when the dashboard runs with a secrets file; the
    CLI falls back to the environment (optionally seeded from ``.env``).
    """
    try:
        import streamlit as st
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    _ensure_env()
    return os.getenv(key, default)
