"""
Application Configuration

Settings are read from the environment after loading a local .env file.
The Streamlit entry point copies st.secrets into os.environ before calling
load_settings(), so the same keys work in both places.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_SECONDS = 30.0
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Keys bridged from st.secrets into the environment
SECRET_KEYS = (
    "GEMINI_API_KEY",
    "API_KEY",
    "GEMINI_MODEL",
    "GEMINI_BASE_URL",
    "INSIGHTS_TIMEOUT_SECONDS",
    "LOG_LEVEL",
)


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the dashboard and the insights client."""
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_BASE_URL
    insights_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"


def _read_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"INSIGHTS_TIMEOUT_SECONDS must be a number, got {raw!r}")
    if timeout <= 0:
        raise ValueError("INSIGHTS_TIMEOUT_SECONDS must be positive")
    return timeout


def load_settings(use_dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        use_dotenv: Load a .env file from the working directory first

    Returns:
        Settings instance

    Raises:
        ValueError: If INSIGHTS_TIMEOUT_SECONDS is not a positive number
    """
    if use_dotenv:
        load_dotenv()

    # API_KEY is the variable name the hosted build injected
    api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")

    return Settings(
        gemini_api_key=api_key or None,
        gemini_model=os.environ.get("GEMINI_MODEL", DEFAULT_MODEL),
        gemini_base_url=os.environ.get("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        insights_timeout=_read_timeout(os.environ.get("INSIGHTS_TIMEOUT_SECONDS")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Install the root log handler used by the app."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
