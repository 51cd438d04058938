"""Rendering configuration settings.

Values are read from the environment once at import time. An optional
``.env`` file at the project root is loaded first.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# =============================================================================
# Rendering Configuration
# =============================================================================

# Error message style for the 4xx/5xx helpers:
# "bracketed" -> "[missing field x]", "plain" -> "missing field x"
ERROR_MESSAGE_STYLE = os.getenv("ERROR_MESSAGE_STYLE", "bracketed")
ERROR_MESSAGE_STYLES = {"bracketed", "plain"}

NOT_ACCEPTABLE_PREFIX = "Accept header must be set to one of "

# =============================================================================
# API Configuration
# =============================================================================

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")


def validate() -> None:
    """Validate configuration settings."""
    if ERROR_MESSAGE_STYLE not in ERROR_MESSAGE_STYLES:
        raise ValueError(
            f"ERROR_MESSAGE_STYLE must be one of {sorted(ERROR_MESSAGE_STYLES)}, "
            f"got {ERROR_MESSAGE_STYLE!r}"
        )
    if API_PORT < 0:
        raise ValueError("API_PORT must not be negative")
