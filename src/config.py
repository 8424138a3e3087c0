"""
Configuration constants for the data.gov dataset search crawler
v1.0 - Initial creation, runtime knobs loaded from .env file
"""

import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment ("1", "true", "yes", "on")."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    """Read an integer from the environment; blank or non-numeric gives the default."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


# Target site (fixed)
DATA_GOV_URL = "https://www.data.gov/"
SEARCH_QUERY = "agriculture"

# Browser
# The crawler launches a visible Chromium by default; set HEADLESS=true on servers
HEADLESS = _env_flag("HEADLESS", False)
# Attach to an existing Chrome instead of launching one (e.g. http://localhost:9222)
CDP_URL = os.getenv("CDP_URL", "")

# Logging
LOG_DIR = os.getenv("LOG_DIR", "logs")

# Timeouts (in milliseconds)
DEFAULT_TIMEOUT = 30000
NAVIGATION_TIMEOUT = _env_int("NAVIGATION_TIMEOUT", 60000)

# Delay between keystrokes when typing the search query (ms)
TYPE_DELAY = 2
