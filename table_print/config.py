"""
table-print shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys also honoured from os.environ when the .env file does not set them.
_ENV_KEYS = (
    "TABLE_PRINT_MAX_FIELD_LENGTH",
    "TABLE_PRINT_SAMPLE_SECONDS",
    "TABLE_PRINT_LOG",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _ENV_KEYS:
        if key not in env and key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"

SEPARATOR = "  | "
NO_DATA = "No data."
ELLIPSIS = "..."
DEFAULT_MAX_FIELD_LENGTH = 30
DEFAULT_SAMPLE_TIME_BUDGET = 2.0

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

MAX_FIELD_LENGTH = max(1, _env_int("TABLE_PRINT_MAX_FIELD_LENGTH", DEFAULT_MAX_FIELD_LENGTH))
SAMPLE_TIME_BUDGET = max(0.0, _env_float("TABLE_PRINT_SAMPLE_SECONDS", DEFAULT_SAMPLE_TIME_BUDGET))
LOG_ENABLED = _env_bool("TABLE_PRINT_LOG", False)
