"""Configuration management."""

import os


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Sink Configuration
TEXTAREA_ID = os.getenv("PAGELOG_TEXTAREA_ID", "")
CONSOLE_ENABLED = _parse_bool(os.getenv("PAGELOG_CONSOLE_ENABLED", "true"))
TEXTAREA_ENABLED = _parse_bool(os.getenv("PAGELOG_TEXTAREA_ENABLED", "true"))

# Textarea Configuration (validated in main)
TEXTAREA_ROWS = os.getenv("PAGELOG_TEXTAREA_ROWS", "20")
TEXTAREA_COLS = os.getenv("PAGELOG_TEXTAREA_COLS", "80")
TEXTAREA_ATTRIBUTES = os.getenv("PAGELOG_TEXTAREA_ATTRIBUTES", "")

# Console Configuration: "stdout" or "logging"
CONSOLE_BACKEND = os.getenv("PAGELOG_CONSOLE", "stdout").strip().lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Derived Configuration
DEFAULT_TEXTAREA_ID = TEXTAREA_ID or "textlog"
