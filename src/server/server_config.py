"""Configuration for the server."""

from __future__ import annotations

import os

DEFAULT_MAX_INPUT_CHARS = 100_000
DEFAULT_LOG_LEVEL = "INFO"

MAX_INPUT_CHARS = int(os.getenv("MDLITE_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
LOG_LEVEL = os.getenv("MDLITE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
