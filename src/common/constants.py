"""Shared constants for statlib."""

import os
from pathlib import Path

# Project root = repository checkout
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Reference scenario used by tests and as a sanity check for callers
REFERENCE_DATA: tuple[float, ...] = (25.5, 29.4, 36.7, 43.1, 57.9, 88.3, 99.9, 100.0)

# Threshold applied by summarize() unless the caller overrides it
DEFAULT_THRESHOLD_MIN = 0.0

# Logging
LOG_LEVEL = os.environ.get("STATLIB_LOG_LEVEL", "INFO").upper()
