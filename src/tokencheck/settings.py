"""Global configuration and constants for contrast validation."""

from __future__ import annotations

import os
from typing import Final

# Suggestion search sweep; factor runs 1..SEARCH_MAX_FACTOR in SEARCH_STEP increments
SEARCH_STEP: Final = 5
SEARCH_MAX_FACTOR: Final = 100
CHANNEL_STEP: Final = 2.55  # 255 / 100, one factor unit per channel
MAX_SUGGESTIONS: Final = 4

DEFAULT_TARGET_RATIO: Final = 4.5

TOKEN_FILE_ENV: Final = "TOKENCHECK_TOKEN_FILE"
LOG_LEVEL: Final = os.environ.get("TOKENCHECK_LOG_LEVEL", "WARNING")
