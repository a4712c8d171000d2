"""Configuration for autoselect."""

import os
from dataclasses import dataclass
from typing import Optional

# Milliseconds to wait for results after pressing enter
MAX_WAIT_MS = 350.0

# First real suggestion; index 0 is the default fallback entry
TARGET_INDEX = 1


@dataclass
class AutoselectConfig:
    """Configuration for the selection controller and the demo host."""

    # Bounded Enter wait, divided by the length of the entered text
    max_wait_ms: float = MAX_WAIT_MS

    # Bulk-load every stored keyword into the classifier cache at startup
    prewarm: bool = True

    # SQLite keyword store; None keeps keywords in memory
    shortcut_db: Optional[str] = None

    # Demo host: delay between appended search results
    search_delay_ms: float = 40.0

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in ("1", "true", "yes")


def load_config() -> AutoselectConfig:
    """Load configuration from ``AUTOSELECT_*`` environment variables.

    Call ``load_dotenv()`` first to pick up a ``.env`` file.
    """
    return AutoselectConfig(
        max_wait_ms=float(os.getenv("AUTOSELECT_MAX_WAIT_MS", MAX_WAIT_MS)),
        prewarm=_env_bool("AUTOSELECT_PREWARM", True),
        shortcut_db=os.getenv("AUTOSELECT_SHORTCUT_DB") or None,
        search_delay_ms=float(os.getenv("AUTOSELECT_SEARCH_DELAY_MS", 40.0)),
        log_level=os.getenv("AUTOSELECT_LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("AUTOSELECT_LOG_FILE") or None,
    )
