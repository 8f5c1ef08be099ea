"""
Configuration Package with Profile Loading
Automatically loads the appropriate profile based on PIANO_ENV environment variable.

Usage:
    export PIANO_ENV=development  # or 'production', 'safe'
    piano

    Or in code:
    import config
    print(config.FPS_TARGET)
"""

import os
import sys
from typing import List, Tuple


_PENDING_LOGS: List[Tuple[str, str]] = []


def _queue_startup_log(level: str, message: str) -> None:
    logger = sys.modules.get("showlog")
    handler = getattr(logger, level, None) if logger else None
    if callable(handler):
        handler(message)
    else:
        _PENDING_LOGS.append((level, message))


def _flush_pending_logs() -> None:
    if not _PENDING_LOGS:
        return

    logger = sys.modules.get("showlog")
    if not logger:
        return

    remaining: List[Tuple[str, str]] = []
    for level, payload in _PENDING_LOGS:
        handler = getattr(logger, level, None)
        if callable(handler):
            handler(payload)
        else:
            remaining.append((level, payload))

    _PENDING_LOGS[:] = remaining


def _notify_showlog_ready() -> None:
    _flush_pending_logs()


def _log_debug(message: str) -> None:
    _queue_startup_log("debug", f"[CONFIG] {message}")


def _log_info(message: str) -> None:
    _queue_startup_log("info", f"[CONFIG] {message}")


# Import all base configuration modules first
from .logging import *
from .display import *
from .performance import *
from .audio import *
from .keyboard import *
from .styling import *
from .paths import *

# Detect environment profile
_env = os.getenv("PIANO_ENV", "production").lower()

# Load profile-specific overrides
if _env == "development" or _env == "dev":
    _log_info("Loading DEVELOPMENT profile")
    from .profiles.dev import *
elif _env == "safe":
    _log_info("Loading SAFE MODE profile")
    from .profiles.safe import *
else:
    _log_info("Loading PRODUCTION profile")
    from .profiles.prod import *

# Export current profile name
ACTIVE_PROFILE = _env if _env in ("development", "dev", "safe") else "production"

_log_info(f"Active profile: {ACTIVE_PROFILE}")
_log_debug(f"FPS_TARGET={FPS_TARGET}, PRELOAD_SAMPLES={PRELOAD_SAMPLES}, DEBUG={DEBUG}")


def _apply_derived_dimensions(ns):
    """Size the window from the key geometry unless a profile pinned it."""
    white_w = int(ns.get("WHITE_KEY_WIDTH", 56))
    white_h = int(ns.get("WHITE_KEY_HEIGHT", 390))
    white_n = int(ns.get("WHITE_KEY_NUM", 21))

    if not ns.get("WINDOW_WIDTH"):
        ns["WINDOW_WIDTH"] = white_w * white_n
    if not ns.get("WINDOW_HEIGHT"):
        ns["WINDOW_HEIGHT"] = white_h

    try:
        fps = float(ns.get("FPS_TARGET", 60))
    except (TypeError, ValueError):
        fps = 60.0
    if fps <= 0:
        fps = 60.0
    ns["FRAME_INTERVAL_MS"] = 1000.0 / fps


_apply_derived_dimensions(globals())
