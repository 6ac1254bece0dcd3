"""Append-only debug log shared by the order state holder."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from cupcake.config import DEBUG_LOG_PATH, DEBUG_LOG_PATH_ENV


def resolve_debug_log_path() -> Path | None:
    """
    Resolve where debug lines go.

    Resolution order:
    1. CUPCAKE_DEBUG_LOG_PATH (if set; an empty value disables logging)
    2. DEBUG_LOG_PATH
    """
    override = os.environ.get(DEBUG_LOG_PATH_ENV)
    if override is not None:
        override = override.strip()
        return Path(override) if override else None
    return Path(DEBUG_LOG_PATH)


def log_debug(message: str) -> None:
    """Append ``<utc timestamp> <message>`` to the debug log."""
    path = resolve_debug_log_path()
    if path is None:
        return
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with order updates.
        return
