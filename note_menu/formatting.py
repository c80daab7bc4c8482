from __future__ import annotations

from datetime import datetime


def format_identifier(dt: datetime) -> str:
    """Return the display form of a note timestamp (YYYY-MM-DD HH:MM)."""
    return dt.strftime("%Y-%m-%d %H:%M")
