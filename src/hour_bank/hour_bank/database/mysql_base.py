from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from ..common.time_codec import time_to_text
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One short-lived connection per repository call; commit on success."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception as exc:
        logger.warning("rolling back transaction", extra={"error": type(exc).__name__})
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME column value as a wall-clock `time`.

    The connector hands TIME back as `timedelta` (C extension), `time` or
    "HH:MM[:SS]" text. Punches never cross midnight, so a timedelta is taken
    modulo one day.
    """

    if value is None or isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        minutes, seconds = divmod(int(value.total_seconds()) % 86400, 60)
        hours, minutes = divmod(minutes, 60)
        return time(hours, minutes, seconds)

    if isinstance(value, str):
        parts = [int(p) for p in value.strip().split(":")]
        if not 2 <= len(parts) <= 3:
            raise ValueError(f"Invalid TIME value: {value!r}")
        return time(*parts)

    raise TypeError(f"Unsupported TIME value type: {type(value)!r}")


def mysql_time_to_hhmm(value: Any) -> Optional[str]:
    """TIME column -> "HH:MM" text used by the timesheet (None stays None)."""

    normalized = normalize_mysql_time(value)
    if normalized is None:
        return None
    return time_to_text(normalized)
