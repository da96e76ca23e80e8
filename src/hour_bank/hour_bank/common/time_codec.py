"""Conversion between "HH:MM" text and signed minute counts.

Zero is displayed as "-" rather than "00:00"; callers compare against that
literal, so it must stay.
"""

from __future__ import annotations

import logging
from datetime import time
from typing import Union

from ..core.constants import EMPTY_TIME

logger = logging.getLogger(__name__)

TimeInput = Union[str, time, None]


def parse_time(value: TimeInput) -> int:
    """Parse "H:MM" / "-H:MM" into signed minutes.

    None, "" and "-" give 0. Malformed text also gives 0 (never raises).
    """

    if value is None:
        return 0
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    text = str(value).strip()
    if not text or text == EMPTY_TIME:
        return 0

    negative = text.startswith("-")
    clean = text.replace("-", "", 1) if negative else text

    parts = clean.split(":")
    try:
        hours = int(parts[0])
        minutes = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    except ValueError:
        logger.debug("malformed time input %r, treating as 0", value)
        return 0

    total = hours * 60 + minutes
    return -total if negative else total


def format_minutes(minutes: int) -> str:
    """Format signed minutes as [-]HH:MM; 0 becomes "-"."""

    if minutes == 0:
        return EMPTY_TIME
    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(int(minutes)), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def format_signed(minutes: int) -> str:
    """Like format_minutes, with a "+" in front of positive balances."""

    text = format_minutes(minutes)
    if minutes > 0:
        return f"+{text}"
    return text


def time_to_text(value: time) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"
