from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} inválido")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} deve ter no mínimo {min_len} caracteres")
    return value


def require_month(month: int) -> int:
    """Month index is zero-based (0 = janeiro)."""
    try:
        month = int(month)
    except (TypeError, ValueError):
        raise ValidationError("Mês inválido") from None
    if not 0 <= month <= 11:
        raise ValidationError("Mês inválido")
    return month


def require_clock_time(value: str, field_name: str) -> str:
    """Wall-clock "HH:MM" as typed in the timesheet grid."""
    value = (value or "").strip()
    if not _HHMM.match(value):
        raise ValidationError(f"{field_name}: horário inválido (use HH:MM)")
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{minutes}"
