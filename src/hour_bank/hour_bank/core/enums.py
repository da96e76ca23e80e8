from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Perfil do usuário usado para controle de acesso."""

    ADMIN = "admin"
    EMPLOYEE = "funcionario"


class DayType(str, Enum):
    """Classificação do dia no cartão de ponto.

    Values are the tags stored in the database (`tipo_dia`).
    """

    NORMAL = "normal"
    HOLIDAY = "feriado"
    DAY_OFF = "folga"
    ABSENCE = "falta"

    @classmethod
    def parse(cls, value: str | None) -> "DayType":
        if not value:
            return cls.NORMAL
        return cls(value)


class PunchField(str, Enum):
    """The four daily clock events, in the order they happen."""

    CLOCK_IN = "clock_in"
    LUNCH_OUT = "lunch_out"
    LUNCH_IN = "lunch_in"
    CLOCK_OUT = "clock_out"
