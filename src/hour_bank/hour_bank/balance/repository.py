from __future__ import annotations

from typing import Protocol, Sequence

from .model import BalanceReportRow, HourBankEntry


class BalanceRepository(Protocol):
    def upsert_balance(self, *, employee_id: int, year: int, month: int, balance_minutes: int) -> HourBankEntry:
        """Idempotent replace keyed by (employee_id, year, month); month is zero-based."""

        raise NotImplementedError

    def list_for_employee_year(self, employee_id: int, year: int) -> Sequence[HourBankEntry]:
        raise NotImplementedError

    def list_for_employee_range(self, employee_id: int, start_year: int, end_year: int) -> Sequence[HourBankEntry]:
        raise NotImplementedError

    def list_for_year(self, year: int) -> Sequence[HourBankEntry]:
        raise NotImplementedError

    def get_report_rows(self) -> Sequence[BalanceReportRow]:
        raise NotImplementedError
