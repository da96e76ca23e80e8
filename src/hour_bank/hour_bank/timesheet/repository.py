from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from .model import DailyPunchRecord, PunchReportRow


class PunchRepository(Protocol):
    """Interface de repositório para o cartão de ponto.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def fetch_month_records(self, employee_id: int, year: int, month: int) -> Mapping[date, DailyPunchRecord]:
        """Records of one month keyed by date; `month` is zero-based."""

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyPunchRecord]:
        raise NotImplementedError

    def upsert_record(self, record: DailyPunchRecord) -> DailyPunchRecord:
        """Idempotent replace keyed by (employee_id, work_date)."""

        raise NotImplementedError

    def get_report_rows(self) -> Sequence[PunchReportRow]:
        raise NotImplementedError
