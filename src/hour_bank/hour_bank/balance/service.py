from __future__ import annotations

import logging
from typing import Optional

from ..common.time_codec import format_minutes
from ..common.validators import require_month
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..timesheet.calculator.base import HoursCalculator
from ..timesheet.calculator.standard_calculator import StandardHoursCalculator
from ..timesheet.calendar import generate_month_days
from ..timesheet.repository import PunchRepository
from .aggregator import aggregate_month
from .model import CategoryYearGrid, EmployeeYearRow, HourBankEntry, MonthlyTotals, YearSummary
from .repository import BalanceRepository
from .rule import compute_balance

logger = logging.getLogger(__name__)

MonthRef = tuple[int, int]


def _months_of_year(entries, year: int) -> list[int]:
    months = [0] * 12
    for e in entries:
        if e.year == year:
            months[e.month] = e.balance_minutes
    return months


class HourBankService:
    """Use case: compute, persist and report the monthly hour-bank balance."""

    def __init__(
        self,
        punches: PunchRepository,
        balances: BalanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[HoursCalculator] = None,
    ):
        self._punches = punches
        self._balances = balances
        self._employees = employees
        self._calculator = calculator or StandardHoursCalculator()

    def month_totals(self, employee_id: int, year: int, month: int) -> MonthlyTotals:
        month = require_month(month)
        records = self._punches.fetch_month_records(int(employee_id), int(year), month)
        return aggregate_month(
            generate_month_days(int(year), month),
            records,
            employee_id=int(employee_id),
            calculator=self._calculator,
        )

    def save_month_balance(self, employee_id: int, year: int, month: int) -> HourBankEntry:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Funcionário não encontrado")

        totals = self.month_totals(employee.employee_id, year, month)
        balance = compute_balance(totals)
        entry = self._balances.upsert_balance(
            employee_id=employee.employee_id,
            year=int(year),
            month=int(month),
            balance_minutes=balance,
        )
        logger.info(
            "hour bank balance saved",
            extra={
                "employee_id": employee.employee_id,
                "year": int(year),
                "month": int(month),
                "balance_minutes": balance,
                "balance": format_minutes(balance),
            },
        )
        return entry

    def year_summary(self, employee_id: int, year: int) -> YearSummary:
        entries = self._balances.list_for_employee_year(int(employee_id), int(year))
        months = _months_of_year(entries, int(year))
        return YearSummary(employee_id=int(employee_id), year=int(year), months=months, total=sum(months))

    def period_total(self, employee_id: int, start: MonthRef, end: MonthRef) -> int:
        """Sum of saved balances from start to end (inclusive), as (year, month) pairs."""

        start = (int(start[0]), require_month(start[1]))
        end = (int(end[0]), require_month(end[1]))
        if start > end:
            raise ValidationError("Período inválido: início depois do fim")

        entries = self._balances.list_for_employee_range(int(employee_id), start[0], end[0])
        return sum(e.balance_minutes for e in entries if start <= (e.year, e.month) <= end)

    def all_employees_year(self, year: int, *, category_id: Optional[int] = None) -> list[CategoryYearGrid]:
        by_employee: dict[int, list] = {}
        for e in self._balances.list_for_year(int(year)):
            by_employee.setdefault(e.employee_id, []).append(e)

        employees = list(self._employees.list_employees())
        grids: list[CategoryYearGrid] = []
        for category in self._employees.list_categories():
            if category_id is not None and category.category_id != int(category_id):
                continue
            members = [emp for emp in employees if emp.category_id == category.category_id]
            if not members:
                continue

            rows = []
            for emp in members:
                months = _months_of_year(by_employee.get(emp.employee_id, []), int(year))
                rows.append(EmployeeYearRow(employee_id=emp.employee_id, name=emp.name, months=months, total=sum(months)))
            grids.append(CategoryYearGrid(category_id=category.category_id, category_name=category.name, rows=rows))
        return grids
