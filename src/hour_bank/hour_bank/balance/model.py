from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MonthlyTotals:
    """Sums over one employee/month.

    Holiday work is kept apart and never enters the worked/delay/overtime sums.
    """

    total_worked: int = 0
    total_delay: int = 0
    total_expected: int = 0
    total_tier1: int = 0
    total_tier2: int = 0
    holiday_worked_minutes: int = 0
    short_lunch_days: int = 0
    tier1_scaled: int = 0
    tier2_scaled: int = 0

    @property
    def overtime_scaled(self) -> int:
        return self.tier1_scaled + self.tier2_scaled


@dataclass(frozen=True)
class HourBankEntry:
    """Saldo mensal persistido, keyed by (employee_id, year, month)."""

    employee_id: int
    year: int
    # zero-based, as stored
    month: int
    balance_minutes: int


@dataclass(frozen=True)
class YearSummary:
    employee_id: int
    year: int
    # index = zero-based month; months without a saved balance are 0
    months: list[int]
    total: int


@dataclass(frozen=True)
class EmployeeYearRow:
    employee_id: int
    name: str
    months: list[int]
    total: int


@dataclass(frozen=True)
class CategoryYearGrid:
    category_id: int
    category_name: str
    rows: list[EmployeeYearRow] = field(default_factory=list)


@dataclass(frozen=True)
class BalanceReportRow:
    """Read-model para exportação."""

    entry: HourBankEntry
    employee_name: str
