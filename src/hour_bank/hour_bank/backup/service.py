"""CSV backup of punch records, hour-bank balances and employees.

Every field is double-quoted (quotes doubled inside), so the files open the
same way in spreadsheets regardless of locale separators.
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..common.time_codec import format_minutes
from ..employees.repository import EmployeeRepository
from ..timesheet.calculator.base import HoursCalculator
from ..timesheet.calculator.standard_calculator import StandardHoursCalculator
from ..timesheet.repository import PunchRepository
from ..balance.repository import BalanceRepository

logger = logging.getLogger(__name__)

NO_RECORDS = "Nenhum registro encontrado"
NO_EMPLOYEES = "Nenhum funcionário encontrado"

RECORD_HEADER = (
    "Data",
    "Funcionário",
    "Categoria",
    "Entrada",
    "Saída Almoço",
    "Retorno Almoço",
    "Saída",
    "Horas Trabalhadas",
    "Tipo",
    "Observações",
)
BALANCE_HEADER = ("Funcionário", "Ano", "Mês", "Saldo (minutos)", "Saldo (horas)")
EMPLOYEE_HEADER = ("Nome", "Email", "Categoria", "Tipo", "Ativo")


@dataclass(frozen=True)
class BackupFile:
    filename: str
    content: str
    rows: int


def _stamp(today: Optional[date]) -> str:
    return (today or date.today()).isoformat()


def _to_csv(header: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    # Header line stays unquoted like the spreadsheet template.
    buf.write(",".join(header) + "\n")
    writer.writerows([["" if v is None else str(v) for v in row] for row in rows])
    return buf.getvalue()


class BackupService:
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

    def records_csv(self, *, today: Optional[date] = None) -> BackupFile:
        filename = f"backup_registros_{_stamp(today)}.csv"
        rows = list(self._punches.get_report_rows())
        if not rows:
            return BackupFile(filename=filename, content=NO_RECORDS, rows=0)

        lines = []
        for r in rows:
            rec = r.record
            worked = self._calculator.worked_minutes(rec)
            lines.append(
                (
                    rec.work_date.isoformat(),
                    r.employee_name or "N/A",
                    r.category_name or "N/A",
                    rec.clock_in,
                    rec.lunch_out,
                    rec.lunch_in,
                    rec.clock_out,
                    format_minutes(worked) if worked else "",
                    rec.day_type.value,
                    rec.notes,
                )
            )
        return BackupFile(filename=filename, content=_to_csv(RECORD_HEADER, lines), rows=len(lines))

    def balances_csv(self, *, today: Optional[date] = None) -> BackupFile:
        filename = f"backup_banco_horas_{_stamp(today)}.csv"
        rows = list(self._balances.get_report_rows())
        if not rows:
            return BackupFile(filename=filename, content=NO_RECORDS, rows=0)

        lines = [
            (
                r.employee_name or "N/A",
                r.entry.year,
                r.entry.month,
                r.entry.balance_minutes,
                format_minutes(r.entry.balance_minutes),
            )
            for r in rows
        ]
        return BackupFile(filename=filename, content=_to_csv(BALANCE_HEADER, lines), rows=len(lines))

    def employees_csv(self, *, today: Optional[date] = None) -> BackupFile:
        filename = f"backup_funcionarios_{_stamp(today)}.csv"
        rows = list(self._employees.list_employees())
        if not rows:
            return BackupFile(filename=filename, content=NO_EMPLOYEES, rows=0)

        lines = [
            (
                e.name,
                e.email,
                e.category_name or "N/A",
                e.role.value,
                "Sim" if e.is_active else "Não",
            )
            for e in rows
        ]
        return BackupFile(filename=filename, content=_to_csv(EMPLOYEE_HEADER, lines), rows=len(lines))

    def build(self, *, today: Optional[date] = None) -> list[BackupFile]:
        return [
            self.records_csv(today=today),
            self.balances_csv(today=today),
            self.employees_csv(today=today),
        ]

    def write_backup(self, out_dir: str | Path, *, today: Optional[date] = None) -> list[Path]:
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for f in self.build(today=today):
            path = out_dir / f.filename
            # utf-8-sig so spreadsheet apps pick up the accents
            path.write_text(f.content, encoding="utf-8-sig")
            written.append(path)
        logger.info("backup written", extra={"files": [p.name for p in written], "out_dir": str(out_dir)})
        return written
