from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import BalanceReportRow, HourBankEntry
from .repository import BalanceRepository


def _to_entry(row: dict) -> HourBankEntry:
    return HourBankEntry(
        employee_id=int(row["employee_id"]),
        year=int(row["year"]),
        month=int(row["month"]),
        balance_minutes=int(row.get("balance_minutes") or 0),
    )


class MySQLBalanceRepository(BalanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_balance(self, *, employee_id: int, year: int, month: int, balance_minutes: int) -> HourBankEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO hour_bank(employee_id, year, month, balance_minutes)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE balance_minutes=VALUES(balance_minutes)
                """,
                (int(employee_id), int(year), int(month), int(balance_minutes)),
            )
        return HourBankEntry(
            employee_id=int(employee_id),
            year=int(year),
            month=int(month),
            balance_minutes=int(balance_minutes),
        )

    def list_for_employee_year(self, employee_id: int, year: int) -> Sequence[HourBankEntry]:
        return self.list_for_employee_range(employee_id, year, year)

    def list_for_employee_range(self, employee_id: int, start_year: int, end_year: int) -> Sequence[HourBankEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, year, month, balance_minutes
                FROM hour_bank
                WHERE employee_id=%s AND year BETWEEN %s AND %s
                ORDER BY year, month
                """,
                (int(employee_id), int(start_year), int(end_year)),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_for_year(self, year: int) -> Sequence[HourBankEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, year, month, balance_minutes
                FROM hour_bank
                WHERE year=%s
                ORDER BY employee_id, month
                """,
                (int(year),),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_report_rows(self) -> Sequence[BalanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT hb.employee_id, hb.year, hb.month, hb.balance_minutes, e.name AS employee_name
                FROM hour_bank hb
                JOIN employees e ON e.employee_id = hb.employee_id
                ORDER BY hb.year DESC, hb.month DESC, e.name ASC
                """
            )
            return [BalanceReportRow(entry=_to_entry(r), employee_name=r["employee_name"]) for r in fetchall(cur)]
