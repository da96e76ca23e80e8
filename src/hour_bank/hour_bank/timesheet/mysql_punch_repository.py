from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_hhmm
from .model import DailyPunchRecord, PunchReportRow
from .repository import PunchRepository

_COLUMNS = "pr.employee_id, pr.work_date, pr.clock_in, pr.lunch_out, pr.lunch_in, pr.clock_out, pr.day_type, pr.notes"


def _to_record(row: dict) -> DailyPunchRecord:
    return DailyPunchRecord(
        employee_id=int(row["employee_id"]),
        work_date=row["work_date"],
        clock_in=mysql_time_to_hhmm(row.get("clock_in")),
        lunch_out=mysql_time_to_hhmm(row.get("lunch_out")),
        lunch_in=mysql_time_to_hhmm(row.get("lunch_in")),
        clock_out=mysql_time_to_hhmm(row.get("clock_out")),
        day_type=DayType.parse(row.get("day_type")),
        notes=row.get("notes"),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_month_records(self, employee_id: int, year: int, month: int) -> Mapping[date, DailyPunchRecord]:
        start, end = month_bounds(year, month)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records pr
                WHERE pr.employee_id=%s AND pr.work_date BETWEEN %s AND %s
                """,
                (int(employee_id), start, end),
            )
            records = [_to_record(r) for r in fetchall(cur)]
            return {r.work_date: r for r in records}

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyPunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records pr
                WHERE pr.employee_id=%s AND pr.work_date=%s
                """,
                (int(employee_id), work_date),
            )
            row = fetchone(cur)
            if not row:
                return None
            return _to_record(row)

    def upsert_record(self, record: DailyPunchRecord) -> DailyPunchRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punch_records(employee_id, work_date, clock_in, lunch_out, lunch_in, clock_out, day_type, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    clock_in=VALUES(clock_in),
                    lunch_out=VALUES(lunch_out),
                    lunch_in=VALUES(lunch_in),
                    clock_out=VALUES(clock_out),
                    day_type=VALUES(day_type),
                    notes=VALUES(notes)
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.clock_in,
                    record.lunch_out,
                    record.lunch_in,
                    record.clock_out,
                    record.day_type.value,
                    record.notes,
                ),
            )
        return record

    def get_report_rows(self) -> Sequence[PunchReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, e.name AS employee_name, c.name AS category_name
                FROM punch_records pr
                JOIN employees e ON e.employee_id = pr.employee_id
                LEFT JOIN categories c ON c.category_id = e.category_id
                ORDER BY pr.work_date DESC, e.name ASC
                """
            )
            return [
                PunchReportRow(
                    record=_to_record(r),
                    employee_name=r["employee_name"],
                    category_name=r.get("category_name"),
                )
                for r in fetchall(cur)
            ]
