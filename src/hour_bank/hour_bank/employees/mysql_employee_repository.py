from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Category, Employee
from .repository import EmployeeRepository

_EMPLOYEE_SELECT = """
    SELECT e.employee_id, e.name, e.email, e.category_id, e.is_active,
           c.name AS category_name, u.role
    FROM employees e
    LEFT JOIN categories c ON c.category_id = e.category_id
    LEFT JOIN users u ON u.employee_id = e.employee_id
"""


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        name=row["name"],
        category_id=row.get("category_id"),
        category_name=row.get("category_name"),
        email=row.get("email"),
        is_active=bool(row.get("is_active", True)),
        role=Role(row["role"]) if row.get("role") else Role.EMPLOYEE,
    )


def _to_category(row: dict) -> Category:
    return Category(
        category_id=int(row["category_id"]),
        name=row["name"],
        sort_order=int(row.get("sort_order") or 0),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_categories(self) -> Sequence[Category]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT category_id, name, sort_order FROM categories ORDER BY sort_order, name")
            return [_to_category(r) for r in fetchall(cur)]

    def get_category(self, category_id: int) -> Optional[Category]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT category_id, name, sort_order FROM categories WHERE category_id=%s",
                (int(category_id),),
            )
            row = fetchone(cur)
            return _to_category(row) if row else None

    def get_category_by_name(self, name: str) -> Optional[Category]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT category_id, name, sort_order FROM categories WHERE name=%s", (name,))
            row = fetchone(cur)
            return _to_category(row) if row else None

    def create_category(self, name: str, *, sort_order: int = 0) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO categories(name, sort_order) VALUES(%s,%s)", (name, int(sort_order)))
            return int(cur.lastrowid)

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_EMPLOYEE_SELECT + " ORDER BY e.name")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_EMPLOYEE_SELECT + " WHERE e.employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create_employee(self, *, name: str, category_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(name, category_id, is_active) VALUES(%s,%s,1)",
                (name, int(category_id)),
            )
            return int(cur.lastrowid)

    def update_category(self, employee_id: int, category_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET category_id=%s WHERE employee_id=%s",
                (int(category_id), int(employee_id)),
            )
            return cur.rowcount > 0
