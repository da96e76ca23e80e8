from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from hour_bank.balance.model import BalanceReportRow, HourBankEntry
from hour_bank.core.enums import Role
from hour_bank.employees.model import Category, Employee
from hour_bank.timesheet.model import DailyPunchRecord, PunchReportRow
from hour_bank.users.model import User


class InMemoryEmployees:
    def __init__(self):
        self.categories: dict[int, Category] = {}
        self.employees: dict[int, Employee] = {}
        self._next_category = 1
        self._next_employee = 1

    def list_categories(self):
        return sorted(self.categories.values(), key=lambda c: (c.sort_order, c.name))

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.categories.get(int(category_id))

    def get_category_by_name(self, name: str) -> Optional[Category]:
        return next((c for c in self.categories.values() if c.name == name), None)

    def create_category(self, name: str, *, sort_order: int = 0) -> int:
        cid = self._next_category
        self._next_category += 1
        self.categories[cid] = Category(category_id=cid, name=name, sort_order=sort_order)
        return cid

    def list_employees(self):
        return sorted(self.employees.values(), key=lambda e: e.name)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(int(employee_id))

    def create_employee(self, *, name: str, category_id: int) -> int:
        eid = self._next_employee
        self._next_employee += 1
        category = self.categories.get(int(category_id))
        self.employees[eid] = Employee(
            employee_id=eid,
            name=name,
            category_id=int(category_id),
            category_name=category.name if category else None,
        )
        return eid

    def update_category(self, employee_id: int, category_id: int) -> bool:
        employee = self.employees.get(int(employee_id))
        if not employee:
            return False
        category = self.categories.get(int(category_id))
        self.employees[employee.employee_id] = replace(
            employee,
            category_id=int(category_id),
            category_name=category.name if category else None,
        )
        return True


class InMemoryPunches:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.records: dict[tuple[int, date], DailyPunchRecord] = {}
        self.upserts = 0

    def fetch_month_records(self, employee_id: int, year: int, month: int):
        return {
            r.work_date: r
            for (eid, d), r in self.records.items()
            if eid == employee_id and d.year == year and d.month == month + 1
        }

    def get_for_employee_and_date(self, employee_id: int, work_date: date):
        return self.records.get((employee_id, work_date))

    def upsert_record(self, record: DailyPunchRecord) -> DailyPunchRecord:
        self.upserts += 1
        self.records[(record.employee_id, record.work_date)] = record
        return record

    def get_report_rows(self):
        rows = []
        for r in sorted(self.records.values(), key=lambda r: r.work_date, reverse=True):
            employee = self._employees.get_by_id(r.employee_id)
            rows.append(
                PunchReportRow(
                    record=r,
                    employee_name=employee.name if employee else "",
                    category_name=employee.category_name if employee else None,
                )
            )
        return rows


class InMemoryBalances:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.entries: dict[tuple[int, int, int], HourBankEntry] = {}

    def upsert_balance(self, *, employee_id: int, year: int, month: int, balance_minutes: int) -> HourBankEntry:
        entry = HourBankEntry(employee_id=employee_id, year=year, month=month, balance_minutes=balance_minutes)
        self.entries[(employee_id, year, month)] = entry
        return entry

    def list_for_employee_year(self, employee_id: int, year: int):
        return self.list_for_employee_range(employee_id, year, year)

    def list_for_employee_range(self, employee_id: int, start_year: int, end_year: int):
        return [
            e
            for (eid, y, _), e in sorted(self.entries.items())
            if eid == employee_id and start_year <= y <= end_year
        ]

    def list_for_year(self, year: int):
        return [e for (_, y, _), e in sorted(self.entries.items()) if y == year]

    def get_report_rows(self):
        return [
            BalanceReportRow(entry=e, employee_name=self._employees.get_by_id(e.employee_id).name)
            for e in self.entries.values()
        ]


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}

    def add(self, user: User) -> User:
        self.users[user.user_id] = user
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        user = self.users.get(int(user_id))
        if not user:
            return False
        self.users[user.user_id] = replace(user, password_hash=password_hash)
        return True


@pytest.fixture
def employees_repo():
    repo = InMemoryEmployees()
    store = repo.create_category("Loja", sort_order=0)
    repo.create_category("Galpão", sort_order=1)
    repo.create_employee(name="MARIA SILVA", category_id=store)
    return repo


@pytest.fixture
def punches_repo(employees_repo):
    return InMemoryPunches(employees_repo)


@pytest.fixture
def balances_repo(employees_repo):
    return InMemoryBalances(employees_repo)


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def make_user(users_repo):
    from werkzeug.security import generate_password_hash

    def _make(user_id: int, email: str, password: str, role: Role = Role.EMPLOYEE, employee_id=None, is_active=True):
        return users_repo.add(
            User(
                user_id=user_id,
                email=email,
                password_hash=generate_password_hash(password),
                role=role,
                employee_id=employee_id,
                is_active=is_active,
            )
        )

    return _make
