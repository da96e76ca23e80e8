from __future__ import annotations

from dataclasses import dataclass

from .backup.service import BackupService
from .balance.mysql_balance_repository import MySQLBalanceRepository
from .balance.service import HourBankService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .timesheet.calculator.standard_calculator import StandardHoursCalculator
from .timesheet.mysql_punch_repository import MySQLPunchRepository
from .timesheet.service import TimesheetService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    employees_repo: MySQLEmployeeRepository
    punches_repo: MySQLPunchRepository
    balances_repo: MySQLBalanceRepository

    auth_service: AuthService
    employee_service: EmployeeService
    timesheet_service: TimesheetService
    hour_bank_service: HourBankService
    backup_service: BackupService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    users_repo = MySQLUserRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    punches_repo = MySQLPunchRepository(conn)
    balances_repo = MySQLBalanceRepository(conn)

    calculator = StandardHoursCalculator()

    auth_service = AuthService(users_repo, employees_repo)
    employee_service = EmployeeService(employees_repo)
    timesheet_service = TimesheetService(punches_repo, employees_repo, calculator=calculator)
    hour_bank_service = HourBankService(punches_repo, balances_repo, employees_repo, calculator=calculator)
    backup_service = BackupService(punches_repo, balances_repo, employees_repo, calculator=calculator)

    return Container(
        conn=conn,
        users_repo=users_repo,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        balances_repo=balances_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        timesheet_service=timesheet_service,
        hour_bank_service=hour_bank_service,
        backup_service=backup_service,
    )
