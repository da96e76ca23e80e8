"""Exemplo: usar a camada de serviços sem passar pelo Flask.

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from hour_bank.common.time_codec import format_minutes
from hour_bank.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = date.today()
    sheet = container.timesheet_service.month_sheet(employee_id=1, year=today.year, month=today.month - 1)
    for row in sheet.rows:
        ui = row.to_ui()
        print(ui["date"], ui["weekday"], ui["worked"], ui["delay"], ui["overtime"])
    print("saldo do mês:", format_minutes(sheet.balance_minutes))


if __name__ == "__main__":
    main()
