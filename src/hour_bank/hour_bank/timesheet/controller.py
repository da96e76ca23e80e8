from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_iso_date
from ..common.time_codec import format_minutes, format_signed
from ..common.web import admin_required, int_arg, login_required
from ..core.enums import PunchField, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from .calendar import month_label


def _own_employee_id() -> int:
    employee_id = session.get("employee_id")
    if not employee_id:
        raise AuthorizationError("Usuário sem funcionário vinculado")
    return int(employee_id)


def _totals_ui(totals) -> dict:
    return {
        "worked": format_minutes(totals.total_worked),
        "delay": format_minutes(totals.total_delay),
        "expected": format_minutes(totals.total_expected),
        "tier1": format_minutes(totals.total_tier1),
        "tier2": format_minutes(totals.total_tier2),
        "tier1_scaled": format_minutes(totals.tier1_scaled),
        "tier2_scaled": format_minutes(totals.tier2_scaled),
        "overtime_scaled": format_minutes(totals.overtime_scaled),
        "holiday_worked": format_minutes(totals.holiday_worked_minutes),
        "short_lunch_days": totals.short_lunch_days,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheet", endpoint="timesheet_month")
    @login_required
    def timesheet_month():
        today = date.today()
        year = int_arg(request.args, "year", today.year)
        month = int_arg(request.args, "month", today.month - 1)

        if session.get("role") == Role.ADMIN.value:
            employee_id = int_arg(request.args, "employee_id")
        else:
            employee_id = _own_employee_id()

        sheet = container.timesheet_service.month_sheet(employee_id, year, month)
        return jsonify(
            {
                "employee_id": sheet.employee_id,
                "year": sheet.year,
                "month": sheet.month,
                "label": month_label(sheet.year, sheet.month),
                "days": [row.to_ui() for row in sheet.rows],
                "totals": _totals_ui(sheet.totals),
                "balance": format_signed(sheet.balance_minutes),
                "balance_minutes": sheet.balance_minutes,
            }
        )

    @app.route("/api/timesheet/field", methods=["POST"], endpoint="timesheet_update_field")
    @admin_required
    def timesheet_update_field():
        data = request.get_json(silent=True) or {}
        try:
            work_date = parse_iso_date(str(data.get("date", "")))
        except ValueError:
            raise ValidationError("Data inválida") from None

        record = container.timesheet_service.update_field(
            employee_id=int_arg(data, "employee_id"),
            work_date=work_date,
            field=str(data.get("field", "")),
            value=data.get("value"),
        )
        return jsonify({"success": True, "record": _record_ui(record)})

    @app.route("/api/punch", methods=["POST"], endpoint="register_punch")
    @login_required
    def register_punch():
        data = request.get_json(silent=True) or {}
        try:
            punch = PunchField(data.get("punch", ""))
        except ValueError:
            raise ValidationError("Tipo de marcação inválido") from None

        record = container.timesheet_service.register_punch(employee_id=_own_employee_id(), punch=punch)
        return jsonify(
            {
                "success": True,
                "message": f"Marcação registrada: {record.punch(punch)}",
                "record": _record_ui(record),
            }
        )

    @app.route("/api/punch/today", endpoint="today_punches")
    @login_required
    def today_punches():
        record = container.timesheet_service.today_record(_own_employee_id(), date.today())
        return jsonify(_record_ui(record))


def _record_ui(record) -> dict:
    return {
        "employee_id": record.employee_id,
        "date": record.work_date.isoformat(),
        "clock_in": record.clock_in or "--:--",
        "lunch_out": record.lunch_out or "--:--",
        "lunch_in": record.lunch_in or "--:--",
        "clock_out": record.clock_out or "--:--",
        "day_type": record.day_type.value,
        "notes": record.notes or "",
    }
