from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.time_codec import format_minutes, format_signed
from ..common.web import admin_required, int_arg
from ..container import Container
from ..timesheet.calendar import MONTH_NAMES, month_label


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hour-bank/save", methods=["POST"], endpoint="hour_bank_save")
    @admin_required
    def hour_bank_save():
        data = request.get_json(silent=True) or {}
        entry = container.hour_bank_service.save_month_balance(
            int_arg(data, "employee_id"),
            int_arg(data, "year"),
            int_arg(data, "month"),
        )
        return jsonify(
            {
                "success": True,
                "message": f"Saldo salvo: {format_minutes(entry.balance_minutes)} em {month_label(entry.year, entry.month)}",
                "balance_minutes": entry.balance_minutes,
                "balance": format_signed(entry.balance_minutes),
            }
        )

    @app.route("/api/hour-bank/year", endpoint="hour_bank_year")
    @admin_required
    def hour_bank_year():
        year = int_arg(request.args, "year", date.today().year)
        summary = container.hour_bank_service.year_summary(int_arg(request.args, "employee_id"), year)
        return jsonify(
            {
                "employee_id": summary.employee_id,
                "year": summary.year,
                "months": [
                    {"month": idx, "label": MONTH_NAMES[idx], "balance": format_minutes(m), "balance_minutes": m}
                    for idx, m in enumerate(summary.months)
                ],
                "total": format_minutes(summary.total),
                "total_minutes": summary.total,
            }
        )

    @app.route("/api/hour-bank/period", endpoint="hour_bank_period")
    @admin_required
    def hour_bank_period():
        args = request.args
        start = (int_arg(args, "start_year"), int_arg(args, "start_month"))
        end = (int_arg(args, "end_year"), int_arg(args, "end_month"))
        total = container.hour_bank_service.period_total(int_arg(args, "employee_id"), start, end)
        return jsonify(
            {
                "start": month_label(*start),
                "end": month_label(*end),
                "total": format_minutes(total),
                "total_minutes": total,
            }
        )

    @app.route("/api/hour-bank/all", endpoint="hour_bank_all")
    @admin_required
    def hour_bank_all():
        year = int_arg(request.args, "year", date.today().year)
        category_id = request.args.get("category_id")
        grids = container.hour_bank_service.all_employees_year(
            year,
            category_id=int_arg(request.args, "category_id") if category_id else None,
        )
        return jsonify(
            {
                "year": year,
                "categories": [
                    {
                        "category_id": g.category_id,
                        "category": g.category_name,
                        "employees": [
                            {
                                "employee_id": r.employee_id,
                                "name": r.name,
                                "months": [format_minutes(m) for m in r.months],
                                "total": format_minutes(r.total),
                                "total_minutes": r.total,
                            }
                            for r in g.rows
                        ],
                    }
                    for g in grids
                ],
            }
        )
