from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, int_arg
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/categories", endpoint="categories")
    @admin_required
    def categories():
        groups = container.employee_service.grouped_by_category()
        return jsonify(
            [
                {
                    "category_id": g.category.category_id,
                    "name": g.category.name,
                    "employees": [{"employee_id": e.employee_id, "name": e.name} for e in g.employees],
                }
                for g in groups
            ]
        )

    @app.route("/api/categories", methods=["POST"], endpoint="create_category")
    @admin_required
    def create_category():
        data = request.get_json(silent=True) or {}
        category_id = container.employee_service.create_category(data.get("name", ""))
        return jsonify({"success": True, "category_id": category_id}), 201

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        data = request.get_json(silent=True) or {}
        employee_id = container.employee_service.create_employee(
            name=data.get("name", ""),
            category_id=int_arg(data, "category_id"),
        )
        return jsonify({"success": True, "employee_id": employee_id, "message": "Funcionário cadastrado com sucesso!"}), 201

    @app.route("/api/employees/<int:employee_id>/transfer", methods=["POST"], endpoint="transfer_employee")
    @admin_required
    def transfer_employee(employee_id: int):
        data = request.get_json(silent=True) or {}
        container.employee_service.transfer(employee_id=employee_id, category_id=int_arg(data, "category_id"))
        return jsonify({"success": True, "message": "Funcionário transferido com sucesso!"})
