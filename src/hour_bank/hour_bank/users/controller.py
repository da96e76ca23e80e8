from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import login_required
from ..core.constants import DEFAULT_SESSION_DAYS
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

        session["user_id"] = s_user.user_id
        session["email"] = s_user.email
        session["name"] = s_user.display_name
        session["role"] = s_user.role.value
        session["employee_id"] = s_user.employee_id

        return jsonify(
            {
                "success": True,
                "user": {
                    "name": s_user.display_name,
                    "email": s_user.email,
                    "role": s_user.role.value,
                    "employee_id": s_user.employee_id,
                },
            }
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "name": session.get("name"),
                "email": session.get("email"),
                "role": session.get("role"),
                "employee_id": session.get("employee_id"),
            }
        )

    @app.route("/api/me/password", methods=["POST"], endpoint="change_password")
    @login_required
    def change_password():
        data = request.get_json(silent=True) or {}
        container.auth_service.change_password(
            user_id=int(session["user_id"]),
            current_password=data.get("current_password", ""),
            new_password=data.get("new_password", ""),
        )
        return jsonify({"success": True, "message": "Senha alterada com sucesso"})
