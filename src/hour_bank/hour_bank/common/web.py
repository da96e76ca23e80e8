from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import DomainError, ValidationError


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Faça login para continuar", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Faça login para continuar", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("Acesso restrito ao administrador", 403)
        return view(*args, **kwargs)

    return wrapper


def register_error_handlers(app) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return fail(str(e), e.status_code)


def int_arg(args, name: str, default=None) -> int:
    raw = args.get(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Parâmetro inválido: {name}") from None
