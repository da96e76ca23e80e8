from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from ..employees.repository import EmployeeRepository
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    email: str
    role: Role
    employee_id: Optional[int]
    display_name: str


class AuthService:
    """Use case: authenticate user (login) and change password."""

    def __init__(self, users: UserRepository, employees: Optional[EmployeeRepository] = None):
        self._users = users
        self._employees = employees

    def _display_name(self, employee_id: Optional[int], fallback: str) -> str:
        if employee_id and self._employees:
            employee = self._employees.get_by_id(employee_id)
            if employee:
                return employee.name
        return fallback

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = (email or "").strip().lower()
        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            raise AuthenticationError("E-mail ou senha inválidos")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("E-mail ou senha inválidos")

        return SessionUser(
            user_id=user.user_id,
            email=user.email,
            role=user.role,
            employee_id=user.employee_id,
            display_name=self._display_name(user.employee_id, user.email),
        )

    def change_password(self, *, user_id: int, current_password: str, new_password: str) -> None:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise ValidationError("Usuário não encontrado")

        if not check_password_hash(user.password_hash, current_password or ""):
            raise AuthenticationError("Senha atual incorreta")

        require_non_empty(new_password, "Nova senha")
        require_min_length(new_password, "Nova senha", MIN_PASSWORD_LENGTH)

        if not self._users.update_password_hash(user.user_id, generate_password_hash(new_password)):
            raise ValidationError("Falha ao alterar a senha")
