from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Entidade de domínio: login account.

    Note: plain data object (no DB access code). Employees log in with the
    account linked through `employee_id`; admins have none.
    """

    user_id: int
    email: str
    password_hash: str
    role: Role
    employee_id: Optional[int]
    is_active: bool = True
