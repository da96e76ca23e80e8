from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Category:
    """Categoria (setor) used to group employees: Loja, Galpão, Desligados..."""

    category_id: int
    name: str
    sort_order: int = 0


@dataclass(frozen=True)
class Employee:
    """Entidade de domínio: Funcionário.

    Note: plain data object (no DB access code).
    """

    employee_id: int
    name: str
    category_id: Optional[int]
    category_name: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True
    # role of the linked login, if any
    role: Role = Role.EMPLOYEE
