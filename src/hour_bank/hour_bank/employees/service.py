from __future__ import annotations

from dataclasses import dataclass, field

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_CATEGORIES
from ..core.exceptions import ValidationError
from .model import Category, Employee
from .repository import EmployeeRepository


@dataclass(frozen=True)
class CategoryGroup:
    category: Category
    employees: list[Employee] = field(default_factory=list)


class EmployeeService:
    """Use case: manage categories and employees (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_categories(self) -> list[Category]:
        return list(self._employees.list_categories())

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_employees())

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Funcionário não encontrado")
        return employee

    def grouped_by_category(self) -> list[CategoryGroup]:
        employees = self.list_employees()
        return [
            CategoryGroup(
                category=c,
                employees=[e for e in employees if e.category_id == c.category_id],
            )
            for c in self.list_categories()
        ]

    def create_category(self, name: str) -> int:
        name = require_non_empty(name, "Nome da categoria")
        if self._employees.get_category_by_name(name):
            raise ValidationError("Categoria já existe")
        position = len(self._employees.list_categories())
        return self._employees.create_category(name, sort_order=position)

    def ensure_default_categories(self) -> list[str]:
        """Create the standard categories that are missing; returns the ones created."""

        created: list[str] = []
        for name in DEFAULT_CATEGORIES:
            if self._employees.get_category_by_name(name):
                continue
            self.create_category(name)
            created.append(name)
        return created

    def create_employee(self, *, name: str, category_id: int) -> int:
        name = require_non_empty(name, "Nome").upper()
        if not self._employees.get_category(int(category_id)):
            raise ValidationError("Categoria não encontrada")
        return self._employees.create_employee(name=name, category_id=int(category_id))

    def transfer(self, *, employee_id: int, category_id: int) -> None:
        self.get_employee(employee_id)
        if not self._employees.get_category(int(category_id)):
            raise ValidationError("Categoria não encontrada")
        if not self._employees.update_category(int(employee_id), int(category_id)):
            raise ValidationError("Falha ao transferir funcionário")
