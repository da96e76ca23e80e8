from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Category, Employee


class EmployeeRepository(Protocol):
    def list_categories(self) -> Sequence[Category]:
        raise NotImplementedError

    def get_category(self, category_id: int) -> Optional[Category]:
        raise NotImplementedError

    def get_category_by_name(self, name: str) -> Optional[Category]:
        raise NotImplementedError

    def create_category(self, name: str, *, sort_order: int = 0) -> int:
        raise NotImplementedError

    def list_employees(self) -> Sequence[Employee]:
        """All employees ordered by name, with category name and login role."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(self, *, name: str, category_id: int) -> int:
        raise NotImplementedError

    def update_category(self, employee_id: int, category_id: int) -> bool:
        raise NotImplementedError
