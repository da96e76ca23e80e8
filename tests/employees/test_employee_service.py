import pytest

from hour_bank.core.exceptions import ValidationError
from hour_bank.employees.service import EmployeeService


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo)


def test_create_employee_uppercases_and_trims(service, employees_repo):
    employee_id = service.create_employee(name="  ana paula ", category_id=1)

    employee = employees_repo.get_by_id(employee_id)
    assert employee.name == "ANA PAULA"
    assert employee.category_name == "Loja"
    assert employee.is_active


def test_create_employee_requires_name_and_category(service):
    with pytest.raises(ValidationError):
        service.create_employee(name="   ", category_id=1)
    with pytest.raises(ValidationError):
        service.create_employee(name="ANA", category_id=99)


def test_grouped_by_category_keeps_category_order(service):
    service.create_employee(name="joao", category_id=2)

    groups = service.grouped_by_category()

    assert [g.category.name for g in groups] == ["Loja", "Galpão"]
    assert [e.name for e in groups[0].employees] == ["MARIA SILVA"]
    assert [e.name for e in groups[1].employees] == ["JOAO"]


def test_transfer_moves_employee(service, employees_repo):
    service.transfer(employee_id=1, category_id=2)
    assert employees_repo.get_by_id(1).category_name == "Galpão"


def test_transfer_validates_both_sides(service):
    with pytest.raises(ValidationError):
        service.transfer(employee_id=99, category_id=2)
    with pytest.raises(ValidationError):
        service.transfer(employee_id=1, category_id=99)


def test_create_category_rejects_duplicates(service):
    with pytest.raises(ValidationError, match="já existe"):
        service.create_category("Loja")

    new_id = service.create_category("Escritório")
    assert service.list_categories()[-1].category_id == new_id


def test_ensure_default_categories_only_adds_missing(service):
    assert service.ensure_default_categories() == ["Desligados"]
    assert service.ensure_default_categories() == []
    assert [c.name for c in service.list_categories()] == ["Loja", "Galpão", "Desligados"]
