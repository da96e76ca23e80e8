import pytest
from werkzeug.security import check_password_hash

from hour_bank.core.enums import Role
from hour_bank.core.exceptions import AuthenticationError, ValidationError
from hour_bank.users.model import User
from hour_bank.users.service import AuthService


@pytest.fixture
def service(users_repo, employees_repo):
    return AuthService(users_repo, employees_repo)


def test_authenticate_employee_uses_employee_name(service, make_user):
    make_user(1, "maria@example.com", "segredo1", employee_id=1)

    s_user = service.authenticate("  Maria@Example.com ", "segredo1")

    assert s_user.user_id == 1
    assert s_user.role == Role.EMPLOYEE
    assert s_user.employee_id == 1
    assert s_user.display_name == "MARIA SILVA"


def test_authenticate_admin_falls_back_to_email(service, make_user):
    make_user(2, "admin@example.com", "admin123", role=Role.ADMIN)

    s_user = service.authenticate("admin@example.com", "admin123")

    assert s_user.role == Role.ADMIN
    assert s_user.display_name == "admin@example.com"


@pytest.mark.parametrize(
    "email, password",
    [
        ("maria@example.com", "errada"),
        ("ninguem@example.com", "segredo1"),
        ("", ""),
    ],
)
def test_authenticate_rejects_bad_credentials(service, make_user, email, password):
    make_user(1, "maria@example.com", "segredo1", employee_id=1)

    with pytest.raises(AuthenticationError, match="E-mail ou senha inválidos"):
        service.authenticate(email, password)


def test_authenticate_rejects_inactive_user(service, make_user):
    make_user(1, "maria@example.com", "segredo1", employee_id=1, is_active=False)

    with pytest.raises(AuthenticationError):
        service.authenticate("maria@example.com", "segredo1")


def test_authenticate_with_placeholder_hash(service, users_repo):
    users_repo.add(User(user_id=3, email="x@example.com", password_hash="CHANGE_ME", role=Role.ADMIN, employee_id=None))

    with pytest.raises(AuthenticationError):
        service.authenticate("x@example.com", "CHANGE_ME")


def test_change_password(service, make_user, users_repo):
    make_user(1, "maria@example.com", "segredo1", employee_id=1)

    service.change_password(user_id=1, current_password="segredo1", new_password="novasenha")

    assert check_password_hash(users_repo.get_by_id(1).password_hash, "novasenha")
    assert service.authenticate("maria@example.com", "novasenha").user_id == 1


def test_change_password_checks_current_and_length(service, make_user):
    make_user(1, "maria@example.com", "segredo1", employee_id=1)

    with pytest.raises(AuthenticationError):
        service.change_password(user_id=1, current_password="errada", new_password="novasenha")
    with pytest.raises(ValidationError, match="mínimo 6"):
        service.change_password(user_id=1, current_password="segredo1", new_password="12345")
