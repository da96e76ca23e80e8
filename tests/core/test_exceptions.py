from hour_bank.core.exceptions import AuthenticationError, AuthorizationError, DomainError, ValidationError


def test_status_codes():
    assert ValidationError("x").status_code == 400
    assert AuthenticationError().status_code == 401
    assert AuthorizationError().status_code == 403
    assert issubclass(ValidationError, DomainError)


def test_default_and_custom_messages():
    assert str(AuthenticationError()) == "E-mail ou senha inválidos"
    assert str(AuthorizationError()) == "Acesso negado"
    assert str(ValidationError("Mês inválido")) == "Mês inválido"
