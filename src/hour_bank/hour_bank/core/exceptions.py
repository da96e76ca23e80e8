from __future__ import annotations

class DomainError(Exception):
    """Base exception for hour-bank rule violations.

    `status_code` is what the JSON layer answers with.
    """

    status_code = 400
    default_message = "Operação inválida"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ValidationError(DomainError):
    """Bad input: month out of range, malformed HH:MM, punch out of sequence..."""

    default_message = "Dados inválidos"


class AuthenticationError(DomainError):
    """Wrong e-mail/password, inactive login or wrong current password."""

    status_code = 401
    default_message = "E-mail ou senha inválidos"


class AuthorizationError(DomainError):
    """Logged in, but not allowed (e.g. a login with no employee linked)."""

    status_code = 403
    default_message = "Acesso negado"
