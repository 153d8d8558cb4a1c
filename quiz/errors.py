"""Quiz Errors - Taxonomia de erros do pipeline de quiz."""

from typing import Any


class QuizError(Exception):
    """Erro base do pipeline.

    Cada subclasse define o status HTTP e um ``kind`` legivel por maquina,
    usados pelo handler do servidor para montar ``{"message", "kind"}``.
    """

    status_code = 500
    kind = "internal_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "kind": self.kind}


class InvalidInputError(QuizError):
    """Campo de request ausente ou mal formado."""

    status_code = 400
    kind = "invalid_input"


class NotFoundError(QuizError):
    """Quiz ou gabarito referenciado nao existe."""

    status_code = 404
    kind = "not_found"


class ProviderUnavailableError(QuizError):
    """Provedor de IA nao configurado ou chamada falhou (recuperado via fallback)."""

    status_code = 503
    kind = "provider_unavailable"


class MalformedResponseError(QuizError):
    """Saida da IA falhou na validacao estrutural (recuperado via fallback)."""

    status_code = 502
    kind = "malformed_response"


class PersistenceError(QuizError):
    """Falha de leitura/escrita no store."""

    status_code = 500
    kind = "persistence_error"


class DuplicateUserError(QuizError):
    """Cadastro com email ja existente."""

    status_code = 409
    kind = "duplicate_user"


class AuthenticationError(QuizError):
    """Credenciais invalidas ou sessao ausente."""

    status_code = 401
    kind = "unauthorized"
