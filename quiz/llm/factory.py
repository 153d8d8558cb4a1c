"""LLM Client Factory - Abstracao para criacao do cliente Anthropic."""

import os

from anthropic import AsyncAnthropic

import config

from ..errors import ProviderUnavailableError


class LLMClientFactory:
    """Factory para criar o cliente LLM usado na geracao de quiz.

    Centraliza:
    - Verificacao de credencial (lida a cada chamada, nao no import)
    - Modelo, temperatura e limite de tokens fixos
    - Timeout do transporte alinhado ao timeout do gerador

    Example:
        >>> factory = LLMClientFactory()
        >>> if factory.is_configured():
        ...     client = factory.create_client()
    """

    API_KEY_ENV = "ANTHROPIC_API_KEY"

    def __init__(
        self,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ):
        self.model = model or config.QUIZ_MODEL
        self.temperature = config.QUIZ_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or config.QUIZ_MAX_TOKENS

    def api_key(self) -> str | None:
        return os.getenv(self.API_KEY_ENV) or None

    def is_configured(self) -> bool:
        """True se existe credencial do provedor no ambiente."""
        return self.api_key() is not None

    def create_client(self) -> AsyncAnthropic:
        """Cria AsyncAnthropic configurado.

        Raises:
            ProviderUnavailableError: Se a credencial nao estiver configurada
        """
        api_key = self.api_key()
        if not api_key:
            raise ProviderUnavailableError("AI provider API key is not configured")

        # Sem retries: uma tentativa e depois fallback
        return AsyncAnthropic(
            api_key=api_key,
            timeout=config.AI_TIMEOUT_SECONDS,
            max_retries=0,
        )
