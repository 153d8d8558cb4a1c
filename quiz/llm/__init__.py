"""Quiz LLM - Criacao de clientes do provedor de IA."""

from .factory import LLMClientFactory

__all__ = ["LLMClientFactory"]
