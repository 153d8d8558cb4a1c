"""KV Collection - Base comum sobre o KV store do AgentFS."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agentfs_sdk import AgentFS

from ..errors import PersistenceError

logger = logging.getLogger(__name__)


class KVCollection:
    """Uma "colecao" de documentos JSON sob um prefixo de chave.

    Estrutura de chaves:
        - {COLLECTION}:{id}[:{sub_id}] -> documento (dict)

    Toda falha do AgentFS vira PersistenceError; nenhuma operacao e repetida.
    """

    COLLECTION = ""

    def __init__(self, agentfs: AgentFS):
        """Inicializa com instancia do AgentFS.

        Args:
            agentfs: Instancia configurada do AgentFS
        """
        self.agentfs = agentfs

    def _key(self, *parts: str) -> str:
        return ":".join([self.COLLECTION, *parts])

    async def _get(self, key: str) -> dict[str, Any] | None:
        try:
            return await self.agentfs.kv.get(key)
        except Exception as e:
            logger.exception("Falha lendo %s", key)
            raise PersistenceError(f"Failed to read from {self.COLLECTION}") from e

    async def _set(self, key: str, value: dict[str, Any]) -> None:
        try:
            await self.agentfs.kv.set(key, value)
        except Exception as e:
            logger.exception("Falha gravando %s", key)
            raise PersistenceError(f"Failed to write to {self.COLLECTION}") from e

    async def _scan(self, prefix: str) -> list[dict[str, Any]]:
        """Lista todos os documentos cujas chaves comecam com o prefixo."""
        try:
            entries = await self.agentfs.kv.list(prefix=prefix)
            documents = []
            for entry in entries:
                if isinstance(entry, dict):
                    key = entry.get("key", "")
                    value = entry.get("value")
                else:
                    key, value = str(entry), None
                if not key.startswith(prefix):
                    continue
                if value is None:
                    value = await self.agentfs.kv.get(key)
                if isinstance(value, dict):
                    documents.append(value)
            return documents
        except Exception as e:
            logger.exception("Falha listando %s", prefix)
            raise PersistenceError(f"Failed to list {self.COLLECTION}") from e
