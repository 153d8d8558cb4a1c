"""Result Store - Colecao ``quiz_results`` (append-only) no AgentFS."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from ..models.records import QuizResult
from .base import KVCollection

logger = logging.getLogger(__name__)


class ResultStore(KVCollection):
    """Resultados de submissoes. Cada submissao gera um novo registro.

    Estrutura de chaves:
        - quiz_results:{quiz_id}:{result_id} -> QuizResult
        - quiz_results_by_user:{user_id}:{result_id} -> QuizResult (indice por dono)

    O indice por usuario so existe para resultados com dono; historico e
    dashboard leem apenas o prefixo do proprio usuario.
    """

    COLLECTION = "quiz_results"
    USER_INDEX = "quiz_results_by_user"

    def _user_key(self, user_id: str, result_id: str = "") -> str:
        return ":".join([self.USER_INDEX, user_id, result_id])

    async def save(
        self,
        quiz_id: str,
        user_answers: dict[str, Any],
        score: int,
        owner_id: str | None = None,
    ) -> QuizResult:
        """Grava um novo resultado (nunca sobrescreve)."""
        result = QuizResult(
            result_id=uuid.uuid4().hex,
            quiz_id=quiz_id,
            user_answers=dict(user_answers),
            score=score,
            user_id=owner_id or None,
        )
        document = result.to_dict()
        await self._set(self._key(quiz_id, result.result_id), document)
        if result.user_id:
            await self._set(self._user_key(result.user_id, result.result_id), document)
        logger.debug("Resultado salvo: %s/%s", quiz_id, result.result_id)
        return result

    async def list_for_quiz(self, quiz_id: str) -> list[QuizResult]:
        """Resultados de um quiz, mais recentes primeiro."""
        documents = await self._scan(self._key(quiz_id, ""))
        results = [QuizResult.from_dict(d) for d in documents]
        return sorted(results, key=lambda r: r.completed_at, reverse=True)

    async def latest_for_quiz(self, quiz_id: str) -> QuizResult | None:
        results = await self.list_for_quiz(quiz_id)
        return results[0] if results else None

    async def list_for_user(self, user_id: str, limit: int | None = None) -> list[QuizResult]:
        """Resultados do usuario, mais recentes primeiro, limitados a ``limit``."""
        documents = await self._scan(self._user_key(user_id))
        results = [QuizResult.from_dict(d) for d in documents]
        results.sort(key=lambda r: r.completed_at, reverse=True)
        return results[:limit] if limit is not None else results
