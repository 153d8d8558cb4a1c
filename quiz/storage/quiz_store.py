"""Quiz Store - Colecao ``quizzes`` (quiz + gabarito) no AgentFS."""

from __future__ import annotations

import logging

from ..errors import PersistenceError
from ..models.records import QuizRecord
from ..models.schemas import Quiz
from .base import KVCollection

logger = logging.getLogger(__name__)


class QuizStore(KVCollection):
    """Persistencia write-once de quizzes.

    Estrutura de chaves:
        - quizzes:{quiz_id} -> QuizRecord (questoes + gabarito + dono)

    ``get_quiz`` devolve apenas as questoes; o gabarito so sai por
    ``get_answers`` e e consumido exclusivamente pela correcao.

    Example:
        >>> store = QuizStore(agentfs)
        >>> await store.save(quiz, answers, owner_id="user_1")
        >>> quiz = await store.get_quiz(quiz.quiz_id)
    """

    COLLECTION = "quizzes"

    def _quiz_key(self, quiz_id: str) -> str:
        return self._key(quiz_id)

    async def save(
        self, quiz: Quiz, answers: dict[str, str], owner_id: str | None = None
    ) -> str:
        """Persiste o QuizRecord.

        Args:
            quiz: Quiz com quiz_id ja gerado pelo chamador
            answers: Gabarito (mesmo conjunto de IDs das questoes)
            owner_id: Usuario dono (None = anonimo)

        Returns:
            quiz_id gravado

        Raises:
            PersistenceError: Falha de escrita ou quiz_id ja existente
        """
        key = self._quiz_key(quiz.quiz_id)
        if await self._get(key) is not None:
            raise PersistenceError(f"Quiz {quiz.quiz_id} already exists")

        record = QuizRecord(
            quiz_id=quiz.quiz_id,
            topic=quiz.topic,
            questions=list(quiz.questions),
            correct_answers=dict(answers),
            user_id=owner_id or None,
        )
        await self._set(key, record.to_dict())
        logger.info("Quiz salvo: %s (owner=%s)", quiz.quiz_id, owner_id)
        return quiz.quiz_id

    async def get_record(self, quiz_id: str) -> QuizRecord | None:
        """Carrega o documento completo (uso interno dos engines)."""
        data = await self._get(self._quiz_key(quiz_id))
        if not data:
            logger.debug("Quiz nao encontrado: %s", quiz_id)
            return None
        return QuizRecord.from_dict(data)

    async def get_quiz(self, quiz_id: str) -> Quiz | None:
        """Questoes do quiz, sem gabarito. None se nao existir."""
        record = await self.get_record(quiz_id)
        return record.to_quiz() if record else None

    async def get_answers(self, quiz_id: str) -> dict[str, str] | None:
        """Gabarito do quiz. None se nao existir."""
        record = await self.get_record(quiz_id)
        if record is None:
            return None
        return dict(record.correct_answers)
