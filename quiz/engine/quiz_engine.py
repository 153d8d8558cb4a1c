"""Quiz Engine - Orquestra geracao e persistencia de quizzes."""

from __future__ import annotations

import logging
import uuid

from ..errors import NotFoundError
from ..models.enums import GeneratedBy
from ..models.schemas import Quiz
from ..storage import QuizStore
from .generator import QuizGenerator

logger = logging.getLogger(__name__)


class QuizEngine:
    """Topico -> QuestionSet -> Quiz persistido.

    O quiz_id (UUID4) e gerado aqui, antes do save. Falhas do store
    propagam como PersistenceError e derrubam a requisicao.

    Example:
        >>> engine = QuizEngine(QuizStore(agentfs))
        >>> quiz, generated_by = await engine.create_quiz("react hooks", owner_id=None)
    """

    def __init__(self, store: QuizStore, generator: QuizGenerator | None = None):
        self.store = store
        self.generator = generator or QuizGenerator()

    async def create_quiz(
        self, topic: str, owner_id: str | None = None
    ) -> tuple[Quiz, GeneratedBy]:
        """Gera e persiste um quiz novo.

        Returns:
            Tuple de (quiz sem gabarito, estrategia usada)
        """
        question_set, generated_by = await self.generator.generate(topic)

        quiz = Quiz(
            quiz_id=str(uuid.uuid4()),
            topic=topic.strip(),
            questions=question_set.questions,
        )
        await self.store.save(quiz, question_set.answers, owner_id=owner_id)

        logger.info(
            "[Quiz %s] criado (%s, owner=%s)", quiz.quiz_id, generated_by.value, owner_id
        )
        return quiz, generated_by

    async def get_quiz(self, quiz_id: str) -> Quiz:
        """Quiz sem gabarito.

        Raises:
            NotFoundError: Quiz inexistente
        """
        quiz = await self.store.get_quiz(quiz_id)
        if quiz is None:
            raise NotFoundError("Quiz not found", details={"quiz_id": quiz_id})
        return quiz
