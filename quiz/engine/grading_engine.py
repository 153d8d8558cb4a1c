"""Quiz Grading Engine - Correcao de submissoes e feedback por questao."""

from __future__ import annotations

import logging
from typing import Any

from ..errors import InvalidInputError, NotFoundError, PersistenceError
from ..models.schemas import NOT_ANSWERED, FeedbackItem, GradeQuizResponse
from ..storage import QuizStore, ResultStore

logger = logging.getLogger(__name__)


class QuizGradingEngine:
    """Motor de correcao.

    Compara a submissao com o gabarito por igualdade exata de texto, na
    ordem das chaves do gabarito. Questao sem resposta vira "Not answered"
    e conta como errada. Toda correcao bem-sucedida grava um novo
    QuizResult, mesmo para submissoes repetidas.

    Example:
        >>> engine = QuizGradingEngine(quiz_store, result_store)
        >>> result = await engine.grade("quiz-1", {"1": "Props"})
        >>> result.correct, result.total
        (1, 5)
    """

    def __init__(self, quiz_store: QuizStore, result_store: ResultStore):
        self.quiz_store = quiz_store
        self.result_store = result_store

    @staticmethod
    def validate_submission(quiz_id: Any, answers: Any) -> dict[str, str | None]:
        """Rejeita quiz_id ausente e respostas que nao sao um mapa id -> texto.

        Raises:
            InvalidInputError: Entrada ausente ou mal formada
        """
        if not isinstance(quiz_id, str) or not quiz_id.strip():
            raise InvalidInputError("Quiz ID is required")

        if not isinstance(answers, dict):
            raise InvalidInputError("Answers are required")

        for key, value in answers.items():
            if not isinstance(key, str) or not (value is None or isinstance(value, str)):
                raise InvalidInputError(
                    "Answers must map question ids to option text",
                    details={"question_id": str(key)},
                )
        return answers

    @staticmethod
    def build_feedback(
        answer_key: dict[str, str], user_answers: dict[str, Any]
    ) -> list[FeedbackItem]:
        """Feedback na ordem do gabarito."""
        return [
            FeedbackItem(
                id=int(question_id),
                your_answer=user_answers.get(question_id) or NOT_ANSWERED,
                correct_answer=correct,
            )
            for question_id, correct in answer_key.items()
        ]

    @classmethod
    def score(
        cls, answer_key: dict[str, str], user_answers: dict[str, Any]
    ) -> GradeQuizResponse:
        """Calcula acertos e feedback. Puro: sem I/O.

        Args:
            answer_key: Gabarito (question id -> alternativa correta)
            user_answers: Submissao (question id -> alternativa escolhida)

        Returns:
            GradeQuizResponse com correct, total e feedback
        """
        correct = sum(
            1
            for question_id, expected in answer_key.items()
            if user_answers.get(question_id) == expected
        )
        return GradeQuizResponse(
            correct=correct,
            total=len(answer_key),
            feedback=cls.build_feedback(answer_key, user_answers),
        )

    async def grade(
        self, quiz_id: str, answers: Any, owner_id: str | None = None
    ) -> GradeQuizResponse:
        """Corrige a submissao e persiste o resultado.

        Raises:
            InvalidInputError: quiz_id ou answers invalidos (antes de qualquer leitura)
            NotFoundError: Quiz/gabarito inexistente (nada e gravado)
            PersistenceError: Falha no store
        """
        answers = self.validate_submission(quiz_id, answers)

        answer_key = await self.quiz_store.get_answers(quiz_id)
        if answer_key is None:
            raise NotFoundError("Quiz not found", details={"quiz_id": quiz_id})

        result = self.score(answer_key, answers)

        await self.result_store.save(quiz_id, answers, result.correct, owner_id=owner_id)
        logger.info(
            "Quiz %s corrigido: %d/%d (owner=%s)", quiz_id, result.correct, result.total, owner_id
        )
        return result

    async def latest_feedback(self, quiz_id: str) -> list[FeedbackItem]:
        """Feedback da submissao mais recente do quiz.

        Lista vazia se nao ha resultado, quiz ou se a leitura falhar.
        """
        try:
            latest = await self.result_store.latest_for_quiz(quiz_id)
            if latest is None:
                return []
            answer_key = await self.quiz_store.get_answers(quiz_id)
        except PersistenceError as e:
            logger.warning("Falha ao montar feedback de %s: %s", quiz_id, e.message)
            return []

        if answer_key is None:
            return []
        return self.build_feedback(answer_key, latest.user_answers)
