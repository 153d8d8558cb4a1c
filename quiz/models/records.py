"""Quiz Records - Documentos persistidos nas colecoes do store."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .schemas import Question, Quiz, UserPublic


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_dt(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class QuizRecord:
    """Quiz + gabarito + dono. Gravado uma unica vez (write-once).

    Attributes:
        quiz_id: ID unico do quiz
        topic: Topico informado pelo usuario
        questions: Questoes na ordem de exibicao
        correct_answers: Gabarito (question id -> alternativa correta)
        user_id: Dono do quiz (None = anonimo)
        created_at: Momento da criacao (UTC)
    """

    quiz_id: str
    topic: str
    questions: list[Question]
    correct_answers: dict[str, str]
    user_id: str | None = None
    created_at: datetime = field(default_factory=utcnow)

    @property
    def total_questions(self) -> int:
        return len(self.correct_answers)

    def to_quiz(self) -> Quiz:
        """Projecao sem gabarito, segura para o cliente."""
        return Quiz(
            quiz_id=self.quiz_id,
            topic=self.topic,
            questions=[q.model_copy(deep=True) for q in self.questions],
        )

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario JSON-compatible (para persistencia)."""
        return {
            "quizId": self.quiz_id,
            "topic": self.topic,
            "questions": [q.model_dump() for q in self.questions],
            "correctAnswers": dict(self.correct_answers),
            "userId": self.user_id,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuizRecord":
        """Cria instancia a partir de dicionario."""
        return cls(
            quiz_id=data["quizId"],
            topic=data.get("topic", ""),
            questions=[Question(**q) for q in data.get("questions", [])],
            correct_answers=dict(data.get("correctAnswers") or {}),
            user_id=data.get("userId"),
            created_at=_parse_dt(data["createdAt"]) if data.get("createdAt") else utcnow(),
        )


@dataclass
class QuizResult:
    """Uma submissao corrigida. Append-only: cada submissao gera um registro."""

    result_id: str
    quiz_id: str
    user_answers: dict[str, Any]
    score: int
    user_id: str | None = None
    completed_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "resultId": self.result_id,
            "quizId": self.quiz_id,
            "userId": self.user_id,
            "userAnswers": dict(self.user_answers),
            "score": self.score,
            "completedAt": self.completed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuizResult":
        return cls(
            result_id=data["resultId"],
            quiz_id=data["quizId"],
            user_id=data.get("userId"),
            user_answers=dict(data.get("userAnswers") or {}),
            score=int(data.get("score", 0)),
            completed_at=_parse_dt(data["completedAt"]) if data.get("completedAt") else utcnow(),
        )


@dataclass
class UserRecord:
    """Credencial de usuario (hash de senha nunca sai do store)."""

    user_id: str
    email: str
    name: str
    password_hash: str
    created_at: datetime = field(default_factory=utcnow)

    def to_public(self) -> UserPublic:
        return UserPublic(user_id=self.user_id, email=self.email, name=self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "name": self.name,
            "password": self.password_hash,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserRecord":
        return cls(
            user_id=data["userId"],
            email=data["email"],
            name=data.get("name", ""),
            password_hash=data["password"],
            created_at=_parse_dt(data["createdAt"]) if data.get("createdAt") else utcnow(),
        )
