"""Quiz Schemas - Modelos Pydantic de dominio e request/response.

Todos os modelos serializam em camelCase (``quizId``, ``yourAnswer``...),
o formato consumido pelo frontend, mas aceitam os nomes Python na criacao.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import GeneratedBy

QUESTIONS_PER_QUIZ = 5
OPTIONS_PER_QUESTION = 4
NOT_ANSWERED = "Not answered"


class CamelModel(BaseModel):
    """Base com aliases camelCase."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


# =============================================================================
# DOMINIO
# =============================================================================


class Question(CamelModel):
    """Questao de multipla escolha (sem a resposta)."""

    id: int = Field(..., ge=1, description="ID sequencial da questao (1-N)")
    text: str = Field(..., description="Enunciado")
    options: list[str] = Field(
        ...,
        min_length=OPTIONS_PER_QUESTION,
        max_length=OPTIONS_PER_QUESTION,
        description="4 alternativas, uma delas igual ao gabarito",
    )


class QuestionSet(CamelModel):
    """Saida de uma estrategia de geracao: questoes + gabarito."""

    questions: list[Question]
    answers: dict[str, str] = Field(..., description="question id -> texto da alternativa correta")


class Quiz(CamelModel):
    """Quiz exposto ao cliente. Nunca carrega o gabarito."""

    quiz_id: str = Field(..., description="ID opaco e unico do quiz")
    topic: str
    questions: list[Question]


class FeedbackItem(CamelModel):
    """Feedback por questao apos a correcao."""

    id: int
    your_answer: str
    correct_answer: str


class HistoryEntry(CamelModel):
    """Resultado passado do usuario com o topico do quiz."""

    quiz_id: str
    topic: str
    score: int
    total_questions: int
    percentage: int = Field(..., ge=0, le=100)
    completed_at: datetime


class TopicTrend(CamelModel):
    """Evolucao do usuario em um topico."""

    topic: str
    attempts: int
    average: int
    best: int
    first_score: int
    latest_score: int
    improvement: int
    recent: list[HistoryEntry] = Field(
        default_factory=list, description="Ultimas tentativas no topico, em ordem cronologica"
    )


# =============================================================================
# RESPONSES
# =============================================================================


class GenerateQuizResponse(CamelModel):
    """Response de /generate."""

    quiz_id: str
    questions: list[Question]
    generated_by: GeneratedBy


class GradeQuizResponse(CamelModel):
    """Response de /grade."""

    correct: int
    total: int
    feedback: list[FeedbackItem]


class QuizResultsResponse(CamelModel):
    """Dados da pagina de resultados."""

    quiz: Quiz
    score: int
    total: int
    feedback: list[FeedbackItem]


class UserPublic(CamelModel):
    """Identidade do usuario autenticado."""

    user_id: str
    email: str
    name: str


class DashboardResponse(CamelModel):
    """Estatisticas agregadas do historico do usuario."""

    user: UserPublic
    total_quizzes: int
    average_score: int
    best_score: int
    recent: list[HistoryEntry]
    topics: list[TopicTrend]
