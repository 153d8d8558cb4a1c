"""Quiz Models - Enums, Schemas e Records."""

from .enums import GeneratedBy
from .records import QuizRecord, QuizResult, UserRecord
from .schemas import (
    NOT_ANSWERED,
    OPTIONS_PER_QUESTION,
    QUESTIONS_PER_QUIZ,
    DashboardResponse,
    FeedbackItem,
    GenerateQuizResponse,
    GradeQuizResponse,
    HistoryEntry,
    Question,
    QuestionSet,
    Quiz,
    QuizResultsResponse,
    TopicTrend,
    UserPublic,
)

__all__ = [
    # Enums
    "GeneratedBy",
    # Constantes
    "NOT_ANSWERED",
    "OPTIONS_PER_QUESTION",
    "QUESTIONS_PER_QUIZ",
    # Schemas
    "Question",
    "QuestionSet",
    "Quiz",
    "FeedbackItem",
    "HistoryEntry",
    "TopicTrend",
    "UserPublic",
    "GenerateQuizResponse",
    "GradeQuizResponse",
    "QuizResultsResponse",
    "DashboardResponse",
    # Records
    "QuizRecord",
    "QuizResult",
    "UserRecord",
]
