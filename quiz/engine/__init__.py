"""Quiz Engines - Logica de negocios."""

from .generator import (
    AIQuestionStrategy,
    FallbackQuestionStrategy,
    QuestionStrategy,
    QuizGenerator,
)
from .grading_engine import QuizGradingEngine
from .history_engine import QuizHistoryEngine
from .quiz_engine import QuizEngine

__all__ = [
    "QuestionStrategy",
    "AIQuestionStrategy",
    "FallbackQuestionStrategy",
    "QuizGenerator",
    "QuizEngine",
    "QuizGradingEngine",
    "QuizHistoryEngine",
]
