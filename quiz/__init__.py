"""Quiz Module - Geracao, correcao e historico de quizzes.

Arquitetura:
- models/: Enums, Schemas Pydantic, Records persistidos
- engine/: QuizGenerator (IA + fallback), QuizEngine, QuizGradingEngine, QuizHistoryEngine
- llm/: LLMClientFactory
- storage/: QuizStore, ResultStore, UserStore (AgentFS KV)
- prompts/: Prompts e bancos de questoes do fallback
- router.py: FastAPI endpoints
"""

from .engine import (
    AIQuestionStrategy,
    FallbackQuestionStrategy,
    QuizEngine,
    QuizGenerator,
    QuizGradingEngine,
    QuizHistoryEngine,
)
from .errors import (
    DuplicateUserError,
    InvalidInputError,
    MalformedResponseError,
    NotFoundError,
    PersistenceError,
    ProviderUnavailableError,
    QuizError,
)
from .llm import LLMClientFactory
from .models import GeneratedBy, Question, QuestionSet, Quiz
from .storage import QuizStore, ResultStore, UserStore

__all__ = [
    # Models
    "GeneratedBy",
    "Question",
    "QuestionSet",
    "Quiz",
    # Engines
    "AIQuestionStrategy",
    "FallbackQuestionStrategy",
    "QuizGenerator",
    "QuizEngine",
    "QuizGradingEngine",
    "QuizHistoryEngine",
    # LLM
    "LLMClientFactory",
    # Storage
    "QuizStore",
    "ResultStore",
    "UserStore",
    # Errors
    "QuizError",
    "InvalidInputError",
    "NotFoundError",
    "ProviderUnavailableError",
    "MalformedResponseError",
    "PersistenceError",
    "DuplicateUserError",
]
