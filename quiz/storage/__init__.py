"""Quiz Storage - Colecoes persistidas no AgentFS KV."""

from .quiz_store import QuizStore
from .result_store import ResultStore
from .user_store import UserStore

__all__ = ["QuizStore", "ResultStore", "UserStore"]
