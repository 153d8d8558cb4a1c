"""Quiz Prompts - Templates de IA e bancos de fallback."""

from .templates import (
    FALLBACK_BUCKETS,
    GENERIC_QUESTION_TEMPLATES,
    QUIZ_GENERATION_PROMPT,
    QUIZ_SYSTEM_PROMPT,
)

__all__ = [
    "QUIZ_SYSTEM_PROMPT",
    "QUIZ_GENERATION_PROMPT",
    "FALLBACK_BUCKETS",
    "GENERIC_QUESTION_TEMPLATES",
]
