"""Quiz Enums - Origem da geracao."""

from enum import Enum


class GeneratedBy(str, Enum):
    """Estrategia que produziu o conjunto de questoes."""

    AI = "AI"
    FALLBACK = "fallback"
