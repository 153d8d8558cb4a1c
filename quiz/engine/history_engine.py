"""Quiz History Engine - Historico do usuario e estatisticas por topico."""

from __future__ import annotations

import logging
import math

import config

from ..models.records import QuizRecord
from ..models.schemas import HistoryEntry, TopicTrend
from ..storage import QuizStore, ResultStore

logger = logging.getLogger(__name__)

RECENT_COUNT = 5


def round_half_up(value: float) -> int:
    """Arredondamento comercial (2.5 -> 3), nao o bancario do ``round``."""
    return int(math.floor(value + 0.5))


def percentage(score: int, total_questions: int) -> int:
    """Percentual inteiro em [0, 100]. Total zero resulta em 0."""
    if total_questions <= 0:
        return 0
    return max(0, min(100, round_half_up(score / total_questions * 100)))


class QuizHistoryEngine:
    """Junta resultados do usuario com o topico de cada quiz.

    Resultados orfaos (quiz removido) sao ignorados. Qualquer falha de
    leitura vira lista vazia: historico nao e caminho critico.
    """

    def __init__(
        self,
        quiz_store: QuizStore,
        result_store: ResultStore,
        limit: int | None = None,
    ):
        self.quiz_store = quiz_store
        self.result_store = result_store
        self.limit = config.HISTORY_LIMIT if limit is None else limit

    async def history(self, user_id: str, topic_filter: str | None = None) -> list[HistoryEntry]:
        """Historico mais recente primeiro, limitado a ``limit`` resultados.

        Args:
            user_id: Dono dos resultados
            topic_filter: Substring do topico (case-insensitive), opcional

        Returns:
            Lista de HistoryEntry (vazia em caso de erro)
        """
        try:
            return await self._build_history(user_id, topic_filter)
        except Exception:
            logger.warning("Falha ao carregar historico de %s", user_id, exc_info=True)
            return []

    async def _build_history(
        self, user_id: str, topic_filter: str | None
    ) -> list[HistoryEntry]:
        results = await self.result_store.list_for_user(user_id, limit=self.limit)
        needle = topic_filter.lower() if topic_filter else None

        records: dict[str, QuizRecord | None] = {}
        history = []
        for result in results:
            if result.quiz_id not in records:
                records[result.quiz_id] = await self.quiz_store.get_record(result.quiz_id)
            record = records[result.quiz_id]

            if record is None:
                logger.debug("Resultado orfao ignorado: %s", result.quiz_id)
                continue
            if needle and needle not in record.topic.lower():
                continue

            history.append(
                HistoryEntry(
                    quiz_id=result.quiz_id,
                    topic=record.topic,
                    score=result.score,
                    total_questions=record.total_questions,
                    percentage=percentage(result.score, record.total_questions),
                    completed_at=result.completed_at,
                )
            )
        return history


# =============================================================================
# AGREGACAO (pura, sem acesso ao store)
# =============================================================================


def average_score(entries: list[HistoryEntry]) -> int:
    if not entries:
        return 0
    return round_half_up(sum(e.percentage for e in entries) / len(entries))


def best_score(entries: list[HistoryEntry]) -> int:
    return max((e.percentage for e in entries), default=0)


def topic_trends(entries: list[HistoryEntry]) -> list[TopicTrend]:
    """Agrupa por topico exato: tentativas, media, melhor e evolucao.

    ``improvement`` = ultimo - primeiro percentual, em ordem cronologica;
    ``recent`` traz as ultimas 5 tentativas (mais antiga primeiro).
    """
    groups: dict[str, list[HistoryEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.topic, []).append(entry)

    trends = []
    for topic, group in groups.items():
        chronological = sorted(group, key=lambda e: e.completed_at)
        first = chronological[0].percentage
        latest = chronological[-1].percentage
        trends.append(
            TopicTrend(
                topic=topic,
                attempts=len(group),
                average=average_score(group),
                best=best_score(group),
                first_score=first,
                latest_score=latest,
                improvement=latest - first,
                recent=chronological[-RECENT_COUNT:],
            )
        )
    return trends


def summarize(entries: list[HistoryEntry]) -> dict:
    """Estatisticas do dashboard a partir do historico ja calculado."""
    return {
        "total_quizzes": len(entries),
        "average_score": average_score(entries),
        "best_score": best_score(entries),
        "recent": entries[:RECENT_COUNT],
        "topics": topic_trends(entries),
    }
