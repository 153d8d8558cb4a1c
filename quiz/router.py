"""Quiz Router - Endpoints FastAPI do pipeline gerar -> corrigir -> historico."""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

import app_state
import config
from routers.identity import get_owner_id, require_user

from .engine import QuizEngine, QuizGradingEngine, QuizHistoryEngine
from .engine.history_engine import summarize
from .errors import InvalidInputError
from .models.schemas import (
    DashboardResponse,
    GenerateQuizResponse,
    GradeQuizResponse,
    HistoryEntry,
    Quiz,
    QuizResultsResponse,
    UserPublic,
)
from .storage import QuizStore, ResultStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quiz"])
limiter = app_state.limiter


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


async def get_quiz_store() -> QuizStore:
    """Dependency para obter QuizStore."""
    return QuizStore(await app_state.get_agentfs())


async def get_result_store() -> ResultStore:
    """Dependency para obter ResultStore."""
    return ResultStore(await app_state.get_agentfs())


async def get_quiz_engine(store: QuizStore = Depends(get_quiz_store)) -> QuizEngine:
    return QuizEngine(store)


async def get_grading_engine(
    quiz_store: QuizStore = Depends(get_quiz_store),
    result_store: ResultStore = Depends(get_result_store),
) -> QuizGradingEngine:
    return QuizGradingEngine(quiz_store, result_store)


async def get_history_engine(
    quiz_store: QuizStore = Depends(get_quiz_store),
    result_store: ResultStore = Depends(get_result_store),
) -> QuizHistoryEngine:
    return QuizHistoryEngine(quiz_store, result_store)


# =============================================================================
# GERACAO & CORRECAO
# =============================================================================


@router.get("/generate", response_model=GenerateQuizResponse)
@limiter.limit(config.GENERATE_RATE_LIMIT)
async def generate_quiz(
    request: Request,
    topic: Optional[str] = None,
    engine: QuizEngine = Depends(get_quiz_engine),
    owner_id: Optional[str] = Depends(get_owner_id),
):
    """Gera um quiz de 5 questoes sobre o topico.

    - Usa a IA quando configurada; qualquer falha cai no fallback
    - Persiste quiz + gabarito (associado ao usuario se logado)
    - Retorna as questoes SEM o gabarito
    """
    if not topic or not topic.strip():
        raise InvalidInputError("Topic is required")

    quiz, generated_by = await engine.create_quiz(topic, owner_id=owner_id)

    return GenerateQuizResponse(
        quiz_id=quiz.quiz_id,
        questions=quiz.questions,
        generated_by=generated_by,
    )


@router.post("/grade", response_model=GradeQuizResponse)
async def grade_quiz(
    request: Request,
    quiz_id: Optional[str] = Query(None, alias="quizId"),
    engine: QuizGradingEngine = Depends(get_grading_engine),
    owner_id: Optional[str] = Depends(get_owner_id),
):
    """Corrige as respostas ``{"answers": {"1": "..."}}`` do quiz.

    O resultado e gravado mesmo que o cliente desconecte antes da resposta.
    """
    if not quiz_id:
        raise InvalidInputError("Quiz ID is required")

    try:
        body = await request.json()
    except Exception as e:
        raise InvalidInputError("Answers are required") from e

    answers = body.get("answers") if isinstance(body, dict) else None

    return await asyncio.shield(engine.grade(quiz_id, answers, owner_id=owner_id))


# =============================================================================
# PAGINAS (quiz, resultados, historico, dashboard)
# =============================================================================


@router.get("/quiz/{quiz_id}", response_model=Quiz)
async def get_quiz(quiz_id: str, engine: QuizEngine = Depends(get_quiz_engine)):
    """Questoes do quiz (sem gabarito). 404 se nao existir."""
    return await engine.get_quiz(quiz_id)


@router.get("/results/{quiz_id}", response_model=QuizResultsResponse)
async def get_results(
    quiz_id: str,
    score: int = 0,
    total: int = 5,
    engine: QuizEngine = Depends(get_quiz_engine),
    grading: QuizGradingEngine = Depends(get_grading_engine),
):
    """Resultado da submissao mais recente do quiz.

    ``score``/``total`` vem da query (como exibidos pelo cliente); o
    feedback e reconstruido do ultimo QuizResult (lista vazia se nao houver).
    """
    quiz = await engine.get_quiz(quiz_id)
    feedback = await grading.latest_feedback(quiz_id)

    return QuizResultsResponse(quiz=quiz, score=score, total=total, feedback=feedback)


@router.get("/history", response_model=list[HistoryEntry])
async def get_history(
    topic: Optional[str] = None,
    user: UserPublic = Depends(require_user),
    engine: QuizHistoryEngine = Depends(get_history_engine),
):
    """Historico do usuario logado (mais recente primeiro, max 50)."""
    return await engine.history(user.user_id, topic_filter=topic)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    user: UserPublic = Depends(require_user),
    engine: QuizHistoryEngine = Depends(get_history_engine),
):
    """Estatisticas gerais e evolucao por topico."""
    history = await engine.history(user.user_id)
    return DashboardResponse(user=user, **summarize(history))
