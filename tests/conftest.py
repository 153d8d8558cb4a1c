# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza mocks do AgentFS, do cliente Anthropic e dados de quiz
# =============================================================================

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# FIXTURES DO AGENTFS
# =============================================================================


@pytest.fixture
def mock_agentfs():
    """Mock do AgentFS com KV vazio."""
    mock = MagicMock()

    mock.kv = AsyncMock()
    mock.kv.get = AsyncMock(return_value=None)
    mock.kv.set = AsyncMock()
    mock.kv.delete = AsyncMock()
    mock.kv.list = AsyncMock(return_value=[])

    mock.close = AsyncMock()

    return mock


@pytest.fixture
def mock_agentfs_with_data():
    """Mock do AgentFS com KV em memoria (dict)."""
    mock = MagicMock()
    _storage = {}

    async def mock_get(key):
        return _storage.get(key)

    async def mock_set(key, value):
        # Simula serializacao JSON do store real
        _storage[key] = json.loads(json.dumps(value))

    async def mock_delete(key):
        _storage.pop(key, None)

    async def mock_list(prefix=""):
        return [{"key": k} for k in _storage if k.startswith(prefix)]

    mock.kv = AsyncMock()
    mock.kv.get = mock_get
    mock.kv.set = mock_set
    mock.kv.delete = mock_delete
    mock.kv.list = mock_list
    mock._storage = _storage

    mock.close = AsyncMock()

    return mock


@pytest.fixture
def failing_agentfs():
    """AgentFS cujas operacoes KV sempre falham."""
    mock = MagicMock()
    error = RuntimeError("database is locked")
    mock.kv = AsyncMock()
    mock.kv.get = AsyncMock(side_effect=error)
    mock.kv.set = AsyncMock(side_effect=error)
    mock.kv.list = AsyncMock(side_effect=error)
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def quiz_store(mock_agentfs_with_data):
    from quiz.storage import QuizStore

    return QuizStore(mock_agentfs_with_data)


@pytest.fixture
def result_store(mock_agentfs_with_data):
    from quiz.storage import ResultStore

    return ResultStore(mock_agentfs_with_data)


@pytest.fixture
def user_store(mock_agentfs_with_data):
    from quiz.storage import UserStore

    return UserStore(mock_agentfs_with_data)


# =============================================================================
# FIXTURES DO QUIZ
# =============================================================================


@pytest.fixture
def javascript_question_set():
    """QuestionSet do bucket javascript (fallback)."""
    from quiz.engine import FallbackQuestionStrategy

    return FallbackQuestionStrategy().build("javascript")


@pytest.fixture
def javascript_answers():
    """Submissao com 4 acertos (questao 3 errada)."""
    return {
        "1": "Document Object Model",
        "2": "push()",
        "3": "wrong",
        "4": "float",
        "5": "Strict equality comparison",
    }


@pytest.fixture
def saved_quiz(quiz_store, javascript_question_set):
    """Factory assincrona que persiste um quiz e devolve o Quiz."""
    from quiz.models import Quiz

    async def _save(quiz_id="quiz-js-1", topic="javascript", owner_id=None):
        quiz = Quiz(quiz_id=quiz_id, topic=topic, questions=javascript_question_set.questions)
        await quiz_store.save(quiz, javascript_question_set.answers, owner_id=owner_id)
        return quiz

    return _save


@pytest.fixture
def make_result():
    """Factory de QuizResult com horario controlado."""
    from quiz.models import QuizResult

    base = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def _make(quiz_id, score, user_id="user_1", minutes=0, result_id=None):
        return QuizResult(
            result_id=result_id or f"{quiz_id}-{minutes}",
            quiz_id=quiz_id,
            user_answers={},
            score=score,
            user_id=user_id,
            completed_at=base + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def store_result(mock_agentfs_with_data):
    """Grava um QuizResult pronto direto no KV (horario preservado)."""

    async def _store(result):
        key = f"quiz_results:{result.quiz_id}:{result.result_id}"
        await mock_agentfs_with_data.kv.set(key, result.to_dict())
        if result.user_id:
            index_key = f"quiz_results_by_user:{result.user_id}:{result.result_id}"
            await mock_agentfs_with_data.kv.set(index_key, result.to_dict())
        return result

    return _store


# =============================================================================
# FIXTURES DA IA
# =============================================================================


@pytest.fixture
def make_ai_response():
    """Factory de respostas no formato do Messages API."""

    def _make_response(text: str):
        return MagicMock(content=[MagicMock(type="text", text=text)])

    return _make_response


@pytest.fixture
def ai_quiz_payload():
    """Payload valido da IA (ids propositalmente fora de 1-5)."""
    questions = []
    answers = {}
    for i in range(5):
        raw_id = 10 + i
        correct = f"Correct {i + 1}"
        questions.append(
            {
                "id": raw_id,
                "text": f"Photosynthesis question {i + 1}?",
                "options": [correct, "Wrong A", "Wrong B", "Wrong C"],
            }
        )
        answers[str(raw_id)] = correct
    return {"questions": questions, "answers": answers}


@pytest.fixture
def mock_anthropic_client(make_ai_response, ai_quiz_payload):
    """Cliente Anthropic mockado retornando um quiz valido."""
    client = MagicMock()
    client.messages.create = AsyncMock(
        return_value=make_ai_response(
            "Here is your quiz:\n" + json.dumps(ai_quiz_payload) + "\nGood luck!"
        )
    )
    return client


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def client(mock_agentfs_with_data):
    """Cliente de teste FastAPI com AgentFS em memoria."""
    from fastapi.testclient import TestClient

    import app_state
    from server import app

    previous = app_state.agentfs
    limiter_enabled = app_state.limiter.enabled
    app_state.agentfs = mock_agentfs_with_data
    app_state.limiter.enabled = False

    yield TestClient(app)

    app_state.agentfs = previous
    app_state.limiter.enabled = limiter_enabled
