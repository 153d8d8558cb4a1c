# =============================================================================
# TESTES DE INTEGRACAO - Endpoints
# =============================================================================
# Fluxo gerar -> corrigir -> resultados -> historico via FastAPI TestClient
# (AgentFS em memoria, sem chave de IA = fallback deterministico)
# =============================================================================

import pytest

JS_ANSWERS = {
    "1": "Document Object Model",
    "2": "push()",
    "3": "wrong",
    "4": "float",
    "5": "Strict equality comparison",
}


def _signup(client, email="ana@example.com", password="secret1", name="Ana"):
    return client.post(
        "/auth/signup", json={"name": name, "email": email, "password": password}
    )


class TestHealthEndpoints:
    """Testes dos endpoints de health check."""

    def test_root_returns_ok(self, client):
        """GET / - Deve retornar status ok sem IA configurada."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["ai_configured"] is False

    def test_health_returns_healthy(self, client):
        """GET /health - Deve retornar status healthy."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["storage_open"] is True


class TestGenerateEndpoint:
    """Testes do endpoint /generate."""

    def test_generate_fallback_javascript(self, client):
        """GET /generate - Fallback de programacao sem gabarito na resposta."""
        response = client.get("/generate", params={"topic": "javascript"})

        assert response.status_code == 200
        data = response.json()
        assert data["generatedBy"] == "fallback"
        assert data["quizId"]
        assert [q["id"] for q in data["questions"]] == [1, 2, 3, 4, 5]
        assert data["questions"][0]["text"] == "What does 'DOM' stand for in web development?"
        assert "answers" not in data

    def test_generate_persists_quiz(self, client, mock_agentfs_with_data):
        """GET /generate - Quiz e gabarito gravados no store."""
        data = client.get("/generate", params={"topic": "  React  "}).json()

        stored = mock_agentfs_with_data._storage[f"quizzes:{data['quizId']}"]
        assert stored["topic"] == "React"
        assert stored["correctAnswers"]["4"] == "Props"
        assert stored["userId"] is None

    @pytest.mark.parametrize("params", [{}, {"topic": ""}, {"topic": "   "}])
    def test_generate_requires_topic(self, client, params):
        """GET /generate - 400 sem topico."""
        response = client.get("/generate", params=params)

        assert response.status_code == 400
        assert response.json() == {"message": "Topic is required", "kind": "invalid_input"}

    def test_generate_storage_failure(self, client, mock_agentfs_with_data):
        """GET /generate - 500 quando o store falha."""
        from unittest.mock import AsyncMock

        mock_agentfs_with_data.kv.set = AsyncMock(side_effect=RuntimeError("disk full"))

        response = client.get("/generate", params={"topic": "javascript"})

        assert response.status_code == 500
        assert response.json()["kind"] == "persistence_error"

    def test_generate_distinct_ids(self, client):
        """GET /generate - Cada chamada gera um quiz novo."""
        first = client.get("/generate", params={"topic": "javascript"}).json()
        second = client.get("/generate", params={"topic": "javascript"}).json()

        assert first["quizId"] != second["quizId"]


class TestGradeEndpoint:
    """Testes do endpoint /grade."""

    def test_generate_then_grade(self, client, mock_agentfs_with_data):
        """POST /grade - 4/5 com feedback da questao 3."""
        quiz_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]

        response = client.post("/grade", params={"quizId": quiz_id}, json={"answers": JS_ANSWERS})

        assert response.status_code == 200
        data = response.json()
        assert data["correct"] == 4
        assert data["total"] == 5
        assert data["feedback"][2] == {
            "id": 3,
            "yourAnswer": "wrong",
            "correctAnswer": "const myVar = 5;",
        }
        results = [k for k in mock_agentfs_with_data._storage if k.startswith("quiz_results:")]
        assert len(results) == 1

    def test_grade_twice_records_two_results(self, client, mock_agentfs_with_data):
        """POST /grade - Submissoes repetidas geram resultados distintos."""
        quiz_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]

        for _ in range(2):
            client.post("/grade", params={"quizId": quiz_id}, json={"answers": JS_ANSWERS})

        results = [k for k in mock_agentfs_with_data._storage if k.startswith("quiz_results:")]
        assert len(results) == 2

    def test_grade_unknown_quiz(self, client, mock_agentfs_with_data):
        """POST /grade - 404 e nada gravado para quiz inexistente."""
        response = client.post("/grade", params={"quizId": "nope"}, json={"answers": JS_ANSWERS})

        assert response.status_code == 404
        assert response.json() == {"message": "Quiz not found", "kind": "not_found"}
        assert not any(k.startswith("quiz_results:") for k in mock_agentfs_with_data._storage)

    def test_grade_requires_quiz_id(self, client):
        """POST /grade - 400 sem quizId."""
        response = client.post("/grade", json={"answers": JS_ANSWERS})

        assert response.status_code == 400
        assert response.json()["message"] == "Quiz ID is required"

    @pytest.mark.parametrize("body", [{}, {"answers": None}, {"answers": ["a"]}])
    def test_grade_requires_answers(self, client, body):
        """POST /grade - 400 sem answers em forma de mapa."""
        response = client.post("/grade", params={"quizId": "q-1"}, json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Answers are required"

    def test_grade_invalid_json(self, client):
        """POST /grade - 400 com corpo que nao e JSON."""
        response = client.post(
            "/grade",
            params={"quizId": "q-1"},
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400


class TestQuizPages:
    """Testes dos endpoints /quiz e /results."""

    def test_get_quiz(self, client):
        """GET /quiz/{id} - Questoes sem gabarito."""
        generated = client.get("/generate", params={"topic": "Biology"}).json()

        response = client.get(f"/quiz/{generated['quizId']}")

        assert response.status_code == 200
        data = response.json()
        assert data["topic"] == "Biology"
        assert data["questions"] == generated["questions"]
        assert "answers" not in data

    def test_get_quiz_not_found(self, client):
        """GET /quiz/{id} - 404."""
        response = client.get("/quiz/missing")

        assert response.status_code == 404

    def test_results_after_grade(self, client):
        """GET /results/{id} - Feedback do ultimo resultado e score da query."""
        quiz_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]
        client.post("/grade", params={"quizId": quiz_id}, json={"answers": JS_ANSWERS})

        response = client.get(f"/results/{quiz_id}", params={"score": 4, "total": 5})

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 4
        assert data["total"] == 5
        assert data["quiz"]["quizId"] == quiz_id
        assert data["feedback"][2]["yourAnswer"] == "wrong"

    def test_results_without_submission(self, client):
        """GET /results/{id} - Defaults 0/5 e feedback vazio."""
        quiz_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]

        data = client.get(f"/results/{quiz_id}").json()

        assert (data["score"], data["total"], data["feedback"]) == (0, 5, [])


class TestAuthEndpoints:
    """Testes do fluxo de autenticacao."""

    def test_signup_starts_session(self, client):
        """POST /auth/signup - Cria conta e ja autentica."""
        response = _signup(client)

        assert response.status_code == 200
        assert response.json()["message"] == "Account created successfully"
        me = client.get("/auth/me").json()
        assert me["email"] == "ana@example.com"
        assert me["userId"].startswith("user_")

    def test_signup_duplicate(self, client):
        """POST /auth/signup - 409 para email repetido."""
        _signup(client)

        response = _signup(client)

        assert response.status_code == 409
        assert response.json()["message"] == "User already exists with this email"

    def test_signup_short_password(self, client):
        """POST /auth/signup - 400 para senha curta."""
        response = _signup(client, password="12345")

        assert response.status_code == 400
        assert response.json()["message"] == "Password must be at least 6 characters long"

    def test_signup_missing_fields(self, client):
        """POST /auth/signup - 400 sem campos obrigatorios."""
        response = client.post("/auth/signup", json={"email": "a@b.c"})

        assert response.status_code == 400
        assert response.json()["message"] == "Name, email, and password are required"

    def test_login_logout(self, client):
        """POST /auth/login + /auth/logout."""
        _signup(client)
        client.post("/auth/logout")
        assert client.get("/auth/me").status_code == 401

        response = client.post(
            "/auth/login", json={"email": "ana@example.com", "password": "secret1"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["name"] == "Ana"
        assert client.get("/auth/me").status_code == 200

    def test_login_wrong_password(self, client):
        """POST /auth/login - 401 com senha errada."""
        _signup(client)
        client.post("/auth/logout")

        response = client.post(
            "/auth/login", json={"email": "ana@example.com", "password": "nope123"}
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid email or password", "kind": "unauthorized"}


class TestHistoryEndpoints:
    """Testes de /history e /dashboard."""

    def test_history_requires_session(self, client):
        """GET /history - 401 anonimo."""
        response = client.get("/history")

        assert response.status_code == 401
        assert response.json()["message"] == "Authentication required"

    def test_history_empty(self, client):
        """GET /history - Lista vazia para usuario novo."""
        _signup(client)

        response = client.get("/history")

        assert response.status_code == 200
        assert response.json() == []

    def test_history_after_grades(self, client):
        """GET /history - Resultados do usuario, mais recentes primeiro."""
        _signup(client)
        js_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]
        bio_id = client.get("/generate", params={"topic": "Biology"}).json()["quizId"]
        client.post("/grade", params={"quizId": js_id}, json={"answers": JS_ANSWERS})
        client.post("/grade", params={"quizId": bio_id}, json={"answers": {}})

        history = client.get("/history").json()

        assert [h["topic"] for h in history] == ["Biology", "javascript"]
        assert history[1]["percentage"] == 80
        assert history[1]["totalQuestions"] == 5
        assert history[0]["percentage"] == 0

        filtered = client.get("/history", params={"topic": "JAVA"}).json()
        assert [h["quizId"] for h in filtered] == [js_id]

    def test_anonymous_results_not_in_history(self, client):
        """GET /history - Resultados anonimos nao pertencem ao usuario."""
        quiz_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]
        client.post("/grade", params={"quizId": quiz_id}, json={"answers": JS_ANSWERS})
        _signup(client)

        assert client.get("/history").json() == []

    def test_dashboard(self, client):
        """GET /dashboard - Estatisticas e evolucao por topico."""
        _signup(client)
        for answers in ({}, JS_ANSWERS):
            quiz_id = client.get("/generate", params={"topic": "javascript"}).json()["quizId"]
            client.post("/grade", params={"quizId": quiz_id}, json={"answers": answers})

        response = client.get("/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["name"] == "Ana"
        assert data["totalQuizzes"] == 2
        assert data["averageScore"] == 40
        assert data["bestScore"] == 80
        assert len(data["recent"]) == 2
        topic = data["topics"][0]
        assert topic["topic"] == "javascript"
        assert topic["attempts"] == 2
        assert topic["firstScore"] == 0
        assert topic["latestScore"] == 80
        assert topic["improvement"] == 80
        assert [e["percentage"] for e in topic["recent"]] == [0, 80]
