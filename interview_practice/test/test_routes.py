"""
Test API Routes Module

This module tests the HTTP API end to end with the FastAPI test client: the
health check, a full interview, exiting, error responses and the history.

Dependencies:
- pytest: For testing framework
- fastapi.testclient: For calling the application
"""

import random

import pytest
from fastapi.testclient import TestClient

from interview_practice.core.route_limiters import limiter
from interview_practice.main import create_app
from interview_practice.services.interview_ai.mock_interview_ai import MockInterviewAI
from interview_practice.test.fakes import CancelledAnalysisProvider


@pytest.fixture
def client(test_settings):
    provider = MockInterviewAI(rng=random.Random(42), question_latency=0, analysis_latency=0)
    with TestClient(create_app(test_settings, provider=provider)) as test_client:
        yield test_client


def start(client, **overrides):
    payload = {"type": "technical", "position": "Senior Software Engineer", "experience": "senior", "duration": 15}
    payload.update(overrides)
    return client.post("/api/interviews", json=payload)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "active_interview": False, "completed_interviews": 0}


def test_options(client):
    body = client.get("/api/interviews/options").json()
    assert body["types"] == ["technical", "behavioral", "leadership", "general"]
    assert "" in body["experience_levels"]
    assert body["durations"] == [10, 15, 20, 30]


def test_full_interview(client):
    """Test an interview from setup to results and history."""
    response = start(client)
    assert response.status_code == 201
    session = response.json()
    assert session["status"] == "active"
    assert len(session["questions"]) == 6
    assert session["current_question_text"] == session["questions"][0]
    assert session["config"]["position"] == "Senior Software Engineer"

    session_id = session["id"]
    for index in range(5):
        session = client.post(f"/api/interviews/{session_id}/answer", json={"answer": "z" * 120}).json()
        assert session["current_question"] == index + 1
    session = client.post(f"/api/interviews/{session_id}/skip").json()
    assert session["status"] == "completed"
    assert session["answers"][-1] == ""
    assert session["end_time"] is not None

    response = client.get(f"/api/interviews/{session_id}/results")
    assert response.status_code == 200
    results = response.json()
    assert 0 <= results["analysis"]["score"] <= 100
    assert len(results["analysis"]["feedback"]) == 6
    assert len(results["analysis"]["suggestions"]) == 5
    assert results["questions_answered"] == 5
    assert results["total_questions"] == 6
    assert results["score_band"] in ("strong", "fair", "weak")

    history = client.get("/api/history").json()
    assert history["summary"]["total_sessions"] == 1
    assert history["summary"]["best_score"] == results["analysis"]["score"]
    assert [item["id"] for item in history["sessions"]] == [session_id]
    assert client.get(f"/api/interviews/{session_id}").json()["score"] == results["analysis"]["score"]


def test_exit_discards_the_session(client):
    session_id = start(client, type="general", position="Designer", duration=10).json()["id"]

    response = client.post(f"/api/interviews/{session_id}/exit")

    assert response.status_code == 204
    assert client.get(f"/api/interviews/{session_id}").status_code == 404
    assert client.get("/api/history").json()["summary"]["total_sessions"] == 0


@pytest.mark.parametrize("overrides", [
    {"position": "   "},
    {"type": "panel"},
    {"duration": 0},
])
def test_invalid_setup_is_rejected(client, overrides):
    response = start(client, **overrides)
    assert response.status_code == 422
    assert "detail" in response.json()


def test_unknown_session(client):
    response = client.post("/api/interviews/does-not-exist/answer", json={"answer": "hello"})
    assert response.status_code == 404
    assert response.json() == {"detail": "Interview session 'does-not-exist' not found."}


def test_results_before_completion_conflict(client):
    session_id = start(client, duration=10).json()["id"]

    response = client.get(f"/api/interviews/{session_id}/results")

    assert response.status_code == 409
    assert "active" in response.json()["detail"]


def test_answer_after_completion_conflicts(client):
    session_id = start(client, type="behavioral", position="Nurse", experience="", duration=10).json()["id"]
    for _ in range(4):
        client.post(f"/api/interviews/{session_id}/skip")

    response = client.post(f"/api/interviews/{session_id}/answer", json={"answer": "late"})

    assert response.status_code == 409


def test_empty_history(client):
    body = client.get("/api/history").json()
    assert body == {
        "summary": {"total_sessions": 0, "average_score": 0, "total_duration_minutes": 0, "best_score": 0},
        "sessions": [],
    }


def test_results_without_analysis_is_a_server_error(test_settings):
    with TestClient(create_app(test_settings, provider=CancelledAnalysisProvider())) as cancelled_client:
        session_id = start(cancelled_client, type="general", position="Designer", experience="", duration=10).json()["id"]
        cancelled_client.post(f"/api/interviews/{session_id}/answer", json={"answer": "An answer"})

        response = cancelled_client.get(f"/api/interviews/{session_id}/results")

    assert response.status_code == 500
    assert response.json() == {"detail": "The analysis for this interview is not available."}


def test_rate_limit_follows_settings(test_settings):
    enabled_settings = test_settings.model_copy(update={"rate_limit_enabled": True})
    try:
        with TestClient(create_app(enabled_settings, provider=CancelledAnalysisProvider())) as limited_client:
            statuses = [limited_client.get("/api/health").status_code for _ in range(11)]
        assert limiter.enabled is True
        assert statuses[:10] == [200] * 10
        assert statuses[10] == 429
    finally:
        limiter.reset()
        create_app(test_settings)
    assert limiter.enabled is False
