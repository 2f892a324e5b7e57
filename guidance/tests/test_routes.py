"""
Test the HTTP surface of the guidance and profile routers.

Run from project root:
    pytest guidance/tests
"""

import pytest
from fastapi.testclient import TestClient

from guidance.logic import runner
from guidance.logic.profile_store import profile_store
from main import app


client = TestClient(app)


@pytest.fixture(autouse=True)
def fresh_profile():
    profile_store.reset()
    yield
    profile_store.reset()


# =============================================================================
# STATELESS GUIDANCE ENDPOINTS
# =============================================================================

def test_health():
    response = client.get("/guidance/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_parse_document_endpoint():
    response = client.post("/guidance/documents/parse", json={"text": "Mathematics 85% Science: 90%"})

    assert response.status_code == 200
    body = response.json()
    assert [(s["name"], s["score"]) for s in body["subjects"]] == [
        ("Mathematics", 85),
        ("Natural Sciences", 90),
    ]
    assert body["error"] is None


def test_parse_document_endpoint_reports_error_as_data():
    response = client.post("/guidance/documents/parse", json={"text": "hi"})

    assert response.status_code == 200
    body = response.json()
    assert body["subjects"] == []
    assert body["error_kind"] == "insufficient_text"


def test_aps_breakdown():
    response = client.post("/guidance/aps", json={"subjects": [
        {"name": "maths", "score": 72},
        {"name": "Technology", "score": 33},
    ]})

    assert response.status_code == 200
    assert response.json() == {
        "aps_score": 8,
        "subject_points": [
            {"name": "Mathematics", "points": 6},
            {"name": "Technology", "points": 2},
        ],
    }


def test_aps_rejects_out_of_range_score():
    response = client.post("/guidance/aps", json={"subjects": [{"name": "Mathematics", "score": 120}]})
    assert response.status_code == 400
    assert "Mathematics" in response.json()["detail"]


def test_recommendations_for_grade12():
    response = client.post("/guidance/recommendations", json={
        "grade": 12,
        "subjects": [
            {"name": "Mathematics", "score": 85},
            {"name": "Physical Sciences", "score": 82},
            {"name": "English", "score": 80},
            {"name": "Life Orientation", "score": 90},
            {"name": "Accounting", "score": 81},
            {"name": "Technology", "score": 88},
            {"name": "Creative Arts", "score": 84},
        ],
        "interests": ["Engineering"],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["aps_score"] == 49
    assert body["count"] == 3
    universities = [u["name"] for u in body["recommendations"][0]["universities"]]
    assert "Stellenbosch University" in universities


def test_recommendations_reject_unsupported_grade():
    response = client.post("/guidance/recommendations", json={"grade": 8})
    assert response.status_code == 422


# =============================================================================
# PROFILE ENDPOINTS
# =============================================================================

def test_initial_profile():
    body = client.get("/api/profile").json()
    assert body["profile"]["grade"] == 9
    assert body["profile"]["subjects"] == []
    assert body["recommendations"] == []


def test_options():
    body = client.get("/api/profile/options").json()
    assert "Technology" in body["interests"]
    assert "Teamwork" in body["skills"]


def test_document_then_interests_flow():
    client.put("/api/profile/interests", json={"values": ["Technology"]})
    response = client.post("/api/profile/document", json={
        "grade": 9,
        "text": "Mathematics 85%\nEnglish Home Language 60%",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["aps_score"] == 12
    assert body["profile"]["selected_interests"] == ["Technology"]
    assert body["recommendations"][0]["careers"][0]["title"] == "Software Developer"
    assert client.get("/api/profile").json() == body


def test_failed_document_keeps_subjects():
    client.post("/api/profile/subjects", json={
        "grade": 11,
        "subjects": [{"name": "Mathematics", "score": 70}],
    })
    body = client.post("/api/profile/document", json={"grade": 11, "text": "blank"}).json()

    assert [s["name"] for s in body["profile"]["subjects"]] == ["Mathematics"]
    assert body["analysis"]["error_kind"] == "insufficient_text"


def test_manual_subjects_reject_invalid_score():
    response = client.post("/api/profile/subjects", json={
        "grade": 10,
        "subjects": [{"name": "Mathematics", "score": "eighty"}],
    })
    assert response.status_code == 400
    assert client.get("/api/profile").json()["profile"]["subjects"] == []


def test_skills_and_clear():
    client.post("/api/profile/subjects", json={
        "grade": 12,
        "subjects": [{"name": "Mathematics", "score": 60}],
    })
    body = client.put("/api/profile/skills", json={"values": ["Technical Skills"]}).json()
    assert body["profile"]["selected_skills"] == ["Technical Skills"]

    cleared = client.delete("/api/profile").json()
    assert cleared["status"] == "ok"
    assert cleared["profile"]["subjects"] == []
    assert cleared["profile"]["selected_skills"] == []


def _fail(*args, **kwargs):
    raise RuntimeError("engine unavailable")


@pytest.mark.parametrize("attribute, method, path, payload", [
    ("update_interests", "put", "/api/profile/interests", {"values": ["Technology"]}),
    ("update_skills", "put", "/api/profile/skills", {"values": ["Teamwork"]}),
    ("apply_manual_subjects", "post", "/api/profile/subjects",
     {"grade": 10, "subjects": [{"name": "Mathematics", "score": 70}]}),
    ("apply_parse_result", "post", "/api/profile/document",
     {"grade": 10, "text": "Mathematics 70%\nEnglish 60%"}),
])
def test_profile_updates_report_unexpected_errors(monkeypatch, attribute, method, path, payload):
    monkeypatch.setattr(runner, attribute, _fail)

    response = getattr(client, method)(path, json=payload)

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert "engine unavailable" in body["message"]
    assert client.get("/api/profile").json()["profile"]["subjects"] == []


def test_clear_reports_unexpected_errors(monkeypatch):
    monkeypatch.setattr(profile_store, "reset", _fail)

    response = client.delete("/api/profile")

    assert response.status_code == 500
    assert response.json()["status"] == "error"
