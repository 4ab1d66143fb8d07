# tests/conftest.py

"""
Pytest Fixtures - shared app, client and scoring data

QUESTION ID REFERENCE:
- forty_questions: "q1" .. "q40", five per pillar under positional chunking
- Seeded CORE bank: "core_01" .. "core_40"
"""

import pytest

from config.settings import TestingConfig
from readiness.assessment.scoring import DEFAULT_PILLAR_NAMES
from readiness.database.models import db
from web.app import create_app


# =============================================================================
# FLASK APP FIXTURES
# =============================================================================

@pytest.fixture
def app():
    """Fresh app with an in-memory database and the seeded question bank."""
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def lead_payload():
    return {
        "contactName": "Ada Lovelace",
        "email": "Ada@Example.com",
        "companyName": "Analytical Engines Ltd",
        "jobTitle": "CTO",
        "companySize": "51-200 employees",
        "country": "United Kingdom",
        "industry": "Technology"
    }


@pytest.fixture
def lead_id(client, lead_payload):
    """ID of a lead created through the API."""
    response = client.post("/api/lead/create", json=lead_payload)
    assert response.status_code == 201
    return response.get_json()["leadId"]


# =============================================================================
# SCORING FIXTURES
# =============================================================================

@pytest.fixture
def pillar_names():
    return list(DEFAULT_PILLAR_NAMES)


@pytest.fixture
def forty_questions():
    """Forty ordered questions given as dicts, without pillar tags."""
    return [{"id": f"q{i}"} for i in range(1, 41)]


@pytest.fixture
def tagged_questions(pillar_names):
    """Sixteen questions tagged with their pillar, two per pillar, interleaved."""
    questions = []
    for round_index in range(2):
        for pillar in pillar_names:
            questions.append({"id": f"{pillar.lower()}_{round_index}", "pillar": pillar})
    return questions
