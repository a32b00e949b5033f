import os
import tempfile

import pytest
from fastapi.testclient import TestClient

# Base jetable pour l'app créée à l'import de askmynote.main
os.environ.setdefault("DATABASE_URL", f"sqlite:///{tempfile.mkdtemp()}/import.db")

from askmynote.core.config import get_settings
from askmynote.core.deps import get_generation_client
from askmynote.db.database import SessionLocal, init_db
from askmynote.main import create_app
from askmynote.services.generation import ResponseFormat


class FakeGenerator:
    """
    Remplace le client de génération : compte les appels, renvoie des réponses préparées.
    """

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def generate(self, prompt, response_format=ResponseFormat.text):
        self.calls.append((prompt, response_format))
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return ""


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def make_generator():
    return FakeGenerator


@pytest.fixture
def db_session(tmp_path):
    init_db(f"sqlite:///{tmp_path / 'unit.db'}")
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def test_client(tmp_path, monkeypatch, fake_generator):
    """
    TestClient sur une base SQLite temporaire (isolée par test),
    client de génération remplacé par FakeGenerator.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "AskMyNote API (tests)")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setenv("MAX_UPLOAD_MB", "1")  # limite faible pour tests
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    # IMPORTANT: vider le cache des settings pour prendre en compte les env
    get_settings.cache_clear()

    app = create_app()
    app.dependency_overrides[get_generation_client] = lambda: fake_generator
    with TestClient(app) as client:
        yield client
    get_settings.cache_clear()

