from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import settings
from core.database import Base, create_db_engine, get_db
from core.seed import seed_if_empty
from main import app
from routers.hotels import get_hotel_client


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    # lowest bcrypt cost keeps the suite quick
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", None)


@pytest.fixture
def engine():
    test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    seed_if_empty(session)
    yield session
    session.close()


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stands in for openai.OpenAI: only chat.completions.create is used."""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content, error)
        self.chat = self


@pytest.fixture
def hotel_client():
    return FakeOpenAI(error=RuntimeError("network down"))


@pytest.fixture
def client(db, hotel_client):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_hotel_client] = lambda: hotel_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    def _register(name="Asha", email="asha@example.com", password="secret123"):
        response = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()
    return _register


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers(register):
    return auth_header(register()["token"])


@pytest.fixture
def fake_openai():
    return FakeOpenAI
