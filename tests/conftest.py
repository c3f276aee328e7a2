import pytest
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"

from career_ai.database import Base, get_db
from career_ai.main import app
from career_ai.models.user import User
from career_ai.routers.deps import get_completion_client
from career_ai.services.identity import StaticIdentityResolver
from fastapi.testclient import TestClient

PRINCIPAL = "user_2abc"


class FakeCompletionClient:
    """Scripted stand-in for the completion API. Exceptions in the script are raised."""

    def __init__(self):
        self.responses = []
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)
        return self

    def complete(self, system_prompt, user_prompt, temperature):
        self.calls.append({
            "system": system_prompt,
            "user": user_prompt,
            "temperature": temperature,
        })
        if not self.responses:
            raise RuntimeError("No scripted completion left")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()

@pytest.fixture(scope="function")
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()

@pytest.fixture(scope="function")
def user(db_session):
    """An onboarded user in the Software industry."""
    user = User(
        principal_id=PRINCIPAL,
        email="dev@example.com",
        name="Sam Dev",
        industry="Software",
        experience=5,
        skills=["Go", "SQL"],
        bio="Backend engineer focused on data platforms.",
    )
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture(scope="function")
def identity():
    return StaticIdentityResolver(PRINCIPAL)

@pytest.fixture(scope="function")
def anonymous():
    return StaticIdentityResolver(None)

@pytest.fixture(scope="function")
def stranger():
    """Authenticated principal with no user row."""
    return StaticIdentityResolver("user_unknown")

@pytest.fixture(scope="function")
def completion_client():
    return FakeCompletionClient()

@pytest.fixture(scope="function")
def auth_headers():
    from career_ai.core.security import create_access_token
    return {"Authorization": f"Bearer {create_access_token(PRINCIPAL)}"}

@pytest.fixture(scope="function")
def client(db_session, completion_client):
    """TestClient wired to the test session and the scripted completion client."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
