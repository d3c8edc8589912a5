"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables before importing
os.environ["ENV"] = "test"
os.environ["APP_ID"] = "test-app"
os.environ["JWT_SECRET"] = "test-jwt-secret-for-unit-tests-only"
os.environ["DATABASE_URL"] = ""
os.environ["OAUTH_SERVER_URL"] = "https://oauth.test"
os.environ["OWNER_OPEN_ID"] = "owner-open-id"
os.environ["LLM_API_URL"] = "https://forge.test"
os.environ["LLM_API_KEY"] = "test-llm-key"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce log noise in tests

# Import after setting env vars
from creative_marketplace.api_server import app
from creative_marketplace.auth import COOKIE_NAME, create_session_token
from creative_marketplace.db import Base, User, get_db
from creative_marketplace.services.oauth_service import get_oauth_service


@pytest.fixture(scope="function")
def test_engine():
    """In-memory SQLite engine shared across connections"""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine):
    """Database session, also injected into the app via get_db"""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestingSessionLocal()

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    yield session
    session.close()
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture(scope="function")
def oauth_service():
    """Mock identity provider client"""
    service = Mock()
    app.dependency_overrides[get_oauth_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_oauth_service, None)


@pytest.fixture(scope="function")
def client(db_session, oauth_service):
    """Test client backed by the in-memory database"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def no_db_client(oauth_service):
    """Test client with no database configured"""
    def override_get_db():
        yield None

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def user_factory(db_session):
    """Create users with unique open ids"""
    counter = {"n": 0}

    def _create(name="Test User", role="user", user_type="client", open_id=None):
        counter["n"] += 1
        user = User(
            open_id=open_id or f"open-id-{counter['n']}",
            name=name,
            email=f"user{counter['n']}@example.com",
            login_method="email",
            role=role,
            user_type=user_type,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create


@pytest.fixture
def login_as(client):
    """Attach a signed session cookie for the given user to the client"""
    def _login(user):
        client.cookies.set(COOKIE_NAME, create_session_token(user.open_id, name=user.name))
        return client

    return _login
