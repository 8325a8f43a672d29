"""
Pytest configuration and shared fixtures for the Job Portal tests.
"""
import os
import sys

# Settings are read once at import time, so the test environment goes first.
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-tokens-12345678901234567890")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from job_portal.backend.main import app
from job_portal.backend.config.settings import get_settings
from job_portal.backend.models.db.database import Base, build_engine, get_db
from job_portal.backend.models.db import application, job, user  # noqa: F401
from job_portal.frontend.client import ApiClient
from job_portal.frontend.pages import Page, PortalApp
from job_portal.frontend.session import SessionManager


# Test Database Setup
@pytest.fixture(scope="function")
def test_db_engine():
    """A fresh in-memory SQLite database per test."""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine):
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_db_engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def test_client(test_db_session):
    """Create a test client with overridden database dependency."""
    def override_get_db():
        yield test_db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    return get_settings()


# User Fixtures
@pytest.fixture
def test_user_data():
    """Sample user credentials."""
    return {
        "email": "a@x.com",
        "password": "secret1"
    }


@pytest.fixture
def admin_credentials(settings):
    return {
        "email": settings.admin_email,
        "password": settings.admin_password
    }


def login_headers(client, path, credentials):
    response = client.post(path, json=credentials)
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(test_client, test_user_data):
    """Register and log in a regular user; return its Authorization header."""
    response = test_client.post("/api/auth/register", json=test_user_data)
    assert response.status_code == 201
    return login_headers(test_client, "/api/auth/login", test_user_data)


@pytest.fixture
def other_user_headers(test_client):
    credentials = {"email": "b@x.com", "password": "secret2"}
    response = test_client.post("/api/auth/register", json=credentials)
    assert response.status_code == 201
    return login_headers(test_client, "/api/auth/login", credentials)


@pytest.fixture
def admin_headers(test_client, admin_credentials):
    return login_headers(test_client, "/api/auth/admin-login", admin_credentials)


# Job Fixtures
@pytest.fixture
def sample_job_data():
    return {
        "title": "Eng",
        "company": "Acme",
        "location": "Remote",
        "description": "Build things"
    }


@pytest.fixture
def created_job(test_client, admin_headers, sample_job_data):
    response = test_client.post("/api/jobs", json=sample_job_data, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["job"]


# Frontend Fixtures
@pytest.fixture
def api_client(test_client):
    """Frontend API client talking to the in-process backend."""
    return ApiClient(base_url="http://testserver/api", http=test_client)


@pytest.fixture
def portal(api_client):
    return PortalApp(api_client, SessionManager())


@pytest.fixture
def page():
    return Page()
