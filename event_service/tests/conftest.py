from __future__ import annotations

import os
import tempfile

# Settings are read at import time, so the environment must be ready first.
_DB_PATH = os.path.join(tempfile.gettempdir(), f"event_service_test_{os.getpid()}.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_PATH}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ESCROW_API_EMAIL"] = "escrow@example.com"
os.environ["ESCROW_API_KEY"] = "test-key"
os.environ["BUCKET_NAME"] = "test-bucket"
os.environ["AWS_REGION"] = "us-east-1"
os.environ["STORAGE_PUBLIC_BASE_URL"] = ""
os.environ["SMTP_HOST"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from event_service.app.main import app  # noqa: E402
from shared.core.auth import create_access_token  # noqa: E402
from shared.core.database import Base, SessionLocal, engine  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database() -> None:
    # Every test starts from empty tables and fresh sequences.
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def bearer_headers(user_id: int) -> dict:
    token = create_access_token({"user_id": user_id, "name": f"user {user_id}"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers() -> dict:
    return bearer_headers(1)


@pytest.fixture
def other_user_headers() -> dict:
    return bearer_headers(2)
