import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure predictable environment variables for tests before importing the app.
BASE_DIR = Path(__file__).resolve().parents[1]

if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("FORM_SESSION_LIMIT", "50")

import app.main as main  # noqa: E402  (import after env vars are set)
from app.schemas.user_info import UserInfo  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(main.app) as test_client:
        yield test_client


@pytest.fixture()
def valid_record() -> UserInfo:
    return UserInfo(
        first_name="John",
        last_name="Doe",
        email="john.doe@example.com",
        phone_number="8989898989",
        password="abc123!@",
        confirm_password="abc123!@",
        gender="male",
        interests=["coding", "reading"],
        dob="1990-05-17",
    )
