from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from coasterapi.main import create_application

ADMIN_PASSWORD = "tr3sp4ss-for-tests"


@pytest.fixture()
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture()
def client() -> TestClient:
    app = create_application(admin_password=ADMIN_PASSWORD, rng=random.Random(1234))
    with TestClient(app) as test_client:
        yield test_client
