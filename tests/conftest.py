import json

import pytest
import requests
from fastapi.testclient import TestClient

from marketmind.config import Settings
from marketmind.main import create_app

FRONTEND = "https://shop.example.com"


def make_settings(**overrides) -> Settings:
    values = {
        "cashfree_app_id": "test-app-id",
        "cashfree_secret_key": "test-secret",
        "cashfree_api_base": "https://sandbox.cashfree.com/",
        "frontend_url": FRONTEND,
        "backend_url": "https://api.example.com",
        "_env_file": None,
    }
    values.update(overrides)
    return Settings(**values)


def gateway_response(body, status_code: int = 200) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = (body or "").encode("utf-8")
    response.url = "https://sandbox.cashfree.com/pg/orders"
    return response


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
