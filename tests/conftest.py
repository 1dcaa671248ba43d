"""Shared pytest fixtures for the endpoint client test suite."""

from typing import Any, Dict

import pytest

from endpointware import ApiClient

BASE_URL = "https://api.example.com"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def rules() -> Dict[str, Dict[str, Any]]:
    return {
        "login": {"path": "/auth/sign_in", "method": "post"},
        "logout": {"path": "/auth/sign_out", "method": "delete"},
        "getProfile": {"path": "/profile", "method": "get"},
        "updateProfile": {"path": "/profile", "method": "put"},
        "getLoad": {"path": "/loads/:id", "method": "get"},
        "updateLoad": {"path": "/loads/:id", "method": "patch", "type": "form"},
        "patchLoad": {"path": "/loads/:id", "method": "patch"},
        "getStop": {"path": "/loads/:load_id/stops/:id", "method": "get"},
        "deleteLoad": {"path": "/loads/:id", "method": "delete", "auth": True},
    }


@pytest.fixture
def api(rules: Dict[str, Dict[str, Any]], base_url: str) -> ApiClient:
    return ApiClient(rules, base_url=base_url)
