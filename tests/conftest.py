from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from airsclient_py import AIRSClient, AIRSConfig

TEST_TOKEN = "test-token"
TEST_BASE_URL = "https://mocked.api.endpoint"


def make_response(
    status_code: int = 200, data: Any = None, *, invalid_json: bool = False, text: str = ""
) -> MagicMock:
    """Build a stand-in for :class:`requests.Response`."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text
    if invalid_json:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        resp.json.return_value = data
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session: MagicMock) -> AIRSClient:
    return AIRSClient(AIRSConfig(api_token=TEST_TOKEN, base_url=TEST_BASE_URL, session=session))


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response
