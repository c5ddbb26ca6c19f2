import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from claritypath.config import ClarityConfig
from claritypath.diagnosis.main import create_app


def gemini_payload(text: str) -> dict:
    return {'candidates': [{'content': {'parts': [{'text': text}], 'role': 'model'}}]}


def fake_response(status_code: int = 200, payload=None, text: str = '') -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = text or (json.dumps(payload) if payload is not None else '')
    if payload is None:
        resp.json.side_effect = ValueError('No JSON object could be decoded')
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def offline_config():
    return ClarityConfig(api_key=None)


@pytest.fixture
def live_config():
    return ClarityConfig(api_key='test-key', model='gemini-test', api_base='https://gemini.example/v1beta')


@pytest.fixture
def remote_config():
    return ClarityConfig(api_url='https://clarity.example')


@pytest.fixture
def offline_client(offline_config):
    return TestClient(create_app(offline_config))


@pytest.fixture
def live_client(live_config):
    return TestClient(create_app(live_config))
