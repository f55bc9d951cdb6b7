"""Route the client's `requests` calls into the in-process application."""
from __future__ import annotations

import pytest
import requests
from fastapi.testclient import TestClient

import api_client


@pytest.fixture
def routed_calls(test_client: TestClient, monkeypatch) -> list:
    """Patch `requests.request` to hit the app; returns the recorded (method, url, timeout) calls."""
    calls = []

    def route_to_app(method, url, json=None, headers=None, timeout=None):
        calls.append((method, url, timeout))
        res = test_client.request(method, url, json=json, headers=headers)
        out = requests.Response()
        out.status_code = res.status_code
        out.reason = res.reason_phrase
        out._content = res.content
        out.headers.update(res.headers)
        out.url = url
        return out

    monkeypatch.setattr(api_client.requests, "request", route_to_app)
    return calls
