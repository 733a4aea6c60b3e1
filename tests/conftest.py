from __future__ import annotations

import json

import pytest
import requests

from azure_chat.config import CREDENTIAL_ENV_VARS

ENV = {
    "AZURE_API_KEY": "sk-test-secret-0000abcd",
    "AZURE_OPENAI_API_INSTANCE_NAME": "foo",
    "AZURE_OPENAI_API_DEPLOYMENT_NAME": "bar",
    "AZURE_OPENAI_API_VERSION": "2023-05-15",
}


def make_response(status_code: int, payload=None, *, text: str | None = None, url: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    if text is not None:
        resp._content = text.encode("utf-8")
        resp.headers["Content-Type"] = "text/plain"
    else:
        resp._content = json.dumps(payload).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    resp.headers["x-request-id"] = "req-123"
    return resp


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # Keep a developer's .env and shell exports out of the tests.
    monkeypatch.chdir(tmp_path)
    for env in CREDENTIAL_ENV_VARS.values():
        monkeypatch.delenv(env, raising=False)
    monkeypatch.delenv("AZURE_OPENAI_REQUEST_TIMEOUT", raising=False)


@pytest.fixture()
def azure_env(monkeypatch):
    for k, v in ENV.items():
        monkeypatch.setenv(k, v)
    return dict(ENV)


class FakePost:
    """Stands in for requests.post and records every call."""

    def __init__(self, result=None, exc: Exception | None = None):
        self.result = result
        self.exc = exc
        self.calls: list[dict] = []

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        self.result.url = url
        return self.result


@pytest.fixture()
def fake_post(monkeypatch):
    def install(result=None, exc: Exception | None = None) -> FakePost:
        fake = FakePost(result, exc)
        monkeypatch.setattr(requests, "post", fake)
        return fake

    return install
