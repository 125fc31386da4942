import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from gateway.config import Settings
from gateway.main import create_app
from gateway.services.clients import Clients
from gateway.services.completion_service import CompletionService


class FakeStorage:
    """In-memory stand-in for ObjectStorage that records every call."""

    def __init__(self, buckets=(), exists_error=None, create_error=None, put_error=None):
        self.buckets = {name: {} for name in buckets}
        self.exists_error = exists_error
        self.create_error = create_error
        self.put_error = put_error
        self.calls = []

    def bucket_exists(self, bucket_name):
        self.calls.append(("bucket_exists", bucket_name))
        if self.exists_error:
            raise self.exists_error
        return bucket_name in self.buckets

    def make_bucket(self, bucket_name):
        self.calls.append(("make_bucket", bucket_name))
        if self.create_error:
            raise self.create_error
        self.buckets[bucket_name] = {}

    def put_text(self, bucket_name, object_name, content):
        self.calls.append(("put_text", bucket_name, object_name))
        if self.put_error:
            raise self.put_error
        self.buckets[bucket_name][object_name] = content


def make_choice(content):
    return SimpleNamespace(message=SimpleNamespace(role="assistant", content=content))


def make_completion_service(choices=None, error=None):
    """Real CompletionService with the OpenAI transport mocked out."""
    service = CompletionService(api_key="sk-test", model="gpt-3.5-turbo")
    service.client = MagicMock()
    create = AsyncMock()
    if error is not None:
        create.side_effect = error
    else:
        create.return_value = SimpleNamespace(choices=choices or [])
    service.client.chat.completions.create = create
    return service


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep stray APP_* variables, .env and config.yaml out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("APP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings():
    return Settings(port="8080", storage_endpoint="localhost:9000")


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def make_client(settings):
    def _make(completion=None, storage=None, app_settings=None):
        app = create_app(app_settings or settings, Clients(completion=completion, storage=storage))
        return TestClient(app)

    return _make
