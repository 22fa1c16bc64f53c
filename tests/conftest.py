# tests/conftest.py
# Pytest fixtures: isolated credentials, fresh prompt cache & a fake Gen AI client

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from karu_assistant.config import Config
from karu_assistant.prompts.loader import PromptLoader


@pytest.fixture(autouse=True)
def isolate_credentials(monkeypatch):
    # no key from the developer's shell, .env or an earlier test
    monkeypatch.delenv(Config.API_KEY_ENV_VAR, raising=False)
    monkeypatch.setattr(Config, "GOOGLE_AI_API_KEY", None)


@pytest.fixture(autouse=True)
def reset_prompt_cache():
    PromptLoader.reset()
    yield
    PromptLoader.reset()


@pytest.fixture
def genai_client(monkeypatch):
    """Replace genai.Client; the returned mock is the client instance the assistant gets."""
    client = MagicMock(name="genai_client_instance")
    client.models.generate_content.return_value = SimpleNamespace(text="ok", usage_metadata=None)
    client_cls = MagicMock(name="genai.Client", return_value=client)
    monkeypatch.setattr("karu_assistant.client.assistant.genai.Client", client_cls)
    client.client_cls = client_cls
    return client


@pytest.fixture
def reply(genai_client):
    """Set the text the fake model answers with."""
    def _set(text):
        genai_client.models.generate_content.return_value = SimpleNamespace(text=text, usage_metadata=None)
    return _set


@pytest.fixture
def sent_prompt(genai_client):
    """Return the prompt passed to the last generate_content call."""
    def _get():
        return genai_client.models.generate_content.call_args.kwargs["contents"]
    return _get


@pytest.fixture
def prompts_file(tmp_path, monkeypatch):
    """Write a custom prompt catalog and point the loader at it."""
    def _write(catalog):
        path = tmp_path / "prompts.json"
        path.write_text(json.dumps(catalog), encoding="utf-8")
        monkeypatch.setattr(PromptLoader, "prompts_file", path)
        PromptLoader.reset()
        return path
    return _write
