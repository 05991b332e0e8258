import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from agents.reflection import graph as reflection_graph
from core.config import CREDENTIAL_ENV_VARS, Settings, get_settings
from main import app


class FakeGenerationModel:
    """Stands in for the chat model; returns canned text or raises."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.text)

    @property
    def prompts(self):
        return [messages[0].content for messages in self.calls]


@pytest.fixture
def clean_env(monkeypatch):
    """Environment with none of the service's variables set."""
    for name in (*CREDENTIAL_ENV_VARS, "GEN_AI_MODEL", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def configured_settings(clean_env):
    return Settings(_env_file=None, api_key="test-key")


@pytest.fixture
def fake_model(monkeypatch):
    """Install a FakeGenerationModel; call with the text (or error) to return."""
    installed = {}

    def install(text="", error=None):
        model = FakeGenerationModel(text=text, error=error)
        installed["model"] = model
        installed["configs"] = []

        def factory(config, temperature=None):
            installed["configs"].append(config)
            return model

        monkeypatch.setattr(reflection_graph, "get_generation_model", factory)
        return model

    install.installed = installed
    return install


@pytest.fixture
def client(configured_settings):
    app.dependency_overrides[get_settings] = lambda: configured_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(clean_env):
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
