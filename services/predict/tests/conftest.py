"""Shared fixtures: settings and in-process stand-ins for the backend."""
import httpx
import pytest

from predict.api.schemas import PromptRequest
from predict.client.base import BackendClient
from predict.config import PredictSettings


class RecordingBackend(BackendClient):
    """Returns a fixed reply (or raises a fixed error) and records every call."""

    def __init__(self, reply: str = "ok", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[PromptRequest, str]] = []
        self.closed = False

    async def generate(self, request: PromptRequest, model: str) -> str:
        self.calls.append((request, model))
        if self.error is not None:
            raise self.error
        return self.reply

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> PredictSettings:
    return PredictSettings(_env_file=None, json_logs=False)


@pytest.fixture
def make_backend():
    """Factory for RecordingBackend(reply=..., error=...)."""
    return RecordingBackend


@pytest.fixture
def backend(make_backend):
    return make_backend(reply="hello")


@pytest.fixture
def mock_http_client():
    """Factory: AsyncClient whose requests are answered by handler instead of the network."""

    def build(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return build
