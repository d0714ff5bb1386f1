from predict.client.base import BackendClient
from predict.client.errors import (
    BackendDecodeError,
    BackendError,
    BackendStatusError,
    BackendTimeoutError,
    BackendTransportError,
)
from predict.client.mock_client import MockBackendClient
from predict.client.ollama_client import OllamaClient

__all__ = [
    "BackendClient",
    "BackendDecodeError",
    "BackendError",
    "BackendStatusError",
    "BackendTimeoutError",
    "BackendTransportError",
    "MockBackendClient",
    "OllamaClient",
]
