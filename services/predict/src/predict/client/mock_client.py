"""Mock backend client for running the gateway without a local backend."""
from predict.api.schemas import PromptRequest
from predict.client.base import BackendClient


class MockBackendClient(BackendClient):
    async def generate(self, request: PromptRequest, model: str) -> str:
        words = request.prompt.split()
        if request.max_tokens:
            # one word per token
            words = words[: request.max_tokens]
        return f"[mock {model}] {' '.join(words)}"
