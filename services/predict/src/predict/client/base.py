"""Backend client interface."""
from abc import ABC, abstractmethod

from predict.api.schemas import PromptRequest


class BackendClient(ABC):
    @abstractmethod
    async def generate(self, request: PromptRequest, model: str) -> str:
        """Generate completion for request with model. Returns generated text."""
        ...

    async def aclose(self) -> None:
        """Release network resources held by the client."""
