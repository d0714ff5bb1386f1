"""HTTP client for the Ollama generate API."""
import asyncio
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

from gateway_shared.http_client import create_http_client

from predict.api.schemas import PromptRequest, describe_validation_error, null_as_default
from predict.client.base import BackendClient
from predict.client.errors import (
    BackendDecodeError,
    BackendStatusError,
    BackendTimeoutError,
    BackendTransportError,
)


class GenerationOptions(BaseModel):
    num_predict: int = 0
    temperature: float = 0.0


class BackendGenerateRequest(BaseModel):
    model: str
    prompt: str
    # The response is decoded as one JSON object, never as a chunk stream.
    stream: bool = False
    options: GenerationOptions

    def to_payload(self) -> dict:
        """Wire form: zero-valued options are left out so the backend keeps its defaults."""
        payload = self.model_dump(exclude={"options"})
        payload["options"] = self.options.model_dump(exclude_defaults=True)
        return payload


class BackendGenerateResponse(BaseModel):
    response: str = ""

    @field_validator("response", mode="before")
    @classmethod
    def _null_is_absent(cls, value: Any, info: ValidationInfo) -> Any:
        return null_as_default(cls, value, info)


def build_generate_request(request: PromptRequest, model: str) -> BackendGenerateRequest:
    return BackendGenerateRequest(
        model=model,
        prompt=request.prompt,
        stream=False,
        options=GenerationOptions(
            num_predict=request.max_tokens,
            temperature=request.temperature,
        ),
    )


async def _read_body_lenient(resp: httpx.Response) -> str:
    try:
        raw = await resp.aread()
    except httpx.HTTPError:
        return ""
    return raw.decode("utf-8", errors="replace")


def _describe_transport_error(exc: httpx.HTTPError) -> str:
    detail = str(exc)
    return f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__


class OllamaClient(BackendClient):
    """One POST to the generate endpoint per call; no retries."""

    def __init__(
        self,
        url: str,
        timeout: float = 60.0,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or create_http_client(timeout)

    async def generate(self, request: PromptRequest, model: str) -> str:
        payload = build_generate_request(request, model).to_payload()
        try:
            return await asyncio.wait_for(self._post(payload), timeout=self._timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise BackendTimeoutError(self._timeout) from e
        except httpx.HTTPError as e:
            raise BackendTransportError(_describe_transport_error(e)) from e

    async def _post(self, payload: dict) -> str:
        http_request = self._client.build_request("POST", self._url, json=payload)
        resp = await self._client.send(http_request, stream=True)
        try:
            if resp.status_code != httpx.codes.OK:
                raise BackendStatusError(resp.status_code, await _read_body_lenient(resp))
            body = await resp.aread()
        finally:
            await resp.aclose()
        try:
            decoded = BackendGenerateResponse.model_validate_json(body)
        except ValidationError as e:
            raise BackendDecodeError(
                f"malformed backend response: {describe_validation_error(e)}"
            ) from e
        return decoded.response

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
