"""Predict API routes."""
import asyncio
import time

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from predict.api.schemas import APIResponse, PromptRequest, describe_validation_error
from predict.client import BackendError

router = APIRouter(tags=["predict"])

log = structlog.get_logger()


async def _read_body(request: Request, timeout: float) -> bytes:
    try:
        return await asyncio.wait_for(request.body(), timeout=timeout)
    except asyncio.TimeoutError:
        log.info("predict_rejected", reason="body_read_timeout")
        raise HTTPException(status_code=408, detail="request body read timed out") from None


def _parse_prompt_request(raw: bytes) -> PromptRequest:
    try:
        body = PromptRequest.model_validate_json(raw)
    except ValidationError as e:
        detail = describe_validation_error(e)
        log.info("predict_rejected", reason="invalid_body", detail=detail)
        raise HTTPException(status_code=400, detail=f"invalid request body: {detail}") from e
    if not body.prompt:
        log.info("predict_rejected", reason="empty_prompt")
        raise HTTPException(status_code=400, detail="prompt is required")
    return body


@router.post("/predict", response_model=APIResponse)
async def predict(request: Request) -> APIResponse:
    settings = request.app.state.settings
    client = request.app.state.backend_client
    raw = await _read_body(request, settings.read_timeout_seconds)
    body = _parse_prompt_request(raw)

    started = time.perf_counter()
    try:
        text = await client.generate(body, settings.model)
    except BackendError as e:
        log.warning("backend_call_failed", kind=e.kind, error=str(e), model=settings.model)
        raise HTTPException(status_code=500, detail=f"model error: {e}") from e
    log.info(
        "predict_completed",
        model=settings.model,
        latency_ms=round((time.perf_counter() - started) * 1000, 1),
        generated_chars=len(text),
    )
    return APIResponse(generated=text)
