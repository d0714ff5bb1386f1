"""Predict service entrypoint - gateway to a local Ollama backend or mock."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from gateway_shared.logging import configure_logging
from gateway_shared.middleware import RequestIdMiddleware
from gateway_shared.schemas import HealthResponse

from predict.api.routes import router
from predict.client import BackendClient, MockBackendClient, OllamaClient
from predict.config import PredictSettings

_settings: PredictSettings | None = None


def get_settings() -> PredictSettings:
    global _settings
    if _settings is None:
        _settings = PredictSettings()
    return _settings


def build_backend_client(settings: PredictSettings) -> BackendClient:
    if settings.mock:
        return MockBackendClient()
    return OllamaClient(settings.backend_url, timeout=settings.backend_timeout_seconds)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: PredictSettings = app.state.settings
    client = app.state.backend_client or build_backend_client(settings)
    app.state.backend_client = client
    structlog.get_logger().info(
        "backend_client_ready",
        client=type(client).__name__,
        backend_url=settings.backend_url,
        model=settings.model,
    )
    try:
        yield
    finally:
        await client.aclose()


def create_app(
    settings: PredictSettings | None = None,
    backend_client: BackendClient | None = None,
) -> FastAPI:
    """Build the app; a backend_client passed here replaces the configured one."""
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs)
    app = FastAPI(title="Predict Service", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.backend_client = backend_client
    app.add_middleware(RequestIdMiddleware)

    app.include_router(router)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok", service="predict")

    @app.get("/readyz", response_model=HealthResponse)
    async def readyz() -> HealthResponse:
        if app.state.backend_client is None:
            return HealthResponse(status="unhealthy", service="predict")
        return HealthResponse(status="ok", service="predict")

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    log = structlog.get_logger()
    log.info(
        "server_starting",
        address=f"http://{settings.host}:{settings.port}",
        backend_url=settings.backend_url,
        model=settings.model,
        mock=settings.mock,
    )
    try:
        uvicorn.run(
            "predict.main:app",
            host=settings.host,
            port=settings.port,
            timeout_keep_alive=int(settings.keep_alive_timeout_seconds),
            reload=False,
        )
    except Exception:
        log.exception("server_error")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
