"""Predict service configuration."""
from pydantic_settings import SettingsConfigDict

from gateway_shared.config import BaseAppSettings


class PredictSettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="PREDICT_")

    host: str = "0.0.0.0"
    port: int = 8080
    backend_url: str = "http://localhost:11434/api/generate"
    model: str = "qwen3:4b"
    backend_timeout_seconds: float = 60.0
    read_timeout_seconds: float = 15.0
    # uvicorn timeout_keep_alive: idle window between requests on a connection
    keep_alive_timeout_seconds: float = 15.0
    mock: bool = False
