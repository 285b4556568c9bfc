"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from astrocache.ingest.weatherstack_client import WEATHERSTACK_BASE_URL


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = WEATHERSTACK_BASE_URL
    access_key: str = ""
    timeout: float = Field(default=30.0, gt=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origins: list[str] = ["http://localhost:5173"]  # frontend default


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.INFO


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
