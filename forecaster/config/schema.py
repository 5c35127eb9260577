"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from forecaster.config.defaults import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MCP_PATH,
    DEFAULT_PORT,
    NWS_API_BASE,
    USER_AGENT,
)


class Transport(StrEnum):
    STREAMABLE_HTTP = "streamable-http"
    SSE = "sse"
    STDIO = "stdio"


class NwsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NWS_API_BASE
    user_agent: str = Field(default=USER_AGENT, min_length=1)
    # None leaves the HTTP client's own default in place
    timeout: float | None = Field(default=None, gt=0.0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    path: str = DEFAULT_MCP_PATH
    transport: Transport = Transport.STREAMABLE_HTTP


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    nws: NwsConfig = NwsConfig()
    server: ServerConfig = ServerConfig()
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level
