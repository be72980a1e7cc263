"""Application settings and configuration."""

import json
import re
from functools import lru_cache
from typing import Annotated, Any, ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)")
_DURATION_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def parse_duration(value: str) -> float:
    """Parse a duration string such as ``1h`` or ``2h45m`` into seconds.

    Raises:
        ValueError: If the string is empty or contains anything but
            number/unit pairs.
    """
    text = value.strip()
    if text == "0":
        return 0.0
    if not text:
        raise ValueError("duration must not be empty")

    position = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        seconds += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        position = match.end()

    if position != len(text):
        raise ValueError(f"invalid duration '{value}'")
    return seconds


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="public-brands-api", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    app_description: str = Field(
        default="A public RESTful API for accessing Brands",
        description="Application description shown in docs and health checks",
    )
    env: str = Field(
        default="local", description="Environment this app is running in"
    )
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=8080, description="Port to listen on")
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARN, ERROR)"
    )

    # HTTP caching
    cache_duration: str = Field(
        default="1h",
        description="Duration GET responses should be cached for, e.g. 2h45m",
    )

    # Backing store
    brands_backend: Literal["graph", "concepts"] = Field(
        default="concepts",
        description="Where brands are read from: the AGE graph or the concepts API",
    )
    authority_precedence: Annotated[list[str], NoDecode] = Field(
        default=["Smartlogic", "TME"],
        description=(
            "Source authorities in order of preference for relationships, "
            "as a JSON list or comma-separated, e.g. Smartlogic,TME"
        ),
    )

    # Upstream concepts API
    concepts_api_url: str = Field(
        default="http://localhost:8080", description="Base URL of the concepts API"
    )
    concepts_api_timeout: float = Field(
        default=10.0, description="Timeout in seconds for concepts API calls"
    )

    # PostgreSQL / AGE
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="brands", description="PostgreSQL database name")
    postgres_pool_min_size: int = Field(default=5, description="Minimum pool size")
    postgres_pool_max_size: int = Field(default=100, description="Maximum pool size")
    postgres_command_timeout: float = Field(
        default=10.0, description="Per-statement timeout for graph queries in seconds"
    )
    age_graph_name: str = Field(default="concepts", description="AGE graph name")

    @field_validator("cache_duration")
    @classmethod
    def validate_cache_duration(cls, v: str) -> str:
        """Reject cache durations that cannot be parsed."""
        _ = parse_duration(v)
        return v

    @field_validator("authority_precedence", mode="before")
    @classmethod
    def split_authority_precedence(cls, v: Any) -> Any:
        """Accept a JSON list or a comma-separated string from the environment."""
        if not isinstance(v, str):
            return v
        text = v.strip()
        if text.startswith("["):
            return json.loads(text)
        return [name.strip() for name in text.split(",") if name.strip()]

    @property
    def cache_max_age(self) -> int:
        """Cache duration expressed in whole seconds."""
        return int(round(parse_duration(self.cache_duration)))

    @property
    def cache_control_header(self) -> str:
        """Value of the Cache-Control header set on successful reads."""
        return f"max-age={self.cache_max_age}, public"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
