"""Settings for the LocalStack environment.

Environment variables can override defaults using the LOCALSTACK_ENV_ prefix.

Example environment variables:
    LOCALSTACK_ENV_IMAGE=localstack/localstack:0.10.9
    LOCALSTACK_ENV_SETTLE_DELAY_SEC=10
    LOCALSTACK_ENV_DOCKER_CMD=podman
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_IMAGE = "docker.io/localstack/localstack"
DEFAULT_SETTLE_DELAY_SEC = 5.0


class LocalstackSettings(BaseSettings):
    """Runtime settings for creating and driving the LocalStack container."""

    model_config = SettingsConfigDict(env_prefix="LOCALSTACK_ENV_", frozen=True)

    image: str = DEFAULT_IMAGE
    """Docker image the environment container is created from."""

    docker_cmd: str = "docker"
    """Docker-compatible CLI used by the default backend."""

    settle_delay_sec: float = Field(default=DEFAULT_SETTLE_DELAY_SEC, ge=0)
    """Fixed wait after start/stop before returning to the caller."""

    hostname: str = "localhost"
    """Hostname used when building endpoint URLs for the published ports."""

    log_level: str = "INFO"
    """Log level name used by the CLI."""


@lru_cache
def get_settings() -> LocalstackSettings:
    """Get the cached settings instance.

    Settings are read from the environment once per process.

    Returns:
        The LocalstackSettings instance.
    """
    return LocalstackSettings()


__all__ = [
    "DEFAULT_IMAGE",
    "DEFAULT_SETTLE_DELAY_SEC",
    "LocalstackSettings",
    "get_settings",
]
