"""Core modules for localstack_env."""

from .utils.logging import logger, setup_localstack_env_logging

__all__ = [
    "logger",
    "setup_localstack_env_logging",
]
