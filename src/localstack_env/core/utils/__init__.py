from .logging import logger, setup_localstack_env_logging

__all__ = [
    "logger",
    "setup_localstack_env_logging",
]
