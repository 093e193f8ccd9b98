"""Package logger for localstack_env.

Library code logs through ``logger`` and never configures handlers itself.
The CLI calls ``setup_localstack_env_logging`` once, so container pull output
and lifecycle steps end up on stdout.
"""

import logging
import sys

LOGGER_NAME = "Localstack-Env"
LOG_FORMAT = "[Localstack Env] [%(levelname)s] %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    # Unknown names fall back to INFO
    return logging.getLevelNamesMapping().get(level.strip().upper(), logging.INFO)


def setup_localstack_env_logging(level: int | str = logging.INFO) -> None:
    """
    Attach a stdout handler to the package logger.

    Calling it again replaces the previous handler.

    Args:
        level: Numeric level or level name such as "debug" (default: INFO)
    """
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False


__all__ = ["LOG_FORMAT", "LOGGER_NAME", "logger", "setup_localstack_env_logging"]
