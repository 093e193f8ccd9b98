"""localstack-env - Local AWS emulation environments on Docker"""

from localstack_env.core.utils import logger
from localstack_env.environment import LocalstackEnvironment
from localstack_env.sessions import SessionConfig, SessionFactory
from localstack_env.types import Service, ServiceSelection

__version__ = "0.1.0"

__all__ = [
    "LocalstackEnvironment",
    "Service",
    "ServiceSelection",
    "SessionConfig",
    "SessionFactory",
    "logger",
]
