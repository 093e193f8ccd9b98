"""Type definitions for localstack_env."""

from .container import (
    ContainerConfig,
    ContainerPort,
    ContainerStatus,
    EnvironmentState,
    HostConfig,
    PortBinding,
    PortBindingTable,
)
from .service import Service, ServiceSelection

__all__ = [
    "ContainerConfig",
    "ContainerPort",
    "ContainerStatus",
    "EnvironmentState",
    "HostConfig",
    "PortBinding",
    "PortBindingTable",
    "Service",
    "ServiceSelection",
]
