"""LocalStack container environment.

This package resolves port bindings and container environment for a set of
service selections and drives the container through its lifecycle.
"""

from .backend import ContainerBackend, DockerBackend, get_default_backend
from .manager import LocalstackEnvironment, build_container_config, build_host_config
from .resolver import SERVICES_ENV_VAR, compose_environment, resolve_port_bindings

__all__ = [
    "SERVICES_ENV_VAR",
    "ContainerBackend",
    "DockerBackend",
    "LocalstackEnvironment",
    "build_container_config",
    "build_host_config",
    "compose_environment",
    "get_default_backend",
    "resolve_port_bindings",
]
