"""Container-related type definitions for LocalStack environments."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST_IP = "0.0.0.0"
MAX_PORT = 65535


class ContainerStatus(StrEnum):
    """Status of a Docker container as reported by the runtime."""

    CREATED = "created"
    RUNNING = "running"
    PAUSED = "paused"
    RESTARTING = "restarting"
    EXITED = "exited"
    DEAD = "dead"
    NOT_FOUND = "not_found"


class EnvironmentState(StrEnum):
    """Lifecycle state of an environment as last observed by its handle."""

    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"


class ContainerPort(BaseModel):
    """A port exposed inside the container."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(gt=0, le=MAX_PORT, description="Port number inside the container")
    protocol: str = Field(default="tcp", description="Transport protocol")

    def __str__(self) -> str:
        return f"{self.port}/{self.protocol}"


class PortBinding(BaseModel):
    """A host address a container port is published on.

    Attributes:
        host_ip: Host interface to bind (defaults to all interfaces).
        host_port: Host port number.
    """

    model_config = ConfigDict(frozen=True)

    host_ip: str = Field(default=DEFAULT_HOST_IP, description="Host interface to bind")
    host_port: int = Field(gt=0, le=MAX_PORT, description="Host port number")


# Internal container port ("4572/tcp") -> host bindings for that port
PortBindingTable = Mapping[str, tuple[PortBinding, ...]]


class ContainerConfig(BaseModel):
    """Image and environment the container is created with."""

    model_config = ConfigDict(frozen=True)

    image: str = Field(description="Docker image name")
    env: tuple[str, ...] = Field(default=(), description="Environment entries in KEY=VALUE form")


class HostConfig(BaseModel):
    """Host-side configuration of the container."""

    model_config = ConfigDict(frozen=True)

    port_bindings: PortBindingTable = Field(description="Container port -> host bindings (read-only)")

    @field_validator("port_bindings", mode="after")
    @classmethod
    def _freeze_port_bindings(cls, value: PortBindingTable) -> PortBindingTable:
        return MappingProxyType(dict(value))

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        """Render port bindings in the runtime's JSON shape."""
        return {
            container_port: [{"HostIp": binding.host_ip, "HostPort": str(binding.host_port)} for binding in bindings]
            for container_port, bindings in self.port_bindings.items()
        }


__all__ = [
    "DEFAULT_HOST_IP",
    "MAX_PORT",
    "ContainerConfig",
    "ContainerPort",
    "ContainerStatus",
    "EnvironmentState",
    "HostConfig",
    "PortBinding",
    "PortBindingTable",
]
