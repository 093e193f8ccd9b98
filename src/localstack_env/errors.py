"""Exception hierarchy for localstack_env.

Registry and resolution failures abort environment setup before anything is
sent to the container runtime. Runtime failures carry the runtime's own error
output in their message.
"""

from __future__ import annotations


class LocalstackEnvError(Exception):
    """Base class for all localstack_env errors."""


class UnsupportedServiceError(LocalstackEnvError, ValueError):
    """Raised when a service is outside the supported registry."""

    def __init__(self, service: object, message: str | None = None) -> None:
        self.service = service
        super().__init__(message or f"Unsupported service: {service!r}")


class ResolutionError(LocalstackEnvError):
    """Raised when port bindings or container environment cannot be computed."""

    def __init__(self, service: object, message: str) -> None:
        self.service = service
        super().__init__(message)


class ContainerRuntimeError(LocalstackEnvError, RuntimeError):
    """Base class for failures reported by the container runtime."""


class ImagePullError(ContainerRuntimeError):
    """Raised when the emulator image cannot be pulled."""


class ContainerCreateError(ContainerRuntimeError):
    """Raised when the container cannot be created."""


class ContainerStartError(ContainerRuntimeError):
    """Raised when the container cannot be started."""


class ContainerStopError(ContainerRuntimeError):
    """Raised when the container cannot be stopped."""


class SessionConstructionError(LocalstackEnvError):
    """Raised when a client session for a service cannot be built."""

    def __init__(self, service: object, message: str) -> None:
        self.service = service
        super().__init__(message)


__all__ = [
    "ContainerCreateError",
    "ContainerRuntimeError",
    "ContainerStartError",
    "ContainerStopError",
    "ImagePullError",
    "LocalstackEnvError",
    "ResolutionError",
    "SessionConstructionError",
    "UnsupportedServiceError",
]
