"""Container runtimes that can host a LocalStack environment.

``DockerBackend`` drives any docker-compatible CLI, so switching runtimes is a
matter of setting ``LOCALSTACK_ENV_DOCKER_CMD`` (for example to ``podman``).
"""

from ...settings import get_settings
from .docker import DockerBackend
from .protocol import ContainerBackend


def get_default_backend(docker_cmd: str | None = None) -> ContainerBackend:
    """Build the backend used when a caller does not inject one.

    Args:
        docker_cmd: CLI executable to drive. None reads it from settings.
    """
    return DockerBackend(docker_cmd=docker_cmd or get_settings().docker_cmd)


__all__ = [
    "ContainerBackend",
    "DockerBackend",
    "get_default_backend",
]
