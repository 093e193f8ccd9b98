"""Container backend protocol definition.

Defines the interface for container operations that can be implemented
by different container runtimes (Docker, Podman, etc.).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localstack_env.types.container import ContainerStatus, PortBindingTable


class ContainerBackend(Protocol):
    """Protocol for container backend implementations.

    Containers are addressed by the identifier returned from container_create.
    """

    def image_pull(self, *, image: str) -> None:
        """Pull an image, streaming progress to the log.

        Pulling an image that is already present is safe and only verifies it.

        Args:
            image: Image reference to pull.

        Raises:
            ImagePullError: If the image cannot be pulled.
        """
        ...

    def container_create(
        self,
        *,
        image: str,
        env: Sequence[str],
        port_bindings: PortBindingTable,
    ) -> str:
        """Create (but do not start) a container.

        Args:
            image: Image to create the container from.
            env: Environment entries in KEY=VALUE form.
            port_bindings: Container port -> host bindings.

        Returns:
            Identifier of the created container.

        Raises:
            ContainerCreateError: If the container cannot be created.
        """
        ...

    def container_start(self, *, container_id: str) -> None:
        """Start a created or stopped container.

        Raises:
            ContainerStartError: If the runtime refuses to start it.
        """
        ...

    def container_stop(self, *, container_id: str) -> None:
        """Stop a running container using the runtime's default grace period.

        Raises:
            ContainerStopError: If the runtime refuses to stop it.
        """
        ...

    def container_status(self, *, container_id: str) -> ContainerStatus:
        """Get the runtime status of a container.

        Returns:
            The container status, or NOT_FOUND if the runtime doesn't know it.
        """
        ...


__all__ = ["ContainerBackend"]
