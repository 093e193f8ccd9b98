"""Docker backend implementation.

Uses the docker CLI to manage containers.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from localstack_env.core.utils import logger
from localstack_env.errors import (
    ContainerCreateError,
    ContainerStartError,
    ContainerStopError,
    ImagePullError,
)
from localstack_env.types.container import ContainerStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localstack_env.types.container import PortBindingTable


def _run(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    logger.debug(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd, capture_output=True, text=True)


class DockerBackend:
    """Docker implementation of ContainerBackend.

    Uses the docker CLI to manage containers.

    Args:
        docker_cmd: Name or path of the docker executable.
    """

    def __init__(self, docker_cmd: str = "docker") -> None:
        self.docker_cmd = docker_cmd

    def image_pull(self, *, image: str) -> None:
        """Pull a Docker image and stream its progress output to the log."""
        cmd = [self.docker_cmd, "pull", image]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            with subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True) as proc:
                last_line = ""
                for line in proc.stdout or ():
                    line = line.rstrip()
                    if line:
                        last_line = line
                        logger.info(line)
                returncode = proc.wait()
        except OSError as e:
            raise ImagePullError(f"Failed to pull image {image}: {e}") from e

        if returncode != 0:
            raise ImagePullError(f"Failed to pull image {image}: {last_line}")
        logger.info(f"Successfully pulled image {image}")

    def container_create(
        self,
        *,
        image: str,
        env: Sequence[str],
        port_bindings: PortBindingTable,
    ) -> str:
        """Create a Docker container and return its ID."""
        cmd = [self.docker_cmd, "create"]

        # Add environment variables
        for entry in env:
            cmd.extend(["-e", entry])

        # Add port bindings (host_ip:host_port:container_port/protocol)
        for container_port, bindings in port_bindings.items():
            for binding in bindings:
                cmd.extend(["-p", f"{binding.host_ip}:{binding.host_port}:{container_port}"])

        cmd.append(image)

        try:
            result = _run(cmd)
        except OSError as e:
            raise ContainerCreateError(f"Failed to create container: {e}") from e
        if result.returncode != 0:
            raise ContainerCreateError(f"Failed to create container: {result.stderr.strip()}")

        container_id = result.stdout.strip()
        if not container_id:
            raise ContainerCreateError("Failed to create container: runtime returned no container ID")
        return container_id

    def container_start(self, *, container_id: str) -> None:
        """Start a Docker container."""
        try:
            result = _run([self.docker_cmd, "start", container_id])
        except OSError as e:
            raise ContainerStartError(f"Failed to start container {container_id}: {e}") from e
        if result.returncode != 0:
            raise ContainerStartError(f"Failed to start container {container_id}: {result.stderr.strip()}")

    def container_stop(self, *, container_id: str) -> None:
        """Stop a Docker container."""
        try:
            result = _run([self.docker_cmd, "stop", container_id])
        except OSError as e:
            raise ContainerStopError(f"Failed to stop container {container_id}: {e}") from e
        if result.returncode != 0:
            raise ContainerStopError(f"Failed to stop container {container_id}: {result.stderr.strip()}")

    def container_status(self, *, container_id: str) -> ContainerStatus:
        """Get the status of a Docker container."""
        try:
            result = _run([self.docker_cmd, "inspect", "-f", "{{.State.Status}}", container_id])
        except OSError:
            return ContainerStatus.NOT_FOUND
        if result.returncode != 0:
            return ContainerStatus.NOT_FOUND

        try:
            return ContainerStatus(result.stdout.strip())
        except ValueError:
            logger.warning(f"Unknown status for container {container_id}: {result.stdout.strip()}")
            return ContainerStatus.NOT_FOUND


__all__ = ["DockerBackend"]
