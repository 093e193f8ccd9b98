"""Lifecycle manager for the LocalStack container.

This module provides the LocalstackEnvironment class for creating, starting
and stopping the single emulator container of a process.
"""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING

from localstack_env.core.utils import logger
from localstack_env.errors import UnsupportedServiceError
from localstack_env.services.registry import get_default_port, parse_service, supported_services
from localstack_env.sessions import SessionConfig, SessionFactory
from localstack_env.settings import get_settings
from localstack_env.types.container import ContainerConfig, ContainerPort, EnvironmentState, HostConfig
from localstack_env.types.service import Service

from .backend import ContainerBackend, get_default_backend
from .resolver import compose_environment, resolve_port_bindings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from localstack_env.settings import LocalstackSettings
    from localstack_env.types.container import ContainerStatus
    from localstack_env.types.service import ServiceSelection


def build_container_config(image: str, selections: Sequence[ServiceSelection]) -> ContainerConfig:
    """Build the container config: image plus the SERVICES environment entry."""
    return ContainerConfig(image=image, env=tuple(compose_environment(selections)))


def build_host_config(selections: Sequence[ServiceSelection]) -> HostConfig:
    """Build the host config holding the container's port bindings."""
    return HostConfig(port_bindings=resolve_port_bindings(selections))


class LocalstackEnvironment:
    """Handle to the LocalStack container of this process.

    Use create() to pull the image and create the container, then start() and
    stop() it. The handle records the last state it drove the container into;
    if start or stop fails, the recorded state is left as it was and the caller
    has to reconcile with the runtime (see status()).

    Args:
        container_id: Runtime identifier of the created container.
        backend: Container backend that created the container.
        container_config: Image and environment the container was created with.
        host_config: Port bindings the container was created with.
        settings: Settings used for settle delay and endpoint hostname.

    Example:
        >>> env = LocalstackEnvironment.create([ServiceSelection(service=Service.S3, port=9000)])
        >>> env.start()
        >>> print(env.endpoint_url(Service.S3))
        >>> env.stop()
    """

    def __init__(
        self,
        *,
        container_id: str,
        backend: ContainerBackend,
        container_config: ContainerConfig,
        host_config: HostConfig,
        settings: LocalstackSettings,
    ) -> None:
        self.container_id = container_id
        self.backend = backend
        self.container_config = container_config
        self.host_config = host_config
        self.settings = settings
        self.state = EnvironmentState.CREATED

    @classmethod
    def create(
        cls,
        selections: Sequence[ServiceSelection] = (),
        *,
        backend: ContainerBackend | None = None,
        settings: LocalstackSettings | None = None,
    ) -> LocalstackEnvironment:
        """Pull the emulator image and create a container for the selected services.

        With no selections, every supported service is published on its
        default port and the image decides which services to run.

        Args:
            selections: Services to run, possibly empty.
            backend: Optional container backend. If None, uses Docker.
            settings: Optional settings. If None, reads them from the environment.

        Returns:
            A new environment in the CREATED state.

        Raises:
            ResolutionError: If a selection names an unsupported service.
            ImagePullError: If the image cannot be pulled.
            ContainerCreateError: If the container cannot be created.
        """
        settings = settings or get_settings()
        backend = backend or get_default_backend(settings.docker_cmd)

        container_config = build_container_config(settings.image, selections)
        logger.info(f"Container config is {container_config.model_dump_json(indent=2)}")
        host_config = build_host_config(selections)
        logger.info(f"Host config port bindings are {json.dumps(host_config.to_dict(), indent=2)}")

        logger.info(f"Pulling image {container_config.image}")
        backend.image_pull(image=container_config.image)

        container_id = backend.container_create(
            image=container_config.image,
            env=container_config.env,
            port_bindings=host_config.port_bindings,
        )
        logger.info(f"Created container {container_id}")

        return cls(
            container_id=container_id,
            backend=backend,
            container_config=container_config,
            host_config=host_config,
            settings=settings,
        )

    def start(self) -> None:
        """Start the container and wait the settle delay.

        The delay gives the emulator time to bind its ports; readiness is not
        checked.

        Raises:
            ContainerStartError: If the runtime fails to start the container.
        """
        logger.info(f"Starting container: {self.container_id}")
        self.backend.container_start(container_id=self.container_id)
        time.sleep(self.settings.settle_delay_sec)
        self.state = EnvironmentState.RUNNING
        logger.info("Container started")

    def stop(self) -> None:
        """Stop the container and wait the settle delay.

        The container is not removed.

        Raises:
            ContainerStopError: If the runtime fails to stop the container.
        """
        logger.info(f"Stopping container: {self.container_id}")
        self.backend.container_stop(container_id=self.container_id)
        time.sleep(self.settings.settle_delay_sec)
        self.state = EnvironmentState.STOPPED
        logger.info("Container stopped")

    def status(self) -> ContainerStatus:
        """Get the container status as reported by the runtime."""
        return self.backend.container_status(container_id=self.container_id)

    def host_port(self, service: Service | str) -> int:
        """Get the host port a service is published on.

        Raises:
            UnsupportedServiceError: If the service is unknown or not published
                by this environment.
        """
        if not isinstance(service, Service):
            service = parse_service(str(service))
        container_port = str(ContainerPort(port=get_default_port(service)))
        bindings = self.host_config.port_bindings.get(container_port)
        if not bindings:
            raise UnsupportedServiceError(service, f"Service {service.value} is not published by this environment")
        return bindings[0].host_port

    def endpoint_url(self, service: Service | str) -> str:
        """Get the URL of a published service (e.g. "http://localhost:4572")."""
        return f"http://{self.settings.hostname}:{self.host_port(service)}"

    def published_ports(self) -> dict[Service, int]:
        """Get the host port of every service published by this environment."""
        ports: dict[Service, int] = {}
        for service in supported_services():
            bindings = self.host_config.port_bindings.get(str(ContainerPort(port=get_default_port(service))))
            if bindings:
                ports[service] = bindings[0].host_port
        return ports

    def endpoints(self) -> dict[Service, str]:
        """Get the URL of every service published by this environment."""
        return {
            service: f"http://{self.settings.hostname}:{port}" for service, port in self.published_ports().items()
        }

    def session_factory(self, config: SessionConfig | None = None) -> SessionFactory:
        """Get a session factory pointed at this environment's published ports."""
        config = config or SessionConfig(hostname=self.settings.hostname)
        return SessionFactory(config, ports=self.published_ports())

    def __enter__(self) -> LocalstackEnvironment:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()


__all__ = [
    "LocalstackEnvironment",
    "build_container_config",
    "build_host_config",
]
