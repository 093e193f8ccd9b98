"""Port binding and container environment resolution.

Both functions take the caller's service selections. An empty selection list
means "every supported service on its default port" for port bindings, and
"no SERVICES entry" for the environment, which lets the image fall back to its
own default service set.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from localstack_env.errors import ResolutionError, UnsupportedServiceError
from localstack_env.services.registry import get_default_port, parse_service, supported_services
from localstack_env.types.container import DEFAULT_HOST_IP, ContainerPort, PortBinding
from localstack_env.types.service import Service

if TYPE_CHECKING:
    from collections.abc import Sequence

    from localstack_env.types.container import PortBindingTable
    from localstack_env.types.service import ServiceSelection

SERVICES_ENV_VAR = "SERVICES"


def _default_port(service: Service | str) -> int:
    try:
        return get_default_port(service)
    except UnsupportedServiceError as e:
        raise ResolutionError(service, f"Cannot resolve port mapping for service {service!r}: {e}") from e


def _mapping_for_selection(selection: ServiceSelection) -> tuple[str, tuple[PortBinding, ...]]:
    default_port = _default_port(selection.service)
    host_port = selection.port if selection.has_port_override else default_port
    internal_port = ContainerPort(port=default_port)
    return str(internal_port), (PortBinding(host_ip=DEFAULT_HOST_IP, host_port=host_port),)


def _mapping_for_service(service: Service) -> tuple[str, tuple[PortBinding, ...]]:
    default_port = _default_port(service)
    return str(ContainerPort(port=default_port)), (PortBinding(host_ip=DEFAULT_HOST_IP, host_port=default_port),)


def resolve_port_bindings(selections: Sequence[ServiceSelection]) -> PortBindingTable:
    """Compute the container's port binding table.

    The container side of each binding is always the service's default port;
    only the host port can be overridden. Selections repeating a service key
    the same container port, so the last one wins.

    Args:
        selections: Services to publish, possibly empty.

    Returns:
        Read-only mapping of container port ("4572/tcp") to host bindings.

    Raises:
        ResolutionError: If any selection names an unsupported service. No
            partial table is returned.
    """
    table: dict[str, tuple[PortBinding, ...]] = {}
    if selections:
        for selection in selections:
            internal_port, bindings = _mapping_for_selection(selection)
            table[internal_port] = bindings
    else:
        for service in supported_services():
            internal_port, bindings = _mapping_for_service(service)
            table[internal_port] = bindings
    return MappingProxyType(table)


def compose_environment(selections: Sequence[ServiceSelection]) -> list[str]:
    """Build the container's environment entries.

    Args:
        selections: Services to activate, possibly empty.

    Returns:
        ``["SERVICES=<names>"]`` with lower-case names comma-joined in input
        order (duplicates kept), or an empty list when nothing was selected.

    Raises:
        ResolutionError: If any selection names an unsupported service.
    """
    if not selections:
        return []

    names: list[str] = []
    for selection in selections:
        service = selection.service
        if not isinstance(service, Service):
            try:
                service = parse_service(str(service))
            except UnsupportedServiceError as e:
                raise ResolutionError(service, f"Cannot add service {service!r} to container environment") from e
        names.append(service.value.lower())

    return [f"{SERVICES_ENV_VAR}={','.join(names)}"]


__all__ = [
    "SERVICES_ENV_VAR",
    "compose_environment",
    "resolve_port_bindings",
]
