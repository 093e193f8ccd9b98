"""Default ports for the services LocalStack emulates.

Each service listens on its own fixed port inside the container. The same
port is used on the host unless a selection overrides it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from localstack_env.errors import UnsupportedServiceError
from localstack_env.types.service import Service, ServiceSelection

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_PORTS: Mapping[Service, int] = MappingProxyType(
    {
        Service.APIGATEWAY: 4567,
        Service.KINESIS: 4568,
        Service.DYNAMODB: 4569,
        Service.DYNAMODBSTREAMS: 4570,
        Service.S3: 4572,
        Service.FIREHOSE: 4573,
        Service.LAMBDA: 4574,
        Service.SNS: 4575,
        Service.SQS: 4576,
        Service.REDSHIFT: 4577,
        Service.SES: 4579,
        Service.ROUTE53: 4580,
        Service.CLOUDFORMATION: 4581,
        Service.CLOUDWATCH: 4582,
        Service.SSM: 4583,
        Service.SECRETSMANAGER: 4584,
        Service.STEPFUNCTIONS: 4585,
        Service.LOGS: 4586,
        Service.STS: 4592,
        Service.IAM: 4593,
        Service.KMS: 4599,
    }
)


def parse_service(name: str) -> Service:
    """Look up a service by its name (case-insensitive).

    Args:
        name: Service name, e.g. "s3" or "SQS".

    Returns:
        The matching Service.

    Raises:
        UnsupportedServiceError: If no supported service has that name.
    """
    try:
        return Service(name.strip().lower())
    except ValueError as e:
        raise UnsupportedServiceError(name) from e


def get_default_port(service: Service | str) -> int:
    """Get the default port of a service.

    Args:
        service: Service enum member or service name.

    Returns:
        Port the service listens on inside the container.

    Raises:
        UnsupportedServiceError: If the service is not in the registry.
    """
    if not isinstance(service, Service):
        if not isinstance(service, str):
            raise UnsupportedServiceError(service)
        service = parse_service(service)

    if service not in DEFAULT_PORTS:
        raise UnsupportedServiceError(service, f"No default port registered for service {service.value}")

    return DEFAULT_PORTS[service]


def supported_services() -> list[Service]:
    """Get all supported services in registry order."""
    return list(DEFAULT_PORTS)


def parse_selection(text: str) -> ServiceSelection:
    """Parse a selection written as ``NAME`` or ``NAME:PORT``.

    Args:
        text: Selection text, e.g. "s3" or "s3:9000".

    Returns:
        ServiceSelection for the named service.

    Raises:
        UnsupportedServiceError: If the service name is unknown.
        ValueError: If the port part is not an integer or is above 65535.
    """
    name, sep, port_text = text.partition(":")
    service = parse_service(name)
    if not sep:
        return ServiceSelection(service=service)

    try:
        port = int(port_text)
    except ValueError as e:
        raise ValueError(f"Invalid port {port_text!r} for service {service.value}") from e

    return ServiceSelection(service=service, port=port)


__all__ = [
    "DEFAULT_PORTS",
    "get_default_port",
    "parse_selection",
    "parse_service",
    "supported_services",
]
