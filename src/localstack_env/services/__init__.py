"""Registry of the services a LocalStack environment can run."""

from .registry import DEFAULT_PORTS, get_default_port, parse_selection, parse_service, supported_services

__all__ = [
    "DEFAULT_PORTS",
    "get_default_port",
    "parse_selection",
    "parse_service",
    "supported_services",
]
