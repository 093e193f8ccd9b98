"""Tests for the service registry."""

import pytest
from pydantic import ValidationError

from localstack_env.errors import UnsupportedServiceError
from localstack_env.services import (
    DEFAULT_PORTS,
    get_default_port,
    parse_selection,
    parse_service,
    supported_services,
)
from localstack_env.types import Service, ServiceSelection


@pytest.mark.parametrize(
    "service,expected_port",
    [
        (Service.S3, 4572),
        (Service.SNS, 4575),
        (Service.SQS, 4576),
        (Service.DYNAMODB, 4569),
    ],
)
def test_get_default_port(service, expected_port):
    assert get_default_port(service) == expected_port


def test_get_default_port_accepts_name():
    assert get_default_port("s3") == 4572
    assert get_default_port("SQS") == 4576


@pytest.mark.parametrize("service", ["not-a-service", "", 42, None])
def test_get_default_port_fail_unsupported(service):
    with pytest.raises(UnsupportedServiceError) as exc_info:
        get_default_port(service)
    assert exc_info.value.service == service


def test_unsupported_service_error_is_value_error():
    with pytest.raises(ValueError):
        get_default_port("not-a-service")


def test_every_service_has_a_default_port():
    assert set(DEFAULT_PORTS) == set(Service)


def test_default_ports_are_unique_and_positive():
    ports = list(DEFAULT_PORTS.values())
    assert len(set(ports)) == len(ports)
    assert all(port > 0 for port in ports)


def test_default_ports_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_PORTS[Service.S3] = 1  # type: ignore[index]


def test_supported_services_follow_registry_order():
    services = supported_services()
    assert services == list(DEFAULT_PORTS)
    # Returned list is a copy
    services.clear()
    assert supported_services()


def test_service_renders_lower_case_name():
    assert str(Service.S3) == "s3"
    assert str(Service.STEPFUNCTIONS) == "stepfunctions"
    assert all(service.value == service.value.lower() for service in Service)


def test_parse_service_case_insensitive():
    assert parse_service(" Lambda ") == Service.LAMBDA


@pytest.mark.parametrize(
    "text,expected",
    [
        ("s3", ServiceSelection(service=Service.S3)),
        ("s3:9000", ServiceSelection(service=Service.S3, port=9000)),
        ("SQS:0", ServiceSelection(service=Service.SQS, port=0)),
    ],
)
def test_parse_selection(text, expected):
    assert parse_selection(text) == expected


def test_parse_selection_fail_bad_port():
    with pytest.raises(ValueError, match="Invalid port 'abc' for service s3"):
        parse_selection("s3:abc")


def test_parse_selection_fail_unknown_service():
    with pytest.raises(UnsupportedServiceError):
        parse_selection("mainframe:9000")


def test_selection_port_override():
    assert ServiceSelection(service=Service.S3, port=9000).has_port_override
    assert not ServiceSelection(service=Service.S3).has_port_override
    assert not ServiceSelection(service=Service.S3, port=0).has_port_override
    assert not ServiceSelection(service=Service.S3, port=-1).has_port_override


def test_selection_validates_service_name():
    assert ServiceSelection.model_validate({"service": "sns"}).service == Service.SNS


def test_selection_accepts_highest_port():
    assert ServiceSelection(service=Service.S3, port=65535).port == 65535


def test_selection_fail_port_out_of_range():
    with pytest.raises(ValidationError):
        ServiceSelection(service=Service.S3, port=70000)


def test_parse_selection_fail_port_out_of_range():
    with pytest.raises(ValueError):
        parse_selection("s3:70000")
