"""Client sessions pointed at the local emulator endpoints.

Sessions use fixed placeholder credentials and a fixed region; the emulator
accepts any credentials. SSL is disabled because the emulator serves plain HTTP.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError
from pydantic import BaseModel, ConfigDict, Field

from localstack_env.core.utils import logger
from localstack_env.errors import SessionConstructionError, UnsupportedServiceError
from localstack_env.services.registry import get_default_port, parse_service
from localstack_env.types.service import Service


class SessionConfig(BaseModel):
    """Credentials and connection settings shared by all local sessions."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str = Field(default="AKID", description="Placeholder access key ID")
    secret_access_key: str = Field(default="SECRET", description="Placeholder secret access key")
    session_token: str | None = Field(default="SESSION", description="Placeholder session token")
    region_name: str = Field(default="eu-west-1", description="Region the clients are configured for")
    use_ssl: bool = Field(default=False, description="Whether clients connect over HTTPS")
    hostname: str = Field(default="localhost", description="Host the emulator ports are published on")


class LocalstackSession:
    """A boto3 session bound to one emulated service's endpoint.

    Args:
        service: Service the session talks to.
        boto_session: Underlying boto3 session holding credentials and region.
        endpoint_url: Endpoint clients are pointed at.
        use_ssl: Whether clients use SSL.
    """

    def __init__(self, *, service: Service, boto_session: boto3.session.Session, endpoint_url: str, use_ssl: bool):
        self.service = service
        self.boto_session = boto_session
        self.endpoint_url = endpoint_url
        self.use_ssl = use_ssl

    @property
    def region_name(self) -> str | None:
        return self.boto_session.region_name

    def client(self, **kwargs: Any) -> Any:
        """Create a low-level boto3 client for the bound service."""
        kwargs.setdefault("endpoint_url", self.endpoint_url)
        kwargs.setdefault("use_ssl", self.use_ssl)
        return self.boto_session.client(self.service.value, **kwargs)

    def resource(self, **kwargs: Any) -> Any:
        """Create a boto3 resource for the bound service (only some services have one)."""
        kwargs.setdefault("endpoint_url", self.endpoint_url)
        kwargs.setdefault("use_ssl", self.use_ssl)
        return self.boto_session.resource(self.service.value, **kwargs)

    def __repr__(self) -> str:
        return f"LocalstackSession(service={self.service.value!r}, endpoint_url={self.endpoint_url!r})"


class SessionFactory:
    """Builds LocalstackSession objects for the supported services.

    Args:
        config: Credentials and connection settings. Defaults to SessionConfig().
        ports: Optional host port per service. Services not listed use their
            default port.

    Example:
        >>> factory = SessionFactory()
        >>> s3 = factory.session(Service.S3).client()
        >>> s3.list_buckets()
    """

    def __init__(self, config: SessionConfig | None = None, ports: Mapping[Service, int] | None = None) -> None:
        self.config = config or SessionConfig()
        self.ports = dict(ports or {})

    def endpoint_url(self, service: Service | str) -> str:
        """Get the endpoint URL for a service.

        Raises:
            UnsupportedServiceError: If the service is not supported.
        """
        if not isinstance(service, Service):
            service = parse_service(str(service))
        port = self.ports.get(service) or get_default_port(service)
        return f"http://{self.config.hostname}:{port}"

    def session(self, service: Service | str) -> LocalstackSession:
        """Build a session for a service.

        Args:
            service: Service enum member or service name.

        Returns:
            LocalstackSession pointed at the service's local endpoint.

        Raises:
            SessionConstructionError: If the session cannot be constructed.
        """
        if not isinstance(service, Service):
            try:
                service = parse_service(str(service))
            except UnsupportedServiceError as e:
                raise SessionConstructionError(service, f"Unable to create session for {service!r}: {e}") from e
        endpoint_url = self.endpoint_url(service)

        try:
            boto_session = boto3.session.Session(
                aws_access_key_id=self.config.access_key_id,
                aws_secret_access_key=self.config.secret_access_key,
                aws_session_token=self.config.session_token,
                region_name=self.config.region_name,
            )
        except BotoCoreError as e:
            raise SessionConstructionError(service, f"Unable to create AWS {service.value} session: {e}") from e

        logger.debug(f"Created {service.value} session for {endpoint_url}")
        return LocalstackSession(
            service=service,
            boto_session=boto_session,
            endpoint_url=endpoint_url,
            use_ssl=self.config.use_ssl,
        )


def _default_session(service: Service, config: SessionConfig | None) -> LocalstackSession:
    return SessionFactory(config).session(service)


def apigateway_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.APIGATEWAY, config)


def kinesis_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.KINESIS, config)


def dynamodb_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.DYNAMODB, config)


def dynamodbstreams_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.DYNAMODBSTREAMS, config)


def s3_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.S3, config)


def firehose_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.FIREHOSE, config)


def lambda_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.LAMBDA, config)


def sns_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.SNS, config)


def sqs_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.SQS, config)


def redshift_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.REDSHIFT, config)


def ses_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.SES, config)


def route53_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.ROUTE53, config)


def cloudformation_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.CLOUDFORMATION, config)


def cloudwatch_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.CLOUDWATCH, config)


def ssm_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.SSM, config)


def secretsmanager_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.SECRETSMANAGER, config)


def stepfunctions_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.STEPFUNCTIONS, config)


def logs_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.LOGS, config)


def sts_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.STS, config)


def iam_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.IAM, config)


def kms_session(config: SessionConfig | None = None) -> LocalstackSession:
    return _default_session(Service.KMS, config)


__all__ = [
    "LocalstackSession",
    "SessionConfig",
    "SessionFactory",
    "apigateway_session",
    "cloudformation_session",
    "cloudwatch_session",
    "dynamodb_session",
    "dynamodbstreams_session",
    "firehose_session",
    "iam_session",
    "kinesis_session",
    "kms_session",
    "lambda_session",
    "logs_session",
    "redshift_session",
    "route53_session",
    "s3_session",
    "secretsmanager_session",
    "ses_session",
    "sns_session",
    "sqs_session",
    "ssm_session",
    "stepfunctions_session",
    "sts_session",
]
