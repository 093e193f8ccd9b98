"""Service-related type definitions for LocalStack environments."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .container import MAX_PORT


class Service(StrEnum):
    """Emulated AWS service, valued by its LocalStack service name."""

    APIGATEWAY = "apigateway"
    KINESIS = "kinesis"
    DYNAMODB = "dynamodb"
    DYNAMODBSTREAMS = "dynamodbstreams"
    S3 = "s3"
    FIREHOSE = "firehose"
    LAMBDA = "lambda"
    SNS = "sns"
    SQS = "sqs"
    REDSHIFT = "redshift"
    SES = "ses"
    ROUTE53 = "route53"
    CLOUDFORMATION = "cloudformation"
    CLOUDWATCH = "cloudwatch"
    SSM = "ssm"
    SECRETSMANAGER = "secretsmanager"
    STEPFUNCTIONS = "stepfunctions"
    LOGS = "logs"
    STS = "sts"
    IAM = "iam"
    KMS = "kms"


class ServiceSelection(BaseModel):
    """A request to run one service, optionally published on a custom host port.

    Attributes:
        service: Service to activate in the container.
        port: Host port to publish the service on. None, zero or a negative
            value means the service's default port.
    """

    model_config = ConfigDict(frozen=True)

    service: Service = Field(description="Service to activate in the container")
    port: int | None = Field(
        default=None,
        le=MAX_PORT,
        description="Host port override (ignored unless positive)",
    )

    @property
    def has_port_override(self) -> bool:
        """Check if the selection carries a usable host port override."""
        return self.port is not None and self.port > 0


__all__ = [
    "Service",
    "ServiceSelection",
]
