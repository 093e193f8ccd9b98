"""Pre-configured client sessions for the emulated services."""

from .factory import (
    LocalstackSession,
    SessionConfig,
    SessionFactory,
    apigateway_session,
    cloudformation_session,
    cloudwatch_session,
    dynamodb_session,
    dynamodbstreams_session,
    firehose_session,
    iam_session,
    kinesis_session,
    kms_session,
    lambda_session,
    logs_session,
    redshift_session,
    route53_session,
    s3_session,
    secretsmanager_session,
    ses_session,
    sns_session,
    sqs_session,
    ssm_session,
    stepfunctions_session,
    sts_session,
)

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
