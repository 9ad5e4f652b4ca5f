# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""SNS topic attributes."""

from typing import Literal, Optional

from pydantic import Field, model_validator

from ..utils.input_validation import ValidationErrorKind, attribute_error
from .base import ResourceAttributes
from .types import AwsTags, IamRoleArn, JsonDocument

FIFO_SUFFIX = ".fifo"

FEEDBACK_PROTOCOLS = ("application", "http", "lambda", "sqs", "firehose")

SampleRate = Optional[int]


class SnsTopicAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_sns_topic``.

    Delivery status logging is configured per protocol with a success role,
    an optional success sample rate (which needs the success role) and a
    failure role.
    """

    terraform_type = "aws_sns_topic"
    outputs = ("id", "arn", "name", "owner", "beginning_archive_time")
    computed = (
        "is_fifo",
        "is_encrypted",
        "has_delivery_policy",
        "has_access_policy",
        "has_data_protection",
        "has_feedback_enabled",
        "feedback_protocols",
        "topic_type",
        "tracing_enabled",
    )

    name: Optional[str] = Field(None, min_length=1, max_length=256, pattern=r"^[A-Za-z0-9_-]+(\.fifo)?$")
    display_name: Optional[str] = Field(None, max_length=100)
    kms_master_key_id: Optional[str] = None
    fifo_topic: bool = False
    content_based_deduplication: bool = False
    delivery_policy: Optional[JsonDocument] = None
    policy: Optional[JsonDocument] = None
    message_data_protection_policy: Optional[JsonDocument] = None

    application_success_feedback_role_arn: Optional[IamRoleArn] = None
    application_success_feedback_sample_rate: SampleRate = Field(None, ge=0, le=100)
    application_failure_feedback_role_arn: Optional[IamRoleArn] = None
    http_success_feedback_role_arn: Optional[IamRoleArn] = None
    http_success_feedback_sample_rate: SampleRate = Field(None, ge=0, le=100)
    http_failure_feedback_role_arn: Optional[IamRoleArn] = None
    lambda_success_feedback_role_arn: Optional[IamRoleArn] = None
    lambda_success_feedback_sample_rate: SampleRate = Field(None, ge=0, le=100)
    lambda_failure_feedback_role_arn: Optional[IamRoleArn] = None
    sqs_success_feedback_role_arn: Optional[IamRoleArn] = None
    sqs_success_feedback_sample_rate: SampleRate = Field(None, ge=0, le=100)
    sqs_failure_feedback_role_arn: Optional[IamRoleArn] = None
    firehose_success_feedback_role_arn: Optional[IamRoleArn] = None
    firehose_success_feedback_sample_rate: SampleRate = Field(None, ge=0, le=100)
    firehose_failure_feedback_role_arn: Optional[IamRoleArn] = None

    tracing_config: Optional[Literal["Active", "PassThrough"]] = None
    tags: AwsTags = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_topic(self) -> "SnsTopicAttributes":
        if self.name:
            if self.fifo_topic and not self.name.endswith(FIFO_SUFFIX):
                raise attribute_error(
                    ValidationErrorKind.FORMAT_MISMATCH, "name", "FIFO topic names must end with '.fifo' suffix"
                )
            if not self.fifo_topic and self.name.endswith(FIFO_SUFFIX):
                raise attribute_error(
                    ValidationErrorKind.FORMAT_MISMATCH, "name", "Standard topic names cannot end with '.fifo' suffix"
                )

        if not self.fifo_topic and self.content_based_deduplication:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "content_based_deduplication",
                "content_based_deduplication is only valid for FIFO topics",
            )

        for protocol in FEEDBACK_PROTOCOLS:
            sample_rate = f"{protocol}_success_feedback_sample_rate"
            role_arn = f"{protocol}_success_feedback_role_arn"
            if getattr(self, sample_rate) is not None and not getattr(self, role_arn):
                raise attribute_error(
                    ValidationErrorKind.DEPENDENCY_UNMET,
                    sample_rate,
                    f"{sample_rate} requires {role_arn} to be set",
                )
        return self

    @property
    def is_fifo(self) -> bool:
        return self.fifo_topic

    @property
    def is_encrypted(self) -> bool:
        return bool(self.kms_master_key_id)

    @property
    def has_delivery_policy(self) -> bool:
        return bool(self.delivery_policy)

    @property
    def has_access_policy(self) -> bool:
        return bool(self.policy)

    @property
    def has_data_protection(self) -> bool:
        return bool(self.message_data_protection_policy)

    @property
    def feedback_protocols(self) -> list[str]:
        """Protocols with a success or failure feedback role configured."""
        return [
            protocol
            for protocol in FEEDBACK_PROTOCOLS
            if getattr(self, f"{protocol}_success_feedback_role_arn")
            or getattr(self, f"{protocol}_failure_feedback_role_arn")
        ]

    @property
    def has_feedback_enabled(self) -> bool:
        return bool(self.feedback_protocols)

    @property
    def topic_type(self) -> str:
        return "FIFO" if self.fifo_topic else "Standard"

    @property
    def tracing_enabled(self) -> bool:
        return self.tracing_config == "Active"

    def terraform_overrides(self, body: dict) -> dict:
        if not self.fifo_topic:
            body.pop("fifo_topic", None)
            body.pop("content_based_deduplication", None)
        return body
