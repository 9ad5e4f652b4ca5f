# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""SQS queue attributes."""

import json
from typing import Literal, Optional

from pydantic import Field, model_validator

from ..utils.input_validation import ValidationErrorKind, attribute_error
from .base import NestedBlock, ResourceAttributes
from .types import Arn, AwsTags, JsonDocument

FIFO_SUFFIX = ".fifo"

# FIFO-only attributes and the value a standard queue implicitly has
_FIFO_ONLY_FIELDS = ("content_based_deduplication", "deduplication_scope", "fifo_throughput_limit")


class RedrivePolicy(NestedBlock):
    dead_letter_target_arn: Arn
    max_receive_count: int = Field(3, ge=1, le=1000)


class RedriveAllowPolicy(NestedBlock):
    redrive_permission: Literal["allowAll", "denyAll", "byQueue"] = "allowAll"
    source_queue_arns: list[Arn] = Field(default_factory=list)


class SqsQueueAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_sqs_queue``.

    FIFO queues must be named with a ``.fifo`` suffix and standard queues
    must not be. Encryption uses either a KMS key or SQS-managed SSE.
    """

    terraform_type = "aws_sqs_queue"
    outputs = ("id", "arn", "url", "name")
    computed = (
        "is_fifo",
        "is_encrypted",
        "has_dlq",
        "long_polling_enabled",
        "is_delay_queue",
        "allows_all_sources",
        "queue_type",
        "encryption_type",
    )

    name: str = Field(..., min_length=1, max_length=80, pattern=r"^[A-Za-z0-9_-]+(\.fifo)?$")
    fifo_queue: bool = False
    content_based_deduplication: bool = False
    deduplication_scope: Optional[Literal["messageGroup", "queue"]] = None
    fifo_throughput_limit: Optional[Literal["perMessageGroupId", "perQueue"]] = None
    visibility_timeout_seconds: int = Field(30, ge=0, le=43200)
    message_retention_seconds: int = Field(345600, ge=60, le=1209600)
    max_message_size: int = Field(262144, ge=1024, le=262144)
    delay_seconds: int = Field(0, ge=0, le=900)
    receive_wait_time_seconds: int = Field(0, ge=0, le=20)
    redrive_policy: Optional[RedrivePolicy] = None
    redrive_allow_policy: Optional[RedriveAllowPolicy] = None
    kms_master_key_id: Optional[str] = None
    kms_data_key_reuse_period_seconds: int = Field(300, ge=60, le=86400)
    sqs_managed_sse_enabled: bool = False
    policy: Optional[JsonDocument] = None
    tags: AwsTags = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_queue(self) -> "SqsQueueAttributes":
        if self.fifo_queue and not self.name.endswith(FIFO_SUFFIX):
            raise attribute_error(
                ValidationErrorKind.FORMAT_MISMATCH, "name", "FIFO queue names must end with '.fifo' suffix"
            )
        if not self.fifo_queue and self.name.endswith(FIFO_SUFFIX):
            raise attribute_error(
                ValidationErrorKind.FORMAT_MISMATCH, "name", "Standard queue names cannot end with '.fifo' suffix"
            )

        if not self.fifo_queue:
            for field in _FIFO_ONLY_FIELDS:
                if getattr(self, field):
                    raise attribute_error(
                        ValidationErrorKind.DEPENDENCY_UNMET,
                        field,
                        f"{field} is only valid for FIFO queues",
                    )

        allow = self.redrive_allow_policy
        if allow and allow.redrive_permission == "byQueue" and not allow.source_queue_arns:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "redrive_allow_policy.source_queue_arns",
                "source_queue_arns must be specified when redrive_permission is 'byQueue'",
            )

        if self.kms_master_key_id and self.sqs_managed_sse_enabled:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "sqs_managed_sse_enabled",
                "Cannot enable both KMS encryption and SQS managed server-side encryption",
            )
        return self

    @property
    def is_fifo(self) -> bool:
        return self.fifo_queue

    @property
    def is_encrypted(self) -> bool:
        return bool(self.kms_master_key_id) or self.sqs_managed_sse_enabled

    @property
    def has_dlq(self) -> bool:
        return self.redrive_policy is not None

    @property
    def long_polling_enabled(self) -> bool:
        return self.receive_wait_time_seconds > 0

    @property
    def is_delay_queue(self) -> bool:
        return self.delay_seconds > 0

    @property
    def allows_all_sources(self) -> bool:
        return self.redrive_allow_policy is None or self.redrive_allow_policy.redrive_permission == "allowAll"

    @property
    def queue_type(self) -> str:
        return "FIFO" if self.fifo_queue else "Standard"

    @property
    def encryption_type(self) -> str:
        if self.kms_master_key_id:
            return "KMS"
        if self.sqs_managed_sse_enabled:
            return "SQS-SSE"
        return "None"

    def terraform_overrides(self, body: dict) -> dict:
        # Terraform takes both redrive policies as JSON strings in AWS casing
        if self.redrive_policy is not None:
            body["redrive_policy"] = json.dumps(
                {
                    "deadLetterTargetArn": self.redrive_policy.dead_letter_target_arn,
                    "maxReceiveCount": self.redrive_policy.max_receive_count,
                }
            )

        if self.redrive_allow_policy is not None:
            allow_policy = {"redrivePermission": self.redrive_allow_policy.redrive_permission}
            if self.redrive_allow_policy.source_queue_arns:
                allow_policy["sourceQueueArns"] = list(self.redrive_allow_policy.source_queue_arns)
            body["redrive_allow_policy"] = json.dumps(allow_policy)

        if not self.fifo_queue:
            body.pop("fifo_queue", None)
            body.pop("content_based_deduplication", None)
        return body
