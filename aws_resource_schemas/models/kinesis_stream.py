# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Kinesis data stream attributes."""

from typing import Literal, Optional

from pydantic import Field, model_validator

from ..utils import pricing
from ..utils.input_validation import ValidationErrorKind, attribute_error
from .base import NestedBlock, ResourceAttributes
from .types import AwsTags, KmsKeyId

ShardLevelMetric = Literal[
    "IncomingRecords",
    "IncomingBytes",
    "OutgoingRecords",
    "OutgoingBytes",
    "WriteProvisionedThroughputExceeded",
    "ReadProvisionedThroughputExceeded",
    "IteratorAgeMilliseconds",
    "ALL",
]

# Each provisioned shard ingests up to 1 MB/s
SHARD_THROUGHPUT_MBPS = 1.0


class StreamModeDetails(NestedBlock):
    stream_mode: Literal["PROVISIONED", "ON_DEMAND"] = "PROVISIONED"


class KinesisStreamAttributes(ResourceAttributes):
    """Attributes for an ``aws_kinesis_stream``."""

    terraform_type = "aws_kinesis_stream"
    outputs = ("id", "arn", "name", "shard_count")
    computed = (
        "is_encrypted",
        "is_on_demand_mode",
        "has_enhanced_metrics",
        "total_max_throughput_mbps",
        "retention_period_days",
        "estimated_monthly_cost_usd",
    )

    name: str = Field(..., min_length=1, max_length=128, pattern=r"^[A-Za-z0-9_.-]+$")
    shard_count: int = Field(1, ge=1, le=500000)
    retention_period: int = Field(24, ge=24, le=8760, description="Retention in hours")
    shard_level_metrics: list[ShardLevelMetric] = Field(default_factory=list)
    encryption_type: Literal["NONE", "KMS"] = "NONE"
    kms_key_id: Optional[KmsKeyId] = None
    stream_mode_details: StreamModeDetails = Field(default_factory=StreamModeDetails)
    tags: AwsTags = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_stream(self) -> "KinesisStreamAttributes":
        if self.encryption_type == "KMS" and not self.kms_key_id:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "kms_key_id",
                "KMS key ID is required when encryption_type is 'KMS'",
            )

        if self.is_on_demand_mode and "shard_count" in self.model_fields_set:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "shard_count",
                "Cannot specify shard_count with ON_DEMAND stream mode",
            )
        return self

    @property
    def is_encrypted(self) -> bool:
        return self.encryption_type == "KMS"

    @property
    def is_on_demand_mode(self) -> bool:
        return self.stream_mode_details.stream_mode == "ON_DEMAND"

    @property
    def has_enhanced_metrics(self) -> bool:
        return bool(self.shard_level_metrics)

    @property
    def total_max_throughput_mbps(self) -> Optional[float]:
        """Provisioned ingest ceiling; None for on-demand streams, which scale automatically."""
        if self.is_on_demand_mode:
            return None
        return self.shard_count * SHARD_THROUGHPUT_MBPS

    @property
    def retention_period_days(self) -> float:
        return self.retention_period / 24

    @property
    def estimated_monthly_cost_usd(self) -> Optional[float]:
        """
        Provisioned shard-hour cost plus extended retention.

        On-demand streams bill per payload unit, which cannot be estimated
        without traffic figures, so they return None.
        """
        if self.is_on_demand_mode:
            return None

        cost = self.shard_count * 24 * 30 * pricing.KINESIS_SHARD_HOUR
        if self.retention_period > 24:
            extended_days = (self.retention_period - 24) / 24
            cost += self.shard_count * extended_days * pricing.KINESIS_EXTENDED_RETENTION_SHARD_DAY
        return round(cost, 2)

    def terraform_overrides(self, body: dict) -> dict:
        if self.is_on_demand_mode:
            body.pop("shard_count", None)
        return body
