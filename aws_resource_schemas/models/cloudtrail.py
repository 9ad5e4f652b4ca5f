# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""CloudTrail trail attributes."""

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..utils import pricing
from ..utils.input_validation import ValidationErrorKind, attribute_error
from .base import NestedBlock, ResourceAttributes
from .types import Arn, AwsTags, IamRoleArn, KmsKeyId

DataResourceType = Literal["AWS::S3::Object", "AWS::Lambda::Function", "AWS::DynamoDB::Table"]
InsightType = Literal["ApiCallRateInsight", "ApiErrorRateInsight"]


class DataResource(NestedBlock):
    type: DataResourceType
    values: list[str] = Field(..., min_length=1)


class EventSelector(NestedBlock):
    read_write_type: Literal["All", "ReadOnly", "WriteOnly"] = "All"
    include_management_events: bool = True
    data_resource: list[DataResource] = Field(default_factory=list)


class InsightSelector(NestedBlock):
    insight_type: InsightType


class CloudtrailAttributes(ResourceAttributes):
    """Attributes for an ``aws_cloudtrail`` trail."""

    terraform_type = "aws_cloudtrail"
    outputs = (
        "id",
        "arn",
        "name",
        "home_region",
        "s3_bucket_name",
        "s3_key_prefix",
        "include_global_service_events",
        "is_multi_region_trail",
        "enable_logging",
        "kms_key_id",
        "cloud_watch_logs_group_arn",
        "cloud_watch_logs_role_arn",
        "sns_topic_arn",
        "tags_all",
    )
    computed = (
        "has_encryption",
        "has_cloudwatch_integration",
        "has_sns_notifications",
        "has_event_selectors",
        "has_insight_selectors",
        "logs_s3_data_events",
        "logs_lambda_data_events",
        "tracked_resource_types",
        "tracked_insight_types",
        "is_compliance_trail",
        "is_security_monitoring_trail",
        "estimated_monthly_cost_usd",
        "recommended_log_retention_days",
        "trail_summary",
    )

    name: str = Field(..., min_length=3, max_length=128, pattern=r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
    s3_bucket_name: str = Field(..., min_length=3, max_length=63)
    s3_key_prefix: Optional[str] = None
    include_global_service_events: bool = True
    is_multi_region_trail: bool = False
    enable_logging: bool = True
    enable_log_file_validation: bool = True
    kms_key_id: Optional[KmsKeyId] = None
    cloud_watch_logs_group_arn: Optional[Arn] = None
    cloud_watch_logs_role_arn: Optional[IamRoleArn] = None
    sns_topic_name: Optional[str] = None
    event_selector: list[EventSelector] = Field(default_factory=list, max_length=5)
    insight_selector: list[InsightSelector] = Field(default_factory=list)
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("insight_selector")
    @classmethod
    def _check_unique_insights(cls, value: list[InsightSelector]) -> list[InsightSelector]:
        types = [selector.insight_type for selector in value]
        if len(set(types)) != len(types):
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "insight_selector",
                "Insight selector types must be unique",
            )
        return value

    @model_validator(mode="after")
    def _check_cloudwatch_pair(self) -> "CloudtrailAttributes":
        if self.cloud_watch_logs_group_arn and not self.cloud_watch_logs_role_arn:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "cloud_watch_logs_role_arn",
                "cloud_watch_logs_role_arn is required when cloud_watch_logs_group_arn is specified",
            )
        if self.cloud_watch_logs_role_arn and not self.cloud_watch_logs_group_arn:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "cloud_watch_logs_group_arn",
                "cloud_watch_logs_group_arn is required when cloud_watch_logs_role_arn is specified",
            )
        return self

    @property
    def has_encryption(self) -> bool:
        return self.kms_key_id is not None

    @property
    def has_cloudwatch_integration(self) -> bool:
        return self.cloud_watch_logs_group_arn is not None

    @property
    def has_sns_notifications(self) -> bool:
        return self.sns_topic_name is not None

    @property
    def has_event_selectors(self) -> bool:
        return bool(self.event_selector)

    @property
    def has_insight_selectors(self) -> bool:
        return bool(self.insight_selector)

    @property
    def tracked_resource_types(self) -> list[str]:
        """Distinct data resource types across all event selectors, in declaration order."""
        seen = []
        for selector in self.event_selector:
            for resource in selector.data_resource:
                if resource.type not in seen:
                    seen.append(resource.type)
        return seen

    @property
    def tracked_insight_types(self) -> list[str]:
        return [selector.insight_type for selector in self.insight_selector]

    @property
    def logs_s3_data_events(self) -> bool:
        return "AWS::S3::Object" in self.tracked_resource_types

    @property
    def logs_lambda_data_events(self) -> bool:
        return "AWS::Lambda::Function" in self.tracked_resource_types

    @property
    def is_compliance_trail(self) -> bool:
        return (
            self.is_multi_region_trail
            and self.include_global_service_events
            and self.enable_log_file_validation
            and self.has_encryption
        )

    @property
    def is_security_monitoring_trail(self) -> bool:
        return self.enable_logging and self.has_cloudwatch_integration and (
            self.has_insight_selectors or self.is_multi_region_trail
        )

    @property
    def estimated_monthly_cost_usd(self) -> float:
        """
        Rough monthly cost: delivery and storage baseline, plus data events
        per tracked resource type and Insights per insight type.
        """
        cost = pricing.CLOUDTRAIL_BASE_MONTHLY
        cost += len(self.tracked_resource_types) * pricing.CLOUDTRAIL_DATA_EVENTS_MONTHLY
        cost += len(self.insight_selector) * pricing.CLOUDTRAIL_INSIGHTS_MONTHLY
        if self.is_multi_region_trail:
            cost *= pricing.CLOUDTRAIL_MULTI_REGION_MULTIPLIER
        return round(cost, 2)

    @property
    def recommended_log_retention_days(self) -> int:
        if self.is_compliance_trail:
            return 2555
        if self.is_security_monitoring_trail:
            return 365
        return 90

    @property
    def trail_summary(self) -> str:
        parts = ["multi-region" if self.is_multi_region_trail else "single-region"]
        if self.has_encryption:
            parts.append("KMS encrypted")
        if self.has_cloudwatch_integration:
            parts.append("CloudWatch Logs")
        if self.has_sns_notifications:
            parts.append("SNS notifications")
        if self.tracked_resource_types:
            parts.append(f"data events: {', '.join(self.tracked_resource_types)}")
        if self.tracked_insight_types:
            parts.append(f"insights: {', '.join(self.tracked_insight_types)}")
        if not self.enable_logging:
            parts.append("logging disabled")
        return f"Trail {self.name} ({'; '.join(parts)})"
