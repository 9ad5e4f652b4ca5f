# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""SageMaker endpoint configuration attributes."""

import re
from typing import Any, Literal, Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from ..utils import pricing
from ..utils.input_validation import ValidationErrorKind, attribute_error
from .base import NestedBlock, ResourceAttributes
from .types import Arn, AwsTags, KmsKeyId

GPU_INSTANCE_PATTERN = re.compile(r"^ml\.(p|g)")

# Weights are floats; allow for rounding when checking they sum to 1
WEIGHT_TOLERANCE = 0.001


class ServerlessConfig(NestedBlock):
    memory_size_in_mb: int = Field(..., ge=1024, le=6144, multiple_of=1024)
    max_concurrency: int = Field(..., ge=1, le=200)
    provisioned_concurrency: Optional[int] = Field(None, ge=1, le=200)


class CoreDumpConfig(NestedBlock):
    destination_s3_uri: str = Field(..., pattern=r"^s3://")
    kms_key_id: Optional[KmsKeyId] = None


class ProductionVariant(NestedBlock):
    """One model variant: either serverless or backed by instances, never both."""

    model_config = ConfigDict(protected_namespaces=())

    variant_name: str = Field(..., min_length=1, max_length=63)
    model_name: str = Field(..., min_length=1)
    initial_instance_count: Optional[int] = Field(None, ge=1)
    instance_type: Optional[str] = Field(None, pattern=r"^ml\.")
    initial_variant_weight: float = Field(1.0, ge=0.0, le=1.0)
    accelerator_type: Optional[str] = Field(None, pattern=r"^ml\.eia")
    serverless_config: Optional[ServerlessConfig] = None
    core_dump_config: Optional[CoreDumpConfig] = None

    @model_validator(mode="after")
    def _check_inference_mode(self) -> "ProductionVariant":
        realtime = self.instance_type is not None or self.initial_instance_count is not None
        if self.serverless_config is not None and realtime:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "serverless_config",
                "A variant is either serverless or uses instance_type/initial_instance_count, not both",
            )
        if self.serverless_config is None and not (self.instance_type and self.initial_instance_count):
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "instance_type",
                "Real-time variants need instance_type and initial_instance_count (or use serverless_config)",
            )
        return self

    @property
    def is_serverless(self) -> bool:
        return self.serverless_config is not None

    @property
    def monthly_cost(self) -> float:
        if self.is_serverless:
            return pricing.SAGEMAKER_SERVERLESS_VARIANT_MONTHLY
        hourly = pricing.SAGEMAKER_INSTANCE_HOURLY.get(self.instance_type, pricing.SAGEMAKER_DEFAULT_INSTANCE_HOURLY)
        hourly += pricing.SAGEMAKER_ACCELERATOR_HOURLY.get(self.accelerator_type, 0.0)
        return hourly * self.initial_instance_count * pricing.HOURS_PER_MONTH


class CaptureOption(NestedBlock):
    capture_mode: Literal["Input", "Output"]


class CaptureContentTypeHeader(NestedBlock):
    csv_content_types: list[str] = Field(default_factory=list)
    json_content_types: list[str] = Field(default_factory=list)


class DataCaptureConfig(NestedBlock):
    enable_capture: bool = True
    initial_sampling_percentage: int = Field(100, ge=0, le=100)
    destination_s3_uri: Optional[str] = Field(None, pattern=r"^s3://")
    kms_key_id: Optional[KmsKeyId] = None
    capture_options: list[CaptureOption] = Field(default_factory=list, max_length=2)
    capture_content_type_header: Optional[CaptureContentTypeHeader] = None


class NotificationConfig(NestedBlock):
    success_topic: Optional[Arn] = None
    error_topic: Optional[Arn] = None
    include_inference_response_in: list[Literal["SUCCESS_NOTIFICATION_TOPIC", "ERROR_NOTIFICATION_TOPIC"]] = Field(
        default_factory=list
    )


class AsyncOutputConfig(NestedBlock):
    s3_output_path: str = Field(..., pattern=r"^s3://")
    s3_failure_path: Optional[str] = Field(None, pattern=r"^s3://")
    kms_key_id: Optional[KmsKeyId] = None
    notification_config: Optional[NotificationConfig] = None


class AsyncClientConfig(NestedBlock):
    max_concurrent_invocations_per_instance: Optional[int] = Field(None, ge=1, le=1000)


class AsyncInferenceConfig(NestedBlock):
    output_config: AsyncOutputConfig
    client_config: Optional[AsyncClientConfig] = None


class SagemakerEndpointConfigurationAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_sagemaker_endpoint_configuration``.

    All variants in one configuration are either serverless or real-time.
    With several variants, their initial weights must sum to 1.0.
    """

    terraform_type = "aws_sagemaker_endpoint_configuration"
    outputs = ("id", "arn", "name")
    computed = (
        "is_serverless_configuration",
        "is_multi_variant_configuration",
        "has_gpu_instances",
        "has_accelerators",
        "has_data_capture",
        "has_async_inference",
        "uses_kms_encryption",
        "total_instance_count",
        "variant_count",
        "estimated_monthly_cost",
        "security_score",
        "compliance_status",
    )

    name: str = Field(..., min_length=1, max_length=63, pattern=r"^[A-Za-z0-9]([A-Za-z0-9-]*[A-Za-z0-9])?$")
    production_variants: list[ProductionVariant] = Field(..., min_length=1, max_length=10)
    data_capture_config: Optional[DataCaptureConfig] = None
    async_inference_config: Optional[AsyncInferenceConfig] = None
    kms_key_id: Optional[KmsKeyId] = None
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("production_variants")
    @classmethod
    def _check_variants(cls, value: list[ProductionVariant]) -> list[ProductionVariant]:
        names = [variant.variant_name for variant in value]
        if len(set(names)) != len(names):
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "production_variants",
                "Production variant names must be unique",
            )

        if len(value) > 1:
            total = sum(variant.initial_variant_weight for variant in value)
            if abs(total - 1.0) >= WEIGHT_TOLERANCE:
                raise attribute_error(
                    ValidationErrorKind.CONSTRAINT_VIOLATION,
                    "production_variants",
                    f"Production variant weights must sum to 1.0, got {round(total, 3)}",
                )

        serverless = sum(1 for variant in value if variant.is_serverless)
        if 0 < serverless < len(value):
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "production_variants",
                "Cannot mix serverless and real-time inference in the same endpoint configuration",
            )
        return value

    @model_validator(mode="after")
    def _validate_configuration(self) -> "SagemakerEndpointConfigurationAttributes":
        capture = self.data_capture_config
        if capture and capture.enable_capture:
            if not capture.destination_s3_uri:
                raise attribute_error(
                    ValidationErrorKind.DEPENDENCY_UNMET,
                    "data_capture_config.destination_s3_uri",
                    "destination_s3_uri is required when data capture is enabled",
                )
            if not capture.capture_options:
                raise attribute_error(
                    ValidationErrorKind.DEPENDENCY_UNMET,
                    "data_capture_config.capture_options",
                    "At least one capture option (Input/Output) must be specified",
                )

        if self.async_inference_config and self.is_serverless_configuration:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "async_inference_config",
                "Async inference is not supported with serverless inference",
            )
        return self

    @property
    def is_serverless_configuration(self) -> bool:
        return all(variant.is_serverless for variant in self.production_variants)

    @property
    def is_multi_variant_configuration(self) -> bool:
        return len(self.production_variants) > 1

    @property
    def has_gpu_instances(self) -> bool:
        return any(
            variant.instance_type and GPU_INSTANCE_PATTERN.match(variant.instance_type)
            for variant in self.production_variants
        )

    @property
    def has_accelerators(self) -> bool:
        return any(variant.accelerator_type for variant in self.production_variants)

    @property
    def has_data_capture(self) -> bool:
        return bool(self.data_capture_config and self.data_capture_config.enable_capture)

    @property
    def has_async_inference(self) -> bool:
        return self.async_inference_config is not None

    @property
    def uses_kms_encryption(self) -> bool:
        return self.kms_key_id is not None

    @property
    def total_instance_count(self) -> int:
        return sum(variant.initial_instance_count or 0 for variant in self.production_variants)

    @property
    def variant_count(self) -> int:
        return len(self.production_variants)

    @property
    def estimated_monthly_cost(self) -> float:
        cost = sum(variant.monthly_cost for variant in self.production_variants)
        if self.has_data_capture:
            sampling = self.data_capture_config.initial_sampling_percentage / 100
            cost += pricing.SAGEMAKER_CAPTURED_REQUESTS * sampling * pricing.SAGEMAKER_CAPTURE_COST_PER_REQUEST
        if self.has_async_inference:
            cost += pricing.SAGEMAKER_ASYNC_INFERENCE_MONTHLY
        return round(cost, 2)

    @property
    def security_score(self) -> int:
        """Encryption and observability score out of 100."""
        score = 0
        if self.uses_kms_encryption:
            score += 20
        if self.has_data_capture and self.data_capture_config.kms_key_id:
            score += 15
        if self.has_async_inference and self.async_inference_config.output_config.kms_key_id:
            score += 10
        if all(
            variant.core_dump_config and variant.core_dump_config.kms_key_id
            for variant in self.production_variants
        ):
            score += 10
        if self.has_data_capture and len(self.data_capture_config.capture_options) == 2:
            score += 15
        if self.is_serverless_configuration:
            score += 10
        return min(score, 100)

    @property
    def compliance_status(self) -> dict[str, Any]:
        issues = []
        if not self.uses_kms_encryption:
            issues.append("No KMS encryption for endpoint configuration")
        if self.has_data_capture and not self.data_capture_config.kms_key_id:
            issues.append("Data capture enabled but not encrypted")
        if self.has_async_inference and not self.async_inference_config.output_config.kms_key_id:
            issues.append("Async inference output not encrypted")
        if any(
            variant.core_dump_config and not variant.core_dump_config.kms_key_id
            for variant in self.production_variants
        ):
            issues.append("Core dump configuration missing KMS encryption")
        return {"status": "compliant" if not issues else "needs_attention", "issues": issues}
