# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Lambda function attributes."""

import re
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..utils import pricing
from ..utils.arn_utils import is_terraform_reference, parse_arn
from ..utils.input_validation import ValidationErrorKind, attribute_error, format_error
from ..utils.validation_rules import LAMBDA_HANDLER_RULES, LAMBDA_RUNTIMES, lambda_runtime_family
from .base import NestedBlock, ResourceAttributes
from .types import Arn, AwsTags, IamRoleArn, SecurityGroupId, SubnetId

Runtime = Literal[LAMBDA_RUNTIMES]
Architecture = Literal["x86_64", "arm64"]

ENV_VAR_NAME_PATTERN = r"^[A-Za-z][A-Za-z0-9_]*$"

_ZIP_SOURCE_FIELDS = ("handler", "runtime", "filename", "s3_bucket", "s3_key", "s3_object_version")


class ImageConfig(NestedBlock):
    command: list[str] = Field(default_factory=list)
    entry_point: list[str] = Field(default_factory=list)
    working_directory: Optional[str] = None


class Environment(NestedBlock):
    variables: dict[str, str] = Field(default_factory=dict)

    @field_validator("variables")
    @classmethod
    def _check_names(cls, value: dict[str, str]) -> dict[str, str]:
        for key in value:
            if not re.match(ENV_VAR_NAME_PATTERN, key):
                raise format_error(f"Invalid environment variable name: {key}")
        return value


class VpcConfig(NestedBlock):
    subnet_ids: list[SubnetId] = Field(..., min_length=1)
    security_group_ids: list[SecurityGroupId] = Field(..., min_length=1)


class DeadLetterConfig(NestedBlock):
    target_arn: Arn

    @field_validator("target_arn")
    @classmethod
    def _check_target(cls, value: str) -> str:
        if is_terraform_reference(value) or parse_arn(value)["service"] in ("sqs", "sns"):
            return value
        raise format_error(f"Dead letter target must be an SQS queue or SNS topic ARN: {value}")


class FileSystemConfig(NestedBlock):
    arn: Arn
    local_mount_path: str = Field(..., pattern=r"^/mnt/[A-Za-z0-9_.-]+$")


class TracingConfig(NestedBlock):
    mode: Literal["Active", "PassThrough"]


class EphemeralStorage(NestedBlock):
    size: int = Field(512, ge=512, le=10240)


class SnapStart(NestedBlock):
    apply_on: Literal["PublishedVersions", "None"]


class LoggingConfig(NestedBlock):
    log_format: Literal["JSON", "Text"] = "Text"
    application_log_level: Optional[Literal["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "FATAL"]] = None
    system_log_level: Optional[Literal["DEBUG", "INFO", "WARN"]] = None
    log_group: Optional[str] = None


class LambdaFunctionAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_lambda_function``.

    Zip packages need a handler, a runtime and exactly one code source
    (``filename`` or ``s3_bucket``/``s3_key``). Image packages need
    ``image_uri`` and must not carry any of the Zip settings. The handler
    format is checked against the rule for the runtime's family.
    """

    terraform_type = "aws_lambda_function"
    outputs = (
        "arn",
        "function_name",
        "qualified_arn",
        "qualified_invoke_arn",
        "invoke_arn",
        "version",
        "last_modified",
        "source_code_hash",
        "source_code_size",
        "role",
        "handler",
        "runtime",
        "timeout",
        "memory_size",
        "signing_job_arn",
        "signing_profile_version_arn",
    )
    computed = (
        "estimated_monthly_cost",
        "requires_vpc",
        "has_dlq",
        "uses_efs",
        "is_container_based",
        "supports_snap_start",
        "architecture",
    )

    function_name: str = Field(..., min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$")
    role: IamRoleArn
    package_type: Literal["Zip", "Image"] = "Zip"
    handler: Optional[str] = None
    runtime: Optional[Runtime] = None
    filename: Optional[str] = None
    s3_bucket: Optional[str] = None
    s3_key: Optional[str] = None
    s3_object_version: Optional[str] = None
    image_uri: Optional[str] = None
    image_config: Optional[ImageConfig] = None
    description: Optional[str] = Field(None, max_length=256)
    timeout: int = Field(3, ge=1, le=900)
    memory_size: int = Field(128, ge=128, le=10240)
    reserved_concurrent_executions: Optional[int] = Field(None, ge=-1, le=1000)
    publish: bool = False
    layers: list[Arn] = Field(default_factory=list, max_length=5)
    architectures: list[Architecture] = Field(default_factory=lambda: ["x86_64"])
    environment: Optional[Environment] = None
    vpc_config: Optional[VpcConfig] = None
    dead_letter_config: Optional[DeadLetterConfig] = None
    file_system_config: list[FileSystemConfig] = Field(default_factory=list, max_length=1)
    tracing_config: Optional[TracingConfig] = None
    kms_key_arn: Optional[Arn] = None
    code_signing_config_arn: Optional[Arn] = None
    ephemeral_storage: Optional[EphemeralStorage] = None
    snap_start: Optional[SnapStart] = None
    logging_config: Optional[LoggingConfig] = None
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("architectures")
    @classmethod
    def _check_single_architecture(cls, value: list[str]) -> list[str]:
        if len(value) != 1:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "architectures",
                "Lambda functions support exactly one architecture",
            )
        return value

    @model_validator(mode="after")
    def _validate_function(self) -> "LambdaFunctionAttributes":
        if self.package_type == "Image":
            self._check_image_package()
        else:
            self._check_zip_package()
            self._check_handler_format()
        self._check_snap_start()
        self._check_file_system()
        return self

    def _check_image_package(self) -> None:
        if not self.image_uri:
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "image_uri",
                "image_uri is required when package_type is 'Image'",
            )
        for field in _ZIP_SOURCE_FIELDS:
            if getattr(self, field) is not None:
                raise attribute_error(
                    ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                    field,
                    f"{field} should not be specified when package_type is 'Image'",
                )

    def _check_zip_package(self) -> None:
        for field in ("handler", "runtime"):
            if getattr(self, field) is None:
                raise attribute_error(
                    ValidationErrorKind.MISSING_FIELD,
                    field,
                    f"{field} is required when package_type is 'Zip'",
                )

        if self.filename and self.s3_bucket:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "filename",
                "filename and s3_bucket cannot both be specified",
            )
        if not self.filename and not self.s3_bucket:
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "filename",
                "Either filename or s3_bucket must be specified for Zip packages",
            )
        if self.s3_bucket and not self.s3_key:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "s3_key",
                "s3_key is required when s3_bucket is specified",
            )

    def _check_handler_format(self) -> None:
        family = lambda_runtime_family(self.runtime)
        if family is None or is_terraform_reference(self.handler):
            return

        rule = LAMBDA_HANDLER_RULES[family]
        if not rule.pattern.match(self.handler):
            raise attribute_error(
                ValidationErrorKind.FORMAT_MISMATCH,
                "handler",
                f"Invalid {rule.label} handler format '{self.handler}': expected {rule.expected}",
            )

    def _check_snap_start(self) -> None:
        if self.snap_start and self.snap_start.apply_on != "None" and not self.supports_snap_start:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "snap_start",
                "SnapStart is only supported for Java runtimes",
            )

    def _check_file_system(self) -> None:
        if self.file_system_config and self.vpc_config is None:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "file_system_config",
                "file_system_config requires vpc_config",
            )

    @property
    def architecture(self) -> str:
        return self.architectures[0]

    @property
    def is_container_based(self) -> bool:
        return self.package_type == "Image"

    @property
    def supports_snap_start(self) -> bool:
        return bool(self.runtime) and self.runtime.startswith("java")

    @property
    def requires_vpc(self) -> bool:
        return self.vpc_config is not None

    @property
    def has_dlq(self) -> bool:
        return self.dead_letter_config is not None

    @property
    def uses_efs(self) -> bool:
        return bool(self.file_system_config)

    @property
    def estimated_monthly_cost(self) -> float:
        """
        Monthly cost assuming one million invocations that each run for
        the full timeout. Graviton (arm64) compute is 20% cheaper.
        """
        invocations = pricing.LAMBDA_ASSUMED_MONTHLY_INVOCATIONS
        gb_seconds = invocations * (self.memory_size / 1024) * self.timeout
        compute = gb_seconds * pricing.LAMBDA_GB_SECOND_COST
        if self.architecture == "arm64":
            compute *= pricing.LAMBDA_ARM_DISCOUNT
        requests = invocations / 1_000_000 * pricing.LAMBDA_REQUEST_COST_PER_MILLION
        return round(compute + requests, 2)

    def terraform_overrides(self, body: dict) -> dict:
        if self.is_container_based:
            for field in _ZIP_SOURCE_FIELDS:
                body.pop(field, None)
        return body
