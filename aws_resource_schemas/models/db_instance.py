# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""RDS database instance attributes."""

from typing import Any, Literal, Optional

from pydantic import Field, model_validator

from ..utils import pricing
from ..utils.input_validation import ValidationErrorKind, attribute_error
from ..utils.validation_rules import (
    PERFORMANCE_INSIGHTS_RETENTION_DAYS,
    RDS_LOG_EXPORTS,
    STORAGE_MAXIMUM_GB,
    STORAGE_MINIMUMS,
)
from .base import ResourceAttributes
from .types import AwsTags, IamRoleArn, KmsKeyId, SecurityGroupId

Engine = Literal[
    "mysql",
    "postgres",
    "mariadb",
    "oracle-ee",
    "oracle-ee-cdb",
    "oracle-se2",
    "oracle-se2-cdb",
    "sqlserver-ee",
    "sqlserver-se",
    "sqlserver-ex",
    "sqlserver-web",
    "aurora-mysql",
    "aurora-postgresql",
]
StorageType = Literal["standard", "gp2", "gp3", "io1", "io2"]

PROVISIONED_IOPS_STORAGE = ("io1", "io2")


class DbInstanceAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_db_instance``.

    Aurora instances get their storage and multi-AZ placement from the
    cluster, so both are rejected at instance level. Every other engine
    needs ``allocated_storage`` of at least 20 GB.
    """

    terraform_type = "aws_db_instance"
    outputs = ("id", "arn", "address", "endpoint", "hosted_zone_id", "resource_id", "status", "port")
    computed = (
        "engine_family",
        "is_aurora",
        "is_serverless",
        "requires_subnet_group",
        "supports_encryption",
        "estimated_monthly_cost",
    )

    identifier: Optional[str] = Field(None, min_length=1, max_length=63, pattern=r"^[a-z][a-z0-9-]*$")
    identifier_prefix: Optional[str] = Field(None, min_length=1, max_length=37, pattern=r"^[a-z][a-z0-9-]*$")
    engine: Engine
    engine_version: Optional[str] = None
    instance_class: str = Field(..., pattern=r"^db\.")
    allocated_storage: Optional[int] = Field(None, le=STORAGE_MAXIMUM_GB)
    max_allocated_storage: Optional[int] = Field(None, ge=0, le=STORAGE_MAXIMUM_GB)
    storage_type: StorageType = "gp3"
    storage_encrypted: bool = True
    kms_key_id: Optional[KmsKeyId] = None
    iops: Optional[int] = Field(None, ge=1000, le=256000)
    storage_throughput: Optional[int] = Field(None, ge=125)
    db_name: Optional[str] = Field(None, min_length=1, max_length=64, pattern=r"^[A-Za-z][A-Za-z0-9_]*$")
    username: Optional[str] = Field(None, min_length=1, max_length=63)
    password: Optional[str] = Field(None, min_length=8, max_length=128, repr=False)
    manage_master_user_password: bool = True
    master_user_secret_kms_key_id: Optional[KmsKeyId] = None
    port: Optional[int] = Field(None, ge=1150, le=65535)
    vpc_security_group_ids: list[SecurityGroupId] = Field(default_factory=list)
    db_subnet_group_name: Optional[str] = None
    parameter_group_name: Optional[str] = None
    option_group_name: Optional[str] = None
    availability_zone: Optional[str] = None
    multi_az: bool = False
    publicly_accessible: bool = False
    backup_retention_period: int = Field(7, ge=0, le=35)
    backup_window: Optional[str] = Field(None, pattern=r"^\d{2}:\d{2}-\d{2}:\d{2}$")
    maintenance_window: Optional[str] = None
    auto_minor_version_upgrade: bool = True
    deletion_protection: bool = False
    skip_final_snapshot: bool = True
    final_snapshot_identifier: Optional[str] = None
    copy_tags_to_snapshot: bool = False
    enabled_cloudwatch_logs_exports: list[str] = Field(default_factory=list)
    performance_insights_enabled: bool = False
    performance_insights_kms_key_id: Optional[KmsKeyId] = None
    performance_insights_retention_period: int = 7
    monitoring_interval: Literal[0, 1, 5, 10, 15, 30, 60] = 0
    monitoring_role_arn: Optional[IamRoleArn] = None
    ca_cert_identifier: Optional[str] = None
    tags: AwsTags = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_password_management(cls, data: Any) -> Any:
        # An explicit password turns managed passwords off unless the caller said otherwise
        if isinstance(data, dict) and data.get("password") and "manage_master_user_password" not in data:
            data = {**data, "manage_master_user_password": False}
        return data

    @model_validator(mode="after")
    def _validate_instance(self) -> "DbInstanceAttributes":
        self._check_exclusive_options()
        self._check_storage()
        self._check_engine_options()
        return self

    def _check_exclusive_options(self) -> None:
        if self.identifier and self.identifier_prefix:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "identifier_prefix",
                "Cannot specify both 'identifier' and 'identifier_prefix'",
            )
        if self.password and self.manage_master_user_password:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "password",
                "Cannot specify both 'password' and 'manage_master_user_password'",
            )

    def _check_storage(self) -> None:
        if self.iops is not None and self.storage_type not in PROVISIONED_IOPS_STORAGE:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "iops",
                "IOPS can only be specified for io1 or io2 storage types",
            )
        if self.iops is None and self.storage_type in PROVISIONED_IOPS_STORAGE:
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "iops",
                f"iops is required for {self.storage_type} storage",
            )

        if self.is_aurora:
            if self.allocated_storage is not None:
                raise attribute_error(
                    ValidationErrorKind.CONSTRAINT_VIOLATION,
                    "allocated_storage",
                    "Aurora engines do not support 'allocated_storage'; storage is managed by the cluster",
                )
            if self.multi_az:
                raise attribute_error(
                    ValidationErrorKind.CONSTRAINT_VIOLATION,
                    "multi_az",
                    "Aurora engines handle multi-AZ at the cluster level",
                )
            return

        if self.allocated_storage is None:
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "allocated_storage",
                f"allocated_storage is required for {self.engine}",
            )
        minimum = STORAGE_MINIMUMS["rds"]
        if self.allocated_storage < minimum:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "allocated_storage",
                f"allocated_storage must be at least {minimum} GB, got: {self.allocated_storage}",
            )

    def _check_engine_options(self) -> None:
        if self.engine.startswith("sqlserver") and self.db_name:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "db_name",
                "SQL Server engines do not support 'db_name'",
            )

        supported = RDS_LOG_EXPORTS[self.engine_family]
        unsupported = [log for log in self.enabled_cloudwatch_logs_exports if log not in supported]
        if unsupported:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "enabled_cloudwatch_logs_exports",
                f"{self.engine} does not export logs: {', '.join(unsupported)}",
            )

        if self.performance_insights_retention_period not in PERFORMANCE_INSIGHTS_RETENTION_DAYS:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "performance_insights_retention_period",
                "performance_insights_retention_period must be 7 or a multiple of 31 up to 731",
            )

        if self.monitoring_interval and not self.monitoring_role_arn:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "monitoring_role_arn",
                "monitoring_role_arn is required when monitoring_interval is set",
            )

    @property
    def engine_family(self) -> str:
        if self.engine in ("aurora-mysql", "mysql"):
            return "mysql"
        if self.engine in ("aurora-postgresql", "postgres"):
            return "postgresql"
        if self.engine.startswith("oracle"):
            return "oracle"
        if self.engine.startswith("sqlserver"):
            return "sqlserver"
        return self.engine

    @property
    def is_aurora(self) -> bool:
        return self.engine.startswith("aurora")

    @property
    def is_serverless(self) -> bool:
        return self.instance_class == "db.serverless"

    @property
    def requires_subnet_group(self) -> bool:
        """Private instances are placed in a VPC through a DB subnet group."""
        return not self.publicly_accessible

    @property
    def supports_encryption(self) -> bool:
        # Previous-generation classes predate storage encryption
        return not self.instance_class.startswith(("db.t1.", "db.m1.", "db.m2."))

    @property
    def estimated_monthly_cost(self) -> str:
        """Indicative monthly cost, e.g. ``~$24.82/month``. Multi-AZ doubles compute."""
        hourly = pricing.RDS_INSTANCE_HOURLY.get(self.instance_class, pricing.RDS_DEFAULT_INSTANCE_HOURLY)
        compute = hourly * pricing.HOURS_PER_MONTH
        if self.multi_az:
            compute *= 2

        storage = (self.allocated_storage or 0) * pricing.RDS_STORAGE_GB_MONTH[self.storage_type]
        iops = (self.iops or 0) * pricing.RDS_IOPS_MONTH
        return f"~${compute + storage + iops:.2f}/month"

    def terraform_overrides(self, body: dict) -> dict:
        if self.storage_type not in PROVISIONED_IOPS_STORAGE:
            body.pop("iops", None)
        if self.skip_final_snapshot:
            body.pop("final_snapshot_identifier", None)
        if not self.performance_insights_enabled:
            body.pop("performance_insights_retention_period", None)
            body.pop("performance_insights_kms_key_id", None)
        if self.is_aurora:
            body.pop("manage_master_user_password", None)
        return body


class RdsEngineConfigs:
    """
    Starting attribute sets for common engines.

    Each method returns a plain dict that can be merged into instance
    attributes (or passed as ``defaults``).

    Example:
        >>> RdsEngineConfigs.postgresql(version="15.3")["enabled_cloudwatch_logs_exports"]
        ['postgresql']
    """

    @classmethod
    def mysql(cls, version: str = "8.0") -> dict[str, Any]:
        return {
            "engine": "mysql",
            "engine_version": version,
            "enabled_cloudwatch_logs_exports": ["error", "general", "slowquery"],
        }

    @classmethod
    def postgresql(cls, version: str = "15") -> dict[str, Any]:
        return {
            "engine": "postgres",
            "engine_version": version,
            "enabled_cloudwatch_logs_exports": ["postgresql"],
        }

    @classmethod
    def aurora_mysql(cls, version: Optional[str] = None) -> dict[str, Any]:
        config = {
            "engine": "aurora-mysql",
            "enabled_cloudwatch_logs_exports": ["audit", "error", "general", "slowquery"],
        }
        if version:
            config["engine_version"] = version
        return config

    @classmethod
    def aurora_postgresql(cls, version: Optional[str] = None) -> dict[str, Any]:
        config = {
            "engine": "aurora-postgresql",
            "enabled_cloudwatch_logs_exports": ["postgresql"],
        }
        if version:
            config["engine_version"] = version
        return config

    @classmethod
    def mariadb(cls, version: str = "10.11") -> dict[str, Any]:
        return {
            "engine": "mariadb",
            "engine_version": version,
            "enabled_cloudwatch_logs_exports": ["error", "general", "slowquery"],
        }
