# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Redshift cluster attributes."""

import re
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..utils import pricing
from ..utils.arn_utils import is_terraform_reference
from ..utils.input_validation import ValidationErrorKind, attribute_error, format_error
from .base import NestedBlock, ResourceAttributes
from .types import AwsTags, IamRoleArn, KmsKeyId, SecurityGroupId

NodeType = Literal["dc2.large", "dc2.8xlarge", "ra3.xlplus", "ra3.4xlarge", "ra3.16xlarge"]

MIN_MULTI_NODE_COUNT = 2
MAX_NODE_COUNT = 128


class Logging(NestedBlock):
    enable: bool = False
    bucket_name: Optional[str] = None
    s3_key_prefix: Optional[str] = None


class SnapshotCopy(NestedBlock):
    destination_region: str
    retention_period: Optional[int] = Field(None, ge=1, le=35)
    grant_name: Optional[str] = None


class RedshiftClusterAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_redshift_cluster``.

    A ``single-node`` cluster has exactly one node; a ``multi-node`` cluster
    has between 2 and 128.
    """

    terraform_type = "aws_redshift_cluster"
    outputs = (
        "id",
        "arn",
        "endpoint",
        "address",
        "port",
        "database_name",
        "cluster_identifier",
        "cluster_nodes",
        "cluster_parameter_group_name",
        "cluster_subnet_group_name",
        "vpc_security_group_ids",
        "preferred_maintenance_window",
        "node_type",
        "number_of_nodes",
    )
    computed = (
        "multi_node",
        "uses_ra3_nodes",
        "uses_dc2_nodes",
        "total_storage_capacity_gb",
        "total_vcpus",
        "total_memory_gb",
        "estimated_monthly_cost_usd",
        "high_availability",
        "audit_logging_enabled",
        "cross_region_backup",
        "jdbc_connection_string",
    )

    cluster_identifier: str = Field(..., min_length=1, max_length=63, pattern=r"^[a-z][a-z0-9-]*$")
    node_type: NodeType
    database_name: str = Field("dev", min_length=1, max_length=64, pattern=r"^[a-z_][a-z0-9_$]*$")
    master_username: str = Field("awsuser", min_length=1, max_length=128)
    master_password: Optional[str] = Field(None, repr=False)
    cluster_type: Literal["single-node", "multi-node"] = "single-node"
    number_of_nodes: int = 1
    port: int = Field(5439, ge=1150, le=65535)
    cluster_subnet_group_name: Optional[str] = None
    cluster_parameter_group_name: Optional[str] = None
    vpc_security_group_ids: list[SecurityGroupId] = Field(default_factory=list)
    availability_zone: Optional[str] = None
    preferred_maintenance_window: str = "sun:05:00-sun:06:00"
    automated_snapshot_retention_period: int = Field(1, ge=0, le=35)
    manual_snapshot_retention_period: int = Field(-1, ge=-1, le=3653)
    encrypted: bool = False
    kms_key_id: Optional[KmsKeyId] = None
    enhanced_vpc_routing: bool = False
    publicly_accessible: bool = False
    elastic_ip: Optional[str] = None
    skip_final_snapshot: bool = True
    final_snapshot_identifier: Optional[str] = None
    snapshot_identifier: Optional[str] = None
    allow_version_upgrade: bool = True
    cluster_version: str = "1.0"
    logging: Optional[Logging] = None
    snapshot_copy: Optional[SnapshotCopy] = None
    iam_roles: list[IamRoleArn] = Field(default_factory=list, max_length=10)
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("cluster_identifier")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if "--" in value or value.endswith("-"):
            raise format_error(
                f"Cluster identifier cannot contain two consecutive hyphens or end with a hyphen: {value}"
            )
        return value

    @field_validator("master_password")
    @classmethod
    def _check_password(cls, value: Optional[str]) -> Optional[str]:
        # Never echo the password in the error
        if value is None:
            return value
        if not 8 <= len(value) <= 64:
            raise format_error("Master password must be between 8 and 64 characters")
        if not (re.search(r"[A-Z]", value) and re.search(r"[a-z]", value) and re.search(r"\d", value)):
            raise format_error("Master password must contain an uppercase letter, a lowercase letter and a digit")
        return value

    @model_validator(mode="after")
    def _validate_cluster(self) -> "RedshiftClusterAttributes":
        if self.cluster_type == "multi-node" and not MIN_MULTI_NODE_COUNT <= self.number_of_nodes <= MAX_NODE_COUNT:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "number_of_nodes",
                f"Multi-node clusters need between {MIN_MULTI_NODE_COUNT} and {MAX_NODE_COUNT} nodes",
            )
        if self.cluster_type == "single-node" and self.number_of_nodes != 1:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "number_of_nodes",
                "Single-node clusters must have exactly 1 node",
            )

        if self.kms_key_id and not self.encrypted:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "kms_key_id",
                "kms_key_id requires encrypted to be true",
            )

        if not self.skip_final_snapshot and not self.final_snapshot_identifier:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "final_snapshot_identifier",
                "final_snapshot_identifier is required when skip_final_snapshot is false",
            )

        if self.logging and self.logging.enable and not self.logging.bucket_name:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "logging.bucket_name",
                "logging.bucket_name is required when logging is enabled",
            )
        return self

    @property
    def _node_spec(self):
        return pricing.REDSHIFT_NODE_TYPES[self.node_type]

    @property
    def multi_node(self) -> bool:
        return self.cluster_type == "multi-node"

    @property
    def uses_ra3_nodes(self) -> bool:
        return self.node_type.startswith("ra3.")

    @property
    def uses_dc2_nodes(self) -> bool:
        return self.node_type.startswith("dc2.")

    @property
    def total_storage_capacity_gb(self) -> int:
        return self._node_spec["storage_gb"] * self.number_of_nodes

    @property
    def total_vcpus(self) -> int:
        return self._node_spec["vcpus"] * self.number_of_nodes

    @property
    def total_memory_gb(self) -> int:
        return self._node_spec["memory_gb"] * self.number_of_nodes

    @property
    def estimated_monthly_cost_usd(self) -> float:
        return round(self._node_spec["hourly"] * self.number_of_nodes * pricing.HOURS_PER_MONTH, 2)

    @property
    def high_availability(self) -> bool:
        return self.multi_node and self.automated_snapshot_retention_period > 0

    @property
    def audit_logging_enabled(self) -> bool:
        return bool(self.logging and self.logging.enable)

    @property
    def cross_region_backup(self) -> bool:
        return self.snapshot_copy is not None

    @property
    def jdbc_connection_string(self) -> Optional[str]:
        """JDBC URL, known only when the availability zone pins the region."""
        if not self.availability_zone or is_terraform_reference(self.availability_zone):
            return None
        region = self.availability_zone[:-1]
        host = f"{self.cluster_identifier}.{region}.redshift.amazonaws.com"
        return f"jdbc:redshift://{host}:{self.port}/{self.database_name}"

    def terraform_overrides(self, body: dict) -> dict:
        if not self.multi_node:
            body.pop("number_of_nodes", None)
        if self.skip_final_snapshot:
            body.pop("final_snapshot_identifier", None)
        return body
