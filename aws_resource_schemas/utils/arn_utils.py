# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Shared ARN and Terraform interpolation utilities.

This module centralizes ARN handling and the ``${type.name.attr}``
interpolation syntax used by resource references, so every schema
recognizes the same formats.
"""

import re
from typing import Optional


# ARN validation pattern - supports standard AWS ARN formats including:
# - S3 buckets with empty region/account fields
# - Resources with colons in their identifiers
ARN_PATTERN = re.compile(r"^arn:aws[a-z-]*:[a-z0-9-]+:[a-z0-9-]*:[0-9]*:.+")

# Terraform interpolation: ${aws_vpc.main.id}, ${var.zone_id}, ${data.x.y.z}
TERRAFORM_REFERENCE_PATTERN = re.compile(r"^\$\{[^{}]+\}$")


def is_valid_arn(arn: Optional[str]) -> bool:
    """
    Validate if a string is a valid AWS ARN format.

    Supports various ARN formats including:
    - Standard: arn:aws:ec2:us-east-1:123456789012:instance/i-1234567890abcdef0
    - S3: arn:aws:s3:::bucket-name (empty region and account)
    - Global services: arn:aws:iam::123456789012:role/role-name

    Args:
        arn: String to validate

    Returns:
        True if valid ARN format, False otherwise
    """
    if not arn or not isinstance(arn, str):
        return False

    return bool(ARN_PATTERN.match(arn))


def is_terraform_reference(value: Optional[str]) -> bool:
    """
    Check whether a value is a Terraform interpolation string.

    Interpolations are resolved by Terraform at apply time, so schemas
    accept them wherever a literal id or ARN would be format-checked.

    Args:
        value: Value to check

    Returns:
        True if the value looks like ``${...}``
    """
    if not value or not isinstance(value, str):
        return False

    return bool(TERRAFORM_REFERENCE_PATTERN.match(value))


def terraform_interpolation(resource_type: str, name: str, attribute: str) -> str:
    """
    Build a Terraform interpolation string for a resource attribute.

    Example:
        >>> terraform_interpolation("aws_vpc", "main", "id")
        '${aws_vpc.main.id}'
    """
    return f"${{{resource_type}.{name}.{attribute}}}"


def parse_arn(arn: str) -> dict[str, str]:
    """
    Parse an AWS ARN into its components.

    ARN format: arn:partition:service:region:account:resource

    Args:
        arn: AWS ARN string

    Returns:
        Dictionary with parsed ARN components:
        - partition: AWS partition (aws, aws-cn, aws-us-gov)
        - service: AWS service name (ec2, s3, iam, etc.)
        - region: AWS region ("global" for services without one)
        - account: AWS account ID (may be empty for some services)
        - resource: Full resource part of ARN
        - resource_id: Resource identifier extracted from resource part

    Raises:
        ValueError: If ARN format is invalid

    Example:
        >>> parse_arn("arn:aws:iam::123456789012:role/lambda-exec")["resource_id"]
        'lambda-exec'
    """
    if not is_valid_arn(arn):
        raise ValueError(f"Invalid ARN format: {arn}")

    parts = arn.split(":")

    return {
        "partition": parts[1],
        "service": parts[2],
        "region": parts[3] or "global",  # IAM and S3 have empty region
        "account": parts[4],
        "resource": ":".join(parts[5:]),  # Resource may contain colons
        "resource_id": extract_resource_id(":".join(parts[5:])),
    }


def extract_resource_id(resource: str) -> str:
    """
    Extract the resource ID from the resource part of an ARN.

    Handles various AWS resource formats:
    - type/id: role/lambda-exec
    - type/subtype/id: loadbalancer/app/name
    - type:id: function:my-function
    - just id: bucket-name

    Args:
        resource: Resource part of ARN

    Returns:
        Resource ID string
    """
    if "/" in resource:
        return resource.split("/")[-1]

    if ":" in resource:
        return resource.split(":")[-1]

    return resource


def build_arn(service: str, resource: str, account: str = "", region: str = "", partition: str = "aws") -> str:
    """
    Assemble an ARN from its parts.

    Example:
        >>> build_arn("iam", "group/teams/developers", account="123456789012")
        'arn:aws:iam::123456789012:group/teams/developers'
    """
    return f"arn:{partition}:{service}:{region}:{account}:{resource}"
