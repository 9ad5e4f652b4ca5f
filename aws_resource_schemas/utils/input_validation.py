# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Input validation utilities shared by every resource schema.

This module owns the validation error taxonomy and the reusable format
checks (ARNs, CIDR blocks, IP addresses, KMS key ids, JSON documents)
that resource attribute models plug into their pydantic fields.

Format checks are written as plain functions raising
``PydanticCustomError`` so they can be used both as field validators and
from cross-field model validators; ``AttributeValidationError`` is the
single exception callers see once pydantic has collected the failures.
"""

import ipaddress
import json
from enum import Enum
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from .arn_utils import is_terraform_reference, is_valid_arn
from .validation_rules import KMS_KEY_PATTERNS, SECURITY_GROUP_ID_PATTERN, SUBNET_ID_PATTERN


class ValidationErrorKind(str, Enum):
    """Kinds of attribute validation failures."""

    MISSING_FIELD = "missing_field"
    CONSTRAINT_VIOLATION = "constraint_violation"
    FORMAT_MISMATCH = "format_mismatch"
    MUTUALLY_EXCLUSIVE = "mutually_exclusive"
    DEPENDENCY_UNMET = "dependency_unmet"


# pydantic's own error types that map onto something other than a
# generic constraint violation
_PYDANTIC_ERROR_KINDS = {
    "missing": ValidationErrorKind.MISSING_FIELD,
    "string_pattern_mismatch": ValidationErrorKind.FORMAT_MISMATCH,
}

_CUSTOM_ERROR_KINDS = {kind.value: kind for kind in ValidationErrorKind}


class AttributeValidationError(Exception):
    """Raised when resource attributes fail schema validation."""

    def __init__(
        self,
        resource_type: str,
        field: str,
        kind: ValidationErrorKind,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        """
        Initialize attribute validation error.

        Args:
            resource_type: Terraform resource type being constructed
            field: The field that failed validation (dotted path for nested fields)
            kind: Category of the failure
            message: Human-readable error message
            errors: Every error pydantic collected, first one first
        """
        self.resource_type = resource_type
        self.field = field
        self.kind = kind
        self.message = message
        self.errors = errors or []
        super().__init__(f"{resource_type}: invalid '{field}' ({kind.value}): {message}")

    @classmethod
    def from_pydantic(cls, resource_type: str, exc: ValidationError) -> "AttributeValidationError":
        """
        Build an AttributeValidationError naming the first pydantic failure.

        Field-level failures carry their location in ``loc``; model-level
        (cross-field) failures carry it in the error context under ``field``.

        Args:
            resource_type: Terraform resource type being constructed
            exc: The pydantic ValidationError to translate

        Returns:
            AttributeValidationError describing the first violated constraint
        """
        errors = exc.errors(include_url=False, include_input=False)
        first = errors[0]
        ctx = first.get("ctx") or {}

        if first["loc"]:
            field = ".".join(str(part) for part in first["loc"])
        else:
            field = str(ctx.get("field", "attributes"))

        error_type = first["type"]
        kind = _CUSTOM_ERROR_KINDS.get(error_type) or _PYDANTIC_ERROR_KINDS.get(
            error_type, ValidationErrorKind.CONSTRAINT_VIOLATION
        )

        if error_type == "missing":
            message = f"Required field '{field}' is missing"
        else:
            message = first["msg"]

        return cls(resource_type, field, kind, message, errors)


def attribute_error(kind: ValidationErrorKind, field: str, message: str) -> PydanticCustomError:
    """Create a pydantic custom error tagged with a validation kind and field."""
    return PydanticCustomError(kind.value, message, {"field": field})


def format_error(message: str) -> PydanticCustomError:
    """Create a format-mismatch error for use inside a field validator."""
    return PydanticCustomError(ValidationErrorKind.FORMAT_MISMATCH.value, message)


class InputValidator:
    """
    Reusable format checks for resource attribute values.

    Each ``check_*`` method returns the value unchanged when valid and
    raises a format-mismatch ``PydanticCustomError`` otherwise, so they
    can be wrapped in ``AfterValidator`` directly. Terraform interpolation
    strings (``${...}``) pass every check because they only resolve at
    apply time.
    """

    @classmethod
    def check_arn(cls, value: str) -> str:
        """Check an AWS ARN."""
        if is_terraform_reference(value) or is_valid_arn(value):
            return value
        raise format_error(f"Invalid ARN format: {value}")

    @classmethod
    def check_iam_role_arn(cls, value: str) -> str:
        """Check an IAM role ARN (arn:aws:iam::<account>:role/<name>)."""
        if is_terraform_reference(value):
            return value
        if is_valid_arn(value) and ":iam::" in value and ":role/" in value:
            return value
        raise format_error(f"Invalid IAM role ARN: {value}")

    @classmethod
    def check_ipv4(cls, value: str) -> str:
        """Check a dotted-quad IPv4 address."""
        if is_terraform_reference(value):
            return value
        try:
            ipaddress.IPv4Address(value)
        except ValueError:
            raise format_error(f"Invalid IPv4 address: {value}") from None
        return value

    @classmethod
    def check_ipv6(cls, value: str) -> str:
        """Check an IPv6 address."""
        if is_terraform_reference(value):
            return value
        try:
            ipaddress.IPv6Address(value)
        except ValueError:
            raise format_error(f"Invalid IPv6 address: {value}") from None
        return value

    @classmethod
    def check_ipv4_cidr(cls, value: str) -> str:
        """Check an IPv4 CIDR block with no host bits set."""
        if is_terraform_reference(value):
            return value
        if "/" not in value:
            raise format_error(f"Invalid CIDR block (missing prefix length): {value}")
        try:
            ipaddress.IPv4Network(value, strict=True)
        except ValueError:
            raise format_error(f"Invalid CIDR block: {value}") from None
        return value

    @classmethod
    def check_kms_key_id(cls, value: str) -> str:
        """Check a KMS key id, key ARN, alias name or alias ARN."""
        if is_terraform_reference(value):
            return value
        if any(pattern.match(value) for pattern in KMS_KEY_PATTERNS):
            return value
        raise format_error(f"Invalid KMS key ID format: {value}")

    @classmethod
    def check_subnet_id(cls, value: str) -> str:
        """Check a VPC subnet id (subnet-...)."""
        if is_terraform_reference(value) or SUBNET_ID_PATTERN.match(value):
            return value
        raise format_error(f"Invalid subnet ID: {value}")

    @classmethod
    def check_security_group_id(cls, value: str) -> str:
        """Check a security group id (sg-...)."""
        if is_terraform_reference(value) or SECURITY_GROUP_ID_PATTERN.match(value):
            return value
        raise format_error(f"Invalid security group ID: {value}")

    @classmethod
    def check_json_document(cls, value: str) -> str:
        """Check that a string holds a JSON document."""
        if is_terraform_reference(value):
            return value
        try:
            json.loads(value)
        except json.JSONDecodeError as e:
            raise format_error(f"Must be valid JSON: {e.msg}") from None
        return value

    @classmethod
    def is_ipv4(cls, value: str) -> bool:
        """Return True if ``value`` parses as an IPv4 address."""
        try:
            ipaddress.IPv4Address(value)
        except ValueError:
            return False
        return True

    @classmethod
    def is_ipv6(cls, value: str) -> bool:
        """Return True if ``value`` parses as an IPv6 address."""
        try:
            ipaddress.IPv6Address(value)
        except ValueError:
            return False
        return True
