"""Utility modules for AWS resource schemas."""

from .arn_utils import is_terraform_reference, is_valid_arn, parse_arn, terraform_interpolation
from .environment_defaults import ENVIRONMENTS, ENVIRONMENT_PROFILES, defaults_for
from .input_validation import AttributeValidationError, InputValidator, ValidationErrorKind

__all__ = [
    "is_terraform_reference",
    "is_valid_arn",
    "parse_arn",
    "terraform_interpolation",
    "ENVIRONMENTS",
    "ENVIRONMENT_PROFILES",
    "defaults_for",
    "AttributeValidationError",
    "InputValidator",
    "ValidationErrorKind",
]
