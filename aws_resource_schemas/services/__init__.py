"""Service layer for AWS resource schemas."""

from .registry import UnknownResourceTypeError, get_model, supported_resource_types
from .synthesizer import DuplicateResourceError, TerraformSynthesizer

__all__ = [
    "UnknownResourceTypeError",
    "get_model",
    "supported_resource_types",
    "DuplicateResourceError",
    "TerraformSynthesizer",
]
