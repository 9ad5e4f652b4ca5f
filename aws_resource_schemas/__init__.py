# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Validated attribute schemas for AWS resources, synthesized as Terraform JSON."""

__version__ = "0.1.0"

from .models import RESOURCE_MODELS, ResourceAttributes, ResourceReference
from .resources import ResourceSink, declare_resource
from .services import (
    DuplicateResourceError,
    TerraformSynthesizer,
    UnknownResourceTypeError,
    get_model,
    supported_resource_types,
)
from .utils import AttributeValidationError, ValidationErrorKind

__all__ = [
    "__version__",
    "RESOURCE_MODELS",
    "ResourceAttributes",
    "ResourceReference",
    "ResourceSink",
    "declare_resource",
    "DuplicateResourceError",
    "TerraformSynthesizer",
    "UnknownResourceTypeError",
    "get_model",
    "supported_resource_types",
    "AttributeValidationError",
    "ValidationErrorKind",
]
