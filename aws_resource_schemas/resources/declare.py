"""Declare resources into a sink and hand back references."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Protocol, runtime_checkable

from ..models.base import ResourceAttributes
from ..models.reference import ResourceReference, build_outputs

logger = logging.getLogger(__name__)


@runtime_checkable
class ResourceSink(Protocol):
    """Anything that collects Terraform resource blocks."""

    def add_resource(self, resource_type: str, name: str, body: dict[str, Any]) -> None:
        ...


def declare_resource(
    sink: ResourceSink,
    model_cls: type[ResourceAttributes],
    name: str,
    attributes: Optional[Mapping[str, Any]] = None,
    defaults: Optional[Mapping[str, Any]] = None,
) -> ResourceReference:
    """
    Validate attributes, emit the Terraform block and build the reference.

    Validation happens before anything reaches the sink, so a rejected
    resource leaves the sink untouched.

    Args:
        sink: Collector for the emitted block
        model_cls: Attribute schema for the resource type
        name: Terraform resource name (``resource.<type>.<name>``)
        attributes: Raw attributes
        defaults: Defaults merged under the raw attributes

    Returns:
        ResourceReference with outputs and computed properties

    Raises:
        AttributeValidationError: If the attributes are invalid
    """
    resource_type = model_cls.terraform_type
    validated = model_cls.from_input(attributes, defaults=defaults)

    sink.add_resource(resource_type, name, validated.to_terraform())
    logger.debug(f"Declared {resource_type}.{name}")

    return ResourceReference(
        resource_type=resource_type,
        name=name,
        resource_attributes=validated,
        outputs=build_outputs(resource_type, name, model_cls.outputs),
    )
