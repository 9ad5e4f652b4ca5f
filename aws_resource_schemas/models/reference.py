# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Resource reference returned from every resource declaration."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Any

from ..utils.arn_utils import terraform_interpolation
from .base import ResourceAttributes


def build_outputs(resource_type: str, name: str, output_names: Iterable[str]) -> Mapping[str, str]:
    """
    Build the read-only output table for a declared resource.

    Example:
        >>> dict(build_outputs("aws_vpc", "main", ["id"]))
        {'id': '${aws_vpc.main.id}'}
    """
    return MappingProxyType(
        {output: terraform_interpolation(resource_type, name, output) for output in output_names}
    )


@dataclass(frozen=True, eq=False)
class ResourceReference:
    """
    Read-only handle to a declared resource.

    Outputs are Terraform interpolation strings (``${type.name.attr}``).
    Computed properties are derived from the validated attributes the first
    time they are requested and memoized afterwards. Both are reachable as
    plain attributes, e.g. ``ref.arn`` or ``ref.supports_multi_az``.
    """

    resource_type: str
    name: str
    resource_attributes: ResourceAttributes
    outputs: Mapping[str, str]

    @cached_property
    def computed_properties(self) -> Mapping[str, Any]:
        return MappingProxyType(self.resource_attributes.computed_properties())

    def ref(self, attribute: str) -> str:
        """Build an interpolation string for any attribute of this resource."""
        return terraform_interpolation(self.resource_type, self.name, attribute)

    def __getattr__(self, attribute: str) -> Any:
        # Only reached when normal lookup fails
        fields = self.__dict__
        if attribute.startswith("_") or "resource_attributes" not in fields:
            raise AttributeError(attribute)
        if attribute in fields["outputs"]:
            return fields["outputs"][attribute]
        if attribute in fields["resource_attributes"].computed:
            return self.computed_properties[attribute]
        raise AttributeError(
            f"{self.resource_type}.{self.name} has no output or computed property '{attribute}'"
        )
