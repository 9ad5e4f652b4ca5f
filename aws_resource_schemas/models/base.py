# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Base model shared by every resource attribute schema."""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..utils.input_validation import AttributeValidationError

logger = logging.getLogger(__name__)


def prune_empty(value: Any) -> Any:
    """
    Recursively drop None values, empty lists and empty mappings.

    Terraform treats an absent block and an empty one differently for many
    resources, so only attributes that carry a value are emitted.
    """
    if isinstance(value, dict):
        pruned = {}
        for key, item in value.items():
            item = prune_empty(item)
            if item is None or item == [] or item == {}:
                continue
            pruned[key] = item
        return pruned
    if isinstance(value, list):
        return [prune_empty(item) for item in value if item is not None]
    return value


class NestedBlock(BaseModel):
    """Immutable nested configuration block inside resource attributes."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ResourceAttributes(BaseModel):
    """
    Immutable, validated attributes for one Terraform resource type.

    Subclasses declare their pydantic fields plus three class-level tables:

    - ``terraform_type``: the Terraform resource type they describe
    - ``outputs``: attribute names exposed as ``${type.name.attr}`` references
    - ``computed``: names of properties returned by ``computed_properties()``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    terraform_type: ClassVar[str]
    outputs: ClassVar[tuple[str, ...]] = ("id",)
    computed: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_input(
        cls,
        attributes: Optional[Mapping[str, Any]] = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> "ResourceAttributes":
        """
        Validate raw attributes and build the immutable model.

        Defaults are merged under the raw input (caller keys win), schema
        defaults fill every field still absent, values are coerced, field
        constraints are checked, and cross-field rules run last.

        Args:
            attributes: Raw attribute mapping with string keys
            defaults: Optional environment or caller defaults

        Returns:
            Validated attribute model

        Raises:
            AttributeValidationError: Naming the first violated constraint
        """
        merged = {**(defaults or {}), **(attributes or {})}

        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            error = AttributeValidationError.from_pydantic(cls.terraform_type, e)
            # Never log the offending value, it may be a secret
            logger.warning(
                f"Rejected {cls.terraform_type} attributes: field={error.field} kind={error.kind.value}"
            )
            raise error from e

    def computed_properties(self) -> dict[str, Any]:
        """Evaluate every computed property declared in ``computed``."""
        return {name: getattr(self, name) for name in self.computed}

    def terraform_overrides(self, body: dict[str, Any]) -> dict[str, Any]:
        """Adjust the emitted body where Terraform's shape differs from the schema."""
        return body

    def to_terraform(self) -> dict[str, Any]:
        """
        Build the Terraform resource body for these attributes.

        Returns:
            JSON-compatible mapping with empty values omitted
        """
        body = self.model_dump(mode="json", exclude_none=True)
        return prune_empty(self.terraform_overrides(body))
