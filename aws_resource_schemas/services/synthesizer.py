"""In-memory Terraform synthesizer."""

import copy
import json
import logging
from collections.abc import Mapping
from typing import Any, Optional

from ..config import settings
from ..models.reference import ResourceReference
from ..resources.declare import declare_resource
from ..utils.environment_defaults import ENVIRONMENTS, defaults_for
from .registry import get_model

logger = logging.getLogger(__name__)


class DuplicateResourceError(Exception):
    """Raised when the same ``type.name`` is declared twice."""

    def __init__(self, resource_type: str, name: str):
        self.resource_type = resource_type
        self.name = name
        super().__init__(f"Resource {resource_type}.{name} is already declared")


class TerraformSynthesizer:
    """
    Collects declared resources and renders Terraform JSON.

    Resources declared through ``declare()`` get the environment profile
    defaults merged under their attributes. The synthesizer also satisfies
    ``ResourceSink``, so the per-type ``aws_*`` functions can write into it
    directly (without profile defaults unless passed explicitly).
    """

    def __init__(
        self,
        environment: Optional[str] = None,
        apply_environment_defaults: Optional[bool] = None,
    ):
        """
        Initialize the synthesizer.

        Args:
            environment: Environment profile (defaults to the configured one)
            apply_environment_defaults: Merge profile defaults in ``declare()``
                (defaults to the configured setting)
        """
        config = settings()
        self.environment = environment or config.environment
        if apply_environment_defaults is None:
            apply_environment_defaults = config.apply_environment_defaults
        self.apply_environment_defaults = apply_environment_defaults
        self._resources: dict[str, dict[str, dict[str, Any]]] = {}

        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"Unknown environment '{self.environment}'. Expected one of: {', '.join(ENVIRONMENTS)}"
            )

    def add_resource(self, resource_type: str, name: str, body: dict[str, Any]) -> None:
        """
        Add a Terraform resource block.

        Raises:
            DuplicateResourceError: If ``resource_type.name`` already exists
        """
        blocks = self._resources.setdefault(resource_type, {})
        if name in blocks:
            raise DuplicateResourceError(resource_type, name)
        blocks[name] = body

    def declare(
        self, resource_type: str, name: str, attributes: Optional[Mapping[str, Any]] = None
    ) -> ResourceReference:
        """
        Declare a resource by Terraform type.

        Args:
            resource_type: Terraform resource type (e.g., "aws_sqs_queue")
            name: Terraform resource name
            attributes: Raw attributes

        Returns:
            ResourceReference for the declared resource

        Raises:
            UnknownResourceTypeError: If the type is not supported
            AttributeValidationError: If the attributes are invalid
            DuplicateResourceError: If the name is already taken for this type
        """
        model_cls = get_model(resource_type)
        defaults = defaults_for(resource_type, self.environment) if self.apply_environment_defaults else None
        return declare_resource(self, model_cls, name, attributes, defaults=defaults)

    @property
    def resource_count(self) -> int:
        return sum(len(blocks) for blocks in self._resources.values())

    def synthesis(self) -> dict[str, Any]:
        """
        Get the synthesized configuration.

        Returns:
            ``{"resource": {type: {name: body}}}`` (a copy; mutating it does
            not affect the synthesizer)
        """
        return {"resource": copy.deepcopy(self._resources)}

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the synthesis as Terraform JSON."""
        logger.info(f"Synthesizing {self.resource_count} resources for environment '{self.environment}'")
        return json.dumps(self.synthesis(), indent=indent)
