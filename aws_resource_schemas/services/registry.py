"""Registry of supported Terraform resource types."""

from types import MappingProxyType

from ..models import RESOURCE_MODELS, ResourceAttributes


class UnknownResourceTypeError(Exception):
    """Raised when a resource type has no registered attribute schema."""

    def __init__(self, resource_type: str):
        self.resource_type = resource_type
        super().__init__(
            f"Unknown resource type '{resource_type}'. "
            f"Supported types: {', '.join(supported_resource_types())}"
        )


_REGISTRY = MappingProxyType({model.terraform_type: model for model in RESOURCE_MODELS})


def get_model(resource_type: str) -> type[ResourceAttributes]:
    """
    Look up the attribute schema for a Terraform resource type.

    Args:
        resource_type: Terraform resource type (e.g., "aws_vpc")

    Returns:
        The ResourceAttributes subclass for that type

    Raises:
        UnknownResourceTypeError: If the type is not supported
    """
    try:
        return _REGISTRY[resource_type]
    except KeyError:
        raise UnknownResourceTypeError(resource_type) from None


def supported_resource_types() -> list[str]:
    """Get every supported Terraform resource type, sorted."""
    return sorted(_REGISTRY)
