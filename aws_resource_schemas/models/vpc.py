# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""VPC attributes."""

import ipaddress
from typing import Literal

from pydantic import Field, field_validator, model_validator

from ..utils.arn_utils import is_terraform_reference
from ..utils.input_validation import ValidationErrorKind, attribute_error, format_error
from .base import ResourceAttributes
from .types import AwsTags, Ipv4Cidr

# AWS allows VPC netmasks between /16 and /28
MIN_PREFIX_LENGTH = 16
MAX_PREFIX_LENGTH = 28


class VpcAttributes(ResourceAttributes):
    """Attributes for an ``aws_vpc``."""

    terraform_type = "aws_vpc"
    outputs = (
        "id",
        "arn",
        "cidr_block",
        "default_security_group_id",
        "default_route_table_id",
        "main_route_table_id",
        "owner_id",
    )
    computed = ("address_count", "is_private_range", "prefix_length")

    cidr_block: Ipv4Cidr
    instance_tenancy: Literal["default", "dedicated"] = "default"
    enable_dns_support: bool = True
    enable_dns_hostnames: bool = False
    assign_generated_ipv6_cidr_block: bool = False
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("cidr_block")
    @classmethod
    def _check_prefix_length(cls, value: str) -> str:
        if is_terraform_reference(value):
            return value
        prefix = ipaddress.IPv4Network(value).prefixlen
        if not MIN_PREFIX_LENGTH <= prefix <= MAX_PREFIX_LENGTH:
            raise format_error(
                f"VPC CIDR block prefix must be between /{MIN_PREFIX_LENGTH} and /{MAX_PREFIX_LENGTH}, got: /{prefix}"
            )
        return value

    @model_validator(mode="after")
    def _check_dns(self) -> "VpcAttributes":
        if self.enable_dns_hostnames and not self.enable_dns_support:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "enable_dns_hostnames",
                "enable_dns_hostnames requires enable_dns_support",
            )
        return self

    @property
    def _network(self):
        if is_terraform_reference(self.cidr_block):
            return None
        return ipaddress.IPv4Network(self.cidr_block)

    @property
    def address_count(self):
        network = self._network
        return network.num_addresses if network else None

    @property
    def is_private_range(self):
        network = self._network
        return network.is_private if network else None

    @property
    def prefix_length(self):
        network = self._network
        return network.prefixlen if network else None
