# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Elastic network interface attributes."""

from typing import Literal, Optional

from pydantic import Field, model_validator

from ..utils.arn_utils import is_terraform_reference
from ..utils.input_validation import ValidationErrorKind, attribute_error
from .base import ResourceAttributes
from .types import AwsTags, IPv4Address, IPv6Address, SecurityGroupId, SubnetId


class NetworkInterfaceAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_network_interface``.

    Secondary addresses are given either as an explicit list or as a count,
    never both (the same applies to IPv6 addresses).
    """

    terraform_type = "aws_network_interface"
    outputs = ("id", "arn", "mac_address", "private_ip", "private_ips", "private_dns_name", "owner_id")
    computed = ("total_private_ip_count", "has_ipv6", "is_efa", "source_dest_check_disabled")

    subnet_id: SubnetId
    description: Optional[str] = None
    private_ip: Optional[IPv4Address] = None
    private_ips: Optional[list[IPv4Address]] = None
    private_ips_count: Optional[int] = Field(None, ge=0, le=49)
    ipv6_address_count: Optional[int] = Field(None, ge=0)
    ipv6_addresses: Optional[list[IPv6Address]] = None
    security_groups: list[SecurityGroupId] = Field(default_factory=list)
    source_dest_check: bool = True
    interface_type: Optional[Literal["efa", "branch", "trunk"]] = None
    tags: AwsTags = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_addresses(self) -> "NetworkInterfaceAttributes":
        if self.private_ips is not None and self.private_ips_count is not None:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "private_ips",
                "Cannot specify both private_ips and private_ips_count",
            )

        if self.ipv6_addresses is not None and self.ipv6_address_count is not None:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                "ipv6_addresses",
                "Cannot specify both ipv6_addresses and ipv6_address_count",
            )

        if (
            self.private_ip
            and self.private_ips
            and not is_terraform_reference(self.private_ip)
            and self.private_ip not in self.private_ips
        ):
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "private_ip",
                "private_ip must be included in private_ips when both are specified",
            )
        return self

    @property
    def total_private_ip_count(self) -> int:
        """Primary address plus every secondary address."""
        if self.private_ips:
            addresses = set(self.private_ips)
            if self.private_ip:
                addresses.add(self.private_ip)
            return len(addresses)
        return 1 + (self.private_ips_count or 0)

    @property
    def has_ipv6(self) -> bool:
        return bool(self.ipv6_addresses) or bool(self.ipv6_address_count)

    @property
    def is_efa(self) -> bool:
        return self.interface_type == "efa"

    @property
    def source_dest_check_disabled(self) -> bool:
        return not self.source_dest_check
