# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""ElastiCache subnet group attributes."""

from typing import Optional

from pydantic import Field

from .base import ResourceAttributes
from .types import AwsTags, SubnetId


class ElasticacheSubnetGroupAttributes(ResourceAttributes):
    """Attributes for an ``aws_elasticache_subnet_group``."""

    terraform_type = "aws_elasticache_subnet_group"
    outputs = ("id", "name", "arn", "subnet_ids", "vpc_id")
    computed = ("subnet_count", "supports_multi_az", "is_single_az")

    name: str = Field(..., min_length=1, max_length=255, pattern=r"^[a-z][a-z0-9-]*$")
    subnet_ids: list[SubnetId] = Field(..., min_length=1)
    description: Optional[str] = None
    tags: AwsTags = Field(default_factory=dict)

    @property
    def subnet_count(self) -> int:
        return len(self.subnet_ids)

    @property
    def supports_multi_az(self) -> bool:
        # Each subnet lives in one AZ; two subnets is the floor for multi-AZ
        return self.subnet_count >= 2

    @property
    def is_single_az(self) -> bool:
        return not self.supports_multi_az
