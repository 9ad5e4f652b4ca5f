"""Unit tests for ElastiCache subnet group attributes."""

import pytest

from aws_resource_schemas.models.elasticache_subnet_group import ElasticacheSubnetGroupAttributes
from aws_resource_schemas.utils.input_validation import AttributeValidationError, ValidationErrorKind


class TestElasticacheSubnetGroup:
    """Test ElastiCache subnet group validation."""

    def test_single_subnet(self):
        """Test a single subnet is accepted but cannot span AZs."""
        group = ElasticacheSubnetGroupAttributes.from_input(
            {"name": "cache-subnets", "subnet_ids": ["subnet-0a1b2c3d"]}
        )
        assert group.subnet_count == 1
        assert group.supports_multi_az is False
        assert group.is_single_az is True

    def test_multi_az(self, subnet_ids):
        """Test two subnets support multi-AZ."""
        group = ElasticacheSubnetGroupAttributes.from_input({"name": "cache-subnets", "subnet_ids": subnet_ids})
        assert group.supports_multi_az is True
        assert group.computed_properties() == {
            "subnet_count": 2,
            "supports_multi_az": True,
            "is_single_az": False,
        }

    def test_empty_subnets_rejected(self):
        """Test at least one subnet is required."""
        with pytest.raises(AttributeValidationError) as exc_info:
            ElasticacheSubnetGroupAttributes.from_input({"name": "cache-subnets", "subnet_ids": []})

        assert exc_info.value.field == "subnet_ids"
        assert exc_info.value.kind == ValidationErrorKind.CONSTRAINT_VIOLATION

    def test_missing_subnets(self):
        """Test subnet_ids is required."""
        with pytest.raises(AttributeValidationError) as exc_info:
            ElasticacheSubnetGroupAttributes.from_input({"name": "cache-subnets"})
        assert exc_info.value.kind == ValidationErrorKind.MISSING_FIELD

    @pytest.mark.parametrize("name", ["Cache", "1cache", "cache_subnets"])
    def test_invalid_name(self, name):
        """Test names must be lowercase, start with a letter and use hyphens."""
        with pytest.raises(AttributeValidationError) as exc_info:
            ElasticacheSubnetGroupAttributes.from_input({"name": name, "subnet_ids": ["subnet-0a1b2c3d"]})

        assert exc_info.value.field == "name"
        assert exc_info.value.kind == ValidationErrorKind.FORMAT_MISMATCH

    def test_invalid_subnet_id(self):
        """Test subnet ids are format checked."""
        with pytest.raises(AttributeValidationError) as exc_info:
            ElasticacheSubnetGroupAttributes.from_input({"name": "cache", "subnet_ids": ["vpc-0a1b2c3d"]})

        assert exc_info.value.field == "subnet_ids.0"
        assert exc_info.value.kind == ValidationErrorKind.FORMAT_MISMATCH

    def test_interpolated_subnet(self):
        """Test subnet ids may be Terraform references."""
        group = ElasticacheSubnetGroupAttributes.from_input(
            {"name": "cache", "subnet_ids": ["${aws_subnet.private.id}"]}
        )
        assert group.to_terraform() == {"name": "cache", "subnet_ids": ["${aws_subnet.private.id}"]}

    def test_unknown_attribute_rejected(self):
        """Test unknown attribute keys are rejected."""
        with pytest.raises(AttributeValidationError) as exc_info:
            ElasticacheSubnetGroupAttributes.from_input(
                {"name": "cache", "subnet_ids": ["subnet-0a1b2c3d"], "vpc_id": "vpc-1"}
            )

        assert exc_info.value.field == "vpc_id"
        assert exc_info.value.kind == ValidationErrorKind.CONSTRAINT_VIOLATION
