"""Unit tests for network interface attributes."""

import pytest

from aws_resource_schemas.models.network_interface import NetworkInterfaceAttributes
from aws_resource_schemas.utils.input_validation import AttributeValidationError, ValidationErrorKind

SUBNET = "subnet-0a1b2c3d"


class TestNetworkInterface:
    """Test network interface validation."""

    def test_minimal(self):
        """Test only subnet_id is required."""
        eni = NetworkInterfaceAttributes.from_input({"subnet_id": SUBNET})
        assert eni.total_private_ip_count == 1
        assert not eni.has_ipv6
        assert not eni.is_efa

    def test_private_ips_and_count_exclusive(self):
        """Test private_ips and private_ips_count cannot both be set."""
        with pytest.raises(AttributeValidationError) as exc_info:
            NetworkInterfaceAttributes.from_input(
                {"subnet_id": SUBNET, "private_ips": ["10.0.0.10"], "private_ips_count": 2}
            )
        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE

    def test_ipv6_addresses_and_count_exclusive(self):
        """Test ipv6_addresses and ipv6_address_count cannot both be set."""
        with pytest.raises(AttributeValidationError) as exc_info:
            NetworkInterfaceAttributes.from_input(
                {"subnet_id": SUBNET, "ipv6_addresses": ["2001:db8::10"], "ipv6_address_count": 1}
            )

        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE
        assert exc_info.value.field == "ipv6_addresses"

    def test_private_ip_must_be_listed(self):
        """Test the primary address must appear in private_ips."""
        with pytest.raises(AttributeValidationError) as exc_info:
            NetworkInterfaceAttributes.from_input(
                {"subnet_id": SUBNET, "private_ip": "10.0.0.5", "private_ips": ["10.0.0.10", "10.0.0.11"]}
            )

        assert exc_info.value.kind == ValidationErrorKind.CONSTRAINT_VIOLATION
        assert exc_info.value.field == "private_ip"

    def test_total_private_ip_count_from_list(self):
        """Test the count is the number of distinct listed addresses."""
        eni = NetworkInterfaceAttributes.from_input(
            {"subnet_id": SUBNET, "private_ip": "10.0.0.10", "private_ips": ["10.0.0.10", "10.0.0.11"]}
        )
        assert eni.total_private_ip_count == 2

    def test_total_private_ip_count_from_count(self):
        """Test the count is the primary address plus secondaries."""
        eni = NetworkInterfaceAttributes.from_input({"subnet_id": SUBNET, "private_ips_count": 3})
        assert eni.total_private_ip_count == 4

    def test_private_ips_count_bounds(self):
        """Test private_ips_count accepts 0 to 49."""
        for count in (0, 49):
            NetworkInterfaceAttributes.from_input({"subnet_id": SUBNET, "private_ips_count": count})
        with pytest.raises(AttributeValidationError):
            NetworkInterfaceAttributes.from_input({"subnet_id": SUBNET, "private_ips_count": 50})

    def test_invalid_ipv4(self):
        """Test addresses are format checked."""
        with pytest.raises(AttributeValidationError) as exc_info:
            NetworkInterfaceAttributes.from_input({"subnet_id": SUBNET, "private_ip": "10.0.0.256"})
        assert exc_info.value.kind == ValidationErrorKind.FORMAT_MISMATCH

    def test_efa_and_source_dest(self):
        """Test EFA and source/destination check flags."""
        eni = NetworkInterfaceAttributes.from_input(
            {"subnet_id": SUBNET, "interface_type": "efa", "source_dest_check": False, "ipv6_address_count": 1}
        )
        assert eni.is_efa
        assert eni.source_dest_check_disabled
        assert eni.has_ipv6
