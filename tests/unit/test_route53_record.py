"""Unit tests for Route53 record attributes."""

import pytest

from aws_resource_schemas.models.route53_record import Route53RecordAttributes, is_valid_record_name
from aws_resource_schemas.utils.input_validation import AttributeValidationError, ValidationErrorKind

ALIAS = {"name": "lb-123.us-east-1.elb.amazonaws.com", "zone_id": "Z35SXDOTRQ7X7K", "evaluate_target_health": True}


def simple_record(**overrides):
    attributes = {
        "zone_id": "Z1",
        "name": "a.example.com",
        "type": "A",
        "ttl": 300,
        "records": ["192.0.2.10"],
    }
    attributes.update(overrides)
    return attributes


class TestRecordShape:
    """Test alias versus simple record shape."""

    def test_simple_record(self):
        """Test a simple A record validates."""
        record = Route53RecordAttributes.from_input(simple_record())
        assert record.is_simple_record
        assert record.routing_policy_type == "simple"
        assert record.record_count == 1

    def test_alias_with_ttl_rejected(self):
        """Test an alias record carrying a TTL is rejected."""
        attributes = {"zone_id": "Z1", "name": "a.example.com", "type": "A", "alias": ALIAS, "ttl": 300}
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(attributes)

        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE
        assert exc_info.value.field == "alias"

    def test_alias_without_ttl(self):
        """Test an alias record without TTL or records validates."""
        record = Route53RecordAttributes.from_input(
            {"zone_id": "Z1", "name": "a.example.com", "type": "A", "alias": ALIAS}
        )
        assert record.is_alias_record
        assert not record.is_simple_record

    def test_alias_with_records_rejected(self):
        """Test an alias record carrying values is rejected."""
        attributes = {
            "zone_id": "Z1",
            "name": "a.example.com",
            "type": "A",
            "alias": ALIAS,
            "records": ["192.0.2.10"],
        }
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(attributes)
        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE

    def test_simple_record_needs_records(self):
        """Test a non-alias record without values fails."""
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(simple_record(records=[]))

        assert exc_info.value.kind == ValidationErrorKind.MISSING_FIELD
        assert exc_info.value.field == "records"

    def test_simple_record_needs_ttl(self):
        """Test a non-alias record without TTL fails."""
        attributes = simple_record()
        del attributes["ttl"]
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(attributes)

        assert exc_info.value.kind == ValidationErrorKind.MISSING_FIELD
        assert exc_info.value.field == "ttl"

    def test_missing_zone_id(self):
        """Test a missing required field is reported as missing."""
        attributes = simple_record()
        del attributes["zone_id"]
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(attributes)

        assert exc_info.value.kind == ValidationErrorKind.MISSING_FIELD
        assert exc_info.value.field == "zone_id"
        assert "zone_id" in exc_info.value.message


class TestRecordValues:
    """Test per-type record value formats."""

    def test_cname_needs_exactly_one_value(self):
        """Test CNAME records with two values are rejected."""
        attributes = simple_record(type="CNAME", records=["a.example.net", "b.example.net"])
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(attributes)
        assert exc_info.value.kind == ValidationErrorKind.CONSTRAINT_VIOLATION

    def test_a_record_rejects_ipv6(self):
        """Test A records only accept IPv4 addresses."""
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(simple_record(records=["2001:db8::1"]))

        assert exc_info.value.kind == ValidationErrorKind.FORMAT_MISMATCH
        assert "IPv4" in exc_info.value.message

    def test_aaaa_record(self):
        """Test AAAA records accept IPv6 addresses."""
        record = Route53RecordAttributes.from_input(simple_record(type="AAAA", records=["2001:db8::1"]))
        assert record.records == ["2001:db8::1"]

    def test_mx_record_format(self):
        """Test MX values need a priority and a host."""
        Route53RecordAttributes.from_input(simple_record(type="MX", records=["10 mail.example.com"]))
        with pytest.raises(AttributeValidationError):
            Route53RecordAttributes.from_input(simple_record(type="MX", records=["mail.example.com"]))

    def test_srv_record_format(self):
        """Test SRV values need priority, weight, port and target."""
        Route53RecordAttributes.from_input(simple_record(type="SRV", records=["10 5 5060 sip.example.com"]))
        with pytest.raises(AttributeValidationError):
            Route53RecordAttributes.from_input(simple_record(type="SRV", records=["10 5 sip.example.com"]))

    def test_interpolated_values_skip_format_checks(self):
        """Test Terraform interpolations are accepted as record values."""
        record = Route53RecordAttributes.from_input(simple_record(records=["${aws_eip.web.public_ip}"]))
        assert record.records == ["${aws_eip.web.public_ip}"]

    def test_invalid_zone_id(self):
        """Test lowercase zone ids are rejected."""
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(simple_record(zone_id="zone-1"))
        assert exc_info.value.kind == ValidationErrorKind.FORMAT_MISMATCH

    def test_ttl_bounds(self):
        """Test TTL accepts 0 and rejects negatives."""
        assert Route53RecordAttributes.from_input(simple_record(ttl=0)).ttl == 0
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(simple_record(ttl=-1))
        assert exc_info.value.kind == ValidationErrorKind.CONSTRAINT_VIOLATION


class TestRoutingPolicies:
    """Test routing policy rules."""

    def test_weighted_needs_set_identifier(self):
        """Test routing policies require a set_identifier."""
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(simple_record(weighted_routing_policy={"weight": 10}))

        assert exc_info.value.kind == ValidationErrorKind.DEPENDENCY_UNMET
        assert exc_info.value.field == "set_identifier"

    def test_weighted_record(self):
        """Test a weighted record with a set_identifier."""
        record = Route53RecordAttributes.from_input(
            simple_record(weighted_routing_policy={"weight": 10}, set_identifier="blue")
        )
        assert record.routing_policy_type == "weighted"
        assert record.has_routing_policy
        assert record.estimated_query_cost_per_million == pytest.approx(0.80)

    def test_two_policies_rejected(self):
        """Test only one routing policy may be attached."""
        attributes = simple_record(
            set_identifier="blue",
            weighted_routing_policy={"weight": 10},
            latency_routing_policy={"region": "us-east-1"},
        )
        with pytest.raises(AttributeValidationError) as exc_info:
            Route53RecordAttributes.from_input(attributes)
        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE

    def test_multivalue_answer(self):
        """Test multivalue answers count as a routing policy."""
        record = Route53RecordAttributes.from_input(simple_record(multivalue_answer=True, set_identifier="a"))
        assert record.routing_policy_type == "multivalue"

    def test_weight_bounds(self):
        """Test weights accept 0 and 255 only within range."""
        for weight in (0, 255):
            Route53RecordAttributes.from_input(
                simple_record(weighted_routing_policy={"weight": weight}, set_identifier="blue")
            )
        with pytest.raises(AttributeValidationError):
            Route53RecordAttributes.from_input(
                simple_record(weighted_routing_policy={"weight": 256}, set_identifier="blue")
            )


class TestComputedAndEmission:
    """Test computed properties and Terraform emission."""

    def test_wildcard_and_domain(self):
        """Test wildcard detection and domain extraction."""
        record = Route53RecordAttributes.from_input(simple_record(name="*.api.example.com"))
        assert record.is_wildcard_record
        assert record.domain_name == "example.com"

    def test_alias_emission(self):
        """Test alias records emit no ttl or records."""
        record = Route53RecordAttributes.from_input(
            {"zone_id": "Z1", "name": "a.example.com", "type": "A", "alias": ALIAS}
        )
        body = record.to_terraform()
        assert "ttl" not in body
        assert "records" not in body
        assert body["alias"]["zone_id"] == "Z35SXDOTRQ7X7K"

    def test_multivalue_emission(self):
        """Test multivalue answers emit Terraform's attribute name."""
        body = Route53RecordAttributes.from_input(
            simple_record(multivalue_answer=True, set_identifier="a")
        ).to_terraform()
        assert body["multivalue_answer_routing_policy"] is True
        assert "multivalue_answer" not in body

        body = Route53RecordAttributes.from_input(simple_record()).to_terraform()
        assert "multivalue_answer_routing_policy" not in body


class TestRecordNames:
    """Test DNS record name checks."""

    @pytest.mark.parametrize("name", ["example.com", "*.example.com", "_sip._tcp.example.com", "a"])
    def test_valid_names(self, name):
        assert is_valid_record_name(name)

    @pytest.mark.parametrize("name", ["", "-bad.example.com", "a..example.com", "a" * 64 + ".com"])
    def test_invalid_names(self, name):
        assert not is_valid_record_name(name)
