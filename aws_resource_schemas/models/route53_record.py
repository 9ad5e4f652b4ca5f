# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Route53 DNS record attributes."""

from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator

from ..utils import pricing
from ..utils.arn_utils import is_terraform_reference
from ..utils.input_validation import InputValidator, ValidationErrorKind, attribute_error, format_error
from ..utils.validation_rules import (
    DNS_LABEL_PATTERN,
    DNS_NAME_MAX_LENGTH,
    MX_RECORD_PATTERN,
    ROUTE53_HEALTH_CHECK_ID_PATTERN,
    ROUTE53_ZONE_ID_PATTERN,
    SRV_RECORD_PATTERN,
)
from .base import NestedBlock, ResourceAttributes
from .types import AwsTags

RecordType = Literal["A", "AAAA", "CNAME", "MX", "NS", "PTR", "SOA", "SPF", "SRV", "TXT"]

ROUTING_POLICY_FIELDS = (
    "weighted_routing_policy",
    "latency_routing_policy",
    "failover_routing_policy",
    "geolocation_routing_policy",
    "geoproximity_routing_policy",
)


def is_valid_record_name(name: str) -> bool:
    """
    Check a DNS record name.

    Accepts an optional leading ``*.`` wildcard, then dot-separated labels
    of 1-63 letters, digits, hyphens or underscores, 253 characters max.
    """
    if not name or len(name) > DNS_NAME_MAX_LENGTH:
        return False

    if name.startswith("*."):
        name = name[2:]

    return all(DNS_LABEL_PATTERN.match(label) for label in name.split("."))


class WeightedRoutingPolicy(NestedBlock):
    weight: int = Field(..., ge=0, le=255)


class LatencyRoutingPolicy(NestedBlock):
    region: str


class FailoverRoutingPolicy(NestedBlock):
    type: Literal["PRIMARY", "SECONDARY"]


class GeolocationRoutingPolicy(NestedBlock):
    continent: Optional[str] = None
    country: Optional[str] = None
    subdivision: Optional[str] = None


class Coordinates(NestedBlock):
    latitude: str
    longitude: str


class GeoproximityRoutingPolicy(NestedBlock):
    aws_region: Optional[str] = None
    bias: Optional[int] = Field(None, ge=-99, le=99)
    coordinates: Optional[Coordinates] = None


class AliasTarget(NestedBlock):
    """Alias target (load balancer, CloudFront distribution, another record)."""

    name: str
    zone_id: str
    evaluate_target_health: bool = False


class Route53RecordAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_route53_record``.

    A record is either an alias (``alias`` set, no ``ttl`` or ``records``) or
    a simple record carrying ``ttl`` and at least one value. At most one
    routing policy may be attached, and routing policies other than
    multivalue answers need a ``set_identifier``.
    """

    terraform_type = "aws_route53_record"
    outputs = ("id", "name", "fqdn", "type", "zone_id", "records", "ttl")
    computed = (
        "is_alias_record",
        "is_simple_record",
        "routing_policy_type",
        "has_routing_policy",
        "is_wildcard_record",
        "record_count",
        "domain_name",
        "estimated_query_cost_per_million",
    )

    zone_id: str = Field(..., description="Hosted zone ID")
    name: str = Field(..., description="DNS record name")
    type: RecordType = Field(..., description="DNS record type")
    ttl: Optional[int] = Field(None, ge=0, le=2147483647)
    records: list[str] = Field(default_factory=list)
    set_identifier: Optional[str] = None
    health_check_id: Optional[str] = None
    multivalue_answer: bool = False
    allow_overwrite: bool = False
    weighted_routing_policy: Optional[WeightedRoutingPolicy] = None
    latency_routing_policy: Optional[LatencyRoutingPolicy] = None
    failover_routing_policy: Optional[FailoverRoutingPolicy] = None
    geolocation_routing_policy: Optional[GeolocationRoutingPolicy] = None
    geoproximity_routing_policy: Optional[GeoproximityRoutingPolicy] = None
    alias: Optional[AliasTarget] = None
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("zone_id")
    @classmethod
    def _check_zone_id(cls, value: str) -> str:
        if is_terraform_reference(value) or ROUTE53_ZONE_ID_PATTERN.match(value):
            return value
        raise format_error(f"Invalid hosted zone ID format: {value}")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if is_terraform_reference(value) or is_valid_record_name(value):
            return value
        raise format_error(f"Invalid DNS record name format: {value}")

    @field_validator("health_check_id")
    @classmethod
    def _check_health_check_id(cls, value: Optional[str]) -> Optional[str]:
        if value is None or is_terraform_reference(value) or ROUTE53_HEALTH_CHECK_ID_PATTERN.match(value):
            return value
        raise format_error(f"Invalid health check ID format: {value}")

    @model_validator(mode="after")
    def _validate_record(self) -> "Route53RecordAttributes":
        self._check_alias_shape()
        self._check_record_values()
        self._check_routing_policies()
        return self

    def _check_alias_shape(self) -> None:
        if self.alias is not None:
            if self.ttl is not None or self.records:
                raise attribute_error(
                    ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                    "alias",
                    "Alias records cannot have TTL or records values",
                )
            return

        if not self.records:
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "records",
                "Non-alias records must have at least one record value",
            )
        if self.ttl is None:
            raise attribute_error(
                ValidationErrorKind.MISSING_FIELD,
                "ttl",
                "Non-alias records must have a TTL value",
            )

    def _check_record_values(self) -> None:
        values = [value for value in self.records if not is_terraform_reference(value)]

        if self.type == "CNAME" and len(self.records) != 1:
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "records",
                "CNAME records must have exactly one value",
            )

        for value in values:
            if self.type == "A" and not InputValidator.is_ipv4(value):
                message = f"A records must be IPv4 addresses, got: {value}"
            elif self.type == "AAAA" and not InputValidator.is_ipv6(value):
                message = f"AAAA records must be IPv6 addresses, got: {value}"
            elif self.type == "MX" and not MX_RECORD_PATTERN.match(value):
                message = f"MX records must be 'priority hostname', got: {value}"
            elif self.type == "SRV" and not SRV_RECORD_PATTERN.match(value):
                message = f"SRV records must be 'priority weight port target', got: {value}"
            else:
                continue
            raise attribute_error(ValidationErrorKind.FORMAT_MISMATCH, "records", message)

    def _check_routing_policies(self) -> None:
        policies = [field for field in ROUTING_POLICY_FIELDS if getattr(self, field) is not None]

        if len(policies) > 1:
            raise attribute_error(
                ValidationErrorKind.MUTUALLY_EXCLUSIVE,
                policies[1],
                "Only one routing policy can be specified per record",
            )

        if policies and not self.multivalue_answer and not self.set_identifier:
            raise attribute_error(
                ValidationErrorKind.DEPENDENCY_UNMET,
                "set_identifier",
                "set_identifier is required when using routing policies",
            )

    # Computed properties

    @property
    def is_alias_record(self) -> bool:
        return self.alias is not None

    @property
    def routing_policy_type(self) -> str:
        for field in ROUTING_POLICY_FIELDS:
            if getattr(self, field) is not None:
                return field.removesuffix("_routing_policy")
        if self.multivalue_answer:
            return "multivalue"
        return "simple"

    @property
    def has_routing_policy(self) -> bool:
        return self.routing_policy_type != "simple"

    @property
    def is_simple_record(self) -> bool:
        return not self.is_alias_record and not self.has_routing_policy

    @property
    def is_wildcard_record(self) -> bool:
        return self.name.startswith("*.")

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def domain_name(self) -> str:
        """Registered domain part of the record name (last two labels)."""
        labels = self.name.removeprefix("*.").split(".")
        return ".".join(labels[-2:])

    @property
    def estimated_query_cost_per_million(self) -> float:
        cost = pricing.ROUTE53_QUERY_COST_PER_MILLION
        if self.has_routing_policy:
            cost *= pricing.ROUTE53_ROUTING_POLICY_MULTIPLIER
        return cost

    def terraform_overrides(self, body: dict) -> dict:
        if self.alias is not None:
            body.pop("ttl", None)
            body.pop("records", None)

        multivalue = body.pop("multivalue_answer", False)
        if multivalue:
            body["multivalue_answer_routing_policy"] = True
        return body
