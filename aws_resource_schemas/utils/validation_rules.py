# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""
Data-driven validation rule tables.

Format rules that track AWS-side constraints live here as data rather than
inline in the schemas, so they can be updated independently when AWS
changes its limits. AWS does not publish most of these as formal grammars;
treat them as best-effort defaults rather than ground truth.
"""

import re
from types import MappingProxyType
from typing import NamedTuple, Optional


class HandlerRule(NamedTuple):
    """Handler format rule for one Lambda runtime family."""

    label: str
    pattern: re.Pattern
    expected: str


# Lambda handler format per runtime family. Keys are runtime prefixes.
LAMBDA_HANDLER_RULES = MappingProxyType(
    {
        "python": HandlerRule(
            "Python",
            re.compile(r"^[A-Za-z0-9_./-]+\.[A-Za-z_][A-Za-z0-9_]*$"),
            "module.function",
        ),
        "nodejs": HandlerRule(
            "Node.js",
            re.compile(r"^[A-Za-z0-9_./-]+\.[A-Za-z_$][A-Za-z0-9_$]*$"),
            "filename.export",
        ),
        "java": HandlerRule(
            "Java",
            re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*::[A-Za-z_$][\w$]*$"),
            "package.Class::method",
        ),
        "go": HandlerRule(
            "Go",
            re.compile(r"^[A-Za-z0-9_-]+$"),
            "executable name",
        ),
        "dotnet": HandlerRule(
            ".NET",
            re.compile(r"^[\w.]+::[\w.]+::\w+$"),
            "Assembly::Namespace.Class::Method",
        ),
        "ruby": HandlerRule(
            "Ruby",
            re.compile(r"^[A-Za-z0-9_./-]+\.[A-Za-z_][A-Za-z0-9_]*$"),
            "file.method",
        ),
        "provided": HandlerRule(
            "custom runtime",
            re.compile(r"^\S+$"),
            "any non-empty handler",
        ),
    }
)

LAMBDA_RUNTIMES = (
    "python3.8",
    "python3.9",
    "python3.10",
    "python3.11",
    "python3.12",
    "python3.13",
    "nodejs16.x",
    "nodejs18.x",
    "nodejs20.x",
    "nodejs22.x",
    "java8",
    "java8.al2",
    "java11",
    "java17",
    "java21",
    "go1.x",
    "dotnet6",
    "dotnet8",
    "ruby3.2",
    "ruby3.3",
    "provided",
    "provided.al2",
    "provided.al2023",
)


def lambda_runtime_family(runtime: str) -> Optional[str]:
    """
    Resolve a Lambda runtime identifier to its handler rule family.

    Example:
        >>> lambda_runtime_family("python3.11")
        'python'
        >>> lambda_runtime_family("provided.al2")
        'provided'
    """
    for family in LAMBDA_HANDLER_RULES:
        if runtime.startswith(family):
            return family
    return None


# KMS key id formats: key id, key ARN, alias name, alias ARN
KMS_KEY_PATTERNS = (
    re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE),
    re.compile(r"^arn:aws[a-z-]*:kms:[a-z0-9-]+:\d{12}:key/[A-Za-z0-9-]+$"),
    re.compile(r"^alias/[a-zA-Z0-9:/_-]+$"),
    re.compile(r"^arn:aws[a-z-]*:kms:[a-z0-9-]+:\d{12}:alias/[a-zA-Z0-9:/_-]+$"),
)

# EC2 resource ids
SUBNET_ID_PATTERN = re.compile(r"^subnet-[0-9a-zA-Z]+$")
SECURITY_GROUP_ID_PATTERN = re.compile(r"^sg-[0-9a-zA-Z]+$")

# Route53 record-type specific value formats
MX_RECORD_PATTERN = re.compile(r"^\d{1,5} \S+$")
SRV_RECORD_PATTERN = re.compile(r"^\d{1,5} \d{1,5} \d{1,5} \S+$")

# DNS label: letters, digits, hyphens and underscores, 1-63 chars
DNS_LABEL_PATTERN = re.compile(r"^[A-Za-z0-9_]([A-Za-z0-9_-]{0,61}[A-Za-z0-9_])?$")
DNS_NAME_MAX_LENGTH = 253

ROUTE53_ZONE_ID_PATTERN = re.compile(r"^[A-Z0-9]+$")
ROUTE53_HEALTH_CHECK_ID_PATTERN = re.compile(r"^[a-z0-9-]+$")

# Storage floor per engine family in GB. Aurora volumes are cluster-managed
# and start at 10 GB; standalone RDS instances need at least 20 GB.
STORAGE_MINIMUMS = MappingProxyType({"rds": 20, "aurora": 10})
STORAGE_MAXIMUM_GB = 65536

# RDS performance insights accepts 7 days or a multiple of 31 up to 731
PERFORMANCE_INSIGHTS_RETENTION_DAYS = frozenset([7] + [31 * n for n in range(1, 24)] + [731])

# CloudWatch log types each RDS engine family can export
RDS_LOG_EXPORTS = MappingProxyType(
    {
        "mysql": frozenset({"audit", "error", "general", "slowquery", "iam-db-auth-error"}),
        "mariadb": frozenset({"audit", "error", "general", "slowquery", "iam-db-auth-error"}),
        "postgresql": frozenset({"postgresql", "upgrade", "iam-db-auth-error"}),
        "oracle": frozenset({"alert", "audit", "listener", "trace", "oemagent"}),
        "sqlserver": frozenset({"agent", "error"}),
    }
)
