# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""IAM group attributes and naming heuristics."""

import logging
import re
from typing import Optional

from pydantic import Field, field_validator, model_validator

from ..config import settings
from ..utils.arn_utils import build_arn
from ..utils.input_validation import format_error
from .base import ResourceAttributes

logger = logging.getLogger(__name__)

# Keyword tables for name classification (substring match, lowercase)
ADMIN_KEYWORDS = ("admin", "root", "super", "power")
DEVELOPER_KEYWORDS = ("developer", "engineer", "programmer", "coder")
OPERATIONS_KEYWORDS = ("ops", "sre", "infrastructure", "platform", "operator")
READONLY_KEYWORDS = ("readonly", "read-only", "viewer", "auditor", "audit", "monitor")

# Token tables (exact match on hyphen/underscore separated parts)
DEPARTMENTS = (
    "engineering",
    "finance",
    "marketing",
    "sales",
    "hr",
    "legal",
    "security",
    "support",
    "product",
    "data",
)
ENVIRONMENTS = ("production", "prod", "staging", "stage", "development", "test", "qa", "sandbox")

BROAD_NAMES = ("all", "all-users", "everyone", "users", "everybody", "default")

ACCESS_LEVELS = {
    "administrative": "full_admin",
    "developer": "developer",
    "operations": "power_user",
    "readonly": "read_only",
}


class IamGroupAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_iam_group``.

    Besides validation this model classifies the group from its name
    (administrative, developer, operations, ...) and scores how well the name
    follows the ``<department>-<role>-<environment>`` convention. Naming
    problems are logged as advisories and never rejected.
    """

    terraform_type = "aws_iam_group"
    outputs = ("id", "arn", "name", "path", "unique_id")
    computed = (
        "administrative_group",
        "developer_group",
        "operations_group",
        "readonly_group",
        "department_group",
        "environment_group",
        "group_category",
        "security_risk_level",
        "suggested_access_level",
        "follows_naming_convention",
        "naming_convention_score",
        "organizational_path",
        "organizational_unit",
    )

    name: str = Field(..., min_length=1, max_length=128, pattern=r"^[A-Za-z0-9+=,.@_-]+$")
    path: str = Field("/", max_length=512)

    @field_validator("path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not (value.startswith("/") and value.endswith("/")):
            raise format_error(f"IAM group path must start and end with '/', got: {value}")
        return value

    @model_validator(mode="after")
    def _log_advisories(self) -> "IamGroupAttributes":
        if self.name.lower() in BROAD_NAMES:
            logger.warning(f"IAM group '{self.name}' has a very broad name; prefer a scoped name")
        if self.administrative_group and self.path == "/":
            logger.warning(f"Administrative IAM group '{self.name}' sits at the root path")
        if self.environment_group and not any(env in self.path.lower() for env in ENVIRONMENTS):
            logger.warning(f"Environment IAM group '{self.name}' has a path without an environment")
        return self

    @property
    def _lower_name(self) -> str:
        return self.name.lower()

    @property
    def _name_tokens(self) -> list[str]:
        return [token for token in re.split(r"[-_.]", self._lower_name) if token]

    @property
    def administrative_group(self) -> bool:
        return any(keyword in self._lower_name for keyword in ADMIN_KEYWORDS)

    @property
    def developer_group(self) -> bool:
        return any(keyword in self._lower_name for keyword in DEVELOPER_KEYWORDS)

    @property
    def operations_group(self) -> bool:
        return any(keyword in self._lower_name for keyword in OPERATIONS_KEYWORDS)

    @property
    def readonly_group(self) -> bool:
        return any(keyword in self._lower_name for keyword in READONLY_KEYWORDS)

    def extract_department(self) -> Optional[str]:
        """First department token in the name, if any."""
        return next((token for token in self._name_tokens if token in DEPARTMENTS), None)

    def extract_environment(self) -> Optional[str]:
        """First environment token in the name, if any."""
        return next((token for token in self._name_tokens if token in ENVIRONMENTS), None)

    @property
    def department_group(self) -> bool:
        return self.extract_department() is not None

    @property
    def environment_group(self) -> bool:
        return self.extract_environment() is not None

    @property
    def group_category(self) -> str:
        """Category by precedence: administrative > developer > operations > readonly > department > environment."""
        if self.administrative_group:
            return "administrative"
        if self.developer_group:
            return "developer"
        if self.operations_group:
            return "operations"
        if self.readonly_group:
            return "readonly"
        if self.department_group:
            return "department"
        if self.environment_group:
            return "environment"
        return "custom"

    @property
    def security_risk_level(self) -> str:
        # Read-only intent outranks developer and operations keywords
        if self.administrative_group:
            return "high"
        if self.readonly_group:
            return "low"
        if self.developer_group:
            return "medium"
        if self.operations_group:
            return "high"
        return "low"

    @property
    def suggested_access_level(self) -> str:
        return ACCESS_LEVELS.get(self.group_category, "custom")

    @property
    def naming_convention_score(self) -> int:
        """
        Score the name out of 100.

        - 20 for a length between 3 and 64 characters
        - 20 for hyphenated structure without leading or trailing hyphens
        - 20 for a department token
        - 40 for an environment token
        """
        score = 0
        name = self._lower_name
        if 3 <= len(name) <= 64:
            score += 20
        if "-" in name and not name.startswith("-") and not name.endswith("-"):
            score += 20
        if self.department_group:
            score += 20
        if self.environment_group:
            score += 40
        return score

    @property
    def follows_naming_convention(self) -> bool:
        return self.naming_convention_score >= 40

    @property
    def organizational_path(self) -> bool:
        return self.path != "/"

    @property
    def organizational_unit(self) -> Optional[str]:
        """First path segment, e.g. ``teams`` for ``/teams/engineering/``."""
        segments = [segment for segment in self.path.split("/") if segment]
        return segments[0] if segments else None

    def group_arn(self, account_id: Optional[str] = None) -> str:
        """
        Build the group's ARN.

        Args:
            account_id: AWS account id (defaults to the configured account)
        """
        account = account_id or settings().aws_account_id
        return build_arn("iam", f"group{self.path}{self.name}", account=account)
