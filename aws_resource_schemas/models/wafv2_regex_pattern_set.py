# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""WAFv2 regex pattern set attributes."""

import re
from typing import Literal, Optional

from pydantic import Field, field_validator

from ..utils.input_validation import ValidationErrorKind, attribute_error, format_error
from .base import NestedBlock, ResourceAttributes
from .types import AwsTags


class RegularExpression(NestedBlock):
    regex_string: str = Field(..., min_length=1, max_length=200)

    @field_validator("regex_string")
    @classmethod
    def _check_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise format_error(f"Invalid regular expression '{value}': {e}") from None
        return value


class Wafv2RegexPatternSetAttributes(ResourceAttributes):
    """
    Attributes for an ``aws_wafv2_regex_pattern_set``.

    Holds between 1 and 10 unique, compilable regular expressions.
    """

    terraform_type = "aws_wafv2_regex_pattern_set"
    outputs = ("id", "arn", "name", "lock_token")
    computed = ("pattern_count", "regional_scope", "cloudfront_scope")

    name: str = Field(..., min_length=1, max_length=128, pattern=r"^[A-Za-z0-9_-]+$")
    scope: Literal["REGIONAL", "CLOUDFRONT"]
    description: Optional[str] = Field(None, max_length=256)
    regular_expression: list[RegularExpression] = Field(..., min_length=1, max_length=10)
    tags: AwsTags = Field(default_factory=dict)

    @field_validator("regular_expression")
    @classmethod
    def _check_unique(cls, value: list[RegularExpression]) -> list[RegularExpression]:
        patterns = [expression.regex_string for expression in value]
        if len(set(patterns)) != len(patterns):
            raise attribute_error(
                ValidationErrorKind.CONSTRAINT_VIOLATION,
                "regular_expression",
                "Regular expressions in a pattern set must be unique",
            )
        return value

    @property
    def pattern_count(self) -> int:
        return len(self.regular_expression)

    @property
    def regional_scope(self) -> bool:
        return self.scope == "REGIONAL"

    @property
    def cloudfront_scope(self) -> bool:
        return self.scope == "CLOUDFRONT"
