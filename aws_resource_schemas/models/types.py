# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""Reusable annotated field types for resource attribute schemas."""

from typing import Annotated

from pydantic import AfterValidator

from ..utils.input_validation import InputValidator

AwsTags = dict[str, str]

Arn = Annotated[str, AfterValidator(InputValidator.check_arn)]
IamRoleArn = Annotated[str, AfterValidator(InputValidator.check_iam_role_arn)]
KmsKeyId = Annotated[str, AfterValidator(InputValidator.check_kms_key_id)]
JsonDocument = Annotated[str, AfterValidator(InputValidator.check_json_document)]

IPv4Address = Annotated[str, AfterValidator(InputValidator.check_ipv4)]
IPv6Address = Annotated[str, AfterValidator(InputValidator.check_ipv6)]
Ipv4Cidr = Annotated[str, AfterValidator(InputValidator.check_ipv4_cidr)]

SubnetId = Annotated[str, AfterValidator(InputValidator.check_subnet_id)]
SecurityGroupId = Annotated[str, AfterValidator(InputValidator.check_security_group_id)]
