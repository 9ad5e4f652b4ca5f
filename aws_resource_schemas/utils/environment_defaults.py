# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""
Environment default profiles.

Each profile maps a Terraform resource type to attribute defaults that are
merged *under* caller input when a resource is declared through a
synthesizer. The tables are immutable and are always passed explicitly into
construction; nothing reads them implicitly.

Profile defaults only ever tighten settings that are valid for every
variant of a resource type (for example, production never forces
``multi_az`` on DB instances because Aurora rejects it at instance level).
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

ENVIRONMENTS = ("development", "staging", "production")

_EMPTY: Mapping = MappingProxyType({})


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


DEVELOPMENT_DEFAULTS = _freeze(
    {
        "aws_db_instance": {
            "backup_retention_period": 1,
            "deletion_protection": False,
        },
        "aws_kinesis_stream": {
            "retention_period": 24,
        },
        "aws_lambda_function": {
            "timeout": 30,
        },
    }
)

STAGING_DEFAULTS = _freeze(
    {
        "aws_db_instance": {
            "backup_retention_period": 7,
            "storage_encrypted": True,
        },
        "aws_cloudtrail": {
            "enable_log_file_validation": True,
        },
        "aws_lambda_function": {
            "timeout": 30,
            "tracing_config": {"mode": "PassThrough"},
        },
        "aws_redshift_cluster": {
            "encrypted": True,
        },
    }
)

PRODUCTION_DEFAULTS = _freeze(
    {
        "aws_db_instance": {
            "backup_retention_period": 30,
            "storage_encrypted": True,
            "deletion_protection": True,
            "performance_insights_enabled": True,
        },
        "aws_cloudtrail": {
            "is_multi_region_trail": True,
            "enable_log_file_validation": True,
            "include_global_service_events": True,
        },
        "aws_kinesis_stream": {
            "retention_period": 168,
        },
        "aws_lambda_function": {
            "timeout": 60,
            "tracing_config": {"mode": "Active"},
        },
        "aws_redshift_cluster": {
            "encrypted": True,
            "automated_snapshot_retention_period": 7,
        },
    }
)

ENVIRONMENT_PROFILES = MappingProxyType(
    {
        "development": DEVELOPMENT_DEFAULTS,
        "staging": STAGING_DEFAULTS,
        "production": PRODUCTION_DEFAULTS,
    }
)


def defaults_for(resource_type: str, environment: str) -> dict[str, Any]:
    """
    Get the default attributes for a resource type in an environment.

    Args:
        resource_type: Terraform resource type (e.g., "aws_db_instance")
        environment: One of "development", "staging", "production"

    Returns:
        A fresh copy of the attribute defaults (empty when the profile
        has nothing for this resource type)

    Raises:
        ValueError: If the environment is unknown
    """
    profile = ENVIRONMENT_PROFILES.get(environment)
    if profile is None:
        raise ValueError(
            f"Unknown environment '{environment}'. Expected one of: {', '.join(ENVIRONMENTS)}"
        )

    defaults = profile.get(resource_type, _EMPTY)
    logger.debug(f"Environment '{environment}' defaults for {resource_type}: {sorted(defaults)}")
    return _thaw(defaults)
