# Copyright (c) 2025 OptimNow - Jean Latiere. All Rights Reserved.
# Licensed under the Proprietary Software License.
# See LICENSE file in the project root for full license information.

"""
Static on-demand pricing tables used by cost estimate properties.

Prices are us-east-1 list prices in USD. Estimates are indicative only and
never call the AWS Pricing API.
"""

from types import MappingProxyType

HOURS_PER_MONTH = 730

# Route53: standard queries per million; routing policies bill at 2x
ROUTE53_QUERY_COST_PER_MILLION = 0.40
ROUTE53_ROUTING_POLICY_MULTIPLIER = 2

# Lambda
LAMBDA_GB_SECOND_COST = 0.0000166667
LAMBDA_ARM_DISCOUNT = 0.8
LAMBDA_REQUEST_COST_PER_MILLION = 0.20
LAMBDA_ASSUMED_MONTHLY_INVOCATIONS = 1_000_000

# Redshift node specs: hourly price, storage GB, vCPUs, memory GB
REDSHIFT_NODE_TYPES = MappingProxyType(
    {
        "dc2.large": MappingProxyType({"hourly": 0.25, "storage_gb": 160, "vcpus": 2, "memory_gb": 15}),
        "dc2.8xlarge": MappingProxyType({"hourly": 4.80, "storage_gb": 2560, "vcpus": 32, "memory_gb": 244}),
        "ra3.xlplus": MappingProxyType({"hourly": 1.086, "storage_gb": 32768, "vcpus": 4, "memory_gb": 32}),
        "ra3.4xlarge": MappingProxyType({"hourly": 3.26, "storage_gb": 131072, "vcpus": 12, "memory_gb": 96}),
        "ra3.16xlarge": MappingProxyType({"hourly": 13.04, "storage_gb": 131072, "vcpus": 48, "memory_gb": 384}),
    }
)

# RDS instance hourly prices (single-AZ, MySQL/PostgreSQL list price)
RDS_INSTANCE_HOURLY = MappingProxyType(
    {
        "db.t3.micro": 0.017,
        "db.t3.small": 0.034,
        "db.t3.medium": 0.068,
        "db.t3.large": 0.136,
        "db.t4g.micro": 0.016,
        "db.t4g.small": 0.032,
        "db.t4g.medium": 0.065,
        "db.m5.large": 0.171,
        "db.m5.xlarge": 0.342,
        "db.m6g.large": 0.152,
        "db.r5.large": 0.24,
        "db.r5.xlarge": 0.48,
        "db.r6g.large": 0.215,
    }
)
RDS_DEFAULT_INSTANCE_HOURLY = 0.10
RDS_STORAGE_GB_MONTH = MappingProxyType(
    {"standard": 0.10, "gp2": 0.115, "gp3": 0.115, "io1": 0.125, "io2": 0.125}
)
RDS_IOPS_MONTH = 0.10

# SageMaker real-time instance hourly prices
SAGEMAKER_INSTANCE_HOURLY = MappingProxyType(
    {
        "ml.t2.medium": 0.065,
        "ml.m5.large": 0.115,
        "ml.m5.xlarge": 0.23,
        "ml.c5.large": 0.102,
        "ml.c5.xlarge": 0.204,
        "ml.g4dn.xlarge": 0.736,
        "ml.g5.xlarge": 1.408,
        "ml.p3.2xlarge": 3.825,
        "ml.inf1.xlarge": 0.368,
    }
)
SAGEMAKER_DEFAULT_INSTANCE_HOURLY = 0.20
SAGEMAKER_ACCELERATOR_HOURLY = MappingProxyType(
    {
        "ml.eia1.medium": 0.13,
        "ml.eia1.large": 0.26,
        "ml.eia1.xlarge": 0.52,
        "ml.eia2.medium": 0.14,
        "ml.eia2.large": 0.28,
        "ml.eia2.xlarge": 0.56,
    }
)
SAGEMAKER_SERVERLESS_VARIANT_MONTHLY = 50.0
SAGEMAKER_ASYNC_INFERENCE_MONTHLY = 5.0
# Data capture storage: 100k captured requests per month at $0.001 each
SAGEMAKER_CAPTURED_REQUESTS = 100_000
SAGEMAKER_CAPTURE_COST_PER_REQUEST = 0.001

# Kinesis
KINESIS_SHARD_HOUR = 0.015
KINESIS_EXTENDED_RETENTION_SHARD_DAY = 0.023

# CloudTrail: first copy of management events is free
CLOUDTRAIL_BASE_MONTHLY = 2.0
CLOUDTRAIL_DATA_EVENTS_MONTHLY = 10.0
CLOUDTRAIL_INSIGHTS_MONTHLY = 3.5
CLOUDTRAIL_MULTI_REGION_MULTIPLIER = 1.5
