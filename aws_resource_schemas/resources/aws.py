"""
One declaration function per supported AWS resource type.

Each function validates ``attributes`` against the type's schema, adds the
Terraform block to ``sink`` and returns a ResourceReference:

    >>> vpc = aws_vpc(synth, "main", {"cidr_block": "10.0.0.0/16"})
    >>> vpc.id
    '${aws_vpc.main.id}'
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..models import (
    CloudtrailAttributes,
    DbInstanceAttributes,
    ElasticacheSubnetGroupAttributes,
    IamGroupAttributes,
    KinesisStreamAttributes,
    LambdaFunctionAttributes,
    NetworkInterfaceAttributes,
    RedshiftClusterAttributes,
    ResourceReference,
    Route53RecordAttributes,
    SagemakerEndpointConfigurationAttributes,
    SnsTopicAttributes,
    SqsQueueAttributes,
    VpcAttributes,
    Wafv2RegexPatternSetAttributes,
)
from .declare import ResourceSink, declare_resource

Attributes = Optional[Mapping[str, Any]]


def aws_cloudtrail(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare a CloudTrail trail."""
    return declare_resource(sink, CloudtrailAttributes, name, attributes, defaults)


def aws_db_instance(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """
    Declare an RDS database instance.

    ``RdsEngineConfigs`` provides engine presets that can be passed as
    ``defaults``.
    """
    return declare_resource(sink, DbInstanceAttributes, name, attributes, defaults)


def aws_elasticache_subnet_group(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare an ElastiCache subnet group."""
    return declare_resource(sink, ElasticacheSubnetGroupAttributes, name, attributes, defaults)


def aws_iam_group(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare an IAM group. Naming advisories are logged, never raised."""
    return declare_resource(sink, IamGroupAttributes, name, attributes, defaults)


def aws_kinesis_stream(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    return declare_resource(sink, KinesisStreamAttributes, name, attributes, defaults)


def aws_lambda_function(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare a Lambda function (Zip or container image package)."""
    return declare_resource(sink, LambdaFunctionAttributes, name, attributes, defaults)


def aws_network_interface(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    return declare_resource(sink, NetworkInterfaceAttributes, name, attributes, defaults)


def aws_redshift_cluster(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare a Redshift cluster."""
    return declare_resource(sink, RedshiftClusterAttributes, name, attributes, defaults)


def aws_route53_record(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare a Route53 record (simple, alias or routing-policy record)."""
    return declare_resource(sink, Route53RecordAttributes, name, attributes, defaults)


def aws_sagemaker_endpoint_configuration(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare a SageMaker endpoint configuration."""
    return declare_resource(sink, SagemakerEndpointConfigurationAttributes, name, attributes, defaults)


def aws_sns_topic(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    return declare_resource(sink, SnsTopicAttributes, name, attributes, defaults)


def aws_sqs_queue(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare an SQS queue (standard or FIFO)."""
    return declare_resource(sink, SqsQueueAttributes, name, attributes, defaults)


def aws_vpc(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    return declare_resource(sink, VpcAttributes, name, attributes, defaults)


def aws_wafv2_regex_pattern_set(
    sink: ResourceSink, name: str, attributes: Attributes = None, defaults: Attributes = None
) -> ResourceReference:
    """Declare a WAFv2 regex pattern set."""
    return declare_resource(sink, Wafv2RegexPatternSetAttributes, name, attributes, defaults)
