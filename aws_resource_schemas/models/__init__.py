"""Attribute schemas for AWS resource types."""

from .base import NestedBlock, ResourceAttributes
from .reference import ResourceReference, build_outputs
from .cloudtrail import CloudtrailAttributes
from .db_instance import DbInstanceAttributes, RdsEngineConfigs
from .elasticache_subnet_group import ElasticacheSubnetGroupAttributes
from .iam_group import IamGroupAttributes
from .kinesis_stream import KinesisStreamAttributes
from .lambda_function import LambdaFunctionAttributes
from .network_interface import NetworkInterfaceAttributes
from .redshift_cluster import RedshiftClusterAttributes
from .route53_record import Route53RecordAttributes
from .sagemaker_endpoint_configuration import SagemakerEndpointConfigurationAttributes
from .sns_topic import SnsTopicAttributes
from .sqs_queue import SqsQueueAttributes
from .vpc import VpcAttributes
from .wafv2_regex_pattern_set import Wafv2RegexPatternSetAttributes

RESOURCE_MODELS = (
    CloudtrailAttributes,
    DbInstanceAttributes,
    ElasticacheSubnetGroupAttributes,
    IamGroupAttributes,
    KinesisStreamAttributes,
    LambdaFunctionAttributes,
    NetworkInterfaceAttributes,
    RedshiftClusterAttributes,
    Route53RecordAttributes,
    SagemakerEndpointConfigurationAttributes,
    SnsTopicAttributes,
    SqsQueueAttributes,
    VpcAttributes,
    Wafv2RegexPatternSetAttributes,
)

__all__ = [
    "NestedBlock",
    "ResourceAttributes",
    "ResourceReference",
    "build_outputs",
    "CloudtrailAttributes",
    "DbInstanceAttributes",
    "RdsEngineConfigs",
    "ElasticacheSubnetGroupAttributes",
    "IamGroupAttributes",
    "KinesisStreamAttributes",
    "LambdaFunctionAttributes",
    "NetworkInterfaceAttributes",
    "RedshiftClusterAttributes",
    "Route53RecordAttributes",
    "SagemakerEndpointConfigurationAttributes",
    "SnsTopicAttributes",
    "SqsQueueAttributes",
    "VpcAttributes",
    "Wafv2RegexPatternSetAttributes",
    "RESOURCE_MODELS",
]
