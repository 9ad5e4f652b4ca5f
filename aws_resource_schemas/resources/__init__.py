"""Resource declaration API."""

from .aws import (
    aws_cloudtrail,
    aws_db_instance,
    aws_elasticache_subnet_group,
    aws_iam_group,
    aws_kinesis_stream,
    aws_lambda_function,
    aws_network_interface,
    aws_redshift_cluster,
    aws_route53_record,
    aws_sagemaker_endpoint_configuration,
    aws_sns_topic,
    aws_sqs_queue,
    aws_vpc,
    aws_wafv2_regex_pattern_set,
)
from .declare import ResourceSink, declare_resource

__all__ = [
    "ResourceSink",
    "declare_resource",
    "aws_cloudtrail",
    "aws_db_instance",
    "aws_elasticache_subnet_group",
    "aws_iam_group",
    "aws_kinesis_stream",
    "aws_lambda_function",
    "aws_network_interface",
    "aws_redshift_cluster",
    "aws_route53_record",
    "aws_sagemaker_endpoint_configuration",
    "aws_sns_topic",
    "aws_sqs_queue",
    "aws_vpc",
    "aws_wafv2_regex_pattern_set",
]
