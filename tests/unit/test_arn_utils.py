"""Unit tests for ARN and interpolation utilities."""

import pytest

from aws_resource_schemas.utils.arn_utils import (
    build_arn,
    extract_resource_id,
    is_terraform_reference,
    is_valid_arn,
    parse_arn,
    terraform_interpolation,
)


class TestIsValidArn:
    """Test ARN format checks."""

    @pytest.mark.parametrize(
        "arn",
        [
            "arn:aws:ec2:us-east-1:123456789012:instance/i-1234567890abcdef0",
            "arn:aws:s3:::bucket-name",
            "arn:aws:iam::123456789012:role/lambda-exec",
            "arn:aws-cn:sqs:cn-north-1:123456789012:queue",
            "arn:aws:logs:us-east-1:123456789012:log-group:/aws/lambda/fn:*",
        ],
    )
    def test_valid(self, arn):
        assert is_valid_arn(arn)

    @pytest.mark.parametrize("arn", ["", None, "not-an-arn", "arn:aws:s3", "arn:gcp:s3:::bucket"])
    def test_invalid(self, arn):
        assert not is_valid_arn(arn)


class TestTerraformReferences:
    """Test interpolation helpers."""

    @pytest.mark.parametrize("value", ["${aws_vpc.main.id}", "${var.zone_id}", "${data.aws_caller_identity.current.account_id}"])
    def test_references(self, value):
        assert is_terraform_reference(value)

    @pytest.mark.parametrize("value", ["", None, "aws_vpc.main.id", "${}", "prefix-${var.x}"])
    def test_not_references(self, value):
        assert not is_terraform_reference(value)

    def test_interpolation(self):
        assert terraform_interpolation("aws_sqs_queue", "orders", "arn") == "${aws_sqs_queue.orders.arn}"


class TestParseArn:
    """Test ARN parsing."""

    def test_iam_role(self):
        parsed = parse_arn("arn:aws:iam::123456789012:role/lambda-exec")
        assert parsed["service"] == "iam"
        assert parsed["region"] == "global"
        assert parsed["account"] == "123456789012"
        assert parsed["resource_id"] == "lambda-exec"

    def test_resource_with_colons(self):
        parsed = parse_arn("arn:aws:lambda:us-east-1:123456789012:function:process-orders")
        assert parsed["resource"] == "function:process-orders"
        assert parsed["resource_id"] == "process-orders"

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_arn("bucket-name")

    @pytest.mark.parametrize(
        "resource,expected",
        [("role/lambda-exec", "lambda-exec"), ("loadbalancer/app/name", "name"), ("function:fn", "fn"), ("bucket", "bucket")],
    )
    def test_extract_resource_id(self, resource, expected):
        assert extract_resource_id(resource) == expected


class TestBuildArn:
    """Test ARN assembly."""

    def test_global_service(self):
        assert build_arn("iam", "group/developers", account="123456789012") == "arn:aws:iam::123456789012:group/developers"

    def test_regional_service(self):
        arn = build_arn("sqs", "orders", account="123456789012", region="eu-west-1")
        assert arn == "arn:aws:sqs:eu-west-1:123456789012:orders"
        assert is_valid_arn(arn)
