"""Pytest configuration and shared fixtures."""

import pytest

from aws_resource_schemas.config import reset_settings
from aws_resource_schemas.services.synthesizer import TerraformSynthesizer


# =============================================================================
# Environment and Configuration Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test against default settings, ignoring the host environment."""
    for key in (
        "ENVIRONMENT",
        "ENV",
        "LOG_LEVEL",
        "AWS_ACCOUNT_ID",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "APPLY_ENVIRONMENT_DEFAULTS",
    ):
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def test_env(monkeypatch):
    """Set up test environment variables."""
    test_vars = {
        "ENVIRONMENT": "staging",
        "AWS_ACCOUNT_ID": "210987654321",
        "AWS_REGION": "eu-west-1",
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    reset_settings()
    return test_vars


# =============================================================================
# Synthesizer Fixtures
# =============================================================================

@pytest.fixture
def synthesizer():
    """Synthesizer without environment profile defaults."""
    return TerraformSynthesizer(environment="development", apply_environment_defaults=False)


@pytest.fixture
def production_synthesizer():
    """Synthesizer applying the production profile."""
    return TerraformSynthesizer(environment="production", apply_environment_defaults=True)


class RecordingSink:
    """Minimal ResourceSink collecting blocks in a list."""

    def __init__(self):
        self.blocks = []

    def add_resource(self, resource_type, name, body):
        self.blocks.append((resource_type, name, body))


@pytest.fixture
def recording_sink():
    return RecordingSink()


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def role_arn():
    return "arn:aws:iam::123456789012:role/service-role"


@pytest.fixture
def kms_key_arn():
    return "arn:aws:kms:us-east-1:123456789012:key/1234abcd-12ab-34cd-56ef-1234567890ab"


@pytest.fixture
def subnet_ids():
    return ["subnet-0a1b2c3d4e5f60718", "subnet-1a2b3c4d5e6f70819"]


@pytest.fixture
def security_group_ids():
    return ["sg-0123456789abcdef0"]
