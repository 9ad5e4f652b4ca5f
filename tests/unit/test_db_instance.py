"""Unit tests for RDS database instance attributes."""

import pytest

from aws_resource_schemas.models.db_instance import DbInstanceAttributes, RdsEngineConfigs
from aws_resource_schemas.utils.input_validation import AttributeValidationError, ValidationErrorKind


def postgres(**overrides):
    attributes = {"engine": "postgres", "instance_class": "db.t3.micro", "allocated_storage": 20}
    attributes.update(overrides)
    return attributes


def aurora(**overrides):
    attributes = {"engine": "aurora-postgresql", "instance_class": "db.r6g.large"}
    attributes.update(overrides)
    return attributes


class TestStorage:
    """Test storage rules."""

    def test_minimal_postgres(self):
        db = DbInstanceAttributes.from_input(postgres())
        assert db.engine_family == "postgresql"
        assert db.manage_master_user_password
        assert db.storage_encrypted

    def test_storage_minimum(self):
        """Test non-Aurora engines need at least 20 GB."""
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(allocated_storage=19))

        assert exc_info.value.field == "allocated_storage"
        assert exc_info.value.kind == ValidationErrorKind.CONSTRAINT_VIOLATION
        assert exc_info.value.message == "allocated_storage must be at least 20 GB, got: 19"

    def test_storage_maximum(self):
        DbInstanceAttributes.from_input(postgres(allocated_storage=65536))
        with pytest.raises(AttributeValidationError):
            DbInstanceAttributes.from_input(postgres(allocated_storage=65537))

    def test_storage_required(self):
        attributes = postgres()
        del attributes["allocated_storage"]
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(attributes)
        assert exc_info.value.kind == ValidationErrorKind.MISSING_FIELD

    def test_iops_needs_provisioned_storage(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(iops=3000))

        assert exc_info.value.kind == ValidationErrorKind.DEPENDENCY_UNMET
        assert exc_info.value.message == "IOPS can only be specified for io1 or io2 storage types"

    def test_provisioned_storage_needs_iops(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(storage_type="io1", allocated_storage=100))
        assert exc_info.value.field == "iops"

    def test_iops_boundaries(self):
        for iops in (1000, 256000):
            DbInstanceAttributes.from_input(postgres(storage_type="io2", allocated_storage=100, iops=iops))
        with pytest.raises(AttributeValidationError):
            DbInstanceAttributes.from_input(postgres(storage_type="io2", allocated_storage=100, iops=999))


class TestAurora:
    """Test Aurora instance rules."""

    def test_aurora_instance(self):
        db = DbInstanceAttributes.from_input(aurora())
        assert db.is_aurora
        assert db.engine_family == "postgresql"
        assert "manage_master_user_password" not in db.to_terraform()

    def test_aurora_rejects_storage(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(aurora(allocated_storage=20))

        assert exc_info.value.field == "allocated_storage"
        assert exc_info.value.message.startswith("Aurora engines do not support 'allocated_storage'")

    def test_aurora_rejects_multi_az(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(aurora(multi_az=True))
        assert exc_info.value.message == "Aurora engines handle multi-AZ at the cluster level"

    def test_serverless(self):
        assert DbInstanceAttributes.from_input(aurora(instance_class="db.serverless")).is_serverless


class TestCredentials:
    """Test identifier and password options."""

    def test_identifier_and_prefix_exclusive(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(identifier="orders", identifier_prefix="orders-"))
        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE

    def test_password_turns_off_managed_password(self):
        """Test an explicit password disables managed passwords by default."""
        db = DbInstanceAttributes.from_input(postgres(username="app", password="correct-horse-1"))
        assert not db.manage_master_user_password

    def test_password_and_managed_exclusive(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(password="correct-horse-1", manage_master_user_password=True))

        assert exc_info.value.kind == ValidationErrorKind.MUTUALLY_EXCLUSIVE
        assert exc_info.value.message == "Cannot specify both 'password' and 'manage_master_user_password'"


class TestEngineOptions:
    """Test engine-specific options."""

    def test_sqlserver_rejects_db_name(self):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(engine="sqlserver-ex", db_name="orders"))
        assert exc_info.value.message == "SQL Server engines do not support 'db_name'"

    def test_log_exports_per_engine(self):
        DbInstanceAttributes.from_input(postgres(enabled_cloudwatch_logs_exports=["postgresql", "upgrade"]))
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(enabled_cloudwatch_logs_exports=["slowquery"]))
        assert exc_info.value.field == "enabled_cloudwatch_logs_exports"

    @pytest.mark.parametrize("days", [7, 31, 372, 731])
    def test_performance_insights_retention(self, days):
        DbInstanceAttributes.from_input(
            postgres(performance_insights_enabled=True, performance_insights_retention_period=days)
        )

    @pytest.mark.parametrize("days", [8, 30, 732])
    def test_invalid_performance_insights_retention(self, days):
        with pytest.raises(AttributeValidationError):
            DbInstanceAttributes.from_input(postgres(performance_insights_retention_period=days))

    def test_monitoring_needs_role(self, role_arn):
        with pytest.raises(AttributeValidationError) as exc_info:
            DbInstanceAttributes.from_input(postgres(monitoring_interval=60))
        assert exc_info.value.kind == ValidationErrorKind.DEPENDENCY_UNMET

        DbInstanceAttributes.from_input(postgres(monitoring_interval=60, monitoring_role_arn=role_arn))

    @pytest.mark.parametrize(
        "engine,family",
        [("mysql", "mysql"), ("aurora-mysql", "mysql"), ("mariadb", "mariadb"), ("oracle-se2", "oracle"), ("sqlserver-se", "sqlserver")],
    )
    def test_engine_family(self, engine, family):
        attributes = aurora(engine=engine) if engine.startswith("aurora") else postgres(engine=engine)
        assert DbInstanceAttributes.from_input(attributes).engine_family == family

    def test_backup_retention_boundaries(self):
        for days in (0, 35):
            DbInstanceAttributes.from_input(postgres(backup_retention_period=days))
        with pytest.raises(AttributeValidationError):
            DbInstanceAttributes.from_input(postgres(backup_retention_period=36))


class TestComputedAndEmission:
    """Test computed properties and Terraform emission."""

    def test_estimated_monthly_cost(self):
        db = DbInstanceAttributes.from_input(postgres())
        assert db.estimated_monthly_cost == "~$14.71/month"

    def test_multi_az_doubles_compute(self):
        db = DbInstanceAttributes.from_input(postgres(multi_az=True))
        assert db.estimated_monthly_cost == "~$27.12/month"

    def test_subnet_group_and_encryption(self):
        assert DbInstanceAttributes.from_input(postgres()).requires_subnet_group
        assert not DbInstanceAttributes.from_input(postgres(publicly_accessible=True)).requires_subnet_group
        assert not DbInstanceAttributes.from_input(postgres(instance_class="db.m1.small")).supports_encryption

    def test_emission_drops_inactive_options(self):
        body = DbInstanceAttributes.from_input(postgres(final_snapshot_identifier="orders-final")).to_terraform()
        assert "final_snapshot_identifier" not in body
        assert "performance_insights_retention_period" not in body
        assert "iops" not in body
        assert body["allocated_storage"] == 20

    def test_emission_keeps_active_options(self):
        body = DbInstanceAttributes.from_input(
            postgres(
                storage_type="io1",
                allocated_storage=100,
                iops=3000,
                skip_final_snapshot=False,
                final_snapshot_identifier="orders-final",
                performance_insights_enabled=True,
            )
        ).to_terraform()
        assert body["iops"] == 3000
        assert body["final_snapshot_identifier"] == "orders-final"
        assert body["performance_insights_retention_period"] == 7


class TestRdsEngineConfigs:
    """Test engine presets."""

    def test_postgresql_preset(self):
        preset = RdsEngineConfigs.postgresql(version="15.3")
        assert preset["engine"] == "postgres"
        assert preset["enabled_cloudwatch_logs_exports"] == ["postgresql"]

    def test_presets_validate_as_defaults(self):
        """Test every preset validates when used as defaults."""
        for preset in (RdsEngineConfigs.mysql(), RdsEngineConfigs.postgresql(), RdsEngineConfigs.mariadb()):
            DbInstanceAttributes.from_input({"instance_class": "db.t3.micro", "allocated_storage": 20}, defaults=preset)
        for preset in (RdsEngineConfigs.aurora_mysql("8.0"), RdsEngineConfigs.aurora_postgresql()):
            DbInstanceAttributes.from_input({"instance_class": "db.r6g.large"}, defaults=preset)

    def test_aurora_version_optional(self):
        assert "engine_version" not in RdsEngineConfigs.aurora_postgresql()
        assert RdsEngineConfigs.aurora_mysql("8.0")["engine_version"] == "8.0"
