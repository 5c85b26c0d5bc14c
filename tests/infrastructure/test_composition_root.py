"""Tests for composition root DI container."""

import pytest
from unittest.mock import MagicMock, patch

from ec2target.domain.errors import SessionBuildError
from ec2target.infrastructure.config import AWSConfig, Ec2TargetConfig, ResolverConfig


class TestCompositionRoot:
    def test_create_container(self):
        from ec2target.composition_root import create_container, Ec2TargetContainer

        container = create_container(region="eu-west-1")

        assert isinstance(container, Ec2TargetContainer)
        assert container.session.region_name == "eu-west-1"
        assert container.instance_query is not None
        assert container.resolve_instance is not None

    def test_resolver_uses_instance_query(self):
        from ec2target.composition_root import create_container

        container = create_container(region="eu-west-1")

        assert container.resolve_instance.query is container.instance_query

    def test_config_values_used_when_no_arguments(self):
        from ec2target.composition_root import create_container

        config = Ec2TargetConfig(
            aws=AWSConfig(region="ca-central-1"),
            resolver=ResolverConfig(page_size=20),
        )
        container = create_container(config)

        assert container.session.region_name == "ca-central-1"
        assert container.instance_query.page_size == 20

    def test_arguments_override_config(self):
        from ec2target.composition_root import create_container

        config = Ec2TargetConfig(aws=AWSConfig(region="ca-central-1"))
        container = create_container(config, region="us-west-1")

        assert container.session.region_name == "us-west-1"

    def test_mfa_token_and_profile_forwarded(self):
        from ec2target import composition_root

        with patch.object(composition_root, "start_session") as start:
            start.return_value = MagicMock()
            composition_root.create_container(
                Ec2TargetConfig(aws=AWSConfig(profile="cfg")),
                profile="admin",
                mfa_token="123456",
            )

        start.assert_called_once_with(
            region=None, profile="admin", mfa_token="123456"
        )

    def test_session_error_propagates(self):
        from ec2target.composition_root import create_container

        with pytest.raises(SessionBuildError):
            create_container(profile="does-not-exist")


class TestResolveInstanceHelper:
    def test_wires_adapter_and_use_case(self):
        from ec2target import composition_root

        session = MagicMock()
        with patch.object(composition_root, "EC2InstanceQuery") as query_cls, \
             patch.object(composition_root, "ResolveInstance") as use_case_cls:
            use_case_cls.return_value.execute.return_value = {"InstanceId": "i-1"}
            result = composition_root.resolve_instance(session, "name-tag", "web")

        assert result == {"InstanceId": "i-1"}
        query_cls.assert_called_once_with(session)
        use_case_cls.return_value.execute.assert_called_once_with("name-tag", "web")
