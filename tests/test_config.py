from unittest.mock import patch

import pytest
from pydantic import ValidationError

from elb_metrics.config import ELBMetricsConfig
from elb_metrics.metrics.session import create_clients, create_session


def test_defaults():
    config = ELBMetricsConfig()
    assert config.elb_names is None
    assert config.scheme == ""
    assert config.fetch_age == 60
    assert config.aws_region == "us-east-1"
    assert config.max_workers == 1
    assert not config.has_credentials


def test_from_env_reads_keys():
    config = ELBMetricsConfig.from_env(
        {"AWS_ACCESS_KEY": "AKIA", "AWS_SECRET_KEY": "secret", "AWS_REGION": "eu-west-1"},
        elb_names="lb1",
    )
    assert config.has_credentials
    assert config.aws_region == "eu-west-1"
    assert config.elb_names == "lb1"


def test_from_env_overrides_win():
    config = ELBMetricsConfig.from_env({"AWS_REGION": "eu-west-1"}, aws_region="ap-northeast-1")
    assert config.aws_region == "ap-northeast-1"


def test_half_credentials_rejected():
    with pytest.raises(ValidationError):
        ELBMetricsConfig(aws_access_key="AKIA")


def test_empty_region_rejected():
    with pytest.raises(ValidationError):
        ELBMetricsConfig(aws_region="")


def test_workers_must_be_positive():
    with pytest.raises(ValidationError):
        ELBMetricsConfig(max_workers=0)


def test_session_with_explicit_credentials():
    config = ELBMetricsConfig(
        aws_access_key="AKIA", aws_secret_access_key="secret", aws_region="eu-west-1"
    )
    with patch("elb_metrics.metrics.session.boto3.Session") as session_cls:
        create_session(config)
    session_cls.assert_called_once_with(
        aws_access_key_id="AKIA",
        aws_secret_access_key="secret",
        region_name="eu-west-1",
    )


def test_session_default_chain():
    with patch("elb_metrics.metrics.session.boto3.Session") as session_cls:
        create_session(ELBMetricsConfig(aws_region="eu-west-1"))
    session_cls.assert_called_once_with(region_name="eu-west-1")


def test_create_clients():
    with patch("elb_metrics.metrics.session.boto3.Session") as session_cls:
        create_clients(ELBMetricsConfig())
    session = session_cls.return_value
    assert [c.args[0] for c in session.client.call_args_list] == ["cloudwatch", "elb"]
