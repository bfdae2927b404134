import boto3

from ..config import ELBMetricsConfig


def create_session(config: ELBMetricsConfig) -> boto3.Session:
    """
    設定からboto3のセッションを作成します。
    キーが指定されていない場合はboto3の既定の認証情報チェーンを使います。
    """
    if config.has_credentials:
        return boto3.Session(
            aws_access_key_id=config.aws_access_key,
            aws_secret_access_key=config.aws_secret_access_key,
            region_name=config.aws_region,
        )
    return boto3.Session(region_name=config.aws_region)


def create_clients(config: ELBMetricsConfig, session=None):
    """(cloudwatch, elb) のクライアントを返します。"""
    if session is None:
        session = create_session(config)
    return session.client("cloudwatch"), session.client("elb")
