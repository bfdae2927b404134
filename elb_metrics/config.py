import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, model_validator

DEFAULT_REGION = "us-east-1"


class ConfigError(ValueError):
    """設定の不備（コアの処理を始める前に検出する）"""


class ELBMetricsConfig(BaseModel):
    """
    メトリクス取得の設定。

    コアの処理はこのオブジェクトだけを参照し、環境変数は直接読みません。
    """

    elb_names: Optional[str] = None  # スペース区切りで複数指定可
    scheme: str = ""
    fetch_age: int = 60
    aws_region: str = DEFAULT_REGION
    aws_access_key: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    max_workers: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_credentials(self):
        # アクセスキーとシークレットキーは両方指定するか、両方省略する
        if bool(self.aws_access_key) != bool(self.aws_secret_access_key):
            raise ConfigError(
                "aws_access_key と aws_secret_access_key は両方指定してください"
            )
        if not self.aws_region:
            raise ConfigError("aws_region が指定されていません")
        return self

    @property
    def has_credentials(self) -> bool:
        return bool(self.aws_access_key and self.aws_secret_access_key)

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides
    ) -> "ELBMetricsConfig":
        """環境変数（AWS_ACCESS_KEY / AWS_SECRET_KEY / AWS_REGION）を既定値として設定を作成します。"""
        if environ is None:
            environ = os.environ
        values = {
            "aws_access_key": environ.get("AWS_ACCESS_KEY"),
            "aws_secret_access_key": environ.get("AWS_SECRET_KEY"),
            "aws_region": environ.get("AWS_REGION") or DEFAULT_REGION,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
