import datetime
import logging
from dataclasses import dataclass
from typing import Optional

from .statistics import MetricSpec
from .window import WINDOW_SECONDS, TimeWindow

logger = logging.getLogger(__name__)

NAMESPACE = "AWS/ELB"
DIMENSION_NAME = "LoadBalancerName"


@dataclass(frozen=True)
class Datapoint:
    value: float
    timestamp: datetime.datetime


def fetch_datapoint(
    cloudwatch_client, load_balancer_name: str, spec: MetricSpec, window: TimeWindow
) -> Optional[Datapoint]:
    """
    1つのELB・1つのメトリクスについてCloudWatchから統計値を取得します。

    引数:
        cloudwatch_client: boto3の"cloudwatch"クライアント
        load_balancer_name (str): ELB名
        spec (MetricSpec): メトリクス名と集計方法
        window (TimeWindow): 取得する時間範囲

    戻り値:
        Optional[Datapoint]: 最初のデータポイント。データがない場合はNone

    CloudWatchのエラーはここでは処理せず、そのまま呼び出し元に伝播します。
    """
    statistic = spec.statistic.value
    response = cloudwatch_client.get_metric_statistics(
        Namespace=NAMESPACE,
        MetricName=spec.name,
        Dimensions=[{"Name": DIMENSION_NAME, "Value": load_balancer_name}],
        StartTime=window.start_iso,
        EndTime=window.end_iso,
        Period=WINDOW_SECONDS,
        Statistics=[statistic],
    )

    datapoints = response.get("Datapoints", [])
    if not datapoints:
        logger.debug(f"{load_balancer_name}: {spec.name} のデータがありません")
        return None

    # 値は集計方法と同じ名前のキーに入っている
    datapoint = datapoints[0]
    return Datapoint(value=float(datapoint[statistic]), timestamp=datapoint["Timestamp"])
