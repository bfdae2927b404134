# ELBメトリクスと集計方法（Statistic）の対応表
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class Statistic(str, Enum):
    """CloudWatchの集計方法"""

    AVERAGE = "Average"
    SUM = "Sum"
    MAXIMUM = "Maximum"


@dataclass(frozen=True)
class MetricSpec:
    name: str
    statistic: Statistic


# 収集するメトリクス（CloudWatch側で決まっているので固定）
STATISTIC_TYPE: Mapping[str, Statistic] = MappingProxyType(
    {
        "Latency": Statistic.AVERAGE,
        "RequestCount": Statistic.SUM,
        "UnHealthyHostCount": Statistic.AVERAGE,
        "HealthyHostCount": Statistic.AVERAGE,
        "HTTPCode_Backend_2XX": Statistic.SUM,
        "HTTPCode_Backend_4XX": Statistic.SUM,
        "HTTPCode_Backend_5XX": Statistic.SUM,
        "HTTPCode_ELB_4XX": Statistic.SUM,
        "HTTPCode_ELB_5XX": Statistic.SUM,
        "BackendConnectionErrors": Statistic.SUM,
        "SurgeQueueLength": Statistic.MAXIMUM,
        "SpilloverCount": Statistic.SUM,
    }
)

METRIC_SPECS: Tuple[MetricSpec, ...] = tuple(
    MetricSpec(name, statistic) for name, statistic in STATISTIC_TYPE.items()
)


def get_statistic(metric_name: str) -> Statistic:
    """
    メトリクス名に対応する集計方法を返します。

    引数:
        metric_name (str): ELBのメトリクス名（例: "Latency"）

    戻り値:
        Statistic: Average / Sum / Maximum のいずれか

    対応表にないメトリクス名の場合はKeyErrorになります。
    """
    return STATISTIC_TYPE[metric_name]
