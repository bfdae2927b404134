import concurrent.futures
import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import ELBMetricsConfig
from .cloudwatch import Datapoint, fetch_datapoint
from .elb import resolve_load_balancer_names
from .graphite import OutputRecord, OutputSink, emit, naming_prefix
from .session import create_clients
from .statistics import METRIC_SPECS
from .window import TimeWindow, calc_time_window

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_CRITICAL = "critical"


@dataclass
class PollResult:
    status: str
    message: Optional[str] = None
    records: List[OutputRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def _discard(path: str, value: float, timestamp: int):
    pass


def _fetch_all(
    cloudwatch_client, load_balancer_name: str, window: TimeWindow, max_workers: int
) -> List[Optional[Datapoint]]:
    """1つのELBについて全メトリクスを取得します（結果は対応表の順）。"""
    if max_workers <= 1:
        return [
            fetch_datapoint(cloudwatch_client, load_balancer_name, spec, window)
            for spec in METRIC_SPECS
        ]

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(
                fetch_datapoint, cloudwatch_client, load_balancer_name, spec, window
            )
            for spec in METRIC_SPECS
        ]
        # 投入順に結果を受け取るので出力順は変わらない
        return [future.result() for future in futures]


def poll_elb_metrics(
    config: ELBMetricsConfig,
    cloudwatch_client,
    elb_client,
    output: Optional[OutputSink] = None,
    now: Optional[datetime.datetime] = None,
) -> PollResult:
    """
    ELBのメトリクスをCloudWatchから取得し、Graphite形式のレコードとして出力します。

    引数:
        config (ELBMetricsConfig): 取得設定
        cloudwatch_client: boto3の"cloudwatch"クライアント
        elb_client: boto3の"elb"クライアント（ELB名が未指定の場合に使用）
        output: (path, value, timestamp) を受け取る出力先
        now (datetime): 基準時刻（テスト用）

    戻り値:
        PollResult: status が "ok" または "critical"。
            出力したレコードは失敗時も records に残ります。
    """
    if output is None:
        output = _discard
    result = PollResult(status=STATUS_OK)
    prefix = naming_prefix(config.scheme)

    try:
        window = calc_time_window(config.fetch_age, now)
        load_balancer_names = resolve_load_balancer_names(config.elb_names, elb_client)
        logger.info(
            f"メトリクス取得開始: ELB {len(load_balancer_names)}個 "
            f"({window.start_iso} - {window.end_iso})"
        )

        for load_balancer_name in load_balancer_names:
            datapoints = _fetch_all(
                cloudwatch_client, load_balancer_name, window, config.max_workers
            )
            for spec, datapoint in zip(METRIC_SPECS, datapoints):
                # データがないメトリクスは出力しない
                if datapoint is None:
                    continue
                record = emit(output, load_balancer_name, spec.name, prefix, datapoint)
                result.records.append(record)
    except Exception as e:
        logger.error(f"メトリクス取得中にエラーが発生: {str(e)}")
        result.status = STATUS_CRITICAL
        result.message = f"Error: exception: {e}"
        return result

    logger.info(f"{len(result.records)}件のメトリクスを出力しました")
    return result


def collect(
    config: ELBMetricsConfig,
    output: Optional[OutputSink] = None,
    session=None,
    now: Optional[datetime.datetime] = None,
) -> PollResult:
    """設定からboto3クライアントを作成してメトリクスを取得します。"""
    try:
        cloudwatch_client, elb_client = create_clients(config, session)
    except Exception as e:
        logger.error(f"AWSクライアントの作成に失敗: {str(e)}")
        return PollResult(status=STATUS_CRITICAL, message=f"Error: exception: {e}")
    return poll_elb_metrics(config, cloudwatch_client, elb_client, output, now)
