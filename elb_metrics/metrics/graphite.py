import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from .cloudwatch import Datapoint

# 出力先: (path, value, timestamp) を受け取る関数
OutputSink = Callable[[str, float, int], None]


@dataclass(frozen=True)
class OutputRecord:
    path: str
    value: float
    timestamp: int


def naming_prefix(scheme: str) -> str:
    """スキーム（例: "prod"）をパスの接頭辞（"prod."）に変換します。"""
    if not scheme or scheme.endswith("."):
        return scheme
    return f"{scheme}."


def build_record(
    load_balancer_name: str, metric_name: str, prefix: str, datapoint: Datapoint
) -> OutputRecord:
    """
    出力レコードを組み立てます。

    パスは prefix + ELB名 + "." + 小文字のメトリクス名、
    タイムスタンプはエポック秒（整数）です。
    """
    return OutputRecord(
        path=f"{prefix}{load_balancer_name}.{metric_name.lower()}",
        value=datapoint.value,
        timestamp=int(datapoint.timestamp.timestamp()),
    )


def emit(
    output: OutputSink,
    load_balancer_name: str,
    metric_name: str,
    prefix: str,
    datapoint: Datapoint,
) -> OutputRecord:
    record = build_record(load_balancer_name, metric_name, prefix, datapoint)
    output(record.path, record.value, record.timestamp)
    return record


def format_graphite_line(record: OutputRecord) -> str:
    return f"{record.path} {record.value} {record.timestamp}"


class GraphiteWriter:
    """Graphiteのplaintext形式（path value timestamp）で書き出す出力先"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, path: str, value: float, timestamp: int):
        self.stream.write(
            format_graphite_line(OutputRecord(path, value, timestamp)) + "\n"
        )
