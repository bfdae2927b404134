"""
コマンドラインのエントリーポイント。

メトリクスごとにGraphiteのplaintext形式で1行ずつ出力し、
Sensuプラグインの終了コード（0: OK, 2: CRITICAL, 3: UNKNOWN）で終了します。
"""
import logging
import sys
from typing import Optional

import typer
from pydantic import ValidationError

from .config import DEFAULT_REGION, ConfigError, ELBMetricsConfig
from .metrics import GraphiteWriter, collect

EXIT_OK = 0
EXIT_CRITICAL = 2
EXIT_UNKNOWN = 3

app = typer.Typer(add_completion=False)


@app.command()
def main(
    elb_name: Optional[str] = typer.Option(
        None, "--name", "-n", help="Name of the Elastic Load Balancer (space-delimited for several)"
    ),
    scheme: str = typer.Option(
        "", "--scheme", "-s", help="Metric naming scheme, text to prepend to metric"
    ),
    fetch_age: int = typer.Option(
        60, "--fetch-age", "-f", help="How long ago (seconds) to fetch metrics for"
    ),
    aws_access_key: Optional[str] = typer.Option(
        None, "--aws-access-key", "-a", envvar="AWS_ACCESS_KEY", help="AWS Access Key"
    ),
    aws_secret_access_key: Optional[str] = typer.Option(
        None,
        "--aws-secret-access-key",
        "-k",
        envvar="AWS_SECRET_KEY",
        help="AWS Secret Access Key",
    ),
    aws_region: str = typer.Option(
        DEFAULT_REGION,
        "--aws-region",
        "-r",
        envvar="AWS_REGION",
        help="AWS Region (such as eu-west-1)",
    ),
    workers: int = typer.Option(
        1, "--workers", "-w", help="Parallel CloudWatch queries per load balancer"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """CloudWatchからELBのメトリクスを取得し、Graphite形式で出力します。"""
    # 標準出力はメトリクス専用なのでログは標準エラーに出す
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ELBMetricsConfig(
            elb_names=elb_name,
            scheme=scheme,
            fetch_age=fetch_age,
            aws_region=aws_region,
            aws_access_key=aws_access_key,
            aws_secret_access_key=aws_secret_access_key,
            max_workers=workers,
        )
    except (ConfigError, ValidationError) as e:
        typer.echo(f"ELBMetrics UNKNOWN: {e}")
        raise typer.Exit(code=EXIT_UNKNOWN)

    result = collect(config, output=GraphiteWriter())
    if not result.ok:
        typer.echo(f"ELBMetrics CRITICAL: {result.message}")
        raise typer.Exit(code=EXIT_CRITICAL)
    raise typer.Exit(code=EXIT_OK)


if __name__ == "__main__":
    app()
