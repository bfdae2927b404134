from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from typing import Callable, List, Optional
import logging
import uvicorn

from .config import ELBMetricsConfig
from .metrics import PollResult, collect, format_graphite_line

# ロガーの設定
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI()


class MetricRecord(BaseModel):
    path: str
    value: float
    timestamp: int


class MetricsResponse(BaseModel):
    status: str
    records: List[MetricRecord]


def get_poller() -> Callable[[ELBMetricsConfig], PollResult]:
    """メトリクス取得関数（テストで差し替え可能）"""
    return collect


def run_poll(
    name: Optional[str] = Query(default=None),
    scheme: str = Query(default=""),
    fetch_age: int = Query(default=60, ge=0),
    poller=Depends(get_poller),
) -> PollResult:
    # リージョンと認証情報は環境変数から取得
    try:
        config = ELBMetricsConfig.from_env(
            elb_names=name, scheme=scheme, fetch_age=fetch_age
        )
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))

    result = poller(config)
    if not result.ok:
        logger.error(f"/metrics エンドポイントでエラーが発生: {result.message}")
        raise HTTPException(status_code=502, detail=result.message)
    return result


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.get("/metrics", response_model=MetricsResponse)
def get_metrics(result: PollResult = Depends(run_poll)):
    """
    ELBのメトリクスをJSONで返します。
    データがないメトリクスは含まれません。
    """
    return MetricsResponse(
        status=result.status,
        records=[
            MetricRecord(path=r.path, value=r.value, timestamp=r.timestamp)
            for r in result.records
        ],
    )


@app.get("/metrics/graphite", response_class=PlainTextResponse)
def get_metrics_graphite(result: PollResult = Depends(run_poll)):
    """ELBのメトリクスをGraphiteのplaintext形式で返します。"""
    return "".join(f"{format_graphite_line(record)}\n" for record in result.records)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8080, log_level="debug")
