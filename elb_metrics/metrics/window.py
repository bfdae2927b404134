import datetime
from dataclasses import dataclass
from typing import Optional

# 取得するウィンドウの長さ（秒）。Periodと同じなので1件だけ返ってくる
WINDOW_SECONDS = 60


@dataclass(frozen=True)
class TimeWindow:
    start: datetime.datetime
    end: datetime.datetime

    @property
    def start_iso(self) -> str:
        return self.start.isoformat()

    @property
    def end_iso(self) -> str:
        return self.end.isoformat()


def calc_time_window(
    fetch_age: int = 60, now: Optional[datetime.datetime] = None
) -> TimeWindow:
    """
    メトリクスを取得する時間範囲を計算します。

    引数:
        fetch_age (int): 遅延を考慮して現在時刻から引く秒数（デフォルト: 60）
        now (datetime): 基準時刻。省略時は現在のUTC時刻

    戻り値:
        TimeWindow: end = now - fetch_age, start = end - 60秒
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is None:
        # タイムゾーンなしの時刻はUTCとして扱う
        now = now.replace(tzinfo=datetime.timezone.utc)

    end_time = now - datetime.timedelta(seconds=fetch_age)
    start_time = end_time - datetime.timedelta(seconds=WINDOW_SECONDS)
    return TimeWindow(start=start_time, end=end_time)
