import datetime
from unittest.mock import MagicMock

import pytest


def make_timestamp(seconds):
    return datetime.datetime.fromtimestamp(seconds, tz=datetime.timezone.utc)


class FakeCloudWatch:
    """get_metric_statistics に対して (ELB名, メトリクス名) ごとの値を返す"""

    def __init__(self, values=None, error=None):
        self.values = values or {}
        self.error = error
        self.calls = []

    def get_metric_statistics(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        name = kwargs["Dimensions"][0]["Value"]
        key = (name, kwargs["MetricName"])
        if key not in self.values:
            return {"Label": kwargs["MetricName"], "Datapoints": []}
        value, ts = self.values[key]
        statistic = kwargs["Statistics"][0]
        return {
            "Label": kwargs["MetricName"],
            "Datapoints": [
                {"Timestamp": make_timestamp(ts), statistic: value, "Unit": "Count"}
            ],
        }


def make_elb_client(pages=None, error=None):
    client = MagicMock()
    paginator = MagicMock()
    if error is not None:
        paginator.paginate.side_effect = error
    else:
        paginator.paginate.return_value = [
            {"LoadBalancerDescriptions": [{"LoadBalancerName": n} for n in page]}
            for page in (pages or [])
        ]
    client.get_paginator.return_value = paginator
    return client


class RecordingOutput:
    def __init__(self):
        self.lines = []

    def __call__(self, path, value, timestamp):
        self.lines.append((path, value, timestamp))


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def now():
    return make_timestamp(1_700_000_000)
