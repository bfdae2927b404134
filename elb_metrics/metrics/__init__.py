"""
ELB metrics collection package.
Fetches Classic ELB metrics from CloudWatch and converts them to Graphite records.
"""
from .statistics import METRIC_SPECS, STATISTIC_TYPE, MetricSpec, Statistic, get_statistic
from .window import TimeWindow, calc_time_window
from .elb import list_load_balancer_names, resolve_load_balancer_names, split_load_balancer_names
from .cloudwatch import Datapoint, fetch_datapoint
from .graphite import GraphiteWriter, OutputRecord, build_record, emit, format_graphite_line, naming_prefix
from .poller import PollResult, collect, poll_elb_metrics
