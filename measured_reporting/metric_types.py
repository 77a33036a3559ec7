from enum import Enum


class MetricTypes(str, Enum):
    """
    The metric kinds a metric may report from `get_type()`.

    Members compare equal to their string values, so a metric returning
    either `MetricTypes.GAUGE` or `"Gauge"` is accepted.
    """

    COUNTER = "Counter"
    GAUGE = "Gauge"
    HISTOGRAM = "Histogram"
    METER = "Meter"
    TIMER = "Timer"


METRIC_TYPE_VALUES = tuple(metric_type.value for metric_type in MetricTypes)
