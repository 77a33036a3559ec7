from measured_reporting.interfaces import Metric
from measured_reporting.metric_types import MetricTypes
from measured_reporting.models import LogLevel, ReporterOptions, SelfReportingMetricsRegistryOptions
from measured_reporting.reporters.base import Reporter
from measured_reporting.validators.input_validators import InputValidator

__all__ = [
    "InputValidator",
    "LogLevel",
    "Metric",
    "MetricTypes",
    "Reporter",
    "ReporterOptions",
    "SelfReportingMetricsRegistryOptions",
]
