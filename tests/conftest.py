import logging

import pytest

from measured_reporting.interfaces import Metric
from measured_reporting.metric_types import MetricTypes
from measured_reporting.reporters.base import Reporter


class StubMetric(Metric):
    def __init__(self, metric_type=MetricTypes.COUNTER):
        self.metric_type = metric_type

    def to_json(self):
        return {"count": 0}

    def get_type(self):
        return self.metric_type


class RecordingReporter(Reporter):
    """Reporter that keeps every batch it was asked to export."""

    def __init__(self, options=None):
        super().__init__(options)
        self.reported = []

    def report_metrics(self, metrics):
        self.reported.append(metrics)


class DuckLogger:
    def debug(self, msg, *args, **kwargs):
        pass

    def info(self, msg, *args, **kwargs):
        pass

    def warning(self, msg, *args, **kwargs):
        pass

    def error(self, msg, *args, **kwargs):
        pass


@pytest.fixture
def metric():
    """A metric that implements the Metric interface."""
    return StubMetric()


@pytest.fixture
def reporter():
    """A concrete reporter built with default options."""
    return RecordingReporter()


@pytest.fixture
def duck_logger():
    return DuckLogger()


@pytest.fixture
def stdlib_logger():
    return logging.getLogger("measured_reporting.tests")


@pytest.fixture
def make_metric():
    """Builds metrics reporting the given type."""
    return StubMetric


@pytest.fixture
def make_reporter():
    """Builds RecordingReporter instances from options."""
    return RecordingReporter
