from abc import ABC, abstractmethod
from typing import Any, Dict

from measured_reporting.metric_types import MetricTypes


class Metric(ABC):
    """
    Interface every metric handed to a registry must satisfy.

    Inheriting from this class is optional. Validation checks for the
    methods themselves, so any object with callable `to_json` and `get_type`
    is a metric.
    """

    @abstractmethod
    def to_json(self) -> Dict[str, Any]:
        pass

    @abstractmethod
    def get_type(self) -> MetricTypes:
        pass
