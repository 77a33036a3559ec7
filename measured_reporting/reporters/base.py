import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from measured_reporting.models import ReporterOptions
from measured_reporting.validators.input_validators import InputValidator


class Reporter(ABC):
    """
    Base class for reporters that export registered metrics to a sink.

    Subclasses implement `report_metrics`. Scheduling the periodic export is
    left to the caller; this class only keeps track of which metric keys are
    due on which interval.

    Attributes:
        default_dimensions (dict): Dimensions merged into every reported metric.
        logger: Logger used by the reporter.
        default_reporting_interval_in_seconds (float): Interval used when a metric has none.
        intervals (dict): Metric keys grouped by reporting interval.
        registry: The registry set through `set_registry`, or None.
    """

    def __init__(self, options: Optional[Union[ReporterOptions, Dict[str, Any]]] = None) -> None:
        InputValidator.validate_reporter_parameters(options)

        if options is None:
            options = ReporterOptions()
        elif isinstance(options, Mapping):
            options = ReporterOptions(**options)
        elif not isinstance(options, ReporterOptions):
            options = ReporterOptions.model_validate(options, from_attributes=True)

        self.default_dimensions = dict(options.default_dimensions or {})
        self.default_reporting_interval_in_seconds = options.default_reporting_interval_in_seconds
        self.logger = options.logger if options.logger is not None else self._build_logger(options.log_level.value)
        self.intervals: Dict[float, List[str]] = defaultdict(list)
        self.registry = None

    def _build_logger(self, level: str) -> logging.Logger:
        # one child per instance so each reporter keeps its own level
        class_logger = logging.getLogger(f"measured_reporting.reporters.{type(self).__name__}")
        reporter_logger = class_logger.getChild(f"{id(self):x}")
        reporter_logger.setLevel(level)
        return reporter_logger

    def set_registry(self, registry: Any) -> None:
        """Sets the registry whose metrics this reporter exports."""
        self.registry = registry
        self.logger.debug(f"Registry set on {type(self).__name__}: {registry!r}")

    def report_metric_on_interval(self, metric_key: str, interval_in_seconds: Optional[float] = None) -> None:
        """
        Marks a metric to be reported on an interval.

        Args:
            metric_key (str): Registry key of the metric.
            interval_in_seconds (float, optional): Reporting interval, defaults to
                `default_reporting_interval_in_seconds`.
        """
        InputValidator.validate_optional_publishing_interval(interval_in_seconds)
        if interval_in_seconds is None:
            interval_in_seconds = self.default_reporting_interval_in_seconds

        keys = self.intervals[interval_in_seconds]
        if metric_key not in keys:
            keys.append(metric_key)
        self.logger.debug(f"Metric {metric_key} will be reported every {interval_in_seconds}s")

    def merged_dimensions(self, dimensions: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Returns the default dimensions overlaid with a metric's own dimensions."""
        InputValidator.validate_optional_dimensions(dimensions)
        return {**self.default_dimensions, **(dimensions or {})}

    @abstractmethod
    def report_metrics(self, metrics: List[Any]) -> None:
        pass
