import numbers
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional

from measured_reporting.metric_types import METRIC_TYPE_VALUES

LOGGER_METHODS = ("debug", "info", "warning", "error")


def _type_name(value: Any) -> str:
    return type(value).__name__


def is_number(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _has_method(obj: Any, method_name: str) -> bool:
    return callable(getattr(obj, method_name, None))


def _get_option(options: Any, option_name: str) -> Any:
    if isinstance(options, Mapping):
        return options.get(option_name)
    return getattr(options, option_name, None)


class InputValidator:
    """
    Validates publicly exposed input before metrics and reporters are built.

    Every check either returns None or raises TypeError on the first
    violation it finds.
    """

    @staticmethod
    def validate_gauge_options(
        name: str,
        callback: Callable[[], float],
        dimensions: Optional[dict] = None,
        publishing_interval_in_seconds: Optional[float] = None,
    ):
        """
        Validates Gauge options.

        Args:
            name (str): The metric name.
            callback (callable): Zero-argument callable returning the gauge value.
                It is invoked once here.
            dimensions (dict, optional): Custom dimensions.
            publishing_interval_in_seconds (float, optional): The publishing interval.
        """
        InputValidator.validate_common_metric_parameters(name, dimensions, publishing_interval_in_seconds)
        InputValidator.validate_number_returning_callback(callback)

    @staticmethod
    def validate_histogram_options(name: str, dimensions=None, publishing_interval_in_seconds=None):
        """Validates Histogram options."""
        InputValidator.validate_common_metric_parameters(name, dimensions, publishing_interval_in_seconds)

    @staticmethod
    def validate_counter_options(name: str, dimensions=None, publishing_interval_in_seconds=None):
        """Validates Counter options."""
        InputValidator.validate_common_metric_parameters(name, dimensions, publishing_interval_in_seconds)

    @staticmethod
    def validate_timer_options(name: str, dimensions=None, publishing_interval_in_seconds=None):
        """Validates Timer options."""
        InputValidator.validate_common_metric_parameters(name, dimensions, publishing_interval_in_seconds)

    @staticmethod
    def validate_settable_gauge_options(name: str, dimensions=None, publishing_interval_in_seconds=None):
        """Validates SettableGauge options."""
        InputValidator.validate_common_metric_parameters(name, dimensions, publishing_interval_in_seconds)

    @staticmethod
    def validate_register_options(
        name: str,
        metric: Any,
        dimensions: Optional[dict] = None,
        publishing_interval_in_seconds: Optional[float] = None,
        metric_types: Optional[Iterable[str]] = None,
    ):
        """
        Validates the options for registering an already built metric.

        Args:
            name (str): The metric name.
            metric (Metric): The metric instance.
            dimensions (dict, optional): Custom dimensions.
            publishing_interval_in_seconds (float, optional): The publishing interval.
            metric_types (iterable, optional): Valid metric kinds, defaults to MetricTypes.
        """
        InputValidator.validate_metric(metric, metric_types)
        InputValidator.validate_common_metric_parameters(name, dimensions, publishing_interval_in_seconds)

    @staticmethod
    def validate_common_metric_parameters(name: str, dimensions=None, publishing_interval_in_seconds=None):
        """Validates the parameters shared by every create metric method."""
        InputValidator.validate_metric_name(name)
        InputValidator.validate_optional_dimensions(dimensions)
        InputValidator.validate_optional_publishing_interval(publishing_interval_in_seconds)

    @staticmethod
    def validate_metric_name(name: str):
        """Validates the metric name. Empty strings are allowed."""
        if not isinstance(name, str):
            raise TypeError(f"options.name is a required option and must be of type str, actual type: {_type_name(name)}")

    @staticmethod
    def validate_metric(metric: Any, metric_types: Optional[Iterable[str]] = None):
        """
        Validates that an object implements the Metric interface.

        Args:
            metric (Metric): The object that is supposed to be a metric.
            metric_types (iterable, optional): Valid values for `metric.get_type()`.
                Defaults to the values of MetricTypes.

        Raises:
            TypeError: If the metric is None, lacks `to_json`/`get_type`, or reports an unknown type.
        """
        if metric is None:
            raise TypeError("The metric was undefined, when it was required")
        if not _has_method(metric, "to_json"):
            raise TypeError("Metrics must implement to_json(), see the Metric interface.")
        if not _has_method(metric, "get_type"):
            raise TypeError("Metrics must implement get_type(), see the Metric interface.")

        if isinstance(metric_types, str):
            raise TypeError("metric_types must be an iterable of metric type names, not a single str")

        if metric_types is None:
            valid_types = METRIC_TYPE_VALUES
            source = "MetricTypes"
        else:
            valid_types = tuple(metric_types)
            source = "the supplied metric_types"

        metric_type = metric.get_type()
        if metric_type not in valid_types:
            raise TypeError(
                f"Metric.get_type() must return a type defined in {source}. "
                f"Found: {metric_type}, Valid values: {', '.join(str(t) for t in valid_types)}"
            )

    @staticmethod
    def validate_number_returning_callback(callback: Callable[[], float]):
        """
        Validates a gauge callback by calling it once.

        Exceptions raised by the callback propagate unchanged.
        """
        if not callable(callback):
            raise TypeError(
                f"options.callback is a required option and must be callable, actual type: {_type_name(callback)}"
            )

        result = callback()
        if not is_number(result):
            raise TypeError(f"options.callback must return a number, actual return type: {_type_name(result)}")

    @staticmethod
    def validate_optional_dimensions(dimensions: Optional[dict]):
        """Validates a set of optional dimensions."""
        if dimensions is None:
            return

        if isinstance(dimensions, (list, tuple)):
            raise TypeError(
                f"dimensions were detected to be a {_type_name(dimensions)}, expected Dict[str, str]"
            )

        if not isinstance(dimensions, Mapping):
            raise TypeError(f"options.dimensions should be a dict, actual type: {_type_name(dimensions)}")

        for key, value in dimensions.items():
            if not isinstance(key, str):
                raise TypeError(f"options.dimensions keys should be of type str, actual type: {_type_name(key)}")
            if not isinstance(value, str):
                raise TypeError(f"options.dimensions.{key} should be of type str, actual type: {_type_name(value)}")

    @staticmethod
    def validate_optional_logger(logger: Any):
        """Validates that an optional logger has at least the methods we call on it."""
        if logger is None:
            return

        if not all(_has_method(logger, method_name) for method_name in LOGGER_METHODS):
            raise TypeError(
                "The logger that was passed in does not support all required logging methods, "
                "expected object to have callables debug, info, warning, and error with "
                "signatures (msg, *args, **kwargs)"
            )

    @staticmethod
    def validate_optional_publishing_interval(publishing_interval_in_seconds: Optional[float]):
        """Validates the optional publishing interval."""
        if publishing_interval_in_seconds is None:
            return

        if not is_number(publishing_interval_in_seconds):
            raise TypeError(
                "options.publishing_interval_in_seconds must be a number, "
                f"actual type: {_type_name(publishing_interval_in_seconds)}"
            )

    @staticmethod
    def validate_reporter_parameters(options: Any):
        """
        Validates the optional parameters of a Reporter.

        Args:
            options (dict | ReporterOptions, optional): Reporter options; `default_dimensions`
                and `logger` are checked.
        """
        if options is None:
            return

        InputValidator.validate_optional_dimensions(_get_option(options, "default_dimensions"))
        InputValidator.validate_optional_logger(_get_option(options, "logger"))

    @staticmethod
    def validate_reporter_instance(reporter: Any):
        """Validates that a usable Reporter object has been supplied."""
        if reporter is None:
            raise TypeError("The reporter was undefined, when it was required")
        if not _has_method(reporter, "set_registry"):
            raise TypeError("A reporter must implement set_registry(registry), see the abstract Reporter class.")
        if not _has_method(reporter, "report_metric_on_interval"):
            raise TypeError(
                "A reporter must implement report_metric_on_interval(metric_key, interval_in_seconds), "
                "see the abstract Reporter class."
            )

    @staticmethod
    def validate_self_reporting_metrics_registry_parameters(reporter: Any, options: Any = None):
        """
        Validates the parameters of a self reporting metrics registry.

        Args:
            reporter (Reporter): The reporter the registry publishes through.
            options (dict | SelfReportingMetricsRegistryOptions, optional): Registry options.
        """
        InputValidator.validate_reporter_instance(reporter)
        if options is not None:
            InputValidator.validate_optional_logger(_get_option(options, "logger"))
