from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from measured_reporting import config
from measured_reporting.validators.input_validators import is_number


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ReporterOptions(BaseModel):
    """
    Optional parameters accepted by a Reporter.

    `default_dimensions` and `logger` are checked by
    `InputValidator.validate_reporter_parameters` (TypeError), not by pydantic.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    default_dimensions: Optional[Any] = None
    logger: Optional[Any] = None
    default_reporting_interval_in_seconds: float = Field(
        default_factory=lambda: config.DEFAULT_REPORTING_INTERVAL_IN_SECONDS, gt=0
    )
    log_level: LogLevel = Field(default_factory=lambda: LogLevel(config.LOG_LEVEL))

    @field_validator("default_reporting_interval_in_seconds", mode="before")
    @classmethod
    def interval_must_be_a_number(cls, value):
        """Applies the same number rule as per-metric publishing intervals (no str, no bool)."""
        if not is_number(value):
            raise ValueError(f"must be a number, actual type: {type(value).__name__}")
        return float(value)


class SelfReportingMetricsRegistryOptions(BaseModel):
    """Optional parameters accepted by a self reporting metrics registry."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    logger: Optional[Any] = None
