"""
Data models for the federal workday calculator using Pydantic.
"""

from datetime import date, datetime
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator


class BusinessDayStrategy(str, Enum):
    """How business days between two dates are counted."""

    SET_DIFFERENCE = "set_difference"  # weekday range minus holiday set
    CLOSED_FORM = "closed_form"  # weekday arithmetic minus holidays in range


class RangeKind(str, Enum):
    """Which dates a range enumeration produces."""

    ALL = "all"
    WEEKDAYS = "weekdays"
    WORKDAYS = "workdays"


class HolidayObservance(BaseModel):
    """A federal holiday resolved for one year."""

    holiday: str = Field(..., description="Registry identifier, e.g. MEMORIAL_DAY")
    name: str = Field(..., description="Display name of the holiday")
    observed_date: date = Field(..., description="Date the holiday is observed")
    actual_date: date = Field(..., description="Date before weekend adjustment")

    @property
    def is_shifted(self) -> bool:
        """Whether the observance was moved off a weekend."""
        return self.observed_date != self.actual_date


class BusinessDayRequest(BaseModel):
    """Request model for a business-day calculation."""

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")
    strategy: BusinessDayStrategy = Field(
        default=BusinessDayStrategy.SET_DIFFERENCE, description="Counting strategy"
    )

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, v: date, info) -> date:
        """Ensure end_date is not before start_date."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("end_date must be after or equal to start_date")
        return v


class WorkdayResult(BaseModel):
    """Complete result of a business-day calculation."""

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")
    calendar_days: int = Field(..., ge=0, description="Calendar days in the period, both ends included")
    days_between: int = Field(..., ge=0, description="Days from start to end, end excluded")
    weekend_days: int = Field(..., ge=0, description="Saturdays and Sundays in the period")
    holidays_count: int = Field(..., ge=0, description="Observed federal holidays in the period")
    business_days: int = Field(..., ge=0, description="Business days in the period")
    holidays: List[HolidayObservance] = Field(
        default_factory=list, description="Federal holidays observed in the period"
    )
    weekends_detail: Dict[str, int] = Field(
        default_factory=dict, description="Breakdown of Saturdays and Sundays"
    )
    strategy: BusinessDayStrategy = Field(..., description="Counting strategy used")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class Config(BaseModel):
    """Configuration for the federal workday calculator."""

    cache_max_size: int = Field(default=1000, ge=0, description="Maximum cached observances")
    cache_ttl_seconds: float = Field(default=600.0, ge=0, description="Observance cache time-to-live")
    business_day_strategy: BusinessDayStrategy = Field(
        default=BusinessDayStrategy.SET_DIFFERENCE, description="Default counting strategy"
    )
    output_format: str = Field(default="console", description="Default output format: console, json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level
