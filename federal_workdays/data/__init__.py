"""
Data models and schemas for the federal workday calculator.
"""

from federal_workdays.data.schemas import (
    BusinessDayRequest,
    BusinessDayStrategy,
    Config,
    HolidayObservance,
    RangeKind,
    WorkdayResult,
)

__all__ = [
    "BusinessDayRequest",
    "BusinessDayStrategy",
    "Config",
    "HolidayObservance",
    "RangeKind",
    "WorkdayResult",
]
