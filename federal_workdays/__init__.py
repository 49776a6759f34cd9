"""
Federal Workday Calculator - US federal holidays, business days and date ranges.
"""

from federal_workdays.core import (
    DateRange,
    USFederalHoliday,
    date_range,
    federal_work_day_range,
    holidays_in_year_range,
    observance_for,
    to_calendar_date,
    to_legacy_datetime,
    total_business_days_between,
    total_days_between,
    weekday_range,
)

__version__ = "0.1.0"

__all__ = [
    "DateRange",
    "USFederalHoliday",
    "date_range",
    "federal_work_day_range",
    "holidays_in_year_range",
    "observance_for",
    "to_calendar_date",
    "to_legacy_datetime",
    "total_business_days_between",
    "total_days_between",
    "weekday_range",
]
