"""
Core holiday, range and counting logic.
"""

from federal_workdays.core.cache import (
    ObservanceCache,
    ObservanceKey,
    configure_default_cache,
    get_default_cache,
    reset_default_cache,
)
from federal_workdays.core.calculator import (
    WorkdayCalculator,
    count_weekdays,
    total_business_days_between,
    total_days_between,
)
from federal_workdays.core.conversion import (
    to_calendar_date,
    to_legacy_datetime,
    to_timestamp,
)
from federal_workdays.core.date_range import (
    DateRange,
    date_range,
    federal_work_day_range,
    weekday_range,
)
from federal_workdays.core.registry import (
    USFederalHoliday,
    holidays_for_year,
    holidays_in_year_range,
    holidays_observed_in_year_range,
    observance_for,
    observances_for_year,
)
from federal_workdays.core.rules import FixedRule, VaryingRule

__all__ = [
    "DateRange",
    "FixedRule",
    "ObservanceCache",
    "ObservanceKey",
    "USFederalHoliday",
    "VaryingRule",
    "WorkdayCalculator",
    "configure_default_cache",
    "count_weekdays",
    "date_range",
    "federal_work_day_range",
    "get_default_cache",
    "holidays_for_year",
    "holidays_in_year_range",
    "holidays_observed_in_year_range",
    "observance_for",
    "observances_for_year",
    "reset_default_cache",
    "to_calendar_date",
    "to_legacy_datetime",
    "to_timestamp",
    "total_business_days_between",
    "total_days_between",
    "weekday_range",
]
