"""
Calendar-day and business-day counting.
"""

import calendar
import logging
from datetime import date
from typing import Optional

from federal_workdays.core.cache import ObservanceCache
from federal_workdays.core.conversion import as_calendar_date
from federal_workdays.core.date_range import (
    date_range,
    holiday_years_for,
    weekday_range,
)
from federal_workdays.core.registry import (
    holidays_observed_in_year_range,
    observances_for_year,
)
from federal_workdays.data.schemas import (
    BusinessDayRequest,
    BusinessDayStrategy,
    WorkdayResult,
)

logger = logging.getLogger(__name__)


def total_days_between(start: date, end: date) -> int:
    """
    Number of days from ``start`` to ``end``, start inclusive, end exclusive.

    November 1 to November 30 is 29 days. The result is negative when ``end``
    precedes ``start``.

    Raises:
        TypeError: If either date is missing.
    """
    start = as_calendar_date(start, "Start date")
    end = as_calendar_date(end, "End date")
    return (end - start).days


def total_business_days_between(
    start: date,
    end: date,
    strategy: BusinessDayStrategy = BusinessDayStrategy.SET_DIFFERENCE,
    cache: Optional[ObservanceCache] = None,
) -> int:
    """
    Number of business days from ``start`` to ``end``, both ends included.

    Business days are weekdays that are not observed federal holidays. The same
    start and end date always yields 0.

    Args:
        start: Start date.
        end: End date.
        strategy: Counting strategy; both give the same result.
        cache: Observance cache; defaults to the process-wide cache.

    Returns:
        Business day count.

    Raises:
        TypeError: If either date is missing.
        ValueError: If ``start`` is after ``end``.
    """
    start = as_calendar_date(start, "Start date")
    end = as_calendar_date(end, "End date")

    if start == end:
        return 0
    if start > end:
        raise ValueError(
            f"Start date {start.isoformat()} must not be after end date {end.isoformat()}"
        )

    if BusinessDayStrategy(strategy) is BusinessDayStrategy.CLOSED_FORM:
        count = _closed_form_count(start, end, cache)
    else:
        count = _set_difference_count(start, end, cache)

    logger.debug(
        "Business days %s..%s (%s): %d", start, end, BusinessDayStrategy(strategy).value, count
    )
    return count


def _set_difference_count(start: date, end: date, cache: Optional[ObservanceCache]) -> int:
    weekdays = set(weekday_range(start, end))
    holidays = holidays_observed_in_year_range(*holiday_years_for(start, end), cache=cache)
    return len(weekdays - holidays)


def _closed_form_count(start: date, end: date, cache: Optional[ObservanceCache]) -> int:
    # Observances never fall on a weekend, so every holiday in range is a weekday
    holidays = holidays_observed_in_year_range(*holiday_years_for(start, end), cache=cache)
    holidays_in_range = sum(1 for h in holidays if start <= h <= end)
    return count_weekdays(start, end) - holidays_in_range


def count_weekdays(start: date, end: date) -> int:
    """Weekdays from ``start`` to ``end`` inclusive, without enumerating them."""
    return _weekdays_through(end.toordinal()) - _weekdays_through(start.toordinal() - 1)


def _weekdays_through(ordinal: int) -> int:
    # Ordinal 1 (0001-01-01) is a Monday, so each 7-day block starts on Monday
    weeks, remainder = divmod(ordinal, 7)
    return 5 * weeks + min(remainder, 5)


class WorkdayCalculator:
    """Produces a detailed breakdown of the days in a period."""

    def __init__(
        self,
        cache: Optional[ObservanceCache] = None,
        default_strategy: BusinessDayStrategy = BusinessDayStrategy.SET_DIFFERENCE,
    ):
        """
        Initialize the workday calculator.

        Args:
            cache: Observance cache; defaults to the process-wide cache.
            default_strategy: Strategy used by ``calculate_simple``.
        """
        self.cache = cache
        self.default_strategy = default_strategy

    def calculate(self, request: BusinessDayRequest) -> WorkdayResult:
        """
        Calculate the day breakdown for a request.

        Args:
            request: BusinessDayRequest with the period and strategy.

        Returns:
            WorkdayResult with counts and the holidays observed in the period.
        """
        start, end = request.start_date, request.end_date

        saturdays = 0
        sundays = 0
        for current in date_range(start, end):
            weekday = current.weekday()
            if weekday == calendar.SATURDAY:
                saturdays += 1
            elif weekday == calendar.SUNDAY:
                sundays += 1

        first_year, last_year = holiday_years_for(start, end)
        holidays = [
            observance
            for year in range(first_year, last_year + 1)
            for observance in observances_for_year(year, self.cache)
            if start <= observance.observed_date <= end
        ]
        holidays.sort(key=lambda observance: observance.observed_date)

        business_days = total_business_days_between(start, end, request.strategy, self.cache)

        return WorkdayResult(
            start_date=start,
            end_date=end,
            calendar_days=total_days_between(start, end) + 1,
            days_between=total_days_between(start, end),
            weekend_days=saturdays + sundays,
            holidays_count=len(holidays),
            business_days=business_days,
            holidays=holidays,
            weekends_detail={"saturdays": saturdays, "sundays": sundays},
            strategy=request.strategy,
        )

    def calculate_simple(
        self,
        start_date: date,
        end_date: date,
        strategy: Optional[BusinessDayStrategy] = None,
    ) -> WorkdayResult:
        """
        Simplified calculation method for CLI usage.

        Args:
            start_date: Start date of the period.
            end_date: End date of the period.
            strategy: Counting strategy; defaults to the calculator's default.

        Returns:
            WorkdayResult for the period.
        """
        request = BusinessDayRequest(
            start_date=start_date,
            end_date=end_date,
            strategy=strategy or self.default_strategy,
        )
        return self.calculate(request)
