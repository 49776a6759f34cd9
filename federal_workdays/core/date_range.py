"""
Lazy, filterable ranges of calendar dates.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Callable, Iterator, Optional, Tuple

from federal_workdays.core.cache import ObservanceCache
from federal_workdays.core.conversion import as_calendar_date
from federal_workdays.core.registry import holidays_observed_in_year_range

DatePredicate = Callable[[date], bool]

_ONE_DAY = timedelta(days=1)


class DateRange:
    """
    Inclusive range of dates from ``start`` to ``end``, produced on demand.

    Every iteration starts over from ``start``. Predicates are applied to each
    produced date; a date is yielded only if all of them accept it.
    """

    def __init__(self, start: date, end: date, predicates: Tuple[DatePredicate, ...] = ()):
        """
        Initialize the range.

        Args:
            start: First date of the range.
            end: Last date of the range (inclusive).
            predicates: Filters every yielded date must satisfy.

        Raises:
            TypeError: If either bound is missing.
            ValueError: If ``start`` is after ``end``.
        """
        self.start = as_calendar_date(start, "Start date")
        self.end = as_calendar_date(end, "End date")
        if self.start > self.end:
            raise ValueError(
                f"Start date {self.start.isoformat()} must not be after "
                f"end date {self.end.isoformat()}"
            )
        self.predicates = tuple(predicates)

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while True:
            if all(predicate(current) for predicate in self.predicates):
                yield current
            if current == self.end:
                return
            current += _ONE_DAY

    def filter(self, predicate: DatePredicate) -> "DateRange":
        """New range over the same bounds with one more predicate."""
        return DateRange(self.start, self.end, self.predicates + (predicate,))

    def count(self) -> int:
        """Number of dates produced. Consumes the whole sequence."""
        return sum(1 for _ in self)

    def contains(self, value: object) -> bool:
        """Whether ``value`` is produced by this range."""
        if isinstance(value, datetime) or not isinstance(value, date):
            return False
        if not self.start <= value <= self.end:
            return False
        for current in self:
            if current == value:
                return True
            if current > value:
                break
        return False

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.start.isoformat()}, {self.end.isoformat()}, "
            f"filters={len(self.predicates)})"
        )


def is_weekday(value: date) -> bool:
    """Monday through Friday."""
    return value.weekday() < calendar.SATURDAY


def holiday_years_for(start: date, end: date) -> Tuple[int, int]:
    """Years whose holiday observances are excluded from ``[start, end]``."""
    return start.year, end.year


def date_range(start: date, end: date) -> DateRange:
    """All dates from ``start`` to ``end`` inclusive."""
    return DateRange(start, end)


def weekday_range(start: date, end: date) -> DateRange:
    """Dates from ``start`` to ``end`` inclusive, excluding Saturdays and Sundays."""
    return date_range(start, end).filter(is_weekday)


def federal_work_day_range(
    start: date, end: date, cache: Optional[ObservanceCache] = None
) -> DateRange:
    """
    Federal work days from ``start`` to ``end`` inclusive.

    The holiday set for the range's years is computed once here; each produced
    weekday is then checked against it.
    """
    weekdays = weekday_range(start, end)
    holidays = holidays_observed_in_year_range(
        *holiday_years_for(weekdays.start, weekdays.end), cache=cache
    )
    return weekdays.filter(lambda value: value not in holidays)
