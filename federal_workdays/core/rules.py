"""
Holiday rules and the shared weekend-adjustment policy.

A rule is plain data: either a fixed month/day or an ordinal weekday within a
month. ``unadjusted_date`` evaluates any rule for a year, and
``observance_for`` applies the federal weekend shift (Executive Order 11582):
a Saturday holiday is observed on Friday, a Sunday holiday on Monday.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Union

LAST = -1


@dataclass(frozen=True)
class FixedRule:
    """Holiday on the same month and day every year (e.g. July 4)."""

    month: int
    day: int

    def __post_init__(self):
        # Validate against a leap year so Feb 29 is accepted here
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")
        if not 1 <= self.day <= calendar.monthrange(2000, self.month)[1]:
            raise ValueError(f"Invalid day {self.day} for month {self.month}")


@dataclass(frozen=True)
class VaryingRule:
    """
    Holiday on the Nth occurrence of a weekday within a month.

    ``weekday`` follows ``date.weekday()`` (Monday is 0). A positive
    ``ordinal`` counts from the start of the month; ``LAST`` (-1) selects the
    final occurrence.
    """

    month: int
    weekday: int
    ordinal: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"Invalid weekday: {self.weekday}")
        if self.ordinal != LAST and not 1 <= self.ordinal <= 5:
            raise ValueError(f"Ordinal must be 1-5 or {LAST}, got {self.ordinal}")


Rule = Union[FixedRule, VaryingRule]


def unadjusted_date(rule: Rule, year: int) -> date:
    """
    Compute the actual date a holiday falls on, before weekend adjustment.

    Args:
        rule: Fixed or varying holiday rule.
        year: Calendar year.

    Returns:
        The unadjusted holiday date.

    Raises:
        ValueError: If the year is outside the range ``date`` supports, or the
            requested occurrence does not exist in that month.
    """
    if isinstance(rule, FixedRule):
        return date(year, rule.month, rule.day)
    if isinstance(rule, VaryingRule):
        if rule.ordinal == LAST:
            return _last_weekday(year, rule.month, rule.weekday)
        return _nth_weekday(year, rule.month, rule.weekday, rule.ordinal)
    raise TypeError(f"Unsupported rule type: {type(rule).__name__}")


def adjust_for_weekend(holiday: date) -> date:
    """Shift a Saturday holiday to Friday and a Sunday holiday to Monday."""
    weekday = holiday.weekday()
    if weekday == calendar.SATURDAY:
        return holiday - timedelta(days=1)
    if weekday == calendar.SUNDAY:
        return holiday + timedelta(days=1)
    return holiday


def observance_for(rule: Rule, year: int) -> date:
    """Date on which the holiday is observed in ``year``."""
    return adjust_for_weekend(unadjusted_date(rule, year))


def _nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    first_day = date(year, month, 1)
    days_ahead = (weekday - first_day.weekday()) % 7
    day = 1 + days_ahead + 7 * (n - 1)
    days_in_month = calendar.monthrange(year, month)[1]
    if day > days_in_month:
        raise ValueError(
            f"{calendar.month_name[month]} {year} has no occurrence #{n} "
            f"of {calendar.day_name[weekday]}"
        )
    return date(year, month, day)


def _last_weekday(year: int, month: int, weekday: int) -> date:
    last_day = date(year, month, calendar.monthrange(year, month)[1])
    days_back = (last_day.weekday() - weekday) % 7
    return last_day - timedelta(days=days_back)
