"""
Registry of US federal holidays, per 5 U.S.C. 6103(a).

See http://www.law.cornell.edu/uscode/text/5/6103
"""

import calendar
import logging
from datetime import date
from enum import Enum
from typing import List, Optional, Set, Union

from federal_workdays.core.cache import ObservanceCache, get_default_cache
from federal_workdays.core.rules import LAST, FixedRule, Rule, VaryingRule, unadjusted_date
from federal_workdays.data.schemas import HolidayObservance

logger = logging.getLogger(__name__)


class USFederalHoliday(Enum):
    """The ten federal holidays, in the order they occur within a year."""

    NEW_YEARS_DAY = ("New Year's Day", FixedRule(1, 1))
    BIRTHDAY_OF_MARTIN_LUTHER_KING_JR = (
        "Birthday of Martin Luther King, Jr.",
        VaryingRule(1, calendar.MONDAY, 3),
    )
    WASHINGTONS_BIRTHDAY = ("Washington's Birthday", VaryingRule(2, calendar.MONDAY, 3))
    MEMORIAL_DAY = ("Memorial Day", VaryingRule(5, calendar.MONDAY, LAST))
    INDEPENDENCE_DAY = ("Independence Day", FixedRule(7, 4))
    LABOR_DAY = ("Labor Day", VaryingRule(9, calendar.MONDAY, 1))
    COLUMBUS_DAY = ("Columbus Day", VaryingRule(10, calendar.MONDAY, 2))
    VETERANS_DAY = ("Veterans Day", FixedRule(11, 11))
    THANKSGIVING_DAY = ("Thanksgiving Day", VaryingRule(11, calendar.THURSDAY, 4))
    CHRISTMAS_DAY = ("Christmas Day", FixedRule(12, 25))

    def __init__(self, display_name: str, rule: Rule):
        self.display_name = display_name
        self.rule = rule

    def observance_for(self, year: int, cache: Optional[ObservanceCache] = None) -> date:
        """
        Observed date of this holiday in ``year``, resolved through the cache.

        Args:
            year: Calendar year.
            cache: Cache to use; defaults to the process-wide cache.

        Returns:
            The weekend-adjusted observance date.
        """
        return _resolve_cache(cache).get(self, year)

    @classmethod
    def from_name(cls, name: str) -> "USFederalHoliday":
        """
        Look up a holiday by enum name or display name.

        Matching ignores case and treats spaces, dashes, dots, commas and
        apostrophes as separators, so "memorial-day", "Memorial Day" and
        "MEMORIAL_DAY" all resolve.

        Raises:
            ValueError: If no holiday matches.
        """
        wanted = _normalize(name)
        for holiday in cls:
            if wanted in (_normalize(holiday.name), _normalize(holiday.display_name)):
                return holiday
        valid = ", ".join(h.name for h in cls)
        raise ValueError(f"Unknown federal holiday: {name!r}. Use one of: {valid}")


def _normalize(name: str) -> str:
    cleaned = name.strip().lower()
    for char in "'.,":
        cleaned = cleaned.replace(char, "")
    for char in " -":
        cleaned = cleaned.replace(char, "_")
    return "_".join(part for part in cleaned.split("_") if part)


def _resolve_cache(cache: Optional[ObservanceCache]) -> ObservanceCache:
    return cache if cache is not None else get_default_cache()


def observance_for(
    holiday: Union[USFederalHoliday, str], year: int, cache: Optional[ObservanceCache] = None
) -> date:
    """Observed date of a holiday, given as a registry member or its name."""
    if holiday is None:
        raise TypeError("Holiday must not be None")
    if isinstance(holiday, str):
        holiday = USFederalHoliday.from_name(holiday)
    return holiday.observance_for(year, cache)


def holidays_for_year(year: int, cache: Optional[ObservanceCache] = None) -> Set[date]:
    """Observed dates of all federal holidays in a single year."""
    resolved = _resolve_cache(cache)
    return {resolved.get(holiday, year) for holiday in USFederalHoliday}


def holidays_observed_in_year_range(
    start_year: int,
    end_year: int,
    cache: Optional[ObservanceCache] = None,
) -> Set[date]:
    """
    Observed dates of all federal holidays for an inclusive range of years.

    Args:
        start_year: First year of the range.
        end_year: Last year of the range (inclusive).
        cache: Cache to use; defaults to the process-wide cache.

    Returns:
        Set of observance dates. No ordering is implied.

    Raises:
        ValueError: If ``start_year`` is after ``end_year``.
    """
    if start_year > end_year:
        raise ValueError(f"Start year {start_year} must not be after end year {end_year}")

    resolved = _resolve_cache(cache)
    result: Set[date] = set()
    for year in range(start_year, end_year + 1):
        result.update(holidays_for_year(year, resolved))

    logger.debug(
        "Resolved %d federal holiday dates for %d-%d", len(result), start_year, end_year
    )
    return result


holidays_in_year_range = holidays_observed_in_year_range


def observances_for_year(
    year: int, cache: Optional[ObservanceCache] = None
) -> List[HolidayObservance]:
    """
    Detailed observance records for every holiday in ``year``.

    Args:
        year: Calendar year.
        cache: Cache to use; defaults to the process-wide cache.

    Returns:
        List of HolidayObservance objects in registry order.
    """
    resolved = _resolve_cache(cache)
    return [
        HolidayObservance(
            holiday=holiday.name,
            name=holiday.display_name,
            observed_date=resolved.get(holiday, year),
            actual_date=unadjusted_date(holiday.rule, year),
        )
        for holiday in USFederalHoliday
    ]
