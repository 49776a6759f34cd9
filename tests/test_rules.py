"""
Tests for holiday rules and weekend adjustment.
"""

import calendar
from datetime import date

import pytest

from federal_workdays.core.rules import (
    LAST,
    FixedRule,
    VaryingRule,
    adjust_for_weekend,
    observance_for,
    unadjusted_date,
)


class TestFixedRule:
    """Tests for fixed month/day rules."""

    def test_unadjusted_date(self):
        """Fixed rule lands on its month and day."""
        assert unadjusted_date(FixedRule(7, 4), 2015) == date(2015, 7, 4)

    def test_saturday_observed_on_friday(self):
        """July 4, 2015 was a Saturday."""
        assert observance_for(FixedRule(7, 4), 2015) == date(2015, 7, 3)

    def test_sunday_observed_on_monday(self):
        """Christmas 2016 was a Sunday."""
        assert observance_for(FixedRule(12, 25), 2016) == date(2016, 12, 26)

    def test_new_year_observed_in_previous_year(self):
        """January 1, 2011 was a Saturday."""
        assert observance_for(FixedRule(1, 1), 2011) == date(2010, 12, 31)

    @pytest.mark.parametrize("month,day", [(0, 1), (13, 1), (2, 30), (4, 31), (1, 0)])
    def test_invalid_rule_rejected(self, month, day):
        """Impossible month/day pairs fail at construction."""
        with pytest.raises(ValueError):
            FixedRule(month, day)

    def test_leap_day_only_exists_in_leap_years(self):
        """A Feb 29 rule is valid but fails in non-leap years."""
        rule = FixedRule(2, 29)
        assert unadjusted_date(rule, 2020) == date(2020, 2, 29)
        with pytest.raises(ValueError):
            unadjusted_date(rule, 2019)


class TestVaryingRule:
    """Tests for ordinal weekday rules."""

    def test_third_monday(self):
        """Third Monday of January 2011."""
        rule = VaryingRule(1, calendar.MONDAY, 3)
        assert unadjusted_date(rule, 2011) == date(2011, 1, 17)

    def test_first_monday_when_month_starts_on_monday(self):
        """October 1, 2018 was a Monday."""
        rule = VaryingRule(10, calendar.MONDAY, 1)
        assert unadjusted_date(rule, 2018) == date(2018, 10, 1)

    def test_fourth_thursday(self):
        """Thanksgiving 2018."""
        rule = VaryingRule(11, calendar.THURSDAY, 4)
        assert unadjusted_date(rule, 2018) == date(2018, 11, 22)

    def test_last_monday(self):
        """Memorial Day 2011 (May 31 was a Tuesday)."""
        rule = VaryingRule(5, calendar.MONDAY, LAST)
        assert unadjusted_date(rule, 2011) == date(2011, 5, 30)

    def test_last_weekday_on_final_day_of_month(self):
        """May 31, 2021 was a Monday."""
        rule = VaryingRule(5, calendar.MONDAY, LAST)
        assert unadjusted_date(rule, 2021) == date(2021, 5, 31)

    def test_last_weekday_in_december(self):
        """Last Friday of December 2021."""
        rule = VaryingRule(12, calendar.FRIDAY, LAST)
        assert unadjusted_date(rule, 2021) == date(2021, 12, 31)

    def test_missing_fifth_occurrence(self):
        """February 2018 has only four Mondays."""
        rule = VaryingRule(2, calendar.MONDAY, 5)
        with pytest.raises(ValueError, match="no occurrence"):
            unadjusted_date(rule, 2018)

    def test_existing_fifth_occurrence(self):
        """April 2018 has five Mondays."""
        rule = VaryingRule(4, calendar.MONDAY, 5)
        assert unadjusted_date(rule, 2018) == date(2018, 4, 30)

    @pytest.mark.parametrize("ordinal", [0, 6, -2])
    def test_invalid_ordinal(self, ordinal):
        """Only 1-5 and LAST are accepted."""
        with pytest.raises(ValueError):
            VaryingRule(1, calendar.MONDAY, ordinal)

    def test_invalid_weekday(self):
        """Weekday must be 0-6."""
        with pytest.raises(ValueError):
            VaryingRule(1, 7, 1)

    def test_rules_are_values(self):
        """Rules compare and hash by their fields."""
        assert VaryingRule(5, calendar.MONDAY, LAST) == VaryingRule(5, calendar.MONDAY, LAST)
        assert len({FixedRule(1, 1), FixedRule(1, 1)}) == 1


class TestOutOfRangeYears:
    """Years outside the date type's domain propagate errors."""

    @pytest.mark.parametrize("year", [0, 10000])
    def test_fixed_rule(self, year):
        with pytest.raises(ValueError):
            unadjusted_date(FixedRule(1, 1), year)

    @pytest.mark.parametrize("year", [0, 10000])
    def test_varying_rule(self, year):
        with pytest.raises(ValueError):
            unadjusted_date(VaryingRule(11, calendar.THURSDAY, 4), year)

    @pytest.mark.parametrize("year", [0, 10000])
    def test_last_weekday_rule(self, year):
        with pytest.raises(ValueError):
            unadjusted_date(VaryingRule(5, calendar.MONDAY, LAST), year)

    def test_unknown_rule_type(self):
        with pytest.raises(TypeError):
            unadjusted_date("January 1", 2018)


class TestAdjustForWeekend:
    """Tests for the weekend adjustment policy."""

    def test_weekday_unchanged(self):
        assert adjust_for_weekend(date(2018, 7, 4)) == date(2018, 7, 4)

    def test_saturday(self):
        assert adjust_for_weekend(date(2017, 11, 11)) == date(2017, 11, 10)

    def test_sunday(self):
        assert adjust_for_weekend(date(2017, 1, 1)) == date(2017, 1, 2)

    def test_never_returns_weekend(self):
        """Every day of a year adjusts to a weekday."""
        for ordinal in range(date(2018, 1, 1).toordinal(), date(2019, 1, 1).toordinal()):
            assert adjust_for_weekend(date.fromordinal(ordinal)).weekday() < 5
