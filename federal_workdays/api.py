"""
FastAPI REST API for the federal workday calculator.
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from federal_workdays.config.manager import ConfigManager, apply_cache_config
from federal_workdays.core.calculator import WorkdayCalculator, total_days_between
from federal_workdays.core.date_range import date_range, federal_work_day_range, weekday_range
from federal_workdays.core.registry import USFederalHoliday, observances_for_year
from federal_workdays.data.schemas import BusinessDayRequest, BusinessDayStrategy, RangeKind
from federal_workdays.output.exporter import holiday_to_dict

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

calculator = WorkdayCalculator(default_strategy=config.business_day_strategy)

RANGE_BUILDERS = {
    RangeKind.ALL: date_range,
    RangeKind.WEEKDAYS: weekday_range,
    RangeKind.WORKDAYS: federal_work_day_range,
}

MAX_RANGE_DAYS = 366 * 10


# API Models
class BusinessDaysRequest(BaseModel):
    """Request model for business-day calculation."""

    start_date: date = Field(..., description="Start date of the period")
    end_date: date = Field(..., description="End date of the period")
    strategy: Optional[BusinessDayStrategy] = Field(None, description="Counting strategy")


class BusinessDaysResponse(BaseModel):
    """Response model for business-day calculation."""

    start_date: date
    end_date: date
    calendar_days: int
    days_between: int
    weekend_days: int
    saturdays: int
    sundays: int
    holidays_count: int
    business_days: int
    strategy: str
    holidays: List[dict]


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    holiday: str
    name: str
    date: date
    actual_date: date
    weekday: str


class RangeResponse(BaseModel):
    """Response model for a date range enumeration."""

    kind: RangeKind
    start_date: date
    end_date: date
    count: int
    dates: List[date]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Install the configured observance cache on startup."""
    cache = apply_cache_config(config)
    logger.info("Observance cache ready (max_size=%d, ttl=%ss)", cache.max_size, cache.ttl_seconds)
    yield


app = FastAPI(
    title="Federal Workday Calculator API",
    description="US federal holiday observances, business days and date ranges",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Federal Workday Calculator API",
        "version": "0.1.0",
        "endpoints": {
            "POST /business-days": "Calculate business days",
            "GET /days": "Count calendar days between two dates",
            "GET /holidays/{year}": "Get federal holidays observed in a year",
            "GET /observance/{holiday}/{year}": "Get the observed date of one holiday",
            "GET /range": "Enumerate all days, weekdays or work days",
        },
    }


@app.post("/business-days", response_model=BusinessDaysResponse)
async def calculate_business_days(request: BusinessDaysRequest):
    """
    Calculate business days between two dates, both ends included.

    The same start and end date yields 0.
    """
    if request.end_date < request.start_date:
        raise HTTPException(
            status_code=400,
            detail="end_date must be after or equal to start_date",
        )

    try:
        result = calculator.calculate(
            BusinessDayRequest(
                start_date=request.start_date,
                end_date=request.end_date,
                strategy=request.strategy or calculator.default_strategy,
            )
        )
    except ValueError as e:
        logger.warning("Business day calculation rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return BusinessDaysResponse(
        start_date=result.start_date,
        end_date=result.end_date,
        calendar_days=result.calendar_days,
        days_between=result.days_between,
        weekend_days=result.weekend_days,
        saturdays=result.weekends_detail.get("saturdays", 0),
        sundays=result.weekends_detail.get("sundays", 0),
        holidays_count=result.holidays_count,
        business_days=result.business_days,
        strategy=result.strategy.value,
        holidays=[holiday_to_dict(h) for h in result.holidays],
    )


@app.get("/days")
async def get_days_between(
    start_date: date = Query(..., description="Start date (inclusive)"),
    end_date: date = Query(..., description="End date (exclusive)"),
):
    """Count calendar days from start_date to end_date, end excluded."""
    return {
        "start_date": start_date,
        "end_date": end_date,
        "days": total_days_between(start_date, end_date),
    }


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(year: int):
    """
    Get all federal holidays observed for a year.

    Args:
        year: Year (e.g., 2024, 2025)
    """
    if year < 1 or year > 9999:
        raise HTTPException(status_code=400, detail="Year must be between 1 and 9999")

    try:
        return [HolidayResponse(**holiday_to_dict(h)) for h in observances_for_year(year)]
    except (ValueError, OverflowError) as e:
        logger.warning("Holiday lookup for %d failed: %s", year, e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/observance/{holiday}/{year}")
async def get_observance(holiday: str, year: int):
    """
    Get the observed date of one holiday.

    Args:
        holiday: Holiday identifier or name (e.g., MEMORIAL_DAY, memorial-day)
        year: Year
    """
    try:
        member = USFederalHoliday.from_name(holiday)
        observed = member.observance_for(year)
    except (ValueError, OverflowError) as e:
        logger.warning("Observance lookup for %r in %d failed: %s", holiday, year, e)
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "holiday": member.name,
        "name": member.display_name,
        "year": year,
        "date": observed,
        "weekday": observed.strftime("%A"),
    }


@app.get("/range", response_model=RangeResponse)
async def get_range(
    start_date: date = Query(..., description="First date of the range"),
    end_date: date = Query(..., description="Last date of the range (inclusive)"),
    kind: RangeKind = Query(RangeKind.WORKDAYS, description="all, weekdays or workdays"),
):
    """Enumerate the dates of a range."""
    if end_date < start_date:
        raise HTTPException(
            status_code=400,
            detail="end_date must be after or equal to start_date",
        )
    if (end_date - start_date).days > MAX_RANGE_DAYS:
        raise HTTPException(
            status_code=400,
            detail=f"Range must not exceed {MAX_RANGE_DAYS} days",
        )

    dates = list(RANGE_BUILDERS[kind](start_date, end_date))
    return RangeResponse(
        kind=kind,
        start_date=start_date,
        end_date=end_date,
        count=len(dates),
        dates=dates,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}
