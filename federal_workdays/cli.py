"""
CLI interface for the federal workday calculator.
"""

import logging
import sys
from datetime import date, datetime

import click

from federal_workdays.config.manager import ConfigManager, apply_cache_config
from federal_workdays.core.calculator import WorkdayCalculator, total_days_between
from federal_workdays.core.date_range import date_range, federal_work_day_range, weekday_range
from federal_workdays.core.registry import USFederalHoliday, observances_for_year
from federal_workdays.data.schemas import BusinessDayStrategy, Config, RangeKind
from federal_workdays.output.exporter import ResultExporter
from federal_workdays.output.formatter import ConsoleFormatter

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

RANGE_BUILDERS = {
    RangeKind.ALL: date_range,
    RangeKind.WEEKDAYS: weekday_range,
    RangeKind.WORKDAYS: federal_work_day_range,
}


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%m/%d/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD or MM/DD/YYYY"
    )


def load_config(config_path) -> Config:
    """Load configuration, apply its log level and install the observance cache."""
    cfg = ConfigManager(config_path).load_config()
    root = logging.getLogger()
    if root.level != logging.DEBUG:
        root.setLevel(cfg.log_level)
    apply_cache_config(cfg)
    return cfg


config_option = click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
start_option = click.option(
    "--start", "-s",
    required=True,
    help="Start date (YYYY-MM-DD or MM/DD/YYYY)",
)
end_option = click.option(
    "--end", "-e",
    required=True,
    help="End date (YYYY-MM-DD or MM/DD/YYYY)",
)


@click.group()
@click.version_option(version="0.1.0", prog_name="fedwork")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose):
    """Federal Workday Calculator - US federal holidays and business days."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@start_option
@end_option
def days(start, end):
    """Count calendar days between two dates (end excluded)."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)
        formatter.print_days_between(start_date, end_date, total_days_between(start_date, end_date))
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command(name="business-days")
@start_option
@end_option
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in BusinessDayStrategy]),
    default=None,
    help="Counting strategy (default: from config)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "both", "console"]),
    default=None,
    help="Output format (default: from config)",
)
@config_option
def business_days(start, end, strategy, output, format, config):
    """Calculate business days between two dates."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        if end_date < start_date:
            formatter.print_error("End date must not be before start date")
            sys.exit(1)

        cfg = load_config(config)
        format = format or cfg.output_format
        chosen = BusinessDayStrategy(strategy) if strategy else cfg.business_day_strategy

        calculator = WorkdayCalculator(default_strategy=cfg.business_day_strategy)
        result = calculator.calculate_simple(start_date, end_date, strategy=chosen)

        if format in ("console", "both"):
            formatter.print_result(result)

        if format in ("json", "csv", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if format == "json":
                path = exporter.export_json(result, output)
                formatter.print_success(f"Result saved to {path}")
            elif format == "csv":
                path = exporter.export_csv(result, output)
                formatter.print_success(f"Result saved to {path}")
            else:
                json_path, csv_path = exporter.export_both(result)
                formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        logger.exception("Business day calculation failed")
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output CSV file path (optional)",
)
@config_option
def holidays(year, output, config):
    """List federal holidays observed in a year."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = date.today().year

        cfg = load_config(config)
        holiday_list = observances_for_year(year)
        formatter.print_holidays_for_year(year, holiday_list)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_holidays_csv(holiday_list, output)
            formatter.print_success(f"Holidays saved to {path}")

    except Exception as e:
        formatter.print_error(f"Error: {e}")
        sys.exit(1)


@main.command()
@click.argument("holiday")
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year (default: current year)",
)
def observance(holiday, year):
    """Show the observed date of one holiday, e.g. 'memorial-day'."""
    formatter = ConsoleFormatter()

    try:
        if year is None:
            year = date.today().year
        member = USFederalHoliday.from_name(holiday)
        formatter.print_observance(member.display_name, year, member.observance_for(year))
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command(name="range")
@start_option
@end_option
@click.option(
    "--kind", "-k",
    type=click.Choice([k.value for k in RangeKind]),
    default=RangeKind.WORKDAYS.value,
    help="Which dates to list (default: workdays)",
)
@click.option("--count", "count_only", is_flag=True, default=False, help="Only print the number of dates")
@click.option("--limit", "-n", type=int, default=0, help="Print at most this many dates")
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output CSV file path (optional)",
)
def range_command(start, end, kind, count_only, limit, output):
    """Enumerate all days, weekdays or federal work days between two dates."""
    formatter = ConsoleFormatter()

    try:
        kind = RangeKind(kind)
        dates = RANGE_BUILDERS[kind](parse_date(start), parse_date(end))

        if count_only:
            formatter.console.print(str(dates.count()))
        else:
            formatter.print_range(kind, dates, limit=limit)

        if output:
            path = ResultExporter().export_dates_csv(dates, output)
            formatter.print_success(f"Dates saved to {path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@config_option
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_config(config)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "federal_workdays.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
