"""
MCP Server for the Federal Workday Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the business-day and federal holiday functionality to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import os
from datetime import date
from typing import Optional

from mcp.server.fastmcp import FastMCP

from federal_workdays.config.manager import ConfigManager, apply_cache_config
from federal_workdays.core.calculator import WorkdayCalculator
from federal_workdays.core.registry import USFederalHoliday, observances_for_year
from federal_workdays.data.schemas import BusinessDayStrategy
from federal_workdays.output.exporter import ResultExporter, holiday_to_dict

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

calculator = WorkdayCalculator(default_strategy=config.business_day_strategy)


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Federal Workday Calculator", host=host, port=port)

    @mcp.tool()
    def calculate_business_days(
        start_date: str,
        end_date: str,
        strategy: Optional[str] = None,
    ) -> dict:
        """
        Calculate US business days between two dates.

        Business days are Monday to Friday excluding observed US federal
        holidays. Both dates are included; the same start and end date
        yields 0.

        Args:
            start_date: Start date in format YYYY-MM-DD (e.g., "2018-01-01")
            end_date: End date in format YYYY-MM-DD (e.g., "2018-12-31")
            strategy: "set_difference" (default) or "closed_form"

        Returns:
            Dictionary with business_days, calendar_days, weekend_days,
            holidays_count and the list of holidays in the period.

        Example:
            >>> calculate_business_days("2018-01-01", "2018-12-31")
        """
        try:
            start = date.fromisoformat(start_date)
            end = date.fromisoformat(end_date)
        except ValueError as e:
            return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

        if end < start:
            return {"error": "end_date must be after or equal to start_date"}

        try:
            chosen = BusinessDayStrategy(strategy) if strategy else None
            result = calculator.calculate_simple(start, end, strategy=chosen)
            return ResultExporter().result_to_dict(result)
        except ValueError as e:
            return {"error": str(e)}

    @mcp.tool()
    def get_holidays(year: int) -> dict:
        """
        Get all US federal holidays observed in a year.

        Observed dates account for the weekend rule: a holiday on Saturday is
        observed the Friday before, one on Sunday the Monday after.

        Args:
            year: Year to get holidays for (e.g., 2026)

        Returns:
            Dictionary with the year, holiday count and holidays with observed
            date, actual date and weekday.
        """
        if year < 1 or year > 9999:
            return {"error": "Year must be between 1 and 9999"}

        try:
            holidays = observances_for_year(year)
        except (ValueError, OverflowError) as e:
            return {"error": str(e)}

        return {
            "year": year,
            "holiday_count": len(holidays),
            "holidays": [holiday_to_dict(h) for h in holidays],
        }

    @mcp.tool()
    def list_federal_holidays() -> dict:
        """
        List the ten US federal holidays (5 U.S.C. 6103(a)) with their identifiers.

        Returns:
            Dictionary with the holidays in calendar order, each with
            its identifier (e.g., "MEMORIAL_DAY") and display name.
        """
        return {
            "count": len(USFederalHoliday),
            "holidays": [
                {"code": holiday.name, "name": holiday.display_name}
                for holiday in USFederalHoliday
            ],
        }

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Federal Workday Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    apply_cache_config(config)
    mcp = create_mcp_server(host=args.host, port=args.port)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
