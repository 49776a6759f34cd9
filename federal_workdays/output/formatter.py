"""
Console output formatting using Rich.
"""

from datetime import date
from typing import Iterable, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from federal_workdays.data.schemas import HolidayObservance, RangeKind, WorkdayResult

DATE_FORMAT = "%Y-%m-%d"


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Console = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_result(self, result: WorkdayResult) -> None:
        """
        Print a business-day calculation result.

        Args:
            result: WorkdayResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Business Day Calculation[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white")

        summary_table.add_row(
            "Period:",
            f"{result.start_date.strftime(DATE_FORMAT)} - {result.end_date.strftime(DATE_FORMAT)}",
        )
        summary_table.add_row("Strategy:", result.strategy.value.replace("_", " "))

        self.console.print(Panel(summary_table, title="[bold]Period[/bold]"))

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=20)
        calc_table.add_column("Value", style="white", justify="right", width=10)

        calc_table.add_row("Calendar Days:", str(result.calendar_days))
        calc_table.add_row(
            "Weekend Days:",
            f"- {result.weekend_days} ({result.weekends_detail.get('saturdays', 0)} Sat, "
            f"{result.weekends_detail.get('sundays', 0)} Sun)",
        )
        calc_table.add_row("Federal Holidays:", f"- {result.holidays_count}")
        calc_table.add_row("", "─" * 15)
        calc_table.add_row(
            Text("Business Days:", style="bold green"),
            Text(str(result.business_days), style="bold green"),
        )

        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))

        if result.holidays:
            self.print_holidays(result.holidays)

        self.console.print()

    def print_holidays(self, holidays: List[HolidayObservance], title: str = "Holidays in Period") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Observed", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=10)
        holiday_table.add_column("Name", style="white")
        holiday_table.add_column("Actual", style="dim", width=12)

        for holiday in holidays:
            holiday_table.add_row(
                holiday.observed_date.strftime(DATE_FORMAT),
                holiday.observed_date.strftime("%A"),
                holiday.name,
                holiday.actual_date.strftime(DATE_FORMAT) if holiday.is_shifted else "",
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, holidays: List[HolidayObservance]) -> None:
        """
        Print all federal holidays observed for a year.

        Args:
            year: Year.
            holidays: List of holidays.
        """
        self.console.print()
        self.console.rule(f"[bold blue]US Federal Holidays {year}[/bold blue]")
        self.console.print()
        self.print_holidays(holidays, title="Observed Holidays")
        self.console.print()

    def print_observance(self, name: str, year: int, observed: date) -> None:
        """Print the observance date of a single holiday."""
        self.console.print(
            f"[cyan]{name}[/cyan] {year}: [bold]{observed.strftime(DATE_FORMAT)}[/bold] "
            f"({observed.strftime('%A')})"
        )

    def print_days_between(self, start: date, end: date, days: int) -> None:
        """Print a calendar-day count."""
        self.console.print(
            f"Days from {start.strftime(DATE_FORMAT)} to {end.strftime(DATE_FORMAT)} "
            f"(end excluded): [bold green]{days}[/bold green]"
        )

    def print_range(self, kind: RangeKind, dates: Iterable[date], limit: int = 0) -> int:
        """
        Print the dates of a range, one per line.

        Args:
            kind: Which range was enumerated.
            dates: Dates to print.
            limit: Stop after this many dates; 0 prints all.

        Returns:
            Number of dates printed.
        """
        printed = 0
        for value in dates:
            if limit and printed >= limit:
                self.console.print("[dim]...[/dim]")
                break
            self.console.print(f"{value.strftime(DATE_FORMAT)}  [dim]{value.strftime('%a')}[/dim]")
            printed += 1
        self.console.print(f"[bold]{printed}[/bold] {kind.value} shown")
        return printed

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
