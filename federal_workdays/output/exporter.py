"""
Export functionality for business-day results and holiday lists.
"""

import csv
import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from federal_workdays.data.schemas import HolidayObservance, WorkdayResult

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports calculation results to various formats."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, prefix: str, extension: str, output_path: Optional[str]) -> Path:
        """Use the given path, or a timestamped file in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"{prefix}_{timestamp}.{extension}"

    def export_json(self, result: WorkdayResult, output_path: Optional[str] = None) -> str:
        """
        Export result to JSON file.

        Args:
            result: WorkdayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("business_days", "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(self.result_to_dict(result), f, indent=2, ensure_ascii=False)

        logger.info("Exported result to %s", file_path)
        return str(file_path)

    def export_csv(self, result: WorkdayResult, output_path: Optional[str] = None) -> str:
        """
        Export result to CSV file.

        Args:
            result: WorkdayResult to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("business_days", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Start Date",
                "End Date",
                "Calendar Days",
                "Days Between",
                "Weekend Days",
                "Saturdays",
                "Sundays",
                "Holidays Count",
                "Business Days",
                "Strategy",
            ])
            writer.writerow([
                result.start_date.isoformat(),
                result.end_date.isoformat(),
                result.calendar_days,
                result.days_between,
                result.weekend_days,
                result.weekends_detail.get("saturdays", 0),
                result.weekends_detail.get("sundays", 0),
                result.holidays_count,
                result.business_days,
                result.strategy.value,
            ])

        logger.info("Exported result to %s", file_path)
        return str(file_path)

    def export_both(self, result: WorkdayResult) -> Tuple[str, str]:
        """
        Export result to both JSON and CSV.

        Returns:
            Tuple of (json_path, csv_path).
        """
        return self.export_json(result), self.export_csv(result)

    def export_holidays_csv(
        self, holidays: List[HolidayObservance], output_path: Optional[str] = None
    ) -> str:
        """
        Export holidays list to CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Observed Date", "Actual Date", "Holiday", "Name"])
            for holiday in holidays:
                writer.writerow([
                    holiday.observed_date.isoformat(),
                    holiday.actual_date.isoformat(),
                    holiday.holiday,
                    holiday.name,
                ])

        return str(file_path)

    def export_dates_csv(self, dates: Iterable[date], output_path: Optional[str] = None) -> str:
        """
        Export a range of dates to CSV file, one row per date.

        Args:
            dates: Dates to export; consumed once.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("dates", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Weekday"])
            for value in dates:
                writer.writerow([value.isoformat(), value.strftime("%A")])

        return str(file_path)

    def result_to_dict(self, result: WorkdayResult) -> dict:
        """
        Convert WorkdayResult to a JSON-serializable dictionary.

        Args:
            result: WorkdayResult to convert.

        Returns:
            Dictionary representation.
        """
        return {
            "start_date": result.start_date.isoformat(),
            "end_date": result.end_date.isoformat(),
            "calculation": {
                "calendar_days": result.calendar_days,
                "days_between": result.days_between,
                "weekend_days": result.weekend_days,
                "weekends_detail": result.weekends_detail,
                "holidays_count": result.holidays_count,
                "business_days": result.business_days,
                "strategy": result.strategy.value,
            },
            "holidays": [holiday_to_dict(h) for h in result.holidays],
            "metadata": {
                "calculation_timestamp": result.calculation_timestamp.isoformat(),
            },
        }


def holiday_to_dict(holiday: HolidayObservance) -> dict:
    """JSON-serializable form of a holiday observance."""
    return {
        "holiday": holiday.holiday,
        "name": holiday.name,
        "date": holiday.observed_date.isoformat(),
        "actual_date": holiday.actual_date.isoformat(),
        "weekday": holiday.observed_date.strftime("%A"),
    }
