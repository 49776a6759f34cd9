"""
Output formatting and export functionality.
"""

from federal_workdays.output.formatter import ConsoleFormatter
from federal_workdays.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
