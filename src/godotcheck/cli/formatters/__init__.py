"""Output formatters for godotcheck CLI."""

from godotcheck.cli.formatters.base import OutputFormat, OutputFormatter
from godotcheck.cli.formatters.json_formatter import JsonFormatter
from godotcheck.cli.formatters.report_formatter import ReportFormatter

__all__ = ["JsonFormatter", "OutputFormat", "OutputFormatter", "ReportFormatter"]
