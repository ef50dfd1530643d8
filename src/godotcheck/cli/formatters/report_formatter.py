"""Human readable and JSON rendering of check reports."""

from __future__ import annotations

from rich.markup import escape

from godotcheck.checker import CheckReport
from godotcheck.cli.formatters.base import OutputFormat, OutputFormatter
from godotcheck.cli.formatters.json_formatter import JsonFormatter
from godotcheck.parser.models import Problem


class ReportFormatter(OutputFormatter[CheckReport]):
    """Formatter for project check reports."""

    SECTIONS = (
        ("general_problems", "General problems"),
        ("script_problems", "Script problems"),
        ("scene_problems", "Scene problems"),
    )

    def format(
        self, data: CheckReport, format_type: OutputFormat = OutputFormat.TEXT
    ) -> str:
        """Format a report as rich text or JSON."""
        if format_type == OutputFormat.JSON:
            return JsonFormatter(self.console).format(data)
        return self._format_text(data)

    def _format_text(self, report: CheckReport) -> str:
        lines = [
            f"[bold cyan]godotcheck[/bold cyan] {escape(str(report.project_root))}",
            f"Checked {len(report.scripts)} scripts and {len(report.scenes)} scenes",
        ]

        for attribute, title in self.SECTIONS:
            problems: list[Problem] = getattr(report, attribute)
            lines.append("")
            if not problems:
                lines.append(f"[bold]{title}[/bold]: [green]none[/green]")
                continue
            lines.append(f"[bold]{title}[/bold] ({len(problems)}):")
            lines.extend(
                f"  [red]✗[/red] {escape(problem.message)}" for problem in problems
            )

        lines.append("")
        if report.has_problems:
            lines.append(f"[red]Found {report.total_problems} problems[/red]")
        else:
            lines.append("[green]No problems found[/green]")
        return "\n".join(lines)
