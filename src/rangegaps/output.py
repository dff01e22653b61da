"""Output formatting for gap reports.

Renders a GapReport as a rich console table, JSON or CSV.
"""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rangegaps.models import GapReport

console = Console()


class GapReportFormatter:
    """Formatter for gap reports."""

    def __init__(self, report: GapReport, max_display: int = 20) -> None:
        self.report = report
        self.max_display = max_display

    def to_json(self) -> str:
        """Convert gap report to JSON string."""
        output = {
            "query": self.report.query.notation,
            "total_points": self.report.total_points,
            "points_in_range": self.report.points_in_range,
            "gap_count": self.report.gap_count,
            "total_missing": self.report.total_missing,
            "gaps": [
                {
                    "notation": gap.notation,
                    "start": gap.start.model_dump(),
                    "end": gap.end.model_dump(),
                    "first": gap.first,
                    "last": gap.last,
                    "size": gap.size,
                }
                for gap in self.report.gaps
            ],
        }
        return json.dumps(output, indent=2)

    def to_csv(self) -> str:
        """Convert gap report to CSV string."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["Gap", "First", "Last", "Size"])

        for gap in self.report.gaps:
            writer.writerow(
                [
                    gap.notation,
                    "" if gap.first is None else gap.first,
                    "" if gap.last is None else gap.last,
                    "" if gap.size is None else gap.size,
                ]
            )

        return output.getvalue()

    def render(self, format: str) -> str:
        """Render the report as 'json' or 'csv' text."""
        if format == "json":
            return self.to_json()
        if format == "csv":
            return self.to_csv()
        raise ValueError(f"Cannot render {format!r} as text; use to_text()")

    def save(self, path: Path, format: str) -> Path:
        """Write the report to a file as JSON or CSV and return the path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(self.render(format))
        return path

    def to_text(self, verbose: bool = False) -> None:
        """Output gap report as formatted text."""
        report = self.report

        console.print()
        console.print(f"[bold blue]Gaps in {escape(report.query.notation)}[/bold blue]")
        console.print()
        console.print(f"[dim]Points given:[/dim] {report.total_points}")
        console.print(f"[dim]Points in range:[/dim] {report.points_in_range}")
        if report.coverage_percent is not None:
            color = self._get_coverage_color(report.coverage_percent)
            console.print(f"[dim]Coverage:[/dim] [{color}]{report.coverage_percent:.1f}%[/{color}]")
        console.print()

        if report.is_complete:
            console.print("[green]The range is fully covered - no gaps![/green]")
            return

        missing = report.total_missing
        missing_str = "unbounded" if missing is None else str(missing)
        console.print(
            f"[yellow]Found {report.gap_count} gaps ({missing_str} missing values)[/yellow]"
        )

        table = Table(show_header=True, header_style="bold")
        table.add_column("Gap")
        table.add_column("First", justify="right")
        table.add_column("Last", justify="right")
        table.add_column("Size", justify="right")

        max_display = len(report.gaps) if verbose else self.max_display
        for gap in report.gaps[:max_display]:
            table.add_row(
                escape(gap.notation),
                "-inf" if gap.first is None else str(gap.first),
                "+inf" if gap.last is None else str(gap.last),
                "inf" if gap.size is None else str(gap.size),
            )
        console.print(table)

        remaining = len(report.gaps) - max_display
        if remaining > 0:
            console.print(f"[dim]... and {remaining} more (use --verbose to show all)[/dim]")

    @staticmethod
    def _get_coverage_color(percent: float) -> str:
        """Get color for coverage display."""
        if percent >= 90:
            return "green"
        elif percent >= 70:
            return "yellow"
        return "red"
