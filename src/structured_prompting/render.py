"""Console rendering of a prompt run."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

import pyfiglet
from rich import box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from structured_prompting.models import SalaryByDepartment, quantize_cents
from structured_prompting.orchestrator import PromptRun

FAILURE_MESSAGE = "Could not parse a valid structured response."


def format_salary(value: Decimal) -> str:
    """Two decimal places, midpoints rounded away from zero."""
    return str(quantize_cents(value))


def sort_rows(rows: Iterable[SalaryByDepartment]) -> list[SalaryByDepartment]:
    """Order rows by department, ignoring case."""
    return sorted(rows, key=lambda r: r.department.casefold())


def build_table(rows: Iterable[SalaryByDepartment]) -> Table:
    table = Table(box=box.ASCII, expand=True)
    table.add_column("Department")
    table.add_column("AverageSalary", justify="right")
    for row in sort_rows(rows):
        # Text avoids markup interpretation of department names like "[R&D]"
        table.add_row(Text(row.department), format_salary(row.average_salary))
    return table


def banner_text(width: int = 80) -> str:
    """ASCII-art title, trailing blank lines removed."""
    return pyfiglet.figlet_format("Structured Output", width=width).rstrip()


def render_header(console: Console) -> None:
    console.print(
        Group(
            Align.center(Text(banner_text(console.width), style="red")),
            Align.center(Panel("[red]Average salary by department[/red]", expand=False)),
        )
    )
    console.print()


def render_run(console: Console, run: PromptRun) -> None:
    """Print question, raw model text, parsed table (or failure) and metrics."""
    console.print()
    console.print("[green]USER:[/green]")
    console.print(Text(run.question))

    console.print()
    console.print("[green]MODEL (raw JSON):[/green]")
    console.print(Text(run.raw_text or ""))

    console.print()
    console.print("[green]RESULT (parsed):[/green]")
    rows = run.rows
    if rows is None:
        console.print(f"[red]{FAILURE_MESSAGE}[/red]")
    else:
        console.print(build_table(rows))

    console.print()
    console.print(
        f"[grey50]Tokens: prompt={run.usage.prompt_tokens}, "
        f"completion={run.usage.completion_tokens}. "
        f"Duration={run.duration_ms}ms.[/grey50]"
    )
