"""Script to ask an LLM for average salary by department with a strict schema."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from structured_prompting.config import get_settings
from structured_prompting.credentials import get_openai_key
from structured_prompting.data import load_employees, read_data_file
from structured_prompting.llm.base import LLM
from structured_prompting.llm.mock import MockLLM
from structured_prompting.llm.openai_client import OpenAIClientLLM
from structured_prompting.log import setup_logging
from structured_prompting.orchestrator import StructuredPrompter
from structured_prompting.render import render_header, render_run

app = typer.Typer(add_completion=False)
console = Console()


def _get_llm(mock: bool, fenced: bool, model: str) -> LLM:
    """Get LLM instance (mock, or OpenAI with a key from env or prompt)."""
    if mock:
        return MockLLM(fenced=fenced)
    return OpenAIClientLLM(model=model, api_key=get_openai_key(console))


@app.command()
def main(
    data_file: Optional[Path] = typer.Option(None, help="Employee data JSON (default: DATA_FILE or data/complex_data.json)"),
    model: Optional[str] = typer.Option(None, help="OpenAI model (default: OPENAI_MODEL or gpt-4o-mini)"),
    mock: bool = typer.Option(False, help="Use the offline mock LLM instead of OpenAI"),
    fenced: bool = typer.Option(False, help="Mock only: wrap the answer in a ```json fence"),
    check_data: bool = typer.Option(False, help="Validate employee records before sending"),
    log_level: Optional[str] = typer.Option(None, help="Log level (default: LOG_LEVEL or WARNING)"),
):
    """
    Ask for the average salary by department and show the parsed result.
    """
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    data_path = data_file or settings.data_file
    try:
        file_content = read_data_file(data_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if check_data:
        try:
            employees = load_employees(file_content)
        except ValueError as e:
            console.print(f"[red]Invalid employee data: {e}[/red]")
            raise typer.Exit(1)
        console.print(f"[dim]Validated {len(employees)} employee records[/dim]")

    render_header(console)

    try:
        llm = _get_llm(mock, fenced, model or settings.openai_model)
        run = StructuredPrompter(llm).run(file_content)
    except RuntimeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    # A response that cannot be decoded is reported, not treated as a failure exit
    render_run(console, run)


if __name__ == "__main__":
    app()
