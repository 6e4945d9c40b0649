"""API key acquisition."""

from __future__ import annotations

import os
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

ENV_VAR = "OPENAI_API_KEY"
MIN_KEY_LENGTH = 3
MAX_KEY_LENGTH = 200


def validate_secret(value: str) -> Optional[str]:
    """Return an error message for an out-of-bounds value, else None."""
    if len(value) < MIN_KEY_LENGTH:
        return "Value too short"
    if len(value) > MAX_KEY_LENGTH:
        return "Value too long"
    return None


def prompt_secret(prompt: str, console: Optional[Console] = None) -> str:
    """Ask for a masked value until it passes validate_secret()."""
    console = console or Console()
    while True:
        value = Prompt.ask(prompt, console=console, password=True)
        error = validate_secret(value)
        if error is None:
            return value
        console.print(f"[red]{error}[/red]")


def get_openai_key(console: Optional[Console] = None) -> str:
    """
    Get the OpenAI API key from the environment, else prompt for it.

    Args:
        console: Console used for the interactive prompt

    Returns:
        The API key with surrounding whitespace removed (env var only)
    """
    from_env = os.getenv(ENV_VAR)
    if from_env and from_env.strip():
        return from_env.strip()

    return prompt_secret(
        f"Please insert your [yellow]OpenAI[/yellow] API key (or set [grey50]{ENV_VAR}[/grey50])",
        console=console,
    )
