"""Loading of the employee data file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from structured_prompting.models import Employee


def read_data_file(path: Path) -> str:
    """
    Read the employee data file as plain text.

    The text is embedded in the prompt as-is; it is not parsed here.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    return path.read_text(encoding="utf-8")


def employee_records(data: Any) -> list[dict]:
    """Return the list of raw records from a top-level array or {"employees": [...]}."""
    if isinstance(data, dict):
        for key, value in data.items():
            if isinstance(key, str) and key.lower() == "employees":
                data = value
                break
        else:
            raise ValueError("Expected an 'employees' array in the data object")

    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of employee records")
    return [r for r in data if isinstance(r, dict)]


def load_employees(text: str) -> list[Employee]:
    """
    Validate the employee data against the Employee model.

    Args:
        text: Raw file content

    Returns:
        Parsed employees

    Raises:
        ValueError: If the text is not valid JSON or a record fails validation
    """
    data = json.loads(text)
    return [Employee.model_validate(r) for r in employee_records(data)]
