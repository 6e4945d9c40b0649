"""Prompt text for the average-salary question."""

from __future__ import annotations

from typing import Optional

QUESTION = "What's the average salary by department?"

DATA_HEADER = "Employee data (JSON):"

SYSTEM_PROMPT = (
    "You are a careful data analyst. Your task: compute the average salary by "
    "department from the provided employee data. "
    "Return ONLY a JSON value that matches the JSON Schema. No prose. No markdown. "
    "No extra keys. "
    "Use the Department string exactly as found in the data. "
    "AverageSalary must be a decimal number."
)


def build_user_prompt(file_content: str, question: str = QUESTION) -> str:
    """Embed the employee data verbatim, followed by the question."""
    return f"{DATA_HEADER}\n{file_content}\n\nQuestion: {question}"


def extract_data_from_prompt(user_prompt: str) -> Optional[str]:
    """Recover the embedded data block from a prompt made by build_user_prompt()."""
    if not user_prompt.startswith(DATA_HEADER):
        return None
    body = user_prompt[len(DATA_HEADER):].lstrip("\n")
    data, sep, _ = body.rpartition("\n\nQuestion: ")
    return data if sep else None
