"""Mock LLM that answers the salary question offline."""

from __future__ import annotations

import json
from collections import defaultdict
from decimal import Decimal, InvalidOperation

from structured_prompting.data import employee_records
from structured_prompting.llm.base import Completion, TokenUsage
from structured_prompting.models import quantize_cents
from structured_prompting.prompts import extract_data_from_prompt


def _field(record: dict, name: str):
    """Case-insensitive key lookup."""
    for key, value in record.items():
        if isinstance(key, str) and key.lower() == name.lower():
            return value
    return None


def _estimate_tokens(text: str) -> int:
    # Roughly 4 tokens per 3 words for English prose
    return (len(text.split()) * 4 + 2) // 3


class MockLLM:
    """
    Mock LLM that computes average salary by department from the prompt data.

    Deterministic and needs no API key. Useful for testing and demos.
    """

    def __init__(self, fenced: bool = False, model_name: str = "mock-llm-v1"):
        """
        Initialize mock LLM.

        Args:
            fenced: Wrap the JSON in a ```json block, like a non-compliant model
            model_name: Identifier shown in output
        """
        self.fenced = fenced
        self.model = model_name

    def complete_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        response_format: dict,
    ) -> Completion:
        """
        Generate a schema-shaped JSON answer.

        Records missing a department or a numeric salary are skipped. If the
        prompt carries no parseable data the answer holds no items.

        Args:
            system_prompt: System prompt (only used for token estimate)
            user_prompt: User prompt built by build_user_prompt()
            response_format: Expected response format (unused)

        Returns:
            Completion with JSON text
        """
        totals: dict[str, Decimal] = defaultdict(Decimal)
        counts: dict[str, int] = defaultdict(int)

        data_text = extract_data_from_prompt(user_prompt)
        try:
            records = employee_records(json.loads(data_text)) if data_text else []
        except (ValueError, RecursionError):
            records = []

        for record in records:
            department = _field(record, "department")
            salary = _field(record, "salary")
            if not isinstance(department, str) or not department:
                continue
            if isinstance(salary, bool) or not isinstance(salary, (int, float)):
                continue
            try:
                amount = Decimal(str(salary))
            except InvalidOperation:
                continue
            # json.loads accepts Infinity and NaN
            if not amount.is_finite():
                continue
            totals[department] += amount
            counts[department] += 1

        items = [
            {
                "Department": dept,
                "AverageSalary": float(quantize_cents(totals[dept] / counts[dept])),
            }
            for dept in totals
        ]
        text = json.dumps({"Items": items})
        if self.fenced:
            text = f"```json\n{text}\n```"

        usage = TokenUsage(
            prompt_tokens=_estimate_tokens(system_prompt) + _estimate_tokens(user_prompt),
            completion_tokens=_estimate_tokens(text),
        )
        return Completion(text=text, usage=usage)
