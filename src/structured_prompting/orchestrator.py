"""One structured request/response cycle against an LLM."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from structured_prompting.decode import DecodeOutcome, Ok, try_decode
from structured_prompting.llm.base import LLM, TokenUsage
from structured_prompting.models import SalaryByDepartment
from structured_prompting.prompts import QUESTION, SYSTEM_PROMPT, build_user_prompt
from structured_prompting.schema import build_response_format

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromptRun:
    """Everything a single run produced."""

    question: str
    raw_text: Optional[str]
    outcome: DecodeOutcome
    usage: TokenUsage
    duration_ms: int

    @property
    def rows(self) -> Optional[list[SalaryByDepartment]]:
        """Decoded entries, or None when there is nothing usable to show."""
        if isinstance(self.outcome, Ok) and self.outcome.value.items:
            return self.outcome.value.items
        return None


class StructuredPrompter:
    """
    Sends the salary question with a strict schema and decodes the answer.
    """

    def __init__(self, llm: LLM, schema: Optional[dict] = None):
        """
        Initialize prompter.

        Args:
            llm: LLM provider
            schema: Response schema (defaults to the salary-by-department schema)

        Raises:
            ValueError: If the schema is not strict
        """
        self.llm = llm
        self.response_format = build_response_format(schema)

    def build_messages(self, file_content: str) -> tuple[str, str]:
        """Return the (system, user) prompt pair."""
        return SYSTEM_PROMPT, build_user_prompt(file_content)

    def run(self, file_content: str) -> PromptRun:
        """
        Ask the model once and decode its answer.

        Provider errors propagate; decode failures do not.

        Args:
            file_content: Employee data text to embed in the prompt

        Returns:
            PromptRun with raw text, decode outcome, usage and timing
        """
        system_prompt, user_prompt = self.build_messages(file_content)

        started = time.perf_counter()
        completion = self.llm.complete_structured(system_prompt, user_prompt, self.response_format)
        duration_ms = int((time.perf_counter() - started) * 1000)

        outcome = try_decode(completion.text)
        if not isinstance(outcome, Ok):
            logger.info("Model response could not be decoded")

        return PromptRun(
            question=QUESTION,
            raw_text=completion.text,
            outcome=outcome,
            usage=completion.usage,
            duration_ms=duration_ms,
        )
