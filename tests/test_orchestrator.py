"""Tests for the structured prompter."""

from __future__ import annotations

from decimal import Decimal

import pytest

from structured_prompting.decode import Invalid, Ok
from structured_prompting.llm.base import Completion, TokenUsage
from structured_prompting.orchestrator import StructuredPrompter
from structured_prompting.prompts import QUESTION, SYSTEM_PROMPT
from structured_prompting.schema import SCHEMA_NAME, get_response_schema


class CannedLLM:
    """LLM that returns fixed text and records what it was sent."""

    def __init__(self, text, usage=None):
        self.text = text
        self.usage = usage or TokenUsage(prompt_tokens=120, completion_tokens=30)
        self.calls = []

    def complete_structured(self, system_prompt, user_prompt, response_format):
        self.calls.append((system_prompt, user_prompt, response_format))
        return Completion(text=self.text, usage=self.usage)


class TestStructuredPrompter:
    """Tests for StructuredPrompter."""

    def test_sends_schema_and_prompts(self):
        """Test one call carrying the strict schema and embedded data."""
        llm = CannedLLM('{"Items":[]}')
        StructuredPrompter(llm).run('[{"Department": "Eng"}]')

        assert len(llm.calls) == 1
        system_prompt, user_prompt, response_format = llm.calls[0]
        assert system_prompt == SYSTEM_PROMPT
        assert '[{"Department": "Eng"}]' in user_prompt
        assert user_prompt.endswith(f"Question: {QUESTION}")
        assert response_format["json_schema"]["name"] == SCHEMA_NAME
        assert response_format["json_schema"]["schema"] == get_response_schema()
        assert response_format["json_schema"]["strict"] is True

    def test_successful_run(self):
        """Test a valid answer decodes into rows."""
        llm = CannedLLM(
            '{"Items":[{"Department":"Engineering","AverageSalary":95000.5},'
            '{"Department":"Sales","AverageSalary":72000}]}'
        )
        run = StructuredPrompter(llm).run("[]")

        assert isinstance(run.outcome, Ok)
        assert len(run.rows) == 2
        assert run.rows[0].average_salary == Decimal("95000.5")
        assert run.usage == TokenUsage(prompt_tokens=120, completion_tokens=30)
        assert run.duration_ms >= 0
        assert run.question == QUESTION

    def test_fenced_answer(self):
        llm = CannedLLM('```json\n{"Items":[{"Department":"Eng","AverageSalary":1}]}\n```')
        run = StructuredPrompter(llm).run("[]")
        assert [r.department for r in run.rows] == ["Eng"]

    @pytest.mark.parametrize("text", [None, "", "{not json", '{"Items":[{"Department":"Eng","AverageSalary":"high"}]}'])
    def test_undecodable_answer(self, text):
        """Test decode failures are reported, not raised."""
        run = StructuredPrompter(CannedLLM(text)).run("[]")
        assert isinstance(run.outcome, Invalid)
        assert run.rows is None
        assert run.raw_text == text

    def test_empty_result_has_no_rows(self):
        """Test zero entries decode as Ok but yield no rows."""
        run = StructuredPrompter(CannedLLM('{"Items":[]}')).run("[]")
        assert isinstance(run.outcome, Ok)
        assert run.rows is None

    def test_provider_error_propagates(self):
        """Test provider errors are not swallowed or retried."""

        class FailingLLM:
            def __init__(self):
                self.calls = 0

            def complete_structured(self, system_prompt, user_prompt, response_format):
                self.calls += 1
                raise RuntimeError("OpenAI API error: boom")

        llm = FailingLLM()
        with pytest.raises(RuntimeError, match="boom"):
            StructuredPrompter(llm).run("[]")
        assert llm.calls == 1

    def test_rejects_loose_schema(self):
        with pytest.raises(ValueError):
            StructuredPrompter(CannedLLM("{}"), schema={"type": "object"})
