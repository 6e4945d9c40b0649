"""Base LLM interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol


@dataclass(frozen=True)
class TokenUsage:
    """Token accounting reported by the provider."""

    prompt_tokens: int = 0
    completion_tokens: int = 0


@dataclass(frozen=True)
class Completion:
    """Raw completion text plus usage. Text is not parsed here."""

    text: Optional[str]
    usage: TokenUsage = field(default_factory=TokenUsage)


class LLM(Protocol):
    """Protocol for LLM providers."""

    def complete_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        response_format: dict,
    ) -> Completion:
        """
        Request a completion constrained by a strict JSON schema.
        
        Args:
            system_prompt: System-level instructions
            user_prompt: User query/prompt
            response_format: Chat-completions response_format payload
            
        Returns:
            Completion holding the model's raw text
        """
        ...
