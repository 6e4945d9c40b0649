"""OpenAI client LLM implementation."""

from __future__ import annotations

import logging
import os
from typing import Optional

from openai import OpenAI, OpenAIError

from structured_prompting.llm.base import Completion, TokenUsage

logger = logging.getLogger(__name__)


class OpenAIClientLLM:
    """
    OpenAI chat-completions client using a strict JSON schema response format.
    
    Only works if an API key is passed in or OPENAI_API_KEY is set. There is
    no retry and no timeout beyond the SDK defaults.
    """

    def __init__(self, model: str = "gpt-4o-mini", api_key: Optional[str] = None):
        """
        Initialize OpenAI client.
        
        Args:
            model: Model name (default: gpt-4o-mini)
            api_key: API key (defaults to OPENAI_API_KEY env var)
            
        Raises:
            RuntimeError: If the API key is missing
        """
        api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError(
                "OPENAI_API_KEY environment variable not set. "
                "Set it or use MockLLM for testing."
            )
        
        self.client = OpenAI(api_key=api_key, max_retries=0)
        self.model = model

    def complete_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        response_format: dict,
    ) -> Completion:
        """
        Complete a schema-constrained response using the OpenAI API.
        
        Args:
            system_prompt: System-level instructions
            user_prompt: User query/prompt
            response_format: Strict json_schema response format
            
        Returns:
            Completion with the raw message text (may be None or empty)
            
        Raises:
            RuntimeError: On any API failure
        """
        logger.info("Requesting structured completion from %s", self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format=response_format,
            )
        except OpenAIError as e:
            raise RuntimeError(f"OpenAI API error: {e}") from e

        if not response.choices:
            raise RuntimeError("OpenAI API error: response contained no choices")

        message = response.choices[0].message
        if getattr(message, "refusal", None):
            logger.warning("Model refused the request: %s", message.refusal)

        usage = TokenUsage()
        if response.usage is not None:
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
            )

        return Completion(text=message.content, usage=usage)
