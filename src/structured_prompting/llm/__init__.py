"""LLM interface modules."""

from .base import LLM, Completion, TokenUsage
from .mock import MockLLM
from .openai_client import OpenAIClientLLM

__all__ = ["LLM", "Completion", "TokenUsage", "MockLLM", "OpenAIClientLLM"]
