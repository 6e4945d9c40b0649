"""Cleanup of model text before JSON parsing."""

from __future__ import annotations

from typing import Optional

FENCE = "```"


def sanitize_model_text(raw: Optional[str]) -> Optional[str]:
    """
    Strip a Markdown code fence a model may wrap around its JSON.

    With a strict response format the text should already be pure JSON; this
    only guards against models that fence it anyway.

    Args:
        raw: Text returned by the model

    Returns:
        Cleaned text, or None if there is no usable text
    """
    if raw is None or not raw.strip():
        return None

    text = raw.strip()
    if text.startswith(FENCE):
        # Drop the opening fence line along with any language tag on it
        newline = text.find("\n")
        if newline >= 0:
            text = text[newline + 1:]
        text = text.replace(FENCE, "").strip()

    return text
