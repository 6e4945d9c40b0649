"""Decoding of model text into a typed salary response."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from pydantic import ValidationError

from structured_prompting.models import SalaryByDepartmentResponse
from structured_prompting.sanitize import sanitize_model_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    """Text decoded into a response (which may still hold zero items)."""

    value: SalaryByDepartmentResponse


@dataclass(frozen=True)
class Invalid:
    """Text that could not be decoded. Carries no failure detail."""


DecodeOutcome = Union[Ok, Invalid]


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant: {name}")


def decode_structured_response(text: Optional[str]) -> DecodeOutcome:
    """
    Parse sanitized text and map it onto SalaryByDepartmentResponse.

    Field names bind case-insensitively. Blank text, malformed JSON and
    shape mismatches all come back as Invalid; nothing is raised.

    Args:
        text: Output of sanitize_model_text()

    Returns:
        Ok with the typed response, or Invalid
    """
    if text is None:
        logger.debug("No usable text to decode")
        return Invalid()

    try:
        data = json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.debug("Malformed JSON in model response: %s", e)
        return Invalid()

    try:
        response = SalaryByDepartmentResponse.model_validate(data)
    except ValidationError as e:
        logger.debug("Model response does not match schema: %s", e)
        return Invalid()

    return Ok(response)


def try_decode(raw: Optional[str]) -> DecodeOutcome:
    """Sanitize raw model text, then decode it."""
    return decode_structured_response(sanitize_model_text(raw))
