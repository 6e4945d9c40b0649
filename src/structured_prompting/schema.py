"""Strict JSON schema for the salary-by-department response."""

from __future__ import annotations

from typing import Any, Optional

SCHEMA_NAME = "SalaryByDepartmentResponse"
SCHEMA_DESCRIPTION = "Schema for average salary grouped by department"


def get_response_schema() -> dict:
    """
    Build the JSON schema sent with the request.

    Built by hand rather than from the pydantic models: strict mode requires
    every object node, including array items, to list ``required`` and set
    ``additionalProperties`` to false, and the provider rejects the schema
    otherwise.

    Returns:
        A new dict on every call
    """
    return {
        "type": "object",
        "properties": {
            "Items": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "Department": {"type": "string"},
                        "AverageSalary": {"type": "number"},
                    },
                    "required": ["Department", "AverageSalary"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["Items"],
        "additionalProperties": False,
    }


def is_strict_schema(node: Any) -> bool:
    """
    Check that every object node declares ``required`` and disallows extra keys.

    Walks ``properties`` and ``items`` recursively. Non-object nodes are
    accepted as-is.
    """
    if not isinstance(node, dict):
        return False

    if node.get("type") == "object":
        if "required" not in node or node.get("additionalProperties") is not False:
            return False
        properties = node.get("properties", {})
        # strict mode wants every declared property listed as required
        if set(properties) != set(node["required"]):
            return False
        if not all(is_strict_schema(child) for child in properties.values()):
            return False

    if "items" in node:
        return is_strict_schema(node["items"])

    return True


def build_response_format(schema: Optional[dict] = None) -> dict:
    """
    Wrap a schema in the chat-completions ``response_format`` payload.

    Args:
        schema: Schema to send (defaults to get_response_schema())

    Returns:
        Dictionary suitable for ``response_format=``

    Raises:
        ValueError: If the schema would be rejected in strict mode
    """
    schema = schema if schema is not None else get_response_schema()
    if not is_strict_schema(schema):
        raise ValueError(
            "Schema is not strict: every object node needs 'required' "
            "and 'additionalProperties': false"
        )

    return {
        "type": "json_schema",
        "json_schema": {
            "name": SCHEMA_NAME,
            "description": SCHEMA_DESCRIPTION,
            "schema": schema,
            "strict": True,
        },
    }
