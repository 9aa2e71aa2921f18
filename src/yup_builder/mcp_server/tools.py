"""
MCP tool definitions for the Yup schema builder.

Wraps schema generation and the field checks as MCP tools. The same
functions back the HTTP API of the SSE app.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from yup_builder.config import get_config
from yup_builder.generator import generate_schema
from yup_builder.guardrails import check_fields
from yup_builder.models.field_definitions import SchemaField

logger = logging.getLogger("yup-builder-mcp")


class SchemaRequest(BaseModel):
    """Arguments shared by every tool: the field list to work on."""

    fields: list[SchemaField] = Field(
        ...,
        description="Field descriptors in display order. Keys may be camelCase.",
    )


def mcp_generate_schema(fields: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Generate Yup schema source text from field descriptors.

    Args:
        fields: Field descriptors as JSON objects, for example
            ``[{"name": "email", "type": "string", "required": true}]``.

    Returns:
        ``{"schema": <source text>, "warnings": [<advisory messages>]}``

    Raises:
        pydantic.ValidationError: If a descriptor has invalid values.
    """
    request = SchemaRequest.model_validate({"fields": fields})
    schema = generate_schema(request.fields)
    warnings = check_fields(request.fields).warnings()

    if get_config().verbose_output:
        logger.info(f"Generated schema:\n{schema}")

    return {"schema": schema, "warnings": warnings}


def mcp_check_fields(fields: list[dict[str, Any]]) -> dict[str, Any]:
    """Run the advisory field checks and return the issues found."""
    request = SchemaRequest.model_validate({"fields": fields})
    result = check_fields(request.fields)
    return {
        "has_issues": result.has_issues,
        "issues": [issue.model_dump() for issue in result.issues],
    }


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    input_schema = SchemaRequest.model_json_schema(by_alias=True)
    return [
        {
            "name": "generate_yup_schema",
            "description": """
Generate a Yup validation schema (JavaScript source) from field descriptors.

Each field has a name, a type (string, number, boolean, date, array, object),
required/nullable flags, optional bounds (minLength/maxLength for strings,
min/max for numbers, arrayMin/arrayMax for arrays), nested objectFields for
object and array-of-object fields (arrayType "object"), and an optional
conditionalValidation rule that makes the field required depending on
another field's value.

Fields with an empty name are skipped. The result contains the generated
source under "schema" and advisory "warnings" (never fatal).
""".strip(),
            "inputSchema": input_schema,
        },
        {
            "name": "check_fields",
            "description": """
Check field descriptors for problems that produce questionable Yup code:
invalid or duplicate names, self-referencing or unknown conditional
dependencies, non-numeric or inverted bounds.
""".strip(),
            "inputSchema": input_schema,
        },
    ]
