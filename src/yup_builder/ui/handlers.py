"""
Event handlers for the builder UI.

Each handler takes the current field tuple held in the UI state and returns
the next one, built through ``FieldModel``. They have no gradio dependency
so they can be tested directly.
"""

from typing import Any, Literal

from yup_builder.field_model import FieldModel
from yup_builder.generator import DEFAULT_SCHEMA, generate_schema
from yup_builder.guardrails import check_fields
from yup_builder.models.check_result import CheckResult
from yup_builder.models.field_definitions import SchemaField

Fields = tuple[SchemaField, ...]


def add_field(fields: Fields) -> Fields:
    model = FieldModel(fields)
    model.add_field()
    return model.fields


def remove_field(fields: Fields, index: int) -> Fields:
    """Remove a field, keeping at least one on screen."""
    if len(fields) <= 1:
        return fields
    model = FieldModel(fields)
    model.remove_field(index)
    return model.fields


def update_field(fields: Fields, index: int, key: str, value: Any) -> Fields:
    model = FieldModel(fields)
    model.update_field(index, {key: value})
    return model.fields


def update_conditional(fields: Fields, index: int, key: str, value: Any) -> Fields:
    model = FieldModel(fields)
    model.update_field(index, {"conditional_validation": {key: value}})
    return model.fields


def update_branch(
    fields: Fields,
    index: int,
    part: Literal["then", "otherwise"],
    required: bool,
) -> Fields:
    model = FieldModel(fields)
    model.update_conditional_policy(index, part, {"required": required})
    return model.fields


def add_object_field(fields: Fields, index: int) -> Fields:
    model = FieldModel(fields)
    model.add_object_field(index)
    return model.fields


def update_object_field(
    fields: Fields,
    index: int,
    child_index: int,
    key: str,
    value: Any,
) -> Fields:
    model = FieldModel(fields)
    model.update_object_field(index, child_index, {key: value})
    return model.fields


def remove_object_field(fields: Fields, index: int, child_index: int) -> Fields:
    model = FieldModel(fields)
    model.remove_object_field(index, child_index)
    return model.fields


def number_text(value: float | int | None) -> str:
    """Text form of a ``gr.Number`` value: ``18.0`` becomes ``"18"``, empty becomes ``""``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def number_value(text: str) -> float | None:
    """Initial value for a numeric input; text that is not a number shows as empty."""
    try:
        return float(text)
    except ValueError:
        return None


def update_conditional_number(fields: Fields, index: int, value: float | int | None) -> Fields:
    """Set the comparison value from a numeric input."""
    return update_conditional(fields, index, "value", number_text(value))


def value_is_numeric(fields: Fields, index: int) -> bool:
    """Whether the field's rule compares against a ``number`` field."""
    rule = fields[index].conditional_validation
    return FieldModel(fields).dependent_field_type(rule.depends_on) == "number"


def warnings_markdown(fields: Fields) -> str:
    """Render advisory issues grouped by field as a markdown list, or an empty string."""
    result = check_fields(fields)
    if not result.has_issues:
        return ""
    lines = [f"**Warnings** ({result.issue_count})", ""]
    for name, messages in result.to_issue_dict().items():
        lines.append(f"- **{name}**: " + "; ".join(messages))
    return "\n".join(lines)


def field_issues_text(result: CheckResult, name: str) -> str:
    """Messages for one field card, or an empty string."""
    if not name:
        return ""
    return "\n\n".join(f"*{issue.message}*" for issue in result.get_field_issues(name))


def generate(fields: Fields) -> tuple[str, str, str]:
    """
    Generate the schema for the current fields.

    Returns:
        (schema text kept in state, text for the code view, warnings markdown)
    """
    schema = generate_schema(fields)
    return schema, schema, warnings_markdown(fields)


def clipboard_text(schema: str | None) -> str:
    """Text placed on the clipboard: the last generated schema or the placeholder."""
    return schema or DEFAULT_SCHEMA
