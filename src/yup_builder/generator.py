"""
Yup schema source generator.

Turns an ordered list of field descriptors into the text of a Yup
``object`` schema module. The output is plain text: nothing is parsed or
validated, and malformed input (non-numeric bounds, unknown or
self-referencing dependencies, duplicate names) is written out as-is.
"""

import json
import logging
from typing import Sequence

from yup_builder.models.field_definitions import (
    ConditionalValidation,
    ObjectArrayShape,
    ObjectField,
    RequirementPolicy,
    ScalarArrayShape,
    ScalarShape,
    SchemaField,
)

logger = logging.getLogger(__name__)

SCHEMA_PREAMBLE = "import * as Yup from 'yup';\n\nconst validationSchema = Yup.object({\n"
SCHEMA_POSTAMBLE = "});\n\nexport default validationSchema;"

DEFAULT_SCHEMA = SCHEMA_PREAMBLE + SCHEMA_POSTAMBLE

# Comparison conditions whose operand is always emitted bare
_COMPARISON_OPERATORS = {
    "greaterThan": ">",
    "lessThan": "<",
    "greaterThanOrEqual": ">=",
    "lessThanOrEqual": "<=",
}

_BOUND_MESSAGES = {
    "string": ("Minimum length is {}", "Maximum length is {}"),
    "number": ("Minimum value is {}", "Maximum value is {}"),
}


def _validator(type_name: str) -> str:
    return f"Yup.{type_name}()"


def _required_clause(required: bool, message: str) -> str:
    if required:
        return f'.required("{message}")'
    return ".notRequired()"


def generate_object_fields(children: Sequence[ObjectField]) -> str:
    """Emit one comma-terminated line per nested property."""
    lines = []
    for child in children:
        suffix = ".required()" if child.required else ".notRequired()"
        lines.append(f"    {child.name}: {_validator(child.type)}{suffix},\n")
    return "".join(lines)


def _count_clauses(name: str, min_items: str, max_items: str) -> str:
    clauses = ""
    if min_items:
        clauses += f'.min({min_items}, "Minimum {name} count is {min_items}")'
    if max_items:
        clauses += f'.max({max_items}, "Maximum {name} count is {max_items}")'
    return clauses


def _base_validator(field: SchemaField) -> str:
    shape = field.shape()

    if isinstance(shape, ScalarShape):
        return _validator(shape.type)
    if isinstance(shape, ObjectArrayShape):
        body = generate_object_fields(shape.children)
        return (
            "Yup.array().of(Yup.object({\n"
            + body
            + "  }))"
            + _count_clauses(field.name, shape.min_items, shape.max_items)
        )
    if isinstance(shape, ScalarArrayShape):
        return f"Yup.array().of({_validator(shape.item_type)})" + _count_clauses(
            field.name, shape.min_items, shape.max_items
        )
    # ObjectShape
    return "Yup.object({\n" + generate_object_fields(shape.children) + "  })"


def format_literal(value: str, numeric: bool) -> str:
    """Bare literal for numeric dependencies, JSON string literal otherwise."""
    if numeric:
        return value
    return json.dumps(value, ensure_ascii=False)


def _condition_test(rule: ConditionalValidation, numeric: bool) -> str:
    condition = rule.condition
    if condition == "equals":
        return format_literal(rule.value, numeric)
    if condition == "notEquals":
        return f"(val) => val !== {format_literal(rule.value, numeric)}"
    if condition == "defined":
        return "(val) => val !== undefined && val !== null && val !== ''"
    if condition == "undefined":
        return "(val) => val === undefined || val === null || val === ''"
    return f"(val) => val {_COMPARISON_OPERATORS[condition]} {rule.value}"


def _branch(policy: RequirementPolicy, message: str) -> str:
    return "(schema) => schema" + _required_clause(policy.required, message)


def _is_numeric_dependency(name: str, fields: Sequence[SchemaField]) -> bool:
    for candidate in fields:
        if candidate.name == name:
            return candidate.type == "number"
    return False


def _when_clause(field: SchemaField, fields: Sequence[SchemaField]) -> str:
    rule = field.conditional_validation
    numeric = _is_numeric_dependency(rule.depends_on, fields)
    message = field.required_message
    return (
        f".when('{rule.depends_on}', {{\n"
        f"    is: {_condition_test(rule, numeric)},\n"
        f"    then: {_branch(rule.then, message)},\n"
        f"    otherwise: {_branch(rule.otherwise, message)}\n"
        "  })"
    )


def _bound_clauses(shape: ScalarShape) -> str:
    if shape.type not in _BOUND_MESSAGES:
        return ""
    min_message, max_message = _BOUND_MESSAGES[shape.type]
    clauses = ""
    if shape.lower:
        clauses += f'.min({shape.lower}, "{min_message.format(shape.lower)}")'
    if shape.upper:
        clauses += f'.max({shape.upper}, "{max_message.format(shape.upper)}")'
    return clauses


def generate_field(field: SchemaField, fields: Sequence[SchemaField]) -> str:
    """
    Emit the schema entry for one named field, without the trailing separator.

    Args:
        field: The field to emit.
        fields: The full field list, used to resolve conditional dependencies.
    """
    entry = f"  {field.name}: " + _base_validator(field)

    if field.nullable:
        entry += ".nullable()"

    if field.conditional_validation.is_active:
        entry += _when_clause(field, fields)
    else:
        entry += _required_clause(field.required, field.required_message)

    shape = field.shape()
    if isinstance(shape, ScalarShape):
        entry += _bound_clauses(shape)

    return entry


def generate_schema(fields: Sequence[SchemaField]) -> str:
    """
    Generate Yup schema source text for a field list.

    Fields without a name are skipped. The function is pure: the same
    list always produces the same text, and the list is not modified.

    Args:
        fields: Field descriptors in display order.

    Returns:
        A complete JavaScript module exporting ``validationSchema``.

    Example:
        >>> print(generate_schema([SchemaField(name="email", required=True)]))
        import * as Yup from 'yup';
        <BLANKLINE>
        const validationSchema = Yup.object({
          email: Yup.string().required("email is required"),
        });
        <BLANKLINE>
        export default validationSchema;
    """
    body = "".join(
        generate_field(field, fields) + ",\n" for field in fields if field.name
    )
    logger.debug(f"Generated schema for {len(fields)} field(s)")
    return SCHEMA_PREAMBLE + body + SCHEMA_POSTAMBLE
