"""
Yup Schema Builder: describe form fields, get a Yup validation schema.

Describe fields (name, type, required/nullable flags, bounds, nested
objects, conditional requirements) and generate the equivalent Yup schema
source text.

Simple Usage:
    from yup_builder import FieldModel

    model = FieldModel()
    model.update_field(0, {"name": "email", "type": "string", "required": True})
    print(model.generate())

Direct generation:
    from yup_builder import SchemaField, generate_schema

    schema = generate_schema([
        SchemaField(name="age", type="number", min="18"),
        SchemaField(name="email", required=True, max_length="120"),
    ])

Checks:
    from yup_builder import check_fields

    result = check_fields(model.fields)
    for warning in result.warnings():
        print(warning)

Browser UI:
    from yup_builder.ui.app import launch

    launch()  # http://localhost:7860
"""

from yup_builder.models.field_definitions import (
    ConditionalValidation,
    ObjectField,
    RequirementPolicy,
    SchemaField,
)
from yup_builder.models.field_updates import (
    FieldPatch,
    ObjectFieldPatch,
)
from yup_builder.models.check_result import (
    CheckResult,
    FieldIssue,
)
from yup_builder.field_model import FieldModel
from yup_builder.generator import (
    DEFAULT_SCHEMA,
    generate_schema,
)
from yup_builder.guardrails import (
    check_field_name,
    check_fields,
    dependency_choices,
)

__all__ = [
    # Main interface
    "FieldModel",
    "generate_schema",
    "DEFAULT_SCHEMA",
    # Descriptors
    "SchemaField",
    "ObjectField",
    "ConditionalValidation",
    "RequirementPolicy",
    # Updates
    "FieldPatch",
    "ObjectFieldPatch",
    # Checks
    "CheckResult",
    "FieldIssue",
    "check_field_name",
    "check_fields",
    "dependency_choices",
]

__version__ = "0.1.0"
