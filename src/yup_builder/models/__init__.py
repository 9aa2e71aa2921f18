"""
Data models for the Yup schema builder.

This module contains Pydantic models for:
- Field descriptors and their tagged shapes
- Partial updates (patches) applied to descriptors
- Advisory check results
"""

from yup_builder.models.field_definitions import (
    ARRAY_ITEM_TYPES,
    CONDITION_LABELS,
    FIELD_TYPES,
    SCALAR_TYPES,
    VALUE_CONDITIONS,
    ArrayItemType,
    ConditionalValidation,
    ConditionType,
    FieldShape,
    FieldType,
    ObjectArrayShape,
    ObjectField,
    ObjectShape,
    RequirementPolicy,
    ScalarArrayShape,
    ScalarShape,
    ScalarType,
    SchemaField,
    default_fields,
)
from yup_builder.models.field_updates import (
    ConditionalPatch,
    FieldPatch,
    ObjectFieldPatch,
    PolicyPatch,
    apply_field_patch,
    apply_object_field_patch,
)
from yup_builder.models.check_result import (
    CheckResult,
    FieldIssue,
)

__all__ = [
    # Descriptors
    "SchemaField",
    "ObjectField",
    "ConditionalValidation",
    "RequirementPolicy",
    "default_fields",
    # Type vocabularies
    "FieldType",
    "ScalarType",
    "ArrayItemType",
    "ConditionType",
    "FIELD_TYPES",
    "SCALAR_TYPES",
    "ARRAY_ITEM_TYPES",
    "CONDITION_LABELS",
    "VALUE_CONDITIONS",
    # Shapes
    "FieldShape",
    "ScalarShape",
    "ScalarArrayShape",
    "ObjectArrayShape",
    "ObjectShape",
    # Patches
    "FieldPatch",
    "ObjectFieldPatch",
    "ConditionalPatch",
    "PolicyPatch",
    "apply_field_patch",
    "apply_object_field_patch",
    # Checks
    "CheckResult",
    "FieldIssue",
]
