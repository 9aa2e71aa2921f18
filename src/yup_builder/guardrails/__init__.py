"""
Guardrails for the Yup schema builder.

Advisory checks over field descriptors. They never block generation.
"""

from yup_builder.guardrails.field_checks import (
    check_field_name,
    check_fields,
    dependency_choices,
)

__all__ = [
    "check_field_name",
    "check_fields",
    "dependency_choices",
]
