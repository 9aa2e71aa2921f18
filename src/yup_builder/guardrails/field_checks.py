"""
Advisory checks for field descriptors.

The schema generator is a text templater and accepts anything. These checks
point out descriptors that will produce questionable Yup code: names that
are not identifiers, duplicate keys, broken conditional references, and
bounds that are not numbers or are inverted.
"""

from collections import Counter
from typing import Sequence

from yup_builder.guardrails.constants import (
    BOUND_PAIRS,
    MAX_FIELD_NAME_LENGTH,
    NUMERIC_LITERAL,
    VALID_FIELD_NAME,
)
from yup_builder.models.check_result import CheckResult, FieldIssue
from yup_builder.models.field_definitions import SchemaField


def check_field_name(name: str) -> tuple[bool, str | None]:
    """Validate a field name."""
    if not name:
        return False, "Field name cannot be empty"
    if len(name) > MAX_FIELD_NAME_LENGTH:
        return False, "Field name too long"
    if not VALID_FIELD_NAME.match(name):
        return False, "Invalid characters in field name"
    return True, None


def _is_numeric(text: str) -> bool:
    return bool(NUMERIC_LITERAL.match(text.strip()))


def dependency_choices(fields: Sequence[SchemaField], index: int) -> list[str]:
    """
    Names a field at ``index`` may depend on.

    Excludes the field itself, fields sharing its name, and unnamed fields,
    so a conditional rule can never point back at its owner.
    """
    own_name = fields[index].name
    choices: list[str] = []
    for i, field in enumerate(fields):
        if i == index or not field.name or field.name == own_name:
            continue
        if field.name not in choices:
            choices.append(field.name)
    return choices


def _check_bounds(field: SchemaField) -> list[FieldIssue]:
    if field.type not in BOUND_PAIRS:
        return []

    lower_attr, upper_attr, label = BOUND_PAIRS[field.type]
    lower = getattr(field, lower_attr)
    upper = getattr(field, upper_attr)
    issues: list[FieldIssue] = []

    for bound in (lower, upper):
        if bound and not _is_numeric(bound):
            issues.append(
                FieldIssue(
                    field_name=field.name,
                    issue_type="non_numeric_bound",
                    message=f"Bound '{bound}' is not a number",
                    value=bound,
                )
            )

    if lower and upper and _is_numeric(lower) and _is_numeric(upper):
        if float(lower) > float(upper):
            issues.append(
                FieldIssue(
                    field_name=field.name,
                    issue_type="inverted_bounds",
                    message=f"Minimum {label} {lower} exceeds maximum {upper}",
                    value=[lower, upper],
                )
            )
    return issues


def check_fields(fields: Sequence[SchemaField]) -> CheckResult:
    """
    Inspect a field list and collect advisory issues.

    Unnamed fields are skipped, matching the generator, which never
    emits them.

    Args:
        fields: The current field list.

    Returns:
        CheckResult listing every issue found, in field order.
    """
    names = [f.name for f in fields if f.name]
    counts = Counter(names)
    issues: list[FieldIssue] = []
    reported_duplicates: set[str] = set()

    for field in fields:
        if not field.name:
            continue

        is_valid, error = check_field_name(field.name)
        if not is_valid:
            issues.append(
                FieldIssue(
                    field_name=field.name,
                    issue_type="invalid_name",
                    message=error or "Invalid field name",
                    value=field.name,
                )
            )

        if counts[field.name] > 1 and field.name not in reported_duplicates:
            reported_duplicates.add(field.name)
            issues.append(
                FieldIssue(
                    field_name=field.name,
                    issue_type="duplicate_name",
                    message=f"Name is used by {counts[field.name]} fields",
                    value=field.name,
                )
            )

        for child in field.object_fields:
            if child.name and not VALID_FIELD_NAME.match(child.name):
                issues.append(
                    FieldIssue(
                        field_name=field.name,
                        issue_type="invalid_name",
                        message=f"Invalid nested property name '{child.name}'",
                        value=child.name,
                    )
                )

        rule = field.conditional_validation
        if rule.is_active:
            if rule.depends_on == field.name:
                issues.append(
                    FieldIssue(
                        field_name=field.name,
                        issue_type="self_dependency",
                        message="Conditional rule depends on the field itself",
                        value=rule.depends_on,
                    )
                )
            elif rule.depends_on not in counts:
                issues.append(
                    FieldIssue(
                        field_name=field.name,
                        issue_type="unknown_dependency",
                        message=f"No field named '{rule.depends_on}'",
                        value=rule.depends_on,
                    )
                )

        issues.extend(_check_bounds(field))

    return CheckResult(issues=issues)
