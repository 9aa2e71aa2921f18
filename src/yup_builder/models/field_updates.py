"""
Partial updates for field descriptors.

A patch carries only the members the caller wants to change. Members that
were never set (or were set to ``None``) are left untouched on the target
record. Applying a patch returns a new record; the original is not modified.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from yup_builder.models.field_definitions import (
    ArrayItemType,
    ConditionalValidation,
    ConditionType,
    FieldType,
    ObjectField,
    RequirementPolicy,
    ScalarType,
    SchemaField,
    check_array_flag,
)


class PolicyPatch(BaseModel):
    """Patch for the ``then`` / ``otherwise`` branch of a conditional rule."""

    required: bool | None = None

    model_config = {"extra": "forbid"}


class ConditionalPatch(BaseModel):
    """Patch for ``SchemaField.conditional_validation``."""

    enabled: bool | None = None
    depends_on: str | None = Field(default=None, alias="dependsOn")
    condition: ConditionType | None = None
    value: str | None = None
    then: PolicyPatch | None = None
    otherwise: PolicyPatch | None = None

    model_config = {"extra": "forbid", "populate_by_name": True, "coerce_numbers_to_str": True}


class FieldPatch(BaseModel):
    """
    Patch for a top-level field.

    ``object_fields`` is not patchable here; nested properties are edited
    through the object-field operations of the field model.

    ``array_of_object`` is another way to set the item type: ``True`` selects
    object elements, ``False`` falls back to string elements when the field
    currently holds objects. Sent together with ``array_type`` it must agree.
    Numeric bounds are accepted and stored as their string form.
    """

    name: str | None = None
    type: FieldType | None = None
    required: bool | None = None
    nullable: bool | None = None
    min_length: str | None = Field(default=None, alias="minLength")
    max_length: str | None = Field(default=None, alias="maxLength")
    min: str | None = None
    max: str | None = None
    custom_message: str | None = Field(default=None, alias="customMessage")
    array_type: ArrayItemType | None = Field(default=None, alias="arrayType")
    array_of_object: bool | None = Field(default=None, alias="arrayOfObject")
    array_min: str | None = Field(default=None, alias="arrayMin")
    array_max: str | None = Field(default=None, alias="arrayMax")
    conditional_validation: ConditionalPatch | None = Field(
        default=None, alias="conditionalValidation"
    )

    model_config = {"extra": "forbid", "populate_by_name": True, "coerce_numbers_to_str": True}

    @model_validator(mode="after")
    def _check_array_flag(self) -> "FieldPatch":
        check_array_flag(self.array_type, self.array_of_object)
        return self


class ObjectFieldPatch(BaseModel):
    """Patch for one nested object property."""

    name: str | None = None
    type: ScalarType | None = None
    required: bool | None = None

    model_config = {"extra": "forbid"}


def _present(patch: BaseModel) -> dict[str, Any]:
    return patch.model_dump(exclude_unset=True, exclude_none=True)


def merge_policy(current: RequirementPolicy, changes: dict[str, Any]) -> RequirementPolicy:
    if not changes:
        return current
    return current.model_copy(update=changes)


def merge_conditional(
    current: ConditionalValidation,
    changes: dict[str, Any],
) -> ConditionalValidation:
    """Merge key-wise into the rule, and one level deeper for branches."""
    changes = dict(changes)
    for part in ("then", "otherwise"):
        if part in changes:
            changes[part] = merge_policy(getattr(current, part), changes[part])
    return current.model_copy(update=changes)


def apply_field_patch(field: SchemaField, patch: FieldPatch | dict[str, Any]) -> SchemaField:
    """
    Return ``field`` with the present members of ``patch`` merged in.

    Args:
        field: The record to update.
        patch: A ``FieldPatch`` or a dict using field names or camelCase aliases.

    Returns:
        A new ``SchemaField``. Untouched nested records keep their identity.

    Raises:
        pydantic.ValidationError: If a dict patch has unknown keys or bad values.
    """
    if not isinstance(patch, FieldPatch):
        patch = FieldPatch.model_validate(patch)

    changes = _present(patch)
    array_of_object = changes.pop("array_of_object", None)
    if array_of_object is not None and "array_type" not in changes:
        if array_of_object:
            changes["array_type"] = "object"
        elif field.array_of_object:
            changes["array_type"] = "string"
    if "conditional_validation" in changes:
        changes["conditional_validation"] = merge_conditional(
            field.conditional_validation,
            changes["conditional_validation"],
        )
    return field.model_copy(update=changes)


def apply_object_field_patch(
    object_field: ObjectField,
    patch: ObjectFieldPatch | dict[str, Any],
) -> ObjectField:
    """Return ``object_field`` with the present members of ``patch`` merged in."""
    if not isinstance(patch, ObjectFieldPatch):
        patch = ObjectFieldPatch.model_validate(patch)
    return object_field.model_copy(update=_present(patch))
