"""
In-memory field model.

Holds the ordered list of field descriptors a user is editing. Every
operation replaces the list and each record it touches, so a caller that
keeps a reference to an older ``fields`` tuple (for example a UI state
holder) can detect change by identity.
"""

import logging
from typing import Any, Iterable, Literal

from yup_builder.generator import generate_schema
from yup_builder.models.field_definitions import (
    FieldType,
    ObjectField,
    SchemaField,
    default_fields,
)
from yup_builder.models.field_updates import (
    FieldPatch,
    ObjectFieldPatch,
    PolicyPatch,
    apply_field_patch,
    apply_object_field_patch,
)

logger = logging.getLogger(__name__)


class FieldModel:
    """
    Mutable holder of immutable field records.

    Usage:
        model = FieldModel()
        model.update_field(0, {"name": "email", "required": True})
        model.add_field()
        print(model.generate())

    Positions are plain list indices. An out-of-range position is a caller
    bug and raises ``IndexError``. The model itself allows removing the last
    field; keeping at least one field on screen is up to the UI.
    """

    def __init__(self, fields: Iterable[SchemaField] | None = None):
        self.fields: tuple[SchemaField, ...] = (
            tuple(fields) if fields is not None else default_fields()
        )

    def __len__(self) -> int:
        return len(self.fields)

    def _check_index(self, index: int) -> None:
        if not -len(self.fields) <= index < len(self.fields):
            raise IndexError(f"Field index {index} out of range")

    def _replace(self, index: int, field: SchemaField) -> SchemaField:
        fields = list(self.fields)
        fields[index] = field
        self.fields = tuple(fields)
        return field

    def add_field(self) -> SchemaField:
        """Insert a blank field at the top of the list."""
        field = SchemaField()
        self.fields = (field, *self.fields)
        logger.debug(f"Added field, {len(self.fields)} total")
        return field

    def add_object_field(self, field_index: int) -> ObjectField:
        """Append a blank nested property to the field at ``field_index``."""
        self._check_index(field_index)
        owner = self.fields[field_index]
        child = ObjectField()
        self._replace(
            field_index,
            owner.model_copy(update={"object_fields": (*owner.object_fields, child)}),
        )
        return child

    def update_field(
        self,
        index: int,
        updates: FieldPatch | dict[str, Any],
    ) -> SchemaField:
        """
        Merge the present keys of ``updates`` into the field at ``index``.

        Conditional-rule updates are merged into the existing rule, and
        ``then``/``otherwise`` updates into the existing branch policy.

        Args:
            index: Position of the field.
            updates: A ``FieldPatch`` or a dict of the members to change.

        Returns:
            The new field record.

        Raises:
            IndexError: If ``index`` is out of range.
            pydantic.ValidationError: If ``updates`` has unknown keys or bad values.
        """
        self._check_index(index)
        return self._replace(index, apply_field_patch(self.fields[index], updates))

    def update_conditional_policy(
        self,
        field_index: int,
        part: Literal["then", "otherwise"],
        updates: PolicyPatch | dict[str, Any],
    ) -> SchemaField:
        """Merge ``updates`` into one branch of the field's conditional rule."""
        if isinstance(updates, PolicyPatch):
            updates = updates.model_dump(exclude_unset=True)
        return self.update_field(
            field_index,
            {"conditional_validation": {part: updates}},
        )

    def update_object_field(
        self,
        field_index: int,
        object_field_index: int,
        updates: ObjectFieldPatch | dict[str, Any],
    ) -> ObjectField:
        """Merge the present keys of ``updates`` into one nested property."""
        self._check_index(field_index)
        owner = self.fields[field_index]
        children = list(owner.object_fields)
        children[object_field_index] = apply_object_field_patch(
            children[object_field_index], updates
        )
        self._replace(
            field_index,
            owner.model_copy(update={"object_fields": tuple(children)}),
        )
        return children[object_field_index]

    def remove_field(self, index: int) -> SchemaField:
        """Delete the field at ``index`` and return it."""
        self._check_index(index)
        fields = list(self.fields)
        removed = fields.pop(index)
        self.fields = tuple(fields)
        logger.debug(f"Removed field {index}, {len(self.fields)} left")
        return removed

    def remove_object_field(self, field_index: int, object_field_index: int) -> ObjectField:
        """Delete one nested property and return it."""
        self._check_index(field_index)
        owner = self.fields[field_index]
        children = list(owner.object_fields)
        removed = children.pop(object_field_index)
        self._replace(
            field_index,
            owner.model_copy(update={"object_fields": tuple(children)}),
        )
        return removed

    def get_field(self, name: str) -> SchemaField | None:
        """First field called ``name``, or None."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def dependent_field_type(self, name: str) -> FieldType | None:
        field = self.get_field(name)
        return field.type if field else None

    def generate(self) -> str:
        """Generate schema text from the current fields."""
        return generate_schema(self.fields)
