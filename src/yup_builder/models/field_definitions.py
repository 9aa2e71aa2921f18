"""
Field descriptor models for the Yup schema builder.

A form is described by an ordered list of ``SchemaField`` records. Each
record is the flat editing state of one form row; ``SchemaField.shape()``
projects it onto a tagged variant that the schema generator consumes.

All records are frozen. Edits go through the patch helpers in
``yup_builder.models.field_updates`` and produce new records.
"""

from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, Field, computed_field, model_validator


FieldType = Literal["string", "number", "boolean", "date", "array", "object"]
ScalarType = Literal["string", "number", "boolean", "date"]
ArrayItemType = Literal["string", "number", "boolean", "date", "object"]

ConditionType = Literal[
    "equals",
    "notEquals",
    "defined",
    "undefined",
    "greaterThan",
    "lessThan",
    "greaterThanOrEqual",
    "lessThanOrEqual",
]

FIELD_TYPES: tuple[str, ...] = get_args(FieldType)
SCALAR_TYPES: tuple[str, ...] = get_args(ScalarType)
ARRAY_ITEM_TYPES: tuple[str, ...] = get_args(ArrayItemType)

# Display order used by the condition dropdown
CONDITION_LABELS: dict[str, str] = {
    "equals": "Equals",
    "notEquals": "Not Equals",
    "greaterThan": "Greater Than",
    "lessThan": "Less Than",
    "greaterThanOrEqual": "Greater Than or Equal",
    "lessThanOrEqual": "Less Than or Equal",
    "defined": "Is Defined",
    "undefined": "Is Undefined",
}

# Conditions that compare against ConditionalValidation.value
VALUE_CONDITIONS: frozenset[str] = frozenset(
    {
        "equals",
        "notEquals",
        "greaterThan",
        "lessThan",
        "greaterThanOrEqual",
        "lessThanOrEqual",
    }
)


def check_array_flag(array_type: str | None, array_of_object: bool | None) -> None:
    """Raise ``ValueError`` when an explicit ``arrayOfObject`` contradicts ``arrayType``."""
    if array_type is None or array_of_object is None:
        return
    if array_of_object != (array_type == "object"):
        raise ValueError(
            f"arrayOfObject={array_of_object} contradicts arrayType={array_type!r}"
        )


class ObjectField(BaseModel):
    """Scalar property of an object field or of an array-of-object element."""

    name: str = Field(default="", description="Property key inside the nested object")
    type: ScalarType = Field(default="string", description="Scalar Yup type")
    required: bool = Field(default=False, description="Whether the property is required")

    model_config = {"frozen": True}


class RequirementPolicy(BaseModel):
    """Required-ness applied by one branch of a conditional rule."""

    required: bool = Field(default=False)

    model_config = {"frozen": True}


class ConditionalValidation(BaseModel):
    """
    Rule that makes a field's required-ness depend on another field.

    ``depends_on`` is a plain name looked up against the current field list
    when the schema is generated. It is never validated for existence.
    """

    enabled: bool = Field(default=False, description="Rule is ignored when False")
    depends_on: str = Field(
        default="",
        alias="dependsOn",
        description="Name of the sibling field the rule reads",
    )
    condition: ConditionType = Field(default="equals")
    value: str = Field(default="", description="Comparison operand, emitted verbatim")
    then: RequirementPolicy = Field(
        default_factory=lambda: RequirementPolicy(required=True),
        description="Policy when the condition holds",
    )
    otherwise: RequirementPolicy = Field(
        default_factory=lambda: RequirementPolicy(required=False),
        description="Policy when the condition does not hold",
    )

    model_config = {"frozen": True, "populate_by_name": True, "coerce_numbers_to_str": True}

    @property
    def is_active(self) -> bool:
        """True when the rule is enabled and names a dependency."""
        return self.enabled and bool(self.depends_on)


class ScalarShape(BaseModel):
    """Plain scalar field. ``lower``/``upper`` are the type-specific bounds."""

    kind: Literal["scalar"] = "scalar"
    type: ScalarType
    lower: str = ""
    upper: str = ""

    model_config = {"frozen": True}


class ScalarArrayShape(BaseModel):
    """Array whose elements are a scalar type."""

    kind: Literal["array"] = "array"
    item_type: ScalarType
    min_items: str = ""
    max_items: str = ""

    model_config = {"frozen": True}


class ObjectArrayShape(BaseModel):
    """Array whose elements are objects built from ``children``."""

    kind: Literal["object_array"] = "object_array"
    children: tuple[ObjectField, ...] = ()
    min_items: str = ""
    max_items: str = ""

    model_config = {"frozen": True}


class ObjectShape(BaseModel):
    """Nested object built from ``children``."""

    kind: Literal["object"] = "object"
    children: tuple[ObjectField, ...] = ()

    model_config = {"frozen": True}


FieldShape = Annotated[
    Union[ScalarShape, ScalarArrayShape, ObjectArrayShape, ObjectShape],
    Field(discriminator="kind"),
]


class SchemaField(BaseModel):
    """
    One top-level property of the generated schema.

    This is the flat record the form edits: bounds for every type live side
    by side, and only the ones matching ``type`` take effect. Use
    ``shape()`` to get the variant that actually applies.
    """

    name: str = Field(default="", description="Schema key; unnamed fields are skipped")
    type: FieldType = Field(default="string")
    required: bool = Field(default=False)
    nullable: bool = Field(default=False)

    # string
    min_length: str = Field(default="", alias="minLength")
    max_length: str = Field(default="", alias="maxLength")

    # number
    min: str = Field(default="")
    max: str = Field(default="")

    custom_message: str = Field(
        default="",
        alias="customMessage",
        description="Replaces the default '<name> is required' message",
    )

    # array / object
    array_type: ArrayItemType = Field(default="string", alias="arrayType")
    object_fields: tuple[ObjectField, ...] = Field(default=(), alias="objectFields")
    array_min: str = Field(default="", alias="arrayMin")
    array_max: str = Field(default="", alias="arrayMax")

    conditional_validation: ConditionalValidation = Field(
        default_factory=ConditionalValidation,
        alias="conditionalValidation",
    )

    model_config = {"frozen": True, "populate_by_name": True, "coerce_numbers_to_str": True}

    @model_validator(mode="before")
    @classmethod
    def _read_array_flag(cls, data: Any) -> Any:
        """Accept the ``arrayOfObject`` flag as an alternative spelling of the item type."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        flag = data.pop("arrayOfObject", None)
        if flag is None:
            flag = data.pop("array_of_object", None)
        else:
            data.pop("array_of_object", None)
        if flag is None:
            return data

        array_type = data.get("arrayType", data.get("array_type"))
        check_array_flag(array_type, flag)
        if array_type is None and flag:
            data["arrayType"] = "object"
        return data

    @computed_field(alias="arrayOfObject")
    @property
    def array_of_object(self) -> bool:
        """Whether array elements come from ``object_fields``."""
        return self.array_type == "object"

    @property
    def required_message(self) -> str:
        return self.custom_message or f"{self.name} is required"

    def shape(self) -> FieldShape:
        """Project this record onto the variant that applies to its type."""
        if self.type == "array":
            if self.array_of_object:
                return ObjectArrayShape(
                    children=self.object_fields,
                    min_items=self.array_min,
                    max_items=self.array_max,
                )
            return ScalarArrayShape(
                item_type=self.array_type,
                min_items=self.array_min,
                max_items=self.array_max,
            )
        if self.type == "object":
            return ObjectShape(children=self.object_fields)
        if self.type == "string":
            return ScalarShape(type="string", lower=self.min_length, upper=self.max_length)
        if self.type == "number":
            return ScalarShape(type="number", lower=self.min, upper=self.max)
        return ScalarShape(type=self.type)


def default_fields() -> tuple[SchemaField, ...]:
    """Initial field list: a single blank string field."""
    return (SchemaField(),)
