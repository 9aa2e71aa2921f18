"""Tests for Yup schema generation."""

from yup_builder.generator import (
    DEFAULT_SCHEMA,
    SCHEMA_POSTAMBLE,
    SCHEMA_PREAMBLE,
    format_literal,
    generate_field,
    generate_object_fields,
    generate_schema,
)
from yup_builder.models.field_definitions import (
    ConditionalValidation,
    ObjectField,
    RequirementPolicy,
    SchemaField,
)


def _entry(field, fields=None):
    return generate_field(field, fields or [field])


def _conditional(name, depends_on, condition, value="", **kwargs):
    return SchemaField(
        name=name,
        conditional_validation=ConditionalValidation(
            enabled=True,
            depends_on=depends_on,
            condition=condition,
            value=value,
        ),
        **kwargs,
    )


class TestSchemaWrapper:
    """Tests for the module preamble and postamble."""

    def test_default_schema(self):
        """Test the placeholder schema."""
        assert DEFAULT_SCHEMA == (
            "import * as Yup from 'yup';\n\n"
            "const validationSchema = Yup.object({\n"
            "});\n\n"
            "export default validationSchema;"
        )

    def test_empty_names_are_skipped(self):
        """Test unnamed fields contribute nothing, whatever their type."""
        fields = [
            SchemaField(),
            SchemaField(type="number", required=True, min="1"),
            SchemaField(type="object", object_fields=(ObjectField(name="x"),)),
            SchemaField(type="array", array_type="object", array_min="2"),
        ]
        assert generate_schema(fields) == DEFAULT_SCHEMA

    def test_email_scenario(self):
        """Test a single required string field end to end."""
        fields = [SchemaField(name="email", type="string", required=True)]
        assert generate_schema(fields) == (
            "import * as Yup from 'yup';\n\n"
            "const validationSchema = Yup.object({\n"
            '  email: Yup.string().required("email is required"),\n'
            "});\n\n"
            "export default validationSchema;"
        )

    def test_fields_keep_order(self):
        """Test entries follow the list order."""
        schema = generate_schema([SchemaField(name="b"), SchemaField(name="a")])
        assert schema.index("  b: ") < schema.index("  a: ")
        assert schema.startswith(SCHEMA_PREAMBLE)
        assert schema.endswith(SCHEMA_POSTAMBLE)

    def test_idempotent(self):
        """Test repeated generation yields identical text and leaves input alone."""
        fields = [
            SchemaField(name="age", type="number", min="18"),
            _conditional("license", "age", "greaterThan", "17"),
        ]
        snapshot = [f.model_dump() for f in fields]
        assert generate_schema(fields) == generate_schema(fields)
        assert [f.model_dump() for f in fields] == snapshot


class TestBaseValidators:
    """Tests for the type-specific base calls."""

    def test_scalar_types(self):
        """Test each scalar type maps to its Yup validator."""
        for type_name in ("string", "number", "boolean", "date"):
            entry = _entry(SchemaField(name="f", type=type_name))
            assert entry == f"  f: Yup.{type_name}().notRequired()"

    def test_number_required_default_message(self):
        """Test the default required message."""
        entry = _entry(SchemaField(name="age", type="number", required=True))
        assert entry == '  age: Yup.number().required("age is required")'

    def test_custom_message(self):
        """Test customMessage replaces the default."""
        entry = _entry(SchemaField(name="age", required=True, custom_message="How old?"))
        assert entry == '  age: Yup.string().required("How old?")'

    def test_nullable_before_required(self):
        """Test nullable and required are independent and ordered."""
        entry = _entry(SchemaField(name="note", nullable=True, required=True))
        assert entry == '  note: Yup.string().nullable().required("note is required")'

    def test_scalar_array(self):
        """Test arrays of scalars with count bounds."""
        field = SchemaField(name="dates", type="array", array_type="date", array_min="1", array_max="5")
        assert _entry(field) == (
            "  dates: Yup.array().of(Yup.date())"
            '.min(1, "Minimum dates count is 1")'
            '.max(5, "Maximum dates count is 5")'
            ".notRequired()"
        )

    def test_array_of_objects(self):
        """Test element schema lists children in order."""
        field = SchemaField(
            name="items",
            type="array",
            array_type="object",
            object_fields=(
                ObjectField(name="a", type="string", required=True),
                ObjectField(name="b", type="number", required=False),
            ),
        )
        entry = _entry(field)
        assert entry == (
            "  items: Yup.array().of(Yup.object({\n"
            "    a: Yup.string().required(),\n"
            "    b: Yup.number().notRequired(),\n"
            "  })).notRequired()"
        )
        assert entry.index("a: Yup.string().required()") < entry.index("b: Yup.number().notRequired()")

    def test_array_of_objects_with_counts(self):
        """Test count bounds follow the element schema."""
        field = SchemaField(name="rows", type="array", array_type="object", array_min="2")
        assert _entry(field) == (
            "  rows: Yup.array().of(Yup.object({\n"
            "  }))"
            '.min(2, "Minimum rows count is 2")'
            ".notRequired()"
        )

    def test_object(self):
        """Test nested object fields."""
        field = SchemaField(
            name="address",
            type="object",
            required=True,
            nullable=True,
            object_fields=(ObjectField(name="city", required=True),),
        )
        assert _entry(field) == (
            "  address: Yup.object({\n"
            "    city: Yup.string().required(),\n"
            '  }).nullable().required("address is required")'
        )

    def test_object_children_get_only_required_suffix(self):
        """Test children never get nullable, message or bound clauses."""
        body = generate_object_fields([ObjectField(name="x", type="date")])
        assert body == "    x: Yup.date().notRequired(),\n"

    def test_unnamed_children_are_emitted(self):
        """Test nested properties are written even without a name."""
        assert generate_object_fields([ObjectField()]) == "    : Yup.string().notRequired(),\n"


class TestBoundClauses:
    """Tests for string and number bounds."""

    def test_string_lengths_after_required(self):
        """Test min/max length clauses follow the required clause in order."""
        field = SchemaField(name="name", required=True, min_length="3", max_length="10")
        assert _entry(field) == (
            '  name: Yup.string().required("name is required")'
            '.min(3, "Minimum length is 3")'
            '.max(10, "Maximum length is 10")'
        )

    def test_number_values(self):
        """Test min/max value clauses."""
        field = SchemaField(name="qty", type="number", min="1", max="9")
        assert _entry(field) == (
            "  qty: Yup.number().notRequired()"
            '.min(1, "Minimum value is 1")'
            '.max(9, "Maximum value is 9")'
        )

    def test_bounds_of_other_types_ignored(self):
        """Test bounds apply only to their own type."""
        assert _entry(SchemaField(name="s", min="1", max="2")) == "  s: Yup.string().notRequired()"
        assert _entry(SchemaField(name="n", type="number", min_length="1")) == "  n: Yup.number().notRequired()"
        assert _entry(SchemaField(name="d", type="date", min="1")) == "  d: Yup.date().notRequired()"

    def test_bounds_pass_through_verbatim(self):
        """Test inverted and non-numeric bounds are not corrected."""
        field = SchemaField(name="n", type="number", min="10", max="abc")
        assert _entry(field) == (
            "  n: Yup.number().notRequired()"
            '.min(10, "Minimum value is 10")'
            '.max(abc, "Maximum value is abc")'
        )


class TestConditionalClauses:
    """Tests for .when() generation."""

    def test_equals_numeric_dependency_is_bare(self):
        """Test the literal is unquoted when the dependency is a number field."""
        age = SchemaField(name="age", type="number")
        field = _conditional("license", "age", "equals", "18")
        assert _entry(field, [age, field]) == (
            "  license: Yup.string().when('age', {\n"
            "    is: 18,\n"
            '    then: (schema) => schema.required("license is required"),\n'
            "    otherwise: (schema) => schema.notRequired()\n"
            "  })"
        )

    def test_equals_string_dependency_is_quoted(self):
        """Test the same value is quoted when the dependency is a string field."""
        age = SchemaField(name="age", type="string")
        field = _conditional("license", "age", "equals", "18")
        assert '    is: "18",\n' in _entry(field, [age, field])

    def test_unknown_dependency_is_quoted(self):
        """Test a missing dependency is treated as non-numeric."""
        field = _conditional("license", "missing", "equals", "18")
        assert '    is: "18",\n' in _entry(field)

    def test_quoting_ignores_value_and_own_type(self):
        """Test numeric-looking values and number fields do not change quoting."""
        kind = SchemaField(name="kind")
        field = _conditional("count", "kind", "equals", "3", type="number")
        assert '    is: "3",\n' in _entry(field, [kind, field])

    def test_first_dependency_match_wins(self):
        """Test duplicate dependency names resolve to the first field."""
        fields = [SchemaField(name="age", type="number"), SchemaField(name="age")]
        field = _conditional("x", "age", "equals", "1")
        assert "    is: 1,\n" in _entry(field, [*fields, field])

    def test_not_equals(self):
        """Test inequality with both literal styles."""
        num = SchemaField(name="n", type="number")
        text = SchemaField(name="t")
        assert "    is: (val) => val !== 0,\n" in _entry(_conditional("x", "n", "notEquals", "0"), [num])
        assert '    is: (val) => val !== "no",\n' in _entry(_conditional("x", "t", "notEquals", "no"), [text])

    def test_defined_and_undefined(self):
        """Test presence checks ignore the value."""
        defined = _entry(_conditional("x", "y", "defined", "ignored"))
        undefined = _entry(_conditional("x", "y", "undefined", "ignored"))
        assert "    is: (val) => val !== undefined && val !== null && val !== '',\n" in defined
        assert "    is: (val) => val === undefined || val === null || val === '',\n" in undefined
        assert "ignored" not in defined + undefined

    def test_comparisons_are_always_bare(self):
        """Test ordering comparisons never quote, even for string dependencies."""
        text = SchemaField(name="t")
        expected = {
            "greaterThan": "    is: (val) => val > 5,\n",
            "lessThan": "    is: (val) => val < 5,\n",
            "greaterThanOrEqual": "    is: (val) => val >= 5,\n",
            "lessThanOrEqual": "    is: (val) => val <= 5,\n",
        }
        for condition, line in expected.items():
            assert line in _entry(_conditional("x", "t", condition, "5"), [text])

    def test_branch_policies_and_custom_message(self):
        """Test both branches use the same message rule."""
        field = SchemaField(
            name="x",
            custom_message="Need x",
            conditional_validation=ConditionalValidation(
                enabled=True,
                depends_on="y",
                condition="defined",
                then=RequirementPolicy(required=False),
                otherwise=RequirementPolicy(required=True),
            ),
        )
        entry = _entry(field)
        assert "    then: (schema) => schema.notRequired(),\n" in entry
        assert '    otherwise: (schema) => schema.required("Need x")\n' in entry

    def test_conditional_replaces_required_flag(self):
        """Test an active rule suppresses the plain required clause."""
        field = _conditional("x", "y", "defined", required=True)
        entry = _entry(field)
        assert not entry.startswith('  x: Yup.string().required(')
        assert ".when('y', {" in entry

    def test_disabled_rule_is_ignored(self):
        """Test a disabled or dependency-less rule falls back to required."""
        disabled = SchemaField(
            name="x",
            required=True,
            conditional_validation=ConditionalValidation(enabled=False, depends_on="y"),
        )
        no_dependency = SchemaField(
            name="x",
            conditional_validation=ConditionalValidation(enabled=True),
        )
        assert _entry(disabled) == '  x: Yup.string().required("x is required")'
        assert _entry(no_dependency) == "  x: Yup.string().notRequired()"

    def test_self_dependency_passes_through(self):
        """Test self-references are emitted as written."""
        field = _conditional("x", "x", "equals", "a")
        assert ".when('x', {" in _entry(field)

    def test_nullable_when_and_bounds_order(self):
        """Test clause order: nullable, when, then bounds."""
        field = _conditional("code", "kind", "defined", nullable=True, min_length="2")
        entry = _entry(field)
        assert entry.index(".nullable()") < entry.index(".when(") < entry.index(".min(2,")


class TestFormatLiteral:
    """Tests for literal formatting."""

    def test_numeric(self):
        """Test numeric literals are written as-is."""
        assert format_literal("18", True) == "18"
        assert format_literal("", True) == ""

    def test_string(self):
        """Test string literals are JSON-quoted."""
        assert format_literal("yes", False) == '"yes"'
        assert format_literal('say "hi"', False) == '"say \\"hi\\""'
        assert format_literal("çay", False) == '"çay"'
