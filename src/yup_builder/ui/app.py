"""
Yup Schema Builder - browser UI.

A Gradio app for describing form fields visually and generating the
matching Yup validation schema:
1. Add fields and pick their type, flags, and bounds
2. Describe nested objects and conditional requirements
3. Click "Generate Schema" and copy the result
"""

import logging

import gradio as gr

from yup_builder.config import get_config
from yup_builder.generator import DEFAULT_SCHEMA
from yup_builder.guardrails import check_fields, dependency_choices
from yup_builder.models.check_result import CheckResult
from yup_builder.models.field_definitions import (
    ARRAY_ITEM_TYPES,
    CONDITION_LABELS,
    FIELD_TYPES,
    SCALAR_TYPES,
    VALUE_CONDITIONS,
    SchemaField,
    default_fields,
)
from yup_builder.ui import handlers

logger = logging.getLogger(__name__)

THEMES = ("light", "dark", "system")

THEME_JS = (
    "(theme) => { const dark = theme === 'dark' || (theme === 'system'"
    " && window.matchMedia('(prefers-color-scheme: dark)').matches);"
    " document.body.classList.toggle('dark', dark); }"
)

# Field edits and generation run one at a time, in arrival order, so a
# pending blur commit always lands before the schema is generated.
FIELD_EVENTS = {"concurrency_id": "fields", "concurrency_limit": 1}

FOOTER = (
    "[Star on GitHub](https://github.com/musama619/yup-schema-builder) · "
    "[Report Issue](https://github.com/musama619/yup-schema-builder/issues/new)"
)


def _initial_theme_js(theme: str) -> str:
    return f"() => {{ ({THEME_JS})('{theme}'); }}"


def _field_setter(index: int, key: str):
    def setter(fields, value):
        return handlers.update_field(fields, index, key, value)
    return setter


def _conditional_setter(index: int, key: str):
    def setter(fields, value):
        return handlers.update_conditional(fields, index, key, value)
    return setter


def _branch_setter(index: int, part: str):
    def setter(fields, value):
        return handlers.update_branch(fields, index, part, value)
    return setter


def _child_setter(index: int, child_index: int, key: str):
    def setter(fields, value):
        return handlers.update_object_field(fields, index, child_index, key, value)
    return setter


def _commit(listener, fn, fields_state: gr.State, component=None) -> None:
    """Wire ``listener`` so ``fn`` replaces the field tuple held in state."""
    inputs = [fields_state, component] if component is not None else fields_state
    listener(fn, inputs=inputs, outputs=fields_state, **FIELD_EVENTS)


def _bound_inputs(fields_state: gr.State, index: int, field: SchemaField) -> None:
    """Min/max boxes for string, number and array fields."""
    if field.type == "string":
        members = (("min_length", "Min Length"), ("max_length", "Max Length"))
    elif field.type == "number":
        members = (("min", "Min Value"), ("max", "Max Value"))
    elif field.type == "array":
        members = (("array_min", "Min Items"), ("array_max", "Max Items"))
    else:
        return

    with gr.Row():
        for key, label in members:
            box = gr.Textbox(value=getattr(field, key), label=label, placeholder=label)
            _commit(box.blur, _field_setter(index, key), fields_state, box)


def _object_fields_editor(fields_state: gr.State, index: int, field: SchemaField) -> None:
    gr.Markdown("**Object Fields**")
    for child_index, child in enumerate(field.object_fields):
        with gr.Row():
            name = gr.Textbox(value=child.name, show_label=False, placeholder="Field Name")
            type_ = gr.Dropdown(choices=list(SCALAR_TYPES), value=child.type, show_label=False)
            required = gr.Checkbox(value=child.required, label="Required")
            remove = gr.Button("Remove", variant="stop", size="sm")

        _commit(name.blur, _child_setter(index, child_index, "name"), fields_state, name)
        _commit(type_.input, _child_setter(index, child_index, "type"), fields_state, type_)
        _commit(required.input, _child_setter(index, child_index, "required"), fields_state, required)
        _commit(
            remove.click,
            lambda fields, i=index, c=child_index: handlers.remove_object_field(fields, i, c),
            fields_state,
        )

    add = gr.Button("Add Object Field", size="sm")
    _commit(add.click, lambda fields, i=index: handlers.add_object_field(fields, i), fields_state)


def _value_input(fields_state: gr.State, fields, index: int) -> None:
    """Comparison value box; numeric when the dependency is a number field."""
    rule = fields[index].conditional_validation
    if handlers.value_is_numeric(fields, index):
        value = gr.Number(value=handlers.number_value(rule.value), label="Value")
        _commit(
            value.blur,
            lambda current, number, i=index: handlers.update_conditional_number(current, i, number),
            fields_state,
            value,
        )
    else:
        value = gr.Textbox(value=rule.value, label="Value", placeholder="Comparison value")
        _commit(value.blur, _conditional_setter(index, "value"), fields_state, value)


def _conditional_editor(fields_state: gr.State, fields, index: int, field: SchemaField) -> None:
    rule = field.conditional_validation
    enabled = gr.Checkbox(value=rule.enabled, label="Use Conditional Validation")
    _commit(enabled.input, _conditional_setter(index, "enabled"), fields_state, enabled)

    if not rule.enabled:
        return

    choices = dependency_choices(fields, index)
    with gr.Row():
        depends_on = gr.Dropdown(
            choices=choices,
            value=rule.depends_on if rule.depends_on in choices else None,
            label="Depends On Field",
        )
        condition = gr.Dropdown(
            choices=[(label, value) for value, label in CONDITION_LABELS.items()],
            value=rule.condition,
            label="Condition",
        )
        _commit(depends_on.input, _conditional_setter(index, "depends_on"), fields_state, depends_on)
        _commit(condition.input, _conditional_setter(index, "condition"), fields_state, condition)
        if rule.condition in VALUE_CONDITIONS:
            _value_input(fields_state, fields, index)

    with gr.Row():
        then = gr.Checkbox(value=rule.then.required, label="Then: Required")
        otherwise = gr.Checkbox(value=rule.otherwise.required, label="Otherwise: Required")
        _commit(then.input, _branch_setter(index, "then"), fields_state, then)
        _commit(otherwise.input, _branch_setter(index, "otherwise"), fields_state, otherwise)


def _field_card(
    fields_state: gr.State,
    fields,
    index: int,
    field: SchemaField,
    result: CheckResult,
) -> None:
    with gr.Group():
        with gr.Row():
            name = gr.Textbox(value=field.name, label="Field Name", placeholder="e.g. email")
            type_ = gr.Dropdown(choices=list(FIELD_TYPES), value=field.type, label="Type")
        _commit(name.blur, _field_setter(index, "name"), fields_state, name)
        _commit(type_.input, _field_setter(index, "type"), fields_state, type_)

        issues = handlers.field_issues_text(result, field.name)
        if issues:
            gr.Markdown(issues)

        if field.type == "array":
            array_type = gr.Dropdown(
                choices=list(ARRAY_ITEM_TYPES),
                value=field.array_type,
                label="Array Item Type",
            )
            _commit(array_type.input, _field_setter(index, "array_type"), fields_state, array_type)

        _bound_inputs(fields_state, index, field)

        if field.type == "object" or (field.type == "array" and field.array_of_object):
            _object_fields_editor(fields_state, index, field)

        with gr.Row():
            required = gr.Checkbox(value=field.required, label="Required")
            nullable = gr.Checkbox(value=field.nullable, label="Nullable")
        _commit(required.input, _field_setter(index, "required"), fields_state, required)
        _commit(nullable.input, _field_setter(index, "nullable"), fields_state, nullable)

        message = gr.Textbox(
            value=field.custom_message,
            label="Custom Error Message",
            placeholder=f"{field.name or 'field'} is required",
        )
        _commit(message.blur, _field_setter(index, "custom_message"), fields_state, message)

        _conditional_editor(fields_state, fields, index, field)

        remove = gr.Button("Remove Field", variant="stop", interactive=len(fields) > 1)
        _commit(remove.click, lambda current, i=index: handlers.remove_field(current, i), fields_state)


def copy_schema(schema: str | None) -> str:
    """Return the clipboard text and show a confirmation toast."""
    text = handlers.clipboard_text(schema)
    gr.Info("Schema copied to clipboard.", title="Copied!")
    return text


def create_builder_app(theme: str | None = None) -> gr.Blocks:
    """
    Build the Gradio Blocks app.

    Args:
        theme: "light", "dark" or "system". Defaults to ``config.ui_theme``;
            unknown values fall back to "dark".
    """
    theme = theme or get_config().ui_theme
    if theme not in THEMES:
        theme = "dark"

    with gr.Blocks(title="Yup Schema Builder", js=_initial_theme_js(theme)) as app:
        fields_state = gr.State(default_fields())
        schema_state = gr.State("")

        with gr.Row():
            gr.Markdown("# Yup Schema Builder")
            theme_choice = gr.Radio(list(THEMES), value=theme, label="Theme")

        with gr.Row():
            with gr.Column(scale=1):
                add_button = gr.Button("Add Field", variant="primary")

                @gr.render(inputs=fields_state)
                def render_fields(fields):
                    result = check_fields(fields)
                    for index, field in enumerate(fields):
                        _field_card(fields_state, fields, index, field, result)

                generate_button = gr.Button("Generate Schema", variant="primary", size="lg")

            with gr.Column(scale=1):
                copy_button = gr.Button("Copy", size="sm")
                code_view = gr.Code(value=DEFAULT_SCHEMA, language="javascript", interactive=False)
                warnings_view = gr.Markdown()
                clipboard = gr.Textbox(visible=False)

        gr.Markdown(FOOTER)

        _commit(add_button.click, handlers.add_field, fields_state)
        generate_button.click(
            handlers.generate,
            inputs=fields_state,
            outputs=[schema_state, code_view, warnings_view],
            **FIELD_EVENTS,
        )
        copy_button.click(copy_schema, inputs=schema_state, outputs=clipboard).then(
            None,
            inputs=clipboard,
            js="(text) => { navigator.clipboard.writeText(text); }",
        )
        theme_choice.change(None, inputs=theme_choice, js=THEME_JS)

    return app


def launch(host: str | None = None, port: int | None = None) -> None:
    """Start the builder UI."""
    config = get_config()
    logging.basicConfig(level=config.log_level)
    host = host or config.ui_host
    port = port or config.ui_port

    logger.info(f"Starting Yup Schema Builder UI on {host}:{port}")
    create_builder_app().launch(server_name=host, server_port=port)
