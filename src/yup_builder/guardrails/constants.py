"""
Constants for the field checks.

Centralizes the patterns and limits used when inspecting field
descriptors, so they are easy to keep in sync with the UI hints.
"""

import re

# Schema keys are emitted unquoted, so they must be JavaScript identifiers
VALID_FIELD_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

MAX_FIELD_NAME_LENGTH = 100

# Bound strings are emitted verbatim as JavaScript number literals
NUMERIC_LITERAL = re.compile(r"^-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")

# (lower member, upper member, label) per field type
BOUND_PAIRS: dict[str, tuple[str, str, str]] = {
    "string": ("min_length", "max_length", "length"),
    "number": ("min", "max", "value"),
    "array": ("array_min", "array_max", "item count"),
}
