"""
Result models for advisory field checks.

Checks never block schema generation; they only describe descriptors that
will produce questionable output.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


IssueType = Literal[
    "invalid_name",
    "duplicate_name",
    "self_dependency",
    "unknown_dependency",
    "non_numeric_bound",
    "inverted_bounds",
]


class FieldIssue(BaseModel):
    """Problem found on a specific field."""

    field_name: str = Field(..., description="Name of the field with the issue")
    issue_type: IssueType = Field(..., description="Kind of issue")
    message: str = Field(..., description="Human-readable description")
    value: Any | None = Field(default=None, description="Offending value")


class CheckResult(BaseModel):
    """Issues collected over a whole field list."""

    issues: list[FieldIssue] = Field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    @property
    def issue_count(self) -> int:
        """Get the number of issues."""
        return len(self.issues)

    def get_field_issues(self, field_name: str) -> list[FieldIssue]:
        """Get all issues for a specific field."""
        return [i for i in self.issues if i.field_name == field_name]

    def to_issue_dict(self) -> dict[str, list[str]]:
        """Convert issues to a dict mapping field names to messages."""
        result: dict[str, list[str]] = {}
        for issue in self.issues:
            if issue.field_name not in result:
                result[issue.field_name] = []
            result[issue.field_name].append(issue.message)
        return result

    def warnings(self) -> list[str]:
        return [f"{i.field_name}: {i.message}" for i in self.issues]
