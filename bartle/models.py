"""Shared models for bartle."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_TYPES: Tuple[str, ...] = ("feat", "fix", "docs", "refactor", "test", "chore")


class Style(str, Enum):
    """Commit message style.

    ``CUSTOM`` is the explicit home of every value that is neither ``jira``
    nor ``conventional``; it is validated with the conventional rule set.
    """

    CONVENTIONAL = "conventional"
    JIRA = "jira"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Any) -> "Style":
        if isinstance(value, Style):
            return value
        name = str(value or "").strip().lower()
        if name in ("", cls.CONVENTIONAL.value):
            return cls.CONVENTIONAL
        if name == cls.JIRA.value:
            return cls.JIRA
        return cls.CUSTOM


class RuleConfig(BaseModel):
    """Fully resolved rules for a single validation call."""

    model_config = ConfigDict(frozen=True)

    style: Style = Field(default=Style.CONVENTIONAL, description="Commit message style")
    scope_required: bool = Field(default=True, description="Require type(scope)")
    max_line_length: int = Field(
        default=72, description="Maximum first line length, 0 or less for no limit"
    )
    lowercase_start: bool = Field(
        default=False, description="Require the subject to start lowercase"
    )
    allowed_types: Tuple[str, ...] = Field(
        default=DEFAULT_TYPES, description="Allowed conventional types, in display order"
    )

    @field_validator("style", mode="before")
    @classmethod
    def _coerce_style(cls, value: Any) -> Style:
        return Style.parse(value)

    @field_validator("allowed_types", mode="before")
    @classmethod
    def _dedupe_types(cls, value: Any) -> Tuple[str, ...]:
        # ordered set: keep first occurrence
        return tuple(dict.fromkeys(value or ()))


@dataclass(frozen=True)
class ParsedSubject:
    type: str
    scope: str
    subject: str
    breaking: bool = False


class FindingKind(str, Enum):
    EMPTY_MESSAGE = "empty_message"
    MISSING_SEPARATOR = "missing_separator"
    EMPTY_SUBJECT = "empty_subject"
    UNCLOSED_SCOPE = "unclosed_scope"
    MISSING_SCOPE = "missing_scope"
    NOT_CONVENTIONAL = "not_conventional"
    TYPE_NOT_LOWERCASE = "type_not_lowercase"
    TYPE_NOT_ALLOWED = "type_not_allowed"
    SCOPE_REQUIRED = "scope_required"
    LINE_TOO_LONG = "line_too_long"
    SUBJECT_NOT_LOWERCASE = "subject_not_lowercase"
    INVALID_TICKET = "invalid_ticket"


@dataclass(frozen=True)
class Finding:
    """A single rule violation, before it is turned into display text."""

    kind: FindingKind
    params: Dict[str, Any] = field(default_factory=dict)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: List[str] = Field(default_factory=list)
    findings: List[Finding] = Field(default_factory=list, exclude=True)

    @model_validator(mode="after")
    def _valid_matches_errors(self) -> "ValidationResult":
        if self.valid != (len(self.errors) == 0):
            raise ValueError("valid must be True exactly when errors is empty")
        return self

    @property
    def kinds(self) -> List[FindingKind]:
        return [finding.kind for finding in self.findings]
