"""Rule sets applied to a normalized first line.

Each rule set appends every violation it finds to a ``FindingCollector``
and hands it to ``finish``; no rule decides validity on its own.
"""
import re
from abc import ABC, abstractmethod

from ..models import FindingKind, RuleConfig, ValidationResult
from .findings import FindingCollector, finish
from .parser import ParseFailure, format_example, parse_conventional

TICKET_PATTERN = re.compile(r"[A-Z]+-[0-9]+", re.ASCII)
TICKET_MIN_LENGTH = 5
TICKET_EXAMPLE = "ABC-123"


def looks_like_ticket(prefix: str) -> bool:
    """Check for an issue key such as ``ABC-123``."""
    return len(prefix) >= TICKET_MIN_LENGTH and TICKET_PATTERN.fullmatch(prefix) is not None


def check_line_length(line: str, rules: RuleConfig, findings: FindingCollector) -> None:
    if rules.max_line_length > 0 and len(line) > rules.max_line_length:
        findings.add(
            FindingKind.LINE_TOO_LONG, length=len(line), limit=rules.max_line_length
        )


class RuleSet(ABC):
    """Abstract base class for style rule sets."""

    @abstractmethod
    def validate(self, line: str, rules: RuleConfig) -> ValidationResult:
        """Validate a non-empty, normalized first line."""
        pass


class ConventionalRuleSet(RuleSet):
    """Rules for ``type(scope)!: subject`` messages."""

    def validate(self, line: str, rules: RuleConfig) -> ValidationResult:
        findings = FindingCollector()

        outcome = parse_conventional(line)
        if not outcome.ok:
            self._diagnose(line, outcome.failure, rules, findings)
            return finish(findings)

        parsed = outcome.parsed
        if parsed.type != parsed.type.lower():
            findings.add(FindingKind.TYPE_NOT_LOWERCASE, commit_type=parsed.type)

        if parsed.type not in rules.allowed_types:
            findings.add(
                FindingKind.TYPE_NOT_ALLOWED,
                commit_type=parsed.type,
                allowed=list(rules.allowed_types),
            )

        if rules.scope_required and not parsed.scope:
            findings.add(FindingKind.SCOPE_REQUIRED, example=format_example(True))

        check_line_length(line, rules, findings)

        if rules.lowercase_start and parsed.subject[:1].isupper():
            findings.add(FindingKind.SUBJECT_NOT_LOWERCASE)

        return finish(findings)

    def _diagnose(
        self,
        line: str,
        failure: ParseFailure,
        rules: RuleConfig,
        findings: FindingCollector,
    ) -> None:
        """Explain a failed parse with the most specific findings available."""
        example = format_example(rules.scope_required)
        colon = line.find(":")
        has_open = "(" in line

        if colon < 0:
            findings.add(FindingKind.MISSING_SEPARATOR, example=example)
        elif failure is ParseFailure.EMPTY_SUBJECT or not line[colon + 1:].strip():
            findings.add(FindingKind.EMPTY_SUBJECT)

        if failure is ParseFailure.UNCLOSED_SCOPE or line.count("(") > line.count(")"):
            findings.add(FindingKind.UNCLOSED_SCOPE, example=format_example(True))

        if rules.scope_required and not has_open:
            findings.add(FindingKind.MISSING_SCOPE, example=format_example(True))

        if not findings:
            findings.add(FindingKind.NOT_CONVENTIONAL, example=example)


class IssuePrefixRuleSet(RuleSet):
    """Rules for ``ABC-123: subject`` messages."""

    def validate(self, line: str, rules: RuleConfig) -> ValidationResult:
        findings = FindingCollector()

        colon = line.find(":")
        if colon <= 0:
            findings.add(
                FindingKind.MISSING_SEPARATOR, example=f"{TICKET_EXAMPLE}: summary"
            )
            return finish(findings)

        prefix = line[:colon].strip()
        subject = line[colon + 1:].strip()

        if not subject:
            findings.add(FindingKind.EMPTY_SUBJECT)

        if not looks_like_ticket(prefix):
            findings.add(FindingKind.INVALID_TICKET, prefix=prefix, example=TICKET_EXAMPLE)

        check_line_length(line, rules, findings)

        return finish(findings)
