"""Finding accumulation and conversion to display text."""
from typing import Callable, Dict, List

from ..models import Finding, FindingKind, ValidationResult

ERROR_MARKER = " - "

_TEMPLATES: Dict[FindingKind, Callable[..., str]] = {
    FindingKind.EMPTY_MESSAGE: lambda: "empty commit message",
    FindingKind.MISSING_SEPARATOR: lambda example: f"missing ':' separator (e.g., {example})",
    FindingKind.EMPTY_SUBJECT: lambda: "empty subject after ':'",
    FindingKind.UNCLOSED_SCOPE: lambda example: (
        f"unclosed scope '(' (expected ')', e.g., {example})"
    ),
    FindingKind.MISSING_SCOPE: lambda example: f"missing scope (e.g., {example})",
    FindingKind.NOT_CONVENTIONAL: lambda example: f"not conventional format (e.g., {example})",
    FindingKind.TYPE_NOT_LOWERCASE: lambda commit_type: f'type must be lowercase (got "{commit_type}")',
    FindingKind.TYPE_NOT_ALLOWED: lambda commit_type, allowed: (
        f'type "{commit_type}" not allowed (choose one of: {", ".join(allowed)})'
    ),
    FindingKind.SCOPE_REQUIRED: lambda example: f"scope required (e.g., {example})",
    FindingKind.LINE_TOO_LONG: lambda length, limit: f"first line too long ({length} > {limit})",
    FindingKind.SUBJECT_NOT_LOWERCASE: lambda: "subject should start lowercase",
    FindingKind.INVALID_TICKET: lambda prefix, example: (
        f"prefix \"{prefix}\" doesn't look like a ticket (e.g., {example})"
    ),
}


def render_finding(finding: Finding) -> str:
    """Turn a finding into a standalone diagnostic line."""
    return ERROR_MARKER + _TEMPLATES[finding.kind](**finding.params)


class FindingCollector:
    """Ordered accumulator of findings for one validation pass."""

    def __init__(self):
        self.findings: List[Finding] = []

    def add(self, kind: FindingKind, **params) -> None:
        self.findings.append(Finding(kind, params))

    def __len__(self) -> int:
        return len(self.findings)


def finish(collector: FindingCollector) -> ValidationResult:
    """Build the result; validity is derived from the findings and nothing else."""
    findings = list(collector.findings)
    return ValidationResult(
        valid=len(findings) == 0,
        errors=[render_finding(finding) for finding in findings],
        findings=findings,
    )
