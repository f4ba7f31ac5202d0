"""Commit message validation entry point."""
from typing import Dict, Optional

from ..models import FindingKind, RuleConfig, Style, ValidationResult
from .findings import FindingCollector, finish
from .normalize import first_line
from .rules import ConventionalRuleSet, IssuePrefixRuleSet, RuleSet

_CONVENTIONAL = ConventionalRuleSet()

RULE_SETS: Dict[Style, RuleSet] = {
    Style.CONVENTIONAL: _CONVENTIONAL,
    Style.CUSTOM: _CONVENTIONAL,
    Style.JIRA: IssuePrefixRuleSet(),
}


def rule_set_for(style) -> RuleSet:
    """Select the rule set for a style name or ``Style`` value.

    Unknown names resolve to ``Style.CUSTOM`` and therefore to the
    conventional rules.
    """
    return RULE_SETS[Style.parse(style)]


def validate_message(message: str, rules: Optional[RuleConfig] = None) -> ValidationResult:
    """Validate the first line of a commit message.

    Args:
        message: Raw commit message, possibly multi-line
        rules: Resolved rules; defaults are used when omitted

    Returns:
        ValidationResult: ``valid`` is True exactly when ``errors`` is empty
    """
    rules = rules or RuleConfig()

    line = first_line(message)
    if not line:
        findings = FindingCollector()
        findings.add(FindingKind.EMPTY_MESSAGE)
        return finish(findings)

    return rule_set_for(rules.style).validate(line, rules)


class CommitMessageValidator:
    """Validates commit messages against a fixed set of rules."""

    def __init__(self, rules: Optional[RuleConfig] = None):
        self.rules = rules or RuleConfig()

    def validate(self, message: str) -> ValidationResult:
        return validate_message(message, self.rules)
