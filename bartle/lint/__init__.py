"""Commit message linting.

The package is pure: it takes a message and a ``RuleConfig`` and returns
a ``ValidationResult`` without touching files, git or the console.

Example:
    ```python
    from bartle.lint import validate_message
    from bartle.models import RuleConfig

    result = validate_message("feat(ui): add dropdown", RuleConfig())
    assert result.valid
    ```
"""

from .findings import FindingCollector, finish, render_finding
from .normalize import first_line
from .parser import ParseFailure, ParseOutcome, format_example, parse_conventional
from .rules import ConventionalRuleSet, IssuePrefixRuleSet, RuleSet, looks_like_ticket
from .validator import CommitMessageValidator, rule_set_for, validate_message

__all__ = [
    "CommitMessageValidator",
    "ConventionalRuleSet",
    "FindingCollector",
    "IssuePrefixRuleSet",
    "ParseFailure",
    "ParseOutcome",
    "RuleSet",
    "finish",
    "first_line",
    "format_example",
    "looks_like_ticket",
    "parse_conventional",
    "render_finding",
    "rule_set_for",
    "validate_message",
]
