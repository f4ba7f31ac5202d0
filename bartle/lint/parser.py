"""Scanner for the ``type(scope)!: subject`` commit subject grammar."""
import string
from enum import Enum
from typing import NamedTuple, Optional

from ..models import ParsedSubject

TYPE_LETTERS = frozenset(string.ascii_letters)


class ParseFailure(str, Enum):
    EMPTY_LINE = "empty_line"
    MISSING_TYPE = "missing_type"
    UNCLOSED_SCOPE = "unclosed_scope"
    MISSING_SEPARATOR = "missing_separator"
    EMPTY_SUBJECT = "empty_subject"


class ParseOutcome(NamedTuple):
    """Either a complete ``ParsedSubject`` or the reason the scan stopped."""

    parsed: Optional[ParsedSubject] = None
    failure: Optional[ParseFailure] = None

    @property
    def ok(self) -> bool:
        return self.parsed is not None


class Cursor:
    """Forward-only position over a line of text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        return None if self.done else self.text[self.pos]

    def accept(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def take_while(self, predicate) -> str:
        start = self.pos
        while not self.done and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def take_until(self, char: str) -> Optional[str]:
        """Consume up to and including ``char``; return the text before it."""
        end = self.text.find(char, self.pos)
        if end < 0:
            return None
        taken = self.text[self.pos:end]
        self.pos = end + 1
        return taken

    def rest(self) -> str:
        taken = self.text[self.pos:]
        self.pos = len(self.text)
        return taken


def _fail(reason: ParseFailure) -> ParseOutcome:
    return ParseOutcome(failure=reason)


def parse_conventional(line: str) -> ParseOutcome:
    """Parse ``type ['(' scope ')'] ['!'] ':' WS* subject``.

    The scan is left to right with no backtracking. Nothing is returned
    on failure except the reason.
    """
    cursor = Cursor(line.strip())
    if cursor.done:
        return _fail(ParseFailure.EMPTY_LINE)

    commit_type = cursor.take_while(TYPE_LETTERS.__contains__)
    if not commit_type:
        return _fail(ParseFailure.MISSING_TYPE)

    scope = ""
    if cursor.accept("("):
        scope = cursor.take_until(")")
        if scope is None:
            return _fail(ParseFailure.UNCLOSED_SCOPE)

    breaking = cursor.accept("!")

    if not cursor.accept(":"):
        return _fail(ParseFailure.MISSING_SEPARATOR)

    cursor.take_while(str.isspace)
    subject = cursor.rest()
    if not subject:
        return _fail(ParseFailure.EMPTY_SUBJECT)

    return ParseOutcome(
        parsed=ParsedSubject(
            type=commit_type, scope=scope, subject=subject, breaking=breaking
        )
    )


def format_example(require_scope: bool) -> str:
    """Example subject shown in diagnostics."""
    return "type(scope): subject" if require_scope else "type: subject"
