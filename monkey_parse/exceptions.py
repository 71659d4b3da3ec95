"""
Custom exception hierarchy for monkey-parse.

Why a custom hierarchy:
- Callers can tell a recoverable grammar mismatch (GrammarError) apart
  from a defect in the grammar itself (GrammarDefectError) without
  relying on generic ValueError/RuntimeError.
- Grammar errors carry the failing rule, field and offset, which makes
  malformed notes easy to locate.
"""

from __future__ import annotations


class MonkeyParseError(Exception):
    """Base exception for all monkey-parse errors."""


class GrammarError(MonkeyParseError):
    """Raised when a record does not match the grammar at some offset.

    These are local, recoverable failures: the stream parser treats any
    GrammarError as "no more records".

    Attributes:
        rule: Description of the sub-rule that did not match
            (e.g. ``tag('Monkey ')`` or ``u32``).
        offset: Index into the text handed to the grammar.
        field: Record field being parsed when the rule failed
            (e.g. ``"items"``). Filled in by the grammar, may be None.
    """

    def __init__(
        self,
        message: str,
        *,
        rule: str,
        offset: int,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.rule = rule
        self.offset = offset
        self.field = field

    def __str__(self) -> str:
        prefix = f"{self.field}: " if self.field else ""
        return f"{prefix}{self.message} at offset {self.offset}"


class UnexpectedToken(GrammarError):
    """A required literal (or whitespace run) was absent at the expected offset."""


class MalformedInteger(GrammarError):
    """Digits were absent, or the numeral does not fit in an unsigned 32-bit integer."""


class InvalidOperatorOperand(GrammarError):
    """The operator cannot be combined with the operand (``+ old``)."""


class GrammarDefectError(MonkeyParseError):
    """Raised when the grammar reaches a state its own rules rule out.

    For example, an operator character other than ``+`` or ``*`` reaching
    operation interpretation. This is a bug, not bad input, so it is
    deliberately not a GrammarError.
    """


class ConfigValidationError(MonkeyParseError):
    """Raised when a grammar config file is empty or unusable."""
