"""
Sub-parser combinators for the monkey record grammar.

A parser is a plain callable ``(text, offset) -> (new_offset, value)``.
On mismatch it raises a GrammarError subclass naming the failed rule and
the offset; it never mutates anything, so the caller can always retry
the original text with another rule.

Builders:
- tag, digit1, u32, multispace0, multispace1: terminal rules.
- alt: ordered choice.
- preceded, terminated, delimited, pair: sequencing.
- separated_list0: zero or more elements with a separator.
- named: label failures with the record field being parsed.

Offsets (rather than string slices) are threaded through the chain so
errors can report where in the record they happened.
"""

from __future__ import annotations

import re
from typing import Any, Callable, TypeVar

from monkey_parse.exceptions import GrammarError, MalformedInteger, UnexpectedToken
from monkey_parse.model import U32_MAX

T = TypeVar("T")
U = TypeVar("U")

Parser = Callable[[str, int], tuple[int, T]]

_DIGITS = re.compile(r"[0-9]+")
_MULTISPACE = re.compile(r"[ \t\r\n]*")

_U32_MAX_TEXT = str(U32_MAX)
_U32_MAX_DIGITS = len(_U32_MAX_TEXT)


def _snippet(text: str, offset: int, width: int = 12) -> str:
    """Return a short excerpt of *text* at *offset* for error messages."""
    found = text[offset:offset + width]
    return repr(found) if found else "end of input"


def _abbreviate(digits: str, width: int = 20) -> str:
    if len(digits) <= width:
        return digits
    return f"{digits[:width]}... ({len(digits)} digits)"


# ---------------------------------------------------------------------------
# Terminal rules
# ---------------------------------------------------------------------------

def tag(literal: str) -> Parser[str]:
    """Match exactly *literal*."""
    rule = f"tag({literal!r})"

    def _tag(text: str, offset: int) -> tuple[int, str]:
        if text.startswith(literal, offset):
            return offset + len(literal), literal
        raise UnexpectedToken(
            f"expected {literal!r}, found {_snippet(text, offset)}",
            rule=rule,
            offset=offset,
        )

    return _tag


def digit1() -> Parser[str]:
    """Match one or more ASCII digits; the value is the digit string."""

    def _digit1(text: str, offset: int) -> tuple[int, str]:
        match = _DIGITS.match(text, offset)
        if match is None:
            raise MalformedInteger(
                f"expected digits, found {_snippet(text, offset)}",
                rule="digit1",
                offset=offset,
            )
        return match.end(), match.group()

    return _digit1


def to_u32(digits: str, offset: int) -> int:
    """Convert a digit string to an int, failing if it exceeds ``U32_MAX``.

    Leading zeros are allowed in any number. The length is checked before
    ``int()`` runs, so arbitrarily long numerals fail as MalformedInteger
    instead of hitting the interpreter's integer-string size limit.
    """
    significant = digits.lstrip("0") or "0"
    too_large = len(significant) > _U32_MAX_DIGITS or (
        len(significant) == _U32_MAX_DIGITS and significant > _U32_MAX_TEXT
    )
    if too_large:
        raise MalformedInteger(
            f"{_abbreviate(digits)} does not fit in an unsigned 32-bit integer",
            rule="u32",
            offset=offset,
        )
    try:
        return int(significant)
    except ValueError as e:
        raise MalformedInteger(
            f"{_abbreviate(digits)} is not a decimal integer",
            rule="u32",
            offset=offset,
        ) from e


def u32() -> Parser[int]:
    """Match an unsigned 32-bit decimal integer."""
    digits = digit1()

    def _u32(text: str, offset: int) -> tuple[int, int]:
        try:
            end, raw = digits(text, offset)
        except MalformedInteger as e:
            e.rule = "u32"
            raise
        return end, to_u32(raw, offset)

    return _u32


def multispace0() -> Parser[str]:
    """Match zero or more spaces, tabs, carriage returns or newlines."""

    def _multispace0(text: str, offset: int) -> tuple[int, str]:
        match = _MULTISPACE.match(text, offset)
        return match.end(), match.group()

    return _multispace0


def multispace1() -> Parser[str]:
    """Match one or more spaces, tabs, carriage returns or newlines."""
    inner = multispace0()

    def _multispace1(text: str, offset: int) -> tuple[int, str]:
        end, value = inner(text, offset)
        if not value:
            raise UnexpectedToken(
                f"expected whitespace, found {_snippet(text, offset)}",
                rule="multispace1",
                offset=offset,
            )
        return end, value

    return _multispace1


# ---------------------------------------------------------------------------
# Choice and sequencing
# ---------------------------------------------------------------------------

def alt(*parsers: Parser[Any]) -> Parser[Any]:
    """Try each parser in order at the same offset; return the first success.

    If every alternative fails, the last failure is re-raised.
    """
    if not parsers:
        raise ValueError("alt() needs at least one parser")

    def _alt(text: str, offset: int) -> tuple[int, Any]:
        last_error: GrammarError | None = None
        for parser in parsers:
            try:
                return parser(text, offset)
            except GrammarError as e:
                last_error = e
        raise last_error

    return _alt


def pair(first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Run *first* then *second*; the value is both results."""

    def _pair(text: str, offset: int) -> tuple[int, tuple[T, U]]:
        offset, a = first(text, offset)
        offset, b = second(text, offset)
        return offset, (a, b)

    return _pair


def preceded(first: Parser[Any], second: Parser[T]) -> Parser[T]:
    """Run *first* then *second*; keep only the result of *second*."""

    def _preceded(text: str, offset: int) -> tuple[int, T]:
        offset, _ = first(text, offset)
        return second(text, offset)

    return _preceded


def terminated(first: Parser[T], second: Parser[Any]) -> Parser[T]:
    """Run *first* then *second*; keep only the result of *first*."""

    def _terminated(text: str, offset: int) -> tuple[int, T]:
        offset, value = first(text, offset)
        offset, _ = second(text, offset)
        return offset, value

    return _terminated


def delimited(open_: Parser[Any], inner: Parser[T], close: Parser[Any]) -> Parser[T]:
    """Run *open_*, *inner*, *close*; keep only the result of *inner*."""
    return preceded(open_, terminated(inner, close))


def separated_list0(separator: Parser[Any], element: Parser[T]) -> Parser[list[T]]:
    """Match zero or more *element* separated by *separator*.

    Never fails. A separator that is not followed by an element is left
    unconsumed, so the next rule sees it.
    """

    def _separated_list0(text: str, offset: int) -> tuple[int, list[T]]:
        values: list[T] = []
        try:
            offset, value = element(text, offset)
        except GrammarError:
            return offset, values
        values.append(value)
        while True:
            try:
                after_sep, _ = separator(text, offset)
                after_elem, value = element(text, after_sep)
            except GrammarError:
                return offset, values
            values.append(value)
            offset = after_elem

    return _separated_list0


def named(field: str, parser: Parser[T]) -> Parser[T]:
    """Attach the record field name to any failure raised by *parser*."""

    def _named(text: str, offset: int) -> tuple[int, T]:
        try:
            return parser(text, offset)
        except GrammarError as e:
            if e.field is None:
                e.field = field
            raise

    return _named
