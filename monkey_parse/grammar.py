"""
Record grammar for monkey notes.

Recognizes exactly one record at the start of a text and returns the
unconsumed remainder together with the parsed Monkey:

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

Each line is a chain of combinators (see combinators.py). Whitespace is
significant: the single space after the operator is required, while the
newline-plus-indentation between lines is a multispace1 run. The last
line ends with multispace0 so the final record of a file needs no
trailing blank line.

On mismatch a GrammarError (UnexpectedToken, MalformedInteger,
InvalidOperatorOperand) is raised with the failing field and the offset
into the text. Nothing is mutated on failure.
"""

from __future__ import annotations

import logging

from monkey_parse.combinators import (
    alt,
    delimited,
    digit1,
    multispace0,
    multispace1,
    named,
    pair,
    preceded,
    separated_list0,
    tag,
    terminated,
    to_u32,
    u32,
)
from monkey_parse.config import GrammarConfig
from monkey_parse.exceptions import (
    GrammarDefectError,
    GrammarError,
    InvalidOperatorOperand,
)
from monkey_parse.model import Add, Monkey, Multiply, Operation, Square

logger = logging.getLogger(__name__)

ADD = "+"
MULTIPLY = "*"


def build_operation(
    operator: str,
    operand: str,
    self_operand: str = "old",
    offset: int = 0,
) -> Operation:
    """Interpret the raw operator and operand tokens of an operation line.

    ``+ <digits>`` -> Add, ``* <digits>`` -> Multiply, ``* old`` -> Square.

    Args:
        operator: ``"+"`` or ``"*"``.
        operand: A digit string or the self operand token.
        self_operand: The token meaning "the item's own value".
        offset: Offset of the operand, used in error messages.

    Raises:
        InvalidOperatorOperand: For ``+`` with the self operand.
        MalformedInteger: If a numeric operand exceeds the u32 range.
        GrammarDefectError: For any operator other than ``+`` or ``*``.
    """
    if operator == ADD:
        if operand == self_operand:
            raise InvalidOperatorOperand(
                f"'{ADD} {self_operand}' is not a supported operation",
                rule="operation",
                offset=offset,
            )
        return Add(operand=to_u32(operand, offset))
    if operator == MULTIPLY:
        if operand == self_operand:
            return Square()
        return Multiply(operand=to_u32(operand, offset))
    raise GrammarDefectError(f"Failed to match operation char: {operator!r}")


class RecordGrammar:
    """Parser for a single monkey record.

    The combinator chain is built once from a GrammarConfig in
    ``__init__`` and is read-only afterwards, so one instance can parse
    any number of independent texts.
    """

    def __init__(self, config: GrammarConfig | None = None) -> None:
        self.config = config or GrammarConfig()
        c = self.config

        self._id = named(
            "id", delimited(tag(c.record_tag), u32(), pair(tag(":"), multispace1()))
        )
        self._items = named(
            "items",
            terminated(
                preceded(tag(c.items_tag), separated_list0(tag(c.item_separator), u32())),
                multispace1(),
            ),
        )
        self._operator = named(
            "operation", preceded(tag(c.operation_tag), alt(tag(ADD), tag(MULTIPLY)))
        )
        self._operand = named(
            "operation",
            delimited(tag(" "), alt(digit1(), tag(c.self_operand)), multispace1()),
        )
        self._test_denom = named(
            "test_denom", delimited(tag(c.test_tag), u32(), multispace1())
        )
        self._on_true = named(
            "on_true_recipient_id", delimited(tag(c.if_true_tag), u32(), multispace1())
        )
        self._on_false = named(
            "on_false_recipient_id", delimited(tag(c.if_false_tag), u32(), multispace0())
        )

    def parse(self, text: str) -> tuple[str, Monkey]:
        """Parse one record from the start of *text*.

        Returns:
            ``(remaining, monkey)`` where *remaining* is the unconsumed
            suffix of *text*.

        Raises:
            GrammarError: If the text does not start with a well-formed record.
        """
        offset = 0
        offset, monkey_id = self._id(text, offset)
        offset, items = self._items(text, offset)
        offset, operator = self._operator(text, offset)
        operand_offset = offset + 1
        offset, operand = self._operand(text, offset)
        try:
            operation = build_operation(
                operator, operand, self.config.self_operand, operand_offset
            )
        except GrammarError as e:
            e.field = "operation"
            raise
        offset, test_denom = self._test_denom(text, offset)
        offset, on_true = self._on_true(text, offset)
        offset, on_false = self._on_false(text, offset)

        monkey = Monkey(
            id=monkey_id,
            items=tuple(items),
            operation=operation,
            test_denom=test_denom,
            on_true_recipient_id=on_true,
            on_false_recipient_id=on_false,
        )
        logger.debug(
            "Parsed monkey %d: %d item(s), new = %s %s (%d chars)",
            monkey.id,
            len(monkey.items),
            self.config.self_operand,
            monkey.operation.describe(self.config.self_operand),
            offset,
        )
        return text[offset:], monkey


def parse_monkey(text: str, config: GrammarConfig | None = None) -> tuple[str, Monkey]:
    """Parse one monkey record from the start of *text*.

    Convenience wrapper around ``RecordGrammar(config).parse(text)``.

    Raises:
        GrammarError: If the text does not start with a well-formed record.
    """
    return RecordGrammar(config).parse(text)
