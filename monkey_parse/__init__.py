"""
monkey-parse: Python library for parsing monkey notes.

Public API surface:

- ``parse_monkeys(text, ...)`` -- **recommended entry point**. Parses every
  record in a notes buffer and returns a list of ``Monkey``. Never raises
  on malformed input: parsing stops at the first record that does not
  match.

- ``parse_monkey(text, ...)`` -- Parses exactly one record from the start
  of the text and returns ``(remaining, monkey)``. Raises a
  ``GrammarError`` subclass on mismatch.

- ``iter_monkeys(text, ...)`` -- Lazy version of ``parse_monkeys``.

- ``monkeys_to_frame(monkeys)`` -- pandas view, one row per monkey.

- ``GrammarConfig`` / ``load_config`` / ``save_config`` -- keyword literals
  of the notes format, optionally kept in YAML.

Example::

    import monkey_parse

    monkeys = monkey_parse.parse_monkeys(notes)
    monkeys[0].operation  # Multiply(kind='multiply', operand=19)
"""

from __future__ import annotations

from monkey_parse.config import GrammarConfig, load_config, save_config
from monkey_parse.exceptions import (
    ConfigValidationError,
    GrammarDefectError,
    GrammarError,
    InvalidOperatorOperand,
    MalformedInteger,
    MonkeyParseError,
    UnexpectedToken,
)
from monkey_parse.frame import monkeys_to_frame
from monkey_parse.grammar import RecordGrammar, build_operation, parse_monkey
from monkey_parse.model import U32_MAX, Add, Monkey, Multiply, Operation, Square
from monkey_parse.stream import iter_monkeys, parse_monkeys

__all__ = [
    "parse_monkeys",
    "parse_monkey",
    "iter_monkeys",
    "build_operation",
    "RecordGrammar",
    "Monkey",
    "Add",
    "Multiply",
    "Square",
    "Operation",
    "U32_MAX",
    "GrammarConfig",
    "load_config",
    "save_config",
    "monkeys_to_frame",
    "MonkeyParseError",
    "GrammarError",
    "UnexpectedToken",
    "MalformedInteger",
    "InvalidOperatorOperand",
    "GrammarDefectError",
    "ConfigValidationError",
]
