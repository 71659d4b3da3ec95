"""
Record-stream parser for monkey notes.

Applies the record grammar repeatedly to a whole text buffer, collecting
monkeys in textual order.

Termination policy: the first GrammarError ends the stream. Whatever has
been parsed so far is returned and the error is dropped, so trailing
garbage, a truncated last record, or an empty buffer simply yield fewer
(possibly zero) monkeys. The stop reason is only logged at DEBUG level.

Every successful record consumes at least the (non-empty) record tag, so
the loop always terminates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from monkey_parse.config import GrammarConfig
from monkey_parse.exceptions import GrammarError
from monkey_parse.grammar import RecordGrammar
from monkey_parse.model import Monkey

logger = logging.getLogger(__name__)


def iter_monkeys(text: str, config: GrammarConfig | None = None) -> Iterator[Monkey]:
    """Yield monkeys from *text* until the grammar stops matching.

    Never raises GrammarError. A GrammarDefectError still propagates,
    since it signals a bug rather than malformed notes.
    """
    grammar = RecordGrammar(config)
    remaining = text
    count = 0
    while True:
        try:
            remaining, monkey = grammar.parse(remaining)
        except GrammarError as e:
            consumed = len(text) - len(remaining)
            logger.debug(
                "Stopped after %d monkey(s) at offset %d: %s",
                count, consumed + e.offset, e,
            )
            return
        count += 1
        yield monkey


def parse_monkeys(text: str, config: GrammarConfig | None = None) -> list[Monkey]:
    """Parse every monkey record in *text*, in order.

    Lenient by design: parsing stops silently at the first record that
    does not match, and the monkeys parsed before it are returned.

    Args:
        text: The full notes buffer.
        config: Keyword literals; the standard notes wording if None.

    Returns:
        Parsed monkeys in textual order (possibly empty). The list index
        is not checked against ``Monkey.id``.
    """
    monkeys = list(iter_monkeys(text, config))
    logger.info("Parsed %d monkey(s)", len(monkeys))
    return monkeys
