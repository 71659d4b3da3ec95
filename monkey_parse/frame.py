"""
Tabular view of parsed monkeys.

Flattens a sequence of Monkey models into a pandas DataFrame, one row per
monkey in input order. Handy for inspecting a set of notes at a glance.

Columns:
- id, test_denom, on_true_recipient_id, on_false_recipient_id: uint32.
- items: tuple of worry levels (object column).
- operation: the operation kind ("add", "multiply", "square").
- operand: nullable UInt32; <NA> for "square".
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from monkey_parse.model import Monkey, Square

FRAME_COLUMNS = [
    "id",
    "items",
    "operation",
    "operand",
    "test_denom",
    "on_true_recipient_id",
    "on_false_recipient_id",
]

_UINT32_COLUMNS = ["id", "test_denom", "on_true_recipient_id", "on_false_recipient_id"]


def monkeys_to_frame(monkeys: Iterable[Monkey]) -> pd.DataFrame:
    """Build a DataFrame with one row per monkey.

    Args:
        monkeys: Parsed monkeys, e.g. from ``parse_monkeys()``.

    Returns:
        DataFrame with ``FRAME_COLUMNS``, empty (but typed) when
        *monkeys* is empty.
    """
    records = []
    for monkey in monkeys:
        operation = monkey.operation
        records.append({
            "id": monkey.id,
            "items": monkey.items,
            "operation": operation.kind,
            "operand": None if isinstance(operation, Square) else operation.operand,
            "test_denom": monkey.test_denom,
            "on_true_recipient_id": monkey.on_true_recipient_id,
            "on_false_recipient_id": monkey.on_false_recipient_id,
        })

    df = pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)
    df = df.astype({col: "uint32" for col in _UINT32_COLUMNS})
    df["operand"] = pd.array([r["operand"] for r in records], dtype="UInt32")
    return df
