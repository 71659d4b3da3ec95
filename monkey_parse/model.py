"""
Data model for parsed monkey notes.

Key models:
- Monkey: one parsed record (id, items, operation, test divisor, recipients).
- Add / Multiply / Square: the closed set of item operations, combined into
  the ``Operation`` tagged union discriminated by ``kind``.

All models are frozen Pydantic models: a Monkey is built once, atomically,
by the grammar and never mutated afterwards. ``items`` is a tuple so the
parsed worklist cannot be changed in place either.

Not validated here (left to downstream consumers):
- uniqueness of ``Monkey.id`` within one parse;
- that recipient ids refer to monkeys that actually exist.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

U32_MAX = 2**32 - 1

U32 = Annotated[int, Field(ge=0, le=U32_MAX)]


class Add(BaseModel):
    """``new = old + operand``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["add"] = "add"
    operand: U32

    def describe(self, self_operand: str = "old") -> str:
        return f"+ {self.operand}"


class Multiply(BaseModel):
    """``new = old * operand``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multiply"] = "multiply"
    operand: U32

    def describe(self, self_operand: str = "old") -> str:
        return f"* {self.operand}"


class Square(BaseModel):
    """``new = old * old``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["square"] = "square"

    def describe(self, self_operand: str = "old") -> str:
        return f"* {self_operand}"


Operation = Annotated[Union[Add, Multiply, Square], Field(discriminator="kind")]


class Monkey(BaseModel):
    """One parsed monkey record.

    Attributes:
        id: Identifier as written in the notes (not regenerated).
        items: Worry levels in processing order.
        operation: How an item's value changes on inspection.
        test_denom: Divisor used by the downstream divisibility test.
        on_true_recipient_id: Monkey receiving items that pass the test.
        on_false_recipient_id: Monkey receiving items that fail the test.
    """

    model_config = ConfigDict(frozen=True)

    id: U32
    items: tuple[U32, ...]
    operation: Operation
    test_denom: U32
    on_true_recipient_id: U32
    on_false_recipient_id: U32
