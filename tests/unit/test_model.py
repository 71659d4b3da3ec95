"""
Unit tests for the data model (monkey_parse.model).

Tests u32 range validation, immutability, value equality, and the
discriminated Operation union.
"""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from monkey_parse.model import U32_MAX, Add, Monkey, Multiply, Operation, Square


def _make_monkey(**overrides) -> Monkey:
    defaults = {
        "id": 0,
        "items": (79, 98),
        "operation": Multiply(operand=19),
        "test_denom": 23,
        "on_true_recipient_id": 2,
        "on_false_recipient_id": 3,
    }
    defaults.update(overrides)
    return Monkey(**defaults)


class TestOperation:
    """Tests for Add / Multiply / Square."""

    def test_kinds(self):
        assert Add(operand=1).kind == "add"
        assert Multiply(operand=1).kind == "multiply"
        assert Square().kind == "square"

    def test_describe(self):
        assert Add(operand=6).describe() == "+ 6"
        assert Multiply(operand=19).describe() == "* 19"
        assert Square().describe() == "* old"

    def test_describe_uses_configured_self_operand(self):
        assert Square().describe("self") == "* self"
        assert Add(operand=2).describe("self") == "+ 2"

    def test_equality_by_value(self):
        assert Add(operand=3) == Add(operand=3)
        assert Add(operand=3) != Multiply(operand=3)

    def test_negative_operand_rejected(self):
        with pytest.raises(ValidationError):
            Add(operand=-1)

    def test_operand_above_u32_rejected(self):
        with pytest.raises(ValidationError):
            Multiply(operand=U32_MAX + 1)

    def test_union_dispatches_on_kind(self):
        adapter = TypeAdapter(Operation)
        assert adapter.validate_python({"kind": "square"}) == Square()
        assert adapter.validate_python({"kind": "add", "operand": 2}) == Add(operand=2)

    def test_union_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Operation).validate_python({"kind": "subtract", "operand": 2})


class TestMonkey:
    """Tests for Monkey."""

    def test_items_are_a_tuple(self):
        monkey = _make_monkey(items=[1, 2, 3])
        assert monkey.items == (1, 2, 3)

    def test_frozen(self):
        monkey = _make_monkey()
        with pytest.raises(ValidationError):
            monkey.id = 5

    def test_hashable(self):
        assert len({_make_monkey(), _make_monkey()}) == 1

    def test_all_fields_required(self):
        with pytest.raises(ValidationError, match="items"):
            Monkey(
                id=0,
                operation=Square(),
                test_denom=1,
                on_true_recipient_id=0,
                on_false_recipient_id=0,
            )

    def test_item_range_checked(self):
        with pytest.raises(ValidationError):
            _make_monkey(items=(U32_MAX + 1,))

    def test_operation_from_dict(self):
        monkey = _make_monkey(operation={"kind": "add", "operand": 6})
        assert monkey.operation == Add(operand=6)

    def test_zero_divisor_accepted(self):
        assert _make_monkey(test_denom=0).test_denom == 0
