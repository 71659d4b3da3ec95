"""
Grammar configuration and YAML I/O for monkey-parse.

The record format is fixed in shape (field order, the ``:`` after the id,
the ``+``/``*`` operators) but its keyword literals live in a Pydantic
model so notes written with different wording can still be parsed.

Key pieces:
- GrammarConfig: the keyword literals, defaulting to the standard notes.
- load_config(path) -> GrammarConfig: load and validate from YAML.
- save_config(config, path): serialize to YAML.

Why Pydantic + YAML:
- Pydantic rejects unusable literals (empty tags, numeric self operand)
  before a grammar is ever built from them.
- YAML is easy to hand-edit.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from monkey_parse.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class GrammarConfig(BaseModel):
    """Keyword literals of the monkey record format.

    Every literal must be non-empty. In particular a non-empty
    ``record_tag`` means every successfully parsed record consumes some
    input, which is what keeps the stream parser from looping forever.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    record_tag: str = Field("Monkey ", description="Opens a record, followed by the id")
    items_tag: str = Field("Starting items: ", description="Precedes the item list")
    item_separator: str = Field(", ", description="Between two items")
    operation_tag: str = Field(
        "Operation: new = old ", description="Precedes the operator character"
    )
    self_operand: str = Field(
        "old", description="Operand token meaning the item's own value"
    )
    test_tag: str = Field("Test: divisible by ", description="Precedes the divisor")
    if_true_tag: str = Field(
        "If true: throw to monkey ", description="Precedes the recipient on success"
    )
    if_false_tag: str = Field(
        "If false: throw to monkey ", description="Precedes the recipient on failure"
    )

    @field_validator(
        "record_tag",
        "items_tag",
        "item_separator",
        "operation_tag",
        "self_operand",
        "test_tag",
        "if_true_tag",
        "if_false_tag",
    )
    @classmethod
    def _check_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("grammar literals must not be empty")
        return value

    @field_validator("self_operand")
    @classmethod
    def _check_self_operand_not_numeric(cls, value: str) -> str:
        # A digit-leading token would be swallowed by the numeric operand rule.
        if value[:1].isdigit():
            raise ValueError(
                f"self_operand {value!r} must not start with a digit"
            )
        return value


def load_config(path: str | Path) -> GrammarConfig:
    """Load and validate a grammar config YAML file.

    Keys missing from the file fall back to the standard literals.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded grammar config from %s", path)
    return GrammarConfig.model_validate(raw)


def save_config(config: GrammarConfig, path: str | Path) -> None:
    """Serialize a GrammarConfig to YAML.

    Literals keep their trailing spaces, so values are always quoted.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# monkey-parse grammar configuration\n")
        f.write("# Keyword literals of the monkey notes format.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            default_style='"',
            sort_keys=False,
        )
    logger.info("Saved grammar config to %s", path)
