"""Formatting strategy abstract base class.

A strategy is resolved once per configuration (see ``factory.build_strategy``)
and bundles the formatter, its inverse parser and the caret rules that
depend on the formatting mode.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import StrEnum

from currency_format.formatting.primitives import parse_float, to_numeric_string
from currency_format.models.values import ValueObject

DIGIT_PATTERN = re.compile(r"[0-9]")

RawValue = str | int | float | Decimal | None


class FormatKind(StrEnum):
    NUMERIC = "numeric"
    PATTERN = "pattern"
    CUSTOM = "custom"


class CaretDirection(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class FormatStrategy(ABC):
    """Formatter, parser and caret rules for one configuration."""

    kind: FormatKind
    has_fixed_decimal: bool = False

    def __init__(self, config):
        self.config = config

    @property
    def allow_empty_formatting(self) -> bool:
        return self.config.allow_empty_formatting

    # -- formatting ---------------------------------------------------------

    @abstractmethod
    def format_num_string(self, value: str) -> str:
        """Render a raw value (already stripped of formatting) as display text."""
        ...

    @abstractmethod
    def remove_formatting(self, text: str) -> str:
        """Recover the raw value from display text."""
        ...

    @abstractmethod
    def normalize_value(self, value: str) -> str:
        """Canonical raw value for a programmatically supplied string."""
        ...

    def format_input(self, text: str) -> str:
        """Re-format text typed by the user."""
        return self.format_num_string(self.remove_formatting(text))

    def format_value(self, value: RawValue) -> str:
        """Render a programmatic value (number, numeric string or ``None``)."""
        if value is None:
            raw = ""
        elif isinstance(value, str):
            raw = value
        else:
            raw = to_numeric_string(value)
        return self.format_num_string(self.normalize_value(raw) if raw else "")

    def to_value_object(self, formatted: str, name: str | None = None) -> ValueObject:
        raw = self.remove_formatting(formatted)
        return ValueObject(
            formatted_value=formatted,
            value=raw,
            float_value=parse_float(raw),
            name=name,
        )

    # -- caret rules --------------------------------------------------------

    def number_pattern(self, ignore_decimal_separator: bool = False) -> re.Pattern[str]:
        """Characters that count as typed input when remapping the caret."""
        return DIGIT_PATTERN

    @abstractmethod
    def correct_caret_position(
        self, value: str, caret_pos: int, direction: CaretDirection | None = None
    ) -> int:
        """Clamp *caret_pos* into the editable part of *value*."""
        ...

    @abstractmethod
    def editable_bounds(self, value: str) -> tuple[int, int]:
        """Leftmost and rightmost caret positions the keyboard may reach."""
        ...

    def is_character_a_format(self, caret_pos: int, value: str) -> bool:
        """True when the character at *caret_pos* is protected formatting."""
        return False

    def collapse_deleted_value(self, value: str, last_num_str: str) -> str | None:
        """Replacement text for a deletion that emptied the value, if any."""
        return None

    def home_position(self, value: str) -> int:
        return self.correct_caret_position(value, 0, CaretDirection.LEFT)

    def end_position(self, value: str) -> int:
        return self.correct_caret_position(value, len(value), CaretDirection.RIGHT)
