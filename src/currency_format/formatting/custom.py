"""Caller-defined formatting functions."""
from __future__ import annotations

from currency_format.formatting.base import CaretDirection, FormatKind, FormatStrategy
from currency_format.formatting.primitives import extract_digits
from currency_format.models.options import CustomFormatConfig


class CustomFormat(FormatStrategy):
    kind = FormatKind.CUSTOM
    config: CustomFormatConfig

    def format_num_string(self, value: str) -> str:
        if value == "":
            return ""
        return self.config.format(value)

    def remove_formatting(self, text: str) -> str:
        if not text:
            return text
        if self.config.remove_formatting is not None:
            return self.config.remove_formatting(text)
        return extract_digits(text)

    def normalize_value(self, value: str) -> str:
        return value

    def correct_caret_position(
        self, value: str, caret_pos: int, direction: CaretDirection | None = None
    ) -> int:
        return caret_pos

    def editable_bounds(self, value: str) -> tuple[int, int]:
        return 0, len(value)
