"""Free numeric formatting: separators, decimal scale, prefix/suffix, sign."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass

from currency_format.formatting.base import CaretDirection, FormatKind, FormatStrategy
from currency_format.formatting.grouping import format_thousand
from currency_format.formatting.primitives import (
    char_at,
    escape_regexp,
    limit_to_scale,
    parse_float,
    round_to_precision,
)
from currency_format.models.options import FormatConfig

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")
_DOUBLE_NEGATION_RE = re.compile(r"-.*-")


@dataclass(frozen=True)
class SplitDecimal:
    before_decimal: str
    after_decimal: str
    has_negation: bool
    add_negation: bool


class NumericFormat(FormatStrategy):
    """Formatter and parser for ``FormatConfig``."""

    kind = FormatKind.NUMERIC
    config: FormatConfig

    def __init__(self, config: FormatConfig):
        super().__init__(config)
        self._number_re = self._build_number_pattern(ignore_decimal_separator=False)
        self._digits_only_re = self._build_number_pattern(ignore_decimal_separator=True)

    def _build_number_pattern(self, ignore_decimal_separator: bool) -> re.Pattern[str]:
        pattern = r"[0-9]"
        if self.config.decimal_scale != 0 and not ignore_decimal_separator:
            pattern += "|" + escape_regexp(self.config.decimal_separator)
        return re.compile(pattern)

    def number_pattern(self, ignore_decimal_separator: bool = False) -> re.Pattern[str]:
        return self._digits_only_re if ignore_decimal_separator else self._number_re

    @property
    def has_fixed_decimal(self) -> bool:
        return bool(self.config.decimal_scale) and self.config.fixed_decimal_scale

    # -- parsing ------------------------------------------------------------

    def split_decimal(self, num_str: str) -> SplitDecimal:
        has_negation = num_str[:1] == "-"
        num_str = num_str.replace("-", "", 1)
        parts = num_str.split(".")
        return SplitDecimal(
            before_decimal=parts[0],
            after_decimal=parts[1] if len(parts) > 1 else "",
            has_negation=has_negation,
            add_negation=has_negation and self.config.allow_negative,
        )

    def get_float_string(self, num: str = "") -> str:
        """Keep digits and the decimal separator, translated to ``.``."""
        decimal_separator = self.config.decimal_separator
        has_negation = num[:1] == "-"
        if has_negation:
            num = num.replace("-", "", 1)

        num = "".join(self._number_re.findall(num)).replace(decimal_separator, ".", 1)

        first_decimal_index = num.find(".")
        if first_decimal_index != -1:
            num = num[: first_decimal_index + 1] + num[first_decimal_index + 1 :].replace(
                decimal_separator, ""
            )

        return "-" + num if has_negation else num

    def remove_prefix_and_suffix(self, val: str) -> str:
        if not val:
            return val
        prefix, suffix = self.config.prefix, self.config.suffix

        is_negative = val[0] == "-"
        if is_negative:
            val = val[1:]
        if prefix and val.startswith(prefix):
            val = val[len(prefix) :]
        if suffix and val.endswith(suffix):
            val = val[: len(val) - len(suffix)]

        return "-" + val if is_negative else val

    def remove_formatting(self, text: str) -> str:
        if not text:
            return text
        return self.get_float_string(self.remove_prefix_and_suffix(text))

    def normalize_value(self, value: str) -> str:
        has_negation = value[:1] == "-"
        num_str = _NON_NUMERIC_RE.sub("", value[1:] if has_negation else value)

        first_decimal_index = num_str.find(".")
        if first_decimal_index != -1:
            num_str = num_str[: first_decimal_index + 1] + num_str[first_decimal_index + 1 :].replace(".", "")
            if first_decimal_index == 0:
                num_str = "0" + num_str

        if self.config.decimal_scale is not None:
            num_str = round_to_precision(num_str, self.config.decimal_scale, self.config.fixed_decimal_scale)

        return "-" + num_str if has_negation and self.config.allow_negative else num_str

    # -- formatting ---------------------------------------------------------

    def format_as_number(self, num_str: str) -> str:
        config = self.config
        has_decimal_separator = "." in num_str or self.has_fixed_decimal
        parts = self.split_decimal(num_str)
        before_decimal, after_decimal = parts.before_decimal, parts.after_decimal
        if before_decimal == "" and has_decimal_separator:
            before_decimal = "0"

        if config.decimal_scale is not None:
            after_decimal = limit_to_scale(after_decimal, config.decimal_scale, config.fixed_decimal_scale)

        if config.thousand_separator:
            before_decimal = format_thousand(before_decimal, config.thousand_separator, config.grouping)

        before_decimal = config.prefix + before_decimal
        after_decimal = after_decimal + config.suffix
        if parts.add_negation:
            before_decimal = "-" + before_decimal

        separator = config.decimal_separator if has_decimal_separator else ""
        return before_decimal + separator + after_decimal

    def format_num_string(self, value: str) -> str:
        if value == "":
            if self.allow_empty_formatting:
                return self.config.prefix + self.config.suffix
            return ""
        if value == "-":
            return "-"
        return self.format_as_number(value)

    def format_negation(self, value: str = "") -> str:
        """A single ``-`` anywhere negates the value; a second one cancels it."""
        has_negation = "-" in value
        remove_negation = _DOUBLE_NEGATION_RE.search(value) is not None
        value = value.replace("-", "")
        if has_negation and not remove_negation and self.config.allow_negative:
            value = "-" + value
        return value

    def format_input(self, text: str) -> str:
        return self.format_num_string(self.remove_formatting(self.format_negation(text)))

    # -- caret rules --------------------------------------------------------

    def correct_caret_position(
        self, value: str, caret_pos: int, direction: CaretDirection | None = None
    ) -> int:
        if not value:
            return 0
        has_negation = value[:1] == "-"
        left_bound = len(self.config.prefix) + (1 if has_negation else 0)
        right_bound = max(len(value) - len(self.config.suffix), 0)
        return min(max(caret_pos, left_bound), right_bound)

    def editable_bounds(self, value: str) -> tuple[int, int]:
        return len(self.config.prefix), len(value) - len(self.config.suffix)

    def is_character_a_format(self, caret_pos: int, value: str) -> bool:
        # The prefix starts after a leading sign so the sign stays deletable.
        offset = 1 if value[:1] == "-" else 0
        if offset <= caret_pos < offset + len(self.config.prefix):
            return True
        if caret_pos >= len(value) - len(self.config.suffix):
            return True
        return self.has_fixed_decimal and char_at(value, caret_pos) == self.config.decimal_separator

    def collapse_deleted_value(self, value: str, last_num_str: str) -> str | None:
        numeric_string = self.remove_formatting(value)
        parts = self.split_decimal(numeric_string)
        fraction = parse_float(parts.after_decimal)
        if (
            len(numeric_string) < len(last_num_str)
            and parts.before_decimal == ""
            and (math.isnan(fraction) or fraction == 0)
        ):
            return "-" if parts.add_negation else ""
        return None
