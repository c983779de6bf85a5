"""Pattern formatting: phone numbers, card numbers, dates and similar templates."""
from __future__ import annotations

from currency_format.formatting.base import CaretDirection, FormatKind, FormatStrategy
from currency_format.formatting.primitives import char_at, char_is_number, extract_digits
from currency_format.models.options import PLACEHOLDER, PatternConfig

DEFAULT_MASK_CHAR = " "


class PatternFormat(FormatStrategy):
    """Fills ``#`` placeholders of a literal template with digits or mask characters."""

    kind = FormatKind.PATTERN
    config: PatternConfig

    def __init__(self, config: PatternConfig):
        super().__init__(config)
        pattern = config.pattern
        self.first_placeholder = pattern.index(PLACEHOLDER)
        self.last_placeholder = pattern.rindex(PLACEHOLDER)
        self._literals = [part for part in pattern.split(PLACEHOLDER) if part]

    @property
    def pattern(self) -> str:
        return self.config.pattern

    def mask_at(self, index: int) -> str:
        mask = self.config.mask
        if isinstance(mask, str):
            return mask
        return mask[index] if index < len(mask) else DEFAULT_MASK_CHAR

    def format_with_pattern(self, num_str: str) -> str:
        chars = list(self.pattern)
        hash_count = 0
        for index, char in enumerate(self.pattern):
            if char == PLACEHOLDER:
                chars[index] = num_str[hash_count] if hash_count < len(num_str) else self.mask_at(hash_count)
                hash_count += 1
        return "".join(chars)

    def format_num_string(self, value: str) -> str:
        if value == "":
            return self.format_with_pattern("") if self.allow_empty_formatting else ""
        return self.format_with_pattern(value)

    def remove_formatting(self, text: str) -> str:
        """Collect the digits found between the template's literal segments.

        When a literal cannot be found (the user mangled the text) every digit
        in the text is taken instead.
        """
        if not text:
            return text

        start = 0
        num_str = ""
        for part in self._literals + [""]:
            index = len(text) if part == "" else text.find(part, start)
            if index == -1:
                num_str = text
                break
            num_str += text[start:index]
            start = index + len(part)

        return extract_digits(num_str)

    def normalize_value(self, value: str) -> str:
        return extract_digits(value)[: self.config.placeholder_count]

    # -- caret rules --------------------------------------------------------

    def correct_caret_position(
        self, value: str, caret_pos: int, direction: CaretDirection | None = None
    ) -> int:
        if not value:
            return 0
        pattern = self.pattern
        if char_at(pattern, caret_pos) == PLACEHOLDER and char_is_number(char_at(value, caret_pos)):
            return caret_pos
        if char_at(pattern, caret_pos - 1) == PLACEHOLDER and char_is_number(char_at(value, caret_pos - 1)):
            return caret_pos

        first, last = self.first_placeholder, self.last_placeholder
        caret_pos = min(max(caret_pos, first), last + 1)

        next_pos = pattern.find(PLACEHOLDER, caret_pos)
        caret_right_bound = next_pos if next_pos != -1 else caret_pos

        caret_left_bound = caret_pos
        while caret_left_bound > first and (
            char_at(pattern, caret_left_bound) != PLACEHOLDER
            or not char_is_number(char_at(value, caret_left_bound))
        ):
            caret_left_bound -= 1

        go_to_left = (
            not char_is_number(char_at(value, caret_right_bound))
            or (direction == CaretDirection.LEFT and caret_pos != first)
            or caret_pos - caret_left_bound < caret_right_bound - caret_pos
        )
        return caret_left_bound + 1 if go_to_left else caret_right_bound

    def editable_bounds(self, value: str) -> tuple[int, int]:
        return self.first_placeholder, self.last_placeholder + 1

    def is_character_a_format(self, caret_pos: int, value: str) -> bool:
        return char_at(self.pattern, caret_pos) != PLACEHOLDER

    def home_position(self, value: str) -> int:
        return self.first_placeholder if value else 0
