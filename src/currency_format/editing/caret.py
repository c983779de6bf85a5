"""Caret reconciliation.

Every edit is a diff -> re-render -> re-sync cycle. The functions here undo
deletions of protected formatting, map the caret from the text the user
produced onto the freshly formatted text, and decide where keyboard
navigation may move the caret.
"""
from __future__ import annotations

from enum import StrEnum

from currency_format.formatting.base import CaretDirection, FormatKind, FormatStrategy
from currency_format.formatting.primitives import char_at, split_string


class NavigationKey(StrEnum):
    LEFT = "ArrowLeft"
    RIGHT = "ArrowRight"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    HOME = "Home"
    END = "End"


def check_if_format_got_deleted(strategy: FormatStrategy, start: int, end: int, value: str) -> bool:
    return any(strategy.is_character_a_format(index, value) for index in range(start, end))


def correct_input_value(
    strategy: FormatStrategy,
    caret_pos: int,
    last_value: str,
    value: str,
    last_num_str: str = "",
) -> str:
    """Undo deletions of protected characters and collapse emptied numbers.

    Only deletions are inspected. The removed span is found by matching the
    text after the caret against the tail of the previous text.
    """
    if len(value) >= len(last_value) or not value:
        return value

    _, last_tail = split_string(last_value, caret_pos)
    _, new_tail = split_string(value, caret_pos)
    deleted_index = last_tail.rfind(new_tail)
    diff = last_tail[:deleted_index] if deleted_index != -1 else ""

    if check_if_format_got_deleted(strategy, caret_pos, caret_pos + len(diff), last_value):
        value = last_value

    collapsed = strategy.collapse_deleted_value(value, last_num_str or "")
    return value if collapsed is None else collapsed


def get_caret_position(
    strategy: FormatStrategy,
    input_value: str,
    formatted_value: str,
    caret_pos: int,
    current_value: str = "",
) -> int:
    """Map *caret_pos* in the typed text onto *formatted_value*.

    Characters of the typed text are matched, left to right, against the
    formatted text; formatting that was inserted (separators, prefix, mask
    fillers) is stepped over. A typed ``0`` facing a different digit while
    the digit counts differ is treated as not yet placed, so a suppressed
    leading zero does not drag the caret.
    """
    number_re = strategy.number_pattern()
    input_number = "".join(number_re.findall(input_value))
    formatted_number = "".join(number_re.findall(formatted_value))

    j = 0
    for i in range(caret_pos):
        input_char = char_at(input_value, i)
        format_char = char_at(formatted_value, j)

        if not number_re.match(input_char) and input_char != format_char:
            continue

        if (
            input_char == "0"
            and number_re.match(format_char)
            and format_char != "0"
            and len(input_number) != len(formatted_number)
        ):
            continue

        while j < len(formatted_value) and input_char != formatted_value[j]:
            j += 1
        j += 1

    # First digit typed into an empty template: jump past it.
    if strategy.kind == FormatKind.PATTERN and not current_value:
        j = len(formatted_value)

    return strategy.correct_caret_position(formatted_value, j)


def navigate(
    strategy: FormatStrategy,
    value: str,
    key: NavigationKey | str,
    selection_start: int,
    selection_end: int | None = None,
) -> int | None:
    """Caret position to force for a navigation/deletion key, or ``None``.

    ``None`` means the host should let the key act normally. Only collapsed
    selections are corrected.
    """
    try:
        key = NavigationKey(key)
    except ValueError:
        return None
    if selection_end is None:
        selection_end = selection_start
    if selection_start != selection_end:
        return None

    if key == NavigationKey.HOME:
        return strategy.home_position(value)
    if key == NavigationKey.END:
        return strategy.end_position(value)

    if key in (NavigationKey.LEFT, NavigationKey.BACKSPACE):
        expected = selection_start - 1
    elif key == NavigationKey.RIGHT:
        expected = selection_start + 1
    else:
        expected = selection_start

    number_re = strategy.number_pattern(ignore_decimal_separator=strategy.has_fixed_decimal)
    left_bound, right_bound = strategy.editable_bounds(value)

    def is_editable(char: str) -> bool:
        return bool(number_re.match(char)) or char == "-"

    new_position = expected
    if key in (NavigationKey.LEFT, NavigationKey.RIGHT):
        direction = CaretDirection.LEFT if key == NavigationKey.LEFT else CaretDirection.RIGHT
        new_position = strategy.correct_caret_position(value, expected, direction)
    elif key == NavigationKey.DELETE and not is_editable(char_at(value, expected)):
        while not number_re.match(char_at(value, new_position)) and new_position < right_bound:
            new_position += 1
    elif key == NavigationKey.BACKSPACE and not is_editable(char_at(value, expected)):
        while not number_re.match(char_at(value, new_position - 1)) and new_position > left_bound:
            new_position -= 1
        new_position = strategy.correct_caret_position(value, new_position, CaretDirection.LEFT)

    if new_position != expected or expected < left_bound or expected > right_bound:
        return new_position
    return None
