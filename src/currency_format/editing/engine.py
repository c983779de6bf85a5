"""Edit state transitions.

``EditState`` pairs the formatted text with the raw value it parses to. New
states are only built here, from one source of truth, so the two halves
never drift apart. Each transition returns an ``EditResult`` and either
accepts the new state or hands back the previous one unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import structlog

from currency_format.editing.caret import correct_input_value, get_caret_position
from currency_format.formatting.base import FormatKind, FormatStrategy, RawValue
from currency_format.formatting.primitives import fix_leading_zero
from currency_format.models.values import ValueObject

logger = structlog.get_logger(__name__)

IsAllowed = Callable[[ValueObject], bool]


@dataclass(frozen=True)
class EditState:
    formatted: str = ""
    raw: str = ""

    @classmethod
    def from_formatted(cls, formatted: str, strategy: FormatStrategy) -> EditState:
        return cls(formatted=formatted, raw=strategy.remove_formatting(formatted))

    @classmethod
    def from_value(cls, value: RawValue, strategy: FormatStrategy) -> EditState:
        return cls.from_formatted(strategy.format_value(value), strategy)


@dataclass(frozen=True)
class EditResult:
    state: EditState
    caret: int
    values: ValueObject
    accepted: bool = True
    changed: bool = False


def initial_state(value: RawValue, strategy: FormatStrategy) -> EditState:
    return EditState.from_value(value, strategy)


def apply_edit(
    state: EditState,
    new_text: str,
    caret: int,
    strategy: FormatStrategy,
    *,
    is_allowed: IsAllowed | None = None,
    selection_end: int | None = None,
    name: str | None = None,
) -> EditResult:
    """Run one keystroke (or paste) through correct -> format -> validate -> caret.

    *new_text* and *caret* are the host's text and caret right after the
    browser-level edit. With a selection, the caret is its far end.
    """
    last_value = state.formatted
    caret = max(caret, selection_end if selection_end is not None else caret)

    input_value = correct_input_value(strategy, caret, last_value, new_text, state.raw)
    if input_value == last_value and len(new_text) < len(last_value):
        logger.debug("format_deletion_absorbed", formatted=last_value, caret=caret)

    formatted = strategy.format_input(input_value)
    values = strategy.to_value_object(formatted, name=name)

    accepted = is_allowed is None or is_allowed(values)
    if not accepted:
        logger.debug("edit_rejected", formatted=formatted, value=values.value)
        formatted = last_value
        new_state = state
        values = strategy.to_value_object(last_value, name=name)
    else:
        new_state = EditState(formatted=formatted, raw=values.value)

    new_caret = get_caret_position(strategy, input_value, formatted, caret, current_value=last_value)
    return EditResult(
        state=new_state,
        caret=new_caret,
        values=values,
        accepted=accepted,
        changed=formatted != last_value,
    )


def finalize(state: EditState, strategy: FormatStrategy, name: str | None = None) -> EditResult:
    """Blur/commit: drop leading zeros from a numeric value."""
    if strategy.kind != FormatKind.NUMERIC:
        return EditResult(
            state=state,
            caret=len(state.formatted),
            values=strategy.to_value_object(state.formatted, name=name),
        )

    raw = fix_leading_zero(state.raw) or ""
    formatted = strategy.format_num_string(raw)
    new_state = EditState.from_formatted(formatted, strategy)
    return EditResult(
        state=new_state,
        caret=len(formatted),
        values=strategy.to_value_object(formatted, name=name),
        changed=formatted != state.formatted,
    )


def replace_value(
    state: EditState, value: RawValue, strategy: FormatStrategy, name: str | None = None
) -> EditResult:
    """Programmatic value change."""
    new_state = EditState.from_value(value, strategy)
    return EditResult(
        state=new_state,
        caret=len(new_state.formatted),
        values=strategy.to_value_object(new_state.formatted, name=name),
        changed=new_state.formatted != state.formatted,
    )


def reformat(state: EditState, strategy: FormatStrategy, name: str | None = None) -> EditResult:
    """Re-render the current raw value under a new strategy."""
    formatted = strategy.format_num_string(state.raw)
    new_state = EditState.from_formatted(formatted, strategy)
    return EditResult(
        state=new_state,
        caret=len(formatted),
        values=strategy.to_value_object(formatted, name=name),
        changed=formatted != state.formatted,
    )
