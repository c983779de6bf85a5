"""Public entry points.

Each function accepts either a configuration model or a strategy already
built with ``build_strategy``; sessions and hot paths should pass the
strategy to avoid resolving it on every call.
"""
from __future__ import annotations

from currency_format.editing import engine
from currency_format.editing.engine import EditResult, EditState, IsAllowed
from currency_format.formatting.base import FormatStrategy, RawValue
from currency_format.formatting.factory import resolve_strategy
from currency_format.models.options import AnyFormatConfig
from currency_format.models.values import ValueObject


def format_value(value: RawValue, config: AnyFormatConfig | FormatStrategy) -> str:
    """Render a number or canonical numeric string.

    >>> from currency_format.models.options import FormatConfig
    >>> format_value(1234.5, FormatConfig(decimal_scale=2, fixed_decimal_scale=True, prefix="$"))
    '$1,234.50'
    """
    return resolve_strategy(config).format_value(value)


def parse_value(
    text: str | None, config: AnyFormatConfig | FormatStrategy, name: str | None = None
) -> ValueObject:
    """Recover the raw value and its float reading from display text."""
    return resolve_strategy(config).to_value_object(text or "", name=name)


def initial_state(value: RawValue, config: AnyFormatConfig | FormatStrategy) -> EditState:
    return engine.initial_state(value, resolve_strategy(config))


def apply_edit(
    state: EditState,
    new_text: str,
    caret: int,
    config: AnyFormatConfig | FormatStrategy,
    *,
    is_allowed: IsAllowed | None = None,
    selection_end: int | None = None,
    name: str | None = None,
) -> EditResult:
    return engine.apply_edit(
        state,
        new_text,
        caret,
        resolve_strategy(config),
        is_allowed=is_allowed,
        selection_end=selection_end,
        name=name,
    )


def finalize(
    state: EditState, config: AnyFormatConfig | FormatStrategy, name: str | None = None
) -> EditResult:
    return engine.finalize(state, resolve_strategy(config), name=name)
