"""Edit session: drives one text input through the formatting pipeline.

The session is the headless counterpart of a bound input component. The
host application forwards its input events (change, blur, key-down,
mouse-up, focus, composition) and the session keeps the text, the caret and
the ``EditState`` in step, notifying subscribers on every change.
"""
from __future__ import annotations

from typing import Callable

import structlog

from currency_format.config import Settings
from currency_format.editing.caret import NavigationKey, navigate
from currency_format.editing.engine import (
    EditResult,
    EditState,
    IsAllowed,
    apply_edit,
    finalize,
    initial_state,
    reformat,
    replace_value,
)
from currency_format.editing.host import CaretPatcher, InMemoryTextInput, Scheduler, TextInputHost
from currency_format.formatting.base import FormatStrategy, RawValue
from currency_format.formatting.factory import build_strategy
from currency_format.models.values import ChangeSource, ValueChange, ValueObject

logger = structlog.get_logger(__name__)

Listener = Callable[[ValueChange], None]


class EditSession:
    """Owns the ``EditState`` of a single input."""

    def __init__(
        self,
        config,
        host: TextInputHost | None = None,
        *,
        value: RawValue = None,
        is_allowed: IsAllowed | None = None,
        name: str | None = None,
        scheduler: Scheduler | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or Settings()
        self._strategy: FormatStrategy = build_strategy(config)
        self._host = host if host is not None else InMemoryTextInput()
        self._is_allowed = is_allowed
        self._name = name
        self._initial_value = value
        self._patcher = CaretPatcher(scheduler, reapply=settings.reapply_caret)
        self._listeners: list[Listener] = []
        self._composing = False

        self._state = initial_state(value, self._strategy)
        self._host.value = self._state.formatted

    # -- accessors ----------------------------------------------------------

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def strategy(self) -> FormatStrategy:
        return self._strategy

    @property
    def host(self) -> TextInputHost:
        return self._host

    @property
    def scheduler(self) -> Scheduler:
        return self._patcher.scheduler

    @property
    def formatted_value(self) -> str:
        return self._state.formatted

    @property
    def value(self) -> str:
        return self._state.raw

    @property
    def values(self) -> ValueObject:
        return self._strategy.to_value_object(self._state.formatted, name=self._name)

    @property
    def composing(self) -> bool:
        return self._composing

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that removes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _commit(self, result: EditResult, source: ChangeSource) -> None:
        self._state = result.state
        if not result.changed:
            return
        change = ValueChange(values=result.values, source=source)
        for listener in list(self._listeners):
            listener(change)

    # -- input events -------------------------------------------------------

    def handle_change(self) -> EditResult | None:
        """The host's text changed through typing, deletion or paste."""
        if self._composing:
            return None

        host = self._host
        result = apply_edit(
            self._state,
            host.value,
            host.selection_start,
            self._strategy,
            is_allowed=self._is_allowed,
            selection_end=host.selection_end,
            name=self._name,
        )
        formatted = result.state.formatted
        host.value = formatted
        self._patcher.apply(host, result.caret, formatted)
        self._commit(result, ChangeSource.EVENT)
        return result

    def handle_blur(self) -> EditResult:
        result = finalize(self._state, self._strategy, name=self._name)
        if result.changed:
            self._host.value = result.state.formatted
        self._commit(result, ChangeSource.EVENT)
        return result

    def handle_key_down(self, key: NavigationKey | str) -> bool:
        """Returns True when the session moved the caret and the key's default action must be suppressed."""
        host = self._host
        position = navigate(self._strategy, host.value, key, host.selection_start, host.selection_end)
        if position is None:
            return False
        self._patcher.apply(host, position, host.value)
        return True

    def handle_mouse_up(self) -> None:
        self._clamp_caret()

    def handle_focus(self) -> None:
        # Hosts place the caret after the focus event fires.
        self._patcher.scheduler.call_soon(self._clamp_caret)

    def _clamp_caret(self) -> None:
        host = self._host
        if host.selection_start != host.selection_end:
            return
        position = self._strategy.correct_caret_position(host.value, host.selection_start)
        if position != host.selection_start:
            self._patcher.apply(host, position, host.value)

    def start_composition(self) -> None:
        """An input method started composing; formatting is suspended."""
        self._composing = True

    def end_composition(self) -> EditResult | None:
        self._composing = False
        return self.handle_change()

    # -- programmatic changes -----------------------------------------------

    def set_value(self, value: RawValue) -> EditResult:
        result = replace_value(self._state, value, self._strategy, name=self._name)
        self._host.value = result.state.formatted
        self._commit(result, ChangeSource.PROP)
        return result

    def clear(self) -> EditResult:
        return self.set_value(None)

    def reset(self) -> EditResult:
        return self.set_value(self._initial_value)

    def reconfigure(self, config) -> EditResult:
        """Swap the configuration and re-render the current raw value."""
        self._strategy = build_strategy(config)
        result = reformat(self._state, self._strategy, name=self._name)
        self._host.value = result.state.formatted
        logger.debug("session_reconfigured", kind=str(self._strategy.kind), formatted=result.state.formatted)
        self._commit(result, ChangeSource.PROP)
        return result
