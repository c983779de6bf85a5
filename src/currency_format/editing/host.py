"""Host text-input seam and the deferred caret re-application.

Some text widgets reset the caret after their text is assigned. The caret
is therefore written twice: immediately, and once more on the next
scheduler tick if the widget still shows the text that was assigned.
"""
from __future__ import annotations

import asyncio
from collections import deque
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger(__name__)

Callback = Callable[[], None]


@runtime_checkable
class TextInputHost(Protocol):
    """What the edit session needs from a text field."""

    value: str
    selection_start: int
    selection_end: int

    def set_selection_range(self, start: int, end: int) -> None: ...

    def focus(self) -> None: ...


@dataclass
class InMemoryTextInput:
    """Headless text field. Assigning ``value`` moves the caret to the end, like a browser input."""

    _value: str = ""
    selection_start: int = 0
    selection_end: int = 0
    focused: bool = False

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, text: str) -> None:
        self._value = text
        self.selection_start = self.selection_end = len(text)

    def set_selection_range(self, start: int, end: int) -> None:
        length = len(self._value)
        self.selection_start = min(max(start, 0), length)
        self.selection_end = min(max(end, 0), length)

    def focus(self) -> None:
        self.focused = True

    def type_text(self, text: str) -> None:
        """Replace the selection with *text*, as a keystroke or paste would."""
        start, end = sorted((self.selection_start, self.selection_end))
        self._value = self._value[:start] + text + self._value[end:]
        self.selection_start = self.selection_end = start + len(text)

    def backspace(self) -> None:
        start, end = sorted((self.selection_start, self.selection_end))
        if start == end and start > 0:
            start -= 1
        self._value = self._value[:start] + self._value[end:]
        self.selection_start = self.selection_end = start

    def delete(self) -> None:
        start, end = sorted((self.selection_start, self.selection_end))
        if start == end:
            end = min(end + 1, len(self._value))
        self._value = self._value[:start] + self._value[end:]
        self.selection_start = self.selection_end = start


# ---------------------------------------------------------------------------
# Schedulers
# ---------------------------------------------------------------------------


class Scheduler(Protocol):
    def call_soon(self, callback: Callback) -> None: ...


class ManualScheduler:
    """Queues callbacks until ``run_pending`` is called."""

    def __init__(self):
        self._pending: deque[Callback] = deque()

    def call_soon(self, callback: Callback) -> None:
        self._pending.append(callback)

    def run_pending(self) -> int:
        count = 0
        while self._pending:
            self._pending.popleft()()
            count += 1
        return count

    @property
    def pending(self) -> int:
        return len(self._pending)


class ImmediateScheduler:
    """Runs callbacks as soon as they are scheduled."""

    def call_soon(self, callback: Callback) -> None:
        callback()


class AsyncioScheduler:
    """Runs callbacks on the next iteration of the event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_soon(self, callback: Callback) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(callback)


def default_scheduler() -> Scheduler:
    """``AsyncioScheduler`` on the running event loop, else ``ImmediateScheduler``."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return ImmediateScheduler()
    return AsyncioScheduler(loop)


# ---------------------------------------------------------------------------
# Caret patching
# ---------------------------------------------------------------------------


def set_caret_position(el: TextInputHost | None, caret_pos: int) -> bool:
    if el is None:
        return False
    el.focus()
    el.set_selection_range(caret_pos, caret_pos)
    return True


class CaretPatcher:
    """Two-phase caret write: apply now, verify-and-reapply on the next tick."""

    def __init__(self, scheduler: Scheduler | None = None, reapply: bool = True):
        self._scheduler = scheduler if scheduler is not None else default_scheduler()
        self._reapply = reapply

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def apply(self, el: TextInputHost, caret_pos: int, value: str) -> None:
        set_caret_position(el, caret_pos)
        if not self._reapply:
            return

        def _verify() -> None:
            if el.value == value:
                set_caret_position(el, caret_pos)
            else:
                logger.debug("caret_reapply_skipped", expected=value, actual=el.value)

        self._scheduler.call_soon(_verify)
