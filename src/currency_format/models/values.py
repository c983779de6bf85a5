"""Value-change contract passed to callers after every accepted update."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ChangeSource(StrEnum):
    """Origin of a value change; form bindings use it to avoid feedback loops."""

    EVENT = "event"
    PROP = "prop"


class ValueObject(BaseModel):
    """Formatted text, raw canonical value and its float reading.

    ``value`` carries an optional sign, digits and at most one ``.``;
    ``float_value`` is ``nan`` when ``value`` is empty or just ``-``.
    """

    formatted_value: str
    value: str
    float_value: float
    name: str | None = None


class ValueChange(BaseModel):
    values: ValueObject
    source: ChangeSource
