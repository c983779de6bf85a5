"""Formatting configuration models.

A configuration is one of three variants, discriminated by ``kind``:

* ``FormatConfig``  - free numeric input with separators, scale, prefix/suffix
* ``PatternConfig`` - a literal template such as ``+1 (###) ###-####``
* ``CustomFormatConfig`` - caller-supplied format/parse functions

All three are frozen. Invalid combinations are rejected when the model is
constructed so that a misconfigured input never renders anything.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

PLACEHOLDER = "#"


class GroupingScheme(StrEnum):
    PLAIN3 = "3"
    GROUP2 = "2"
    GROUP2_SCALED = "2s"
    GROUP4 = "4"


# ---------------------------------------------------------------------------
# Numeric mode
# ---------------------------------------------------------------------------


class FormatConfig(BaseModel):
    """Numeric formatting rules (currency amounts, percentages, plain numbers)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["numeric"] = "numeric"
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    thousand_separator: str | None = ","
    grouping: GroupingScheme = GroupingScheme.PLAIN3
    decimal_scale: int | None = Field(default=None, ge=0)
    fixed_decimal_scale: bool = False
    prefix: str = ""
    suffix: str = ""
    allow_negative: bool = True
    allow_empty_formatting: bool = False

    @field_validator("thousand_separator", mode="before")
    @classmethod
    def _coerce_thousand_separator(cls, value: Any) -> Any:
        # ``True`` means the default comma, ``False`` disables grouping.
        if value is True:
            return ","
        if value is False or value == "":
            return None
        return value

    @model_validator(mode="after")
    def _check_separators(self) -> FormatConfig:
        if self.thousand_separator is not None and self.thousand_separator == self.decimal_separator:
            raise ValueError(
                "Decimal separator can't be same as thousand separator "
                f"(thousand_separator={self.thousand_separator!r}, "
                f"decimal_separator={self.decimal_separator!r})"
            )
        return self


# ---------------------------------------------------------------------------
# Pattern mode
# ---------------------------------------------------------------------------


class PatternConfig(BaseModel):
    """Literal template with ``#`` digit placeholders and a mask filler."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pattern"] = "pattern"
    pattern: str
    mask: str | tuple[str, ...] = " "
    allow_empty_formatting: bool = False

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        if PLACEHOLDER not in value:
            raise ValueError(f"Pattern {value!r} has no {PLACEHOLDER!r} placeholder")
        return value

    @field_validator("mask", mode="before")
    @classmethod
    def _coerce_mask(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(value)
        return value

    @field_validator("mask")
    @classmethod
    def _check_mask(cls, value: str | tuple[str, ...]) -> str | tuple[str, ...]:
        chars = (value,) if isinstance(value, str) else value
        for char in chars:
            if len(char) != 1:
                raise ValueError(f"Mask entries must be single characters, got {char!r}")
            if char.isdigit():
                raise ValueError(f"Mask {value!r} should not contain numeric character")
        return value

    @property
    def placeholder_count(self) -> int:
        return self.pattern.count(PLACEHOLDER)


# ---------------------------------------------------------------------------
# Custom mode
# ---------------------------------------------------------------------------


class CustomFormatConfig(BaseModel):
    """Caller-defined formatting. Without ``remove_formatting`` the parser keeps digits only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    format: Callable[[str], str]
    remove_formatting: Callable[[str], str] | None = None
    allow_empty_formatting: bool = False


AnyFormatConfig = Annotated[
    Union[FormatConfig, PatternConfig, CustomFormatConfig],
    Field(discriminator="kind"),
]
