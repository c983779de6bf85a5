"""String-level helpers shared by the formatters and the caret engine.

Everything here works on ``str`` values rather than floats so that large
amounts keep every digit.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

_DIGIT_RE = re.compile(r"[0-9]")
_FLOAT_RE = re.compile(r"^\s*[-+]?(\d+\.?\d*|\.\d+)")


def char_is_number(char: str | None) -> bool:
    """True iff *char* is one of ``0-9``."""
    return bool(char) and _DIGIT_RE.fullmatch(char) is not None


def char_at(text: str, index: int) -> str:
    """Return ``text[index]`` or ``""`` when *index* falls outside the string."""
    if 0 <= index < len(text):
        return text[index]
    return ""


def escape_regexp(text: str) -> str:
    return re.escape(text)


def extract_digits(text: str) -> str:
    return "".join(_DIGIT_RE.findall(text or ""))


def split_string(text: str, index: int) -> tuple[str, str]:
    return text[:index], text[index:]


def fix_leading_zero(num_str: str | None) -> str | None:
    """Strip leading zeros from the integer part of a signed decimal string.

    ``"00123"`` becomes ``"123"`` and ``"000.50"`` becomes ``"0.50"``.
    A negative zero without a fraction (``"-"``, ``"-0"``, ``"-00"``)
    finalizes to the empty string.
    """
    if not num_str:
        return num_str

    is_negative = num_str[0] == "-"
    if is_negative:
        num_str = num_str[1:]

    before_decimal, _, after_decimal = num_str.partition(".")
    before_decimal = before_decimal.lstrip("0") or "0"

    if is_negative and before_decimal == "0" and not after_decimal:
        return ""

    sign = "-" if is_negative else ""
    return f"{sign}{before_decimal}{'.' + after_decimal if after_decimal else ''}"


def limit_to_scale(num_str: str, scale: int, fixed_decimal_scale: bool) -> str:
    """Truncate *num_str* to *scale* characters, padding with ``0`` when fixed."""
    filler = "0" if fixed_decimal_scale else ""
    return "".join(num_str[i] if i < len(num_str) else filler for i in range(scale))


def round_to_precision(num_str: str, scale: int, fixed_decimal_scale: bool) -> str:
    """Round a numeric string to *scale* fractional digits, half up.

    The carry walks the digit array right to left like long addition, so
    ``"99999999999999999.995"`` rounds to ``"100000000000000000.00"``
    without passing through a float.
    """
    if not num_str or num_str == "-":
        return num_str

    is_negative = num_str[0] == "-"
    if is_negative:
        num_str = num_str[1:]

    int_part, _, frac_part = num_str.partition(".")

    if len(frac_part) <= scale:
        rounded_int, rounded_frac = int_part, frac_part
    else:
        digits = list(int_part + frac_part[:scale])
        carry = frac_part[scale] >= "5"
        index = len(digits) - 1
        while carry and index >= 0:
            if digits[index] == "9":
                digits[index] = "0"
                index -= 1
            else:
                digits[index] = str(int(digits[index]) + 1)
                carry = False
        if carry:
            digits.insert(0, "1")
        split_at = len(digits) - scale
        rounded_int = "".join(digits[:split_at])
        rounded_frac = "".join(digits[split_at:])

    if frac_part or rounded_frac:
        rounded_int = rounded_int or "0"
    rounded_frac = limit_to_scale(rounded_frac, scale, fixed_decimal_scale) if frac_part else ""

    sign = "-" if is_negative else ""
    return f"{sign}{rounded_int}{'.' + rounded_frac if rounded_frac else ''}"


def parse_float(num_str: str | None) -> float:
    """Parse the leading number of *num_str*; ``nan`` when there is none."""
    match = _FLOAT_RE.match(num_str or "")
    if match is None:
        return math.nan
    return float(match.group(0))


def to_numeric_string(value: int | float | Decimal) -> str:
    """Render a number positionally, never in scientific notation."""
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric value")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return ""
        value = Decimal(repr(value))
    try:
        if not value.is_finite():
            return ""
        text = format(value, "f")
    except InvalidOperation:
        return ""
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
