"""Test the public entry points."""
import math

import pytest
from currency_format.api import apply_edit, finalize, format_value, initial_state, parse_value
from currency_format.editing.engine import EditState
from currency_format.models.options import FormatConfig, PatternConfig

USD = FormatConfig(prefix="$", decimal_scale=2)


class TestFormatAndParse:
    def test_format_value(self):
        assert format_value(1234.5, FormatConfig(decimal_scale=2, fixed_decimal_scale=True, prefix="$")) == "$1,234.50"

    def test_parse_value(self):
        values = parse_value("-$1,234.56", USD)
        assert values.value == "-1234.56"
        assert values.float_value == -1234.56

    def test_parse_empty(self):
        values = parse_value(None, USD)
        assert values.value == ""
        assert math.isnan(values.float_value)

    def test_parse_lone_sign(self):
        assert math.isnan(parse_value("-", USD).float_value)

    @pytest.mark.parametrize("raw", ["0", "7", "1234.5", "-99.99", "1000000"])
    def test_format_parse_format_is_stable(self, raw):
        formatted = format_value(raw, USD)
        assert format_value(parse_value(formatted, USD).value, USD) == formatted

    def test_pattern(self):
        config = PatternConfig(pattern="##/##/####", mask="_")
        assert format_value("12052024", config) == "12/05/2024"
        assert parse_value("12/05/2024", config).value == "12052024"

    def test_accepts_built_strategy(self, usd):
        assert format_value(12, usd) == "$12"


class TestEditing:
    def test_keystroke_cycle(self):
        state = initial_state(None, USD)
        for text, caret in (("1", 1), ("$12", 3), ("$123", 4), ("$1234", 5)):
            result = apply_edit(state, text, caret, USD)
            state = result.state
        assert state == EditState(formatted="$1,234", raw="1234")
        assert result.caret == 6

    def test_is_allowed(self):
        state = initial_state(15, USD)
        result = apply_edit(state, "$150", 4, USD, is_allowed=lambda values: values.float_value <= 100)
        assert result.accepted is False
        assert result.state == state

    def test_finalize(self):
        state = apply_edit(initial_state(None, USD), "007", 3, USD).state
        assert state.formatted == "$007"
        assert finalize(state, USD, name="tip").state.formatted == "$7"
