"""Test caller-defined formatting and strategy resolution."""
import pytest
from currency_format.formatting.base import FormatKind
from currency_format.formatting.custom import CustomFormat
from currency_format.formatting.factory import build_strategy, resolve_strategy
from currency_format.formatting.numeric import NumericFormat
from currency_format.formatting.pattern import PatternFormat
from currency_format.models.options import CustomFormatConfig, FormatConfig


def percent(value: str) -> str:
    return f"{value}%"


class TestCustomFormat:
    def test_formats_with_callable(self):
        strategy = build_strategy(CustomFormatConfig(format=percent))
        assert strategy.format_value("42") == "42%"

    def test_empty_value_not_passed_to_callable(self):
        calls = []

        def tracking(value):
            calls.append(value)
            return value

        strategy = build_strategy(CustomFormatConfig(format=tracking))
        assert strategy.format_value(None) == ""
        assert calls == []

    def test_default_parser_keeps_digits(self):
        strategy = build_strategy(CustomFormatConfig(format=percent))
        assert strategy.remove_formatting("42%") == "42"

    def test_caller_parser(self):
        strategy = build_strategy(
            CustomFormatConfig(format=percent, remove_formatting=lambda text: text.rstrip("%"))
        )
        assert strategy.remove_formatting("4.2%") == "4.2"

    def test_caret_is_not_corrected(self):
        strategy = build_strategy(CustomFormatConfig(format=percent))
        assert strategy.correct_caret_position("42%", 3) == 3
        assert strategy.editable_bounds("42%") == (0, 3)
        assert strategy.is_character_a_format(2, "42%") is False


class TestBuildStrategy:
    def test_resolves_each_kind(self, usd_config, phone_config):
        assert isinstance(build_strategy(usd_config), NumericFormat)
        assert isinstance(build_strategy(phone_config), PatternFormat)
        assert isinstance(build_strategy(CustomFormatConfig(format=percent)), CustomFormat)

    def test_kind(self, usd, phone):
        assert usd.kind == FormatKind.NUMERIC
        assert phone.kind == FormatKind.PATTERN

    def test_unknown_config_type(self):
        with pytest.raises(TypeError, match="Unsupported"):
            build_strategy({"prefix": "$"})

    def test_resolve_passes_strategy_through(self, usd):
        assert resolve_strategy(usd) is usd

    def test_resolve_builds_from_config(self):
        assert isinstance(resolve_strategy(FormatConfig()), NumericFormat)
