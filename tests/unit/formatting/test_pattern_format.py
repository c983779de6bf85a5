"""Test pattern (template) formatting."""
import pytest
from pydantic import ValidationError
from currency_format.formatting.base import CaretDirection
from currency_format.formatting.factory import build_strategy
from currency_format.models.options import PatternConfig


class TestFormatWithPattern:
    def test_full_phone_number(self, phone):
        assert phone.format_value("5551234567") == "+1 (555) 123-4567"

    def test_partial_input_is_masked(self, phone):
        assert phone.format_value("555") == "+1 (555) ___-____"

    def test_number_input(self, phone):
        assert phone.format_value(5551234567) == "+1 (555) 123-4567"

    def test_programmatic_value_keeps_digits_only(self, phone):
        assert phone.format_value("555-123") == "+1 (555) 123-____"

    def test_extra_digits_dropped(self, phone):
        assert phone.normalize_value("555123456789") == "5551234567"

    def test_empty_without_allow_empty(self, phone):
        assert phone.format_value("") == ""

    def test_empty_with_allow_empty(self):
        strategy = build_strategy(PatternConfig(pattern="+1 (###) ###-####", mask="_", allow_empty_formatting=True))
        assert strategy.format_value(None) == "+1 (___) ___-____"

    def test_positional_mask(self):
        strategy = build_strategy(PatternConfig(pattern="##/##/####", mask=["D", "D", "M", "M", "Y", "Y", "Y", "Y"]))
        assert strategy.format_value("12") == "12/MM/YYYY"

    def test_short_positional_mask_falls_back_to_space(self):
        strategy = build_strategy(PatternConfig(pattern="##", mask=["A"], allow_empty_formatting=True))
        assert strategy.format_value("") == "A "

    def test_card_number(self):
        strategy = build_strategy(PatternConfig(pattern="#### #### #### ####"))
        assert strategy.format_value("4111111111111111") == "4111 1111 1111 1111"


class TestRemovePatternFormatting:
    def test_full(self, phone):
        assert phone.remove_formatting("+1 (555) 123-4567") == "5551234567"

    def test_literal_digits_are_not_input(self, phone):
        assert phone.remove_formatting("+1 (555) ___-____") == "555"

    def test_missing_literals_takes_every_digit(self, phone):
        assert phone.remove_formatting("5551234") == "5551234"

    def test_digit_typed_inside_group(self, phone):
        assert phone.remove_formatting("+1 (5551) ___-____") == "5551"

    def test_round_trip(self, phone):
        formatted = phone.format_value("5551234567")
        assert phone.format_value(phone.remove_formatting(formatted)) == formatted


class TestPatternCaretRules:
    def test_clamps_to_first_placeholder(self, phone):
        assert phone.correct_caret_position("+1 (555) ___-____", 0) == 4

    def test_snaps_to_last_digit(self, phone):
        assert phone.correct_caret_position("+1 (555) ___-____", 10) == 7

    def test_keeps_position_next_to_digit(self, phone):
        assert phone.correct_caret_position("+1 (555) 123-4567", 10) == 10

    def test_left_direction(self, phone):
        value = "+1 (555) 123-4567"
        assert phone.correct_caret_position(value, 8, CaretDirection.LEFT) == 7

    def test_empty_value(self, phone):
        assert phone.correct_caret_position("", 5) == 0

    def test_literals_are_protected(self, phone):
        assert phone.is_character_a_format(3, "+1 (555) 123-4567") is True
        assert phone.is_character_a_format(4, "+1 (555) 123-4567") is False

    def test_home_and_end(self, phone):
        value = "+1 (555) ___-____"
        assert phone.home_position(value) == 4
        assert phone.end_position(value) == 7
        assert phone.end_position("+1 (555) 123-4567") == 17
        assert phone.home_position("") == 0

    def test_editable_bounds(self, phone):
        assert phone.editable_bounds("") == (4, 17)


class TestPatternConfigErrors:
    def test_numeric_mask_rejected(self):
        with pytest.raises(ValidationError, match="numeric"):
            PatternConfig(pattern="###", mask="1")

    def test_numeric_positional_mask_rejected(self):
        with pytest.raises(ValidationError):
            PatternConfig(pattern="###", mask=["a", "2", "c"])

    def test_pattern_without_placeholder(self):
        with pytest.raises(ValidationError):
            PatternConfig(pattern="(---)")
