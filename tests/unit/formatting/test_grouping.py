"""Test thousand-separator grouping schemes."""
from currency_format.formatting.grouping import format_thousand
from currency_format.models.options import GroupingScheme


class TestFormatThousand:
    def test_plain3(self):
        assert format_thousand("1234567", ",") == "1,234,567"

    def test_group2(self):
        assert format_thousand("1234567", ",", GroupingScheme.GROUP2) == "1,23,45,67"

    def test_group2_scaled(self):
        assert format_thousand("1234567", ",", GroupingScheme.GROUP2_SCALED) == "12,34,567"

    def test_group2_scaled_small(self):
        assert format_thousand("1234", ",", GroupingScheme.GROUP2_SCALED) == "1,234"
        assert format_thousand("123", ",", GroupingScheme.GROUP2_SCALED) == "123"

    def test_group4(self):
        assert format_thousand("1234567", ",", GroupingScheme.GROUP4) == "123,4567"

    def test_short_number_unchanged(self):
        assert format_thousand("123", ",") == "123"
        assert format_thousand("", ",") == ""

    def test_custom_separator(self):
        assert format_thousand("1234567", ".") == "1.234.567"
        assert format_thousand("1234567", " ") == "1 234 567"

    def test_separator_with_regex_escape_chars(self):
        assert format_thousand("1234", "\\") == "1\\234"
