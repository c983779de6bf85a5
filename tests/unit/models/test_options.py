"""Test configuration and value models."""
import math

import pytest
from pydantic import TypeAdapter, ValidationError
from currency_format.models.options import (
    AnyFormatConfig,
    CustomFormatConfig,
    FormatConfig,
    GroupingScheme,
    PatternConfig,
)
from currency_format.models.values import ChangeSource, ValueChange, ValueObject


class TestFormatConfig:
    def test_defaults(self):
        config = FormatConfig()
        assert config.kind == "numeric"
        assert config.decimal_separator == "."
        assert config.thousand_separator == ","
        assert config.grouping == GroupingScheme.PLAIN3
        assert config.decimal_scale is None

    def test_equal_separators_rejected(self):
        with pytest.raises(ValidationError, match="same as thousand separator"):
            FormatConfig(decimal_separator=",")

    def test_thousand_separator_true_means_comma(self):
        assert FormatConfig(thousand_separator=True).thousand_separator == ","

    def test_thousand_separator_false_disables(self):
        assert FormatConfig(thousand_separator=False).thousand_separator is None
        assert FormatConfig(thousand_separator="").thousand_separator is None

    def test_disabled_grouping_allows_any_decimal_separator(self):
        assert FormatConfig(decimal_separator=",", thousand_separator=None).decimal_separator == ","

    def test_negative_scale_rejected(self):
        with pytest.raises(ValidationError):
            FormatConfig(decimal_scale=-1)

    def test_multi_char_decimal_separator_rejected(self):
        with pytest.raises(ValidationError):
            FormatConfig(decimal_separator="..")

    def test_grouping_from_string(self):
        assert FormatConfig(grouping="2s").grouping == GroupingScheme.GROUP2_SCALED

    def test_frozen(self):
        config = FormatConfig()
        with pytest.raises(ValidationError):
            config.prefix = "$"


class TestPatternConfig:
    def test_list_mask_coerced_to_tuple(self):
        config = PatternConfig(pattern="##/##", mask=["D", "D", "M", "M"])
        assert config.mask == ("D", "D", "M", "M")

    def test_multi_char_mask_rejected(self):
        with pytest.raises(ValidationError, match="single characters"):
            PatternConfig(pattern="###", mask="__")

    def test_placeholder_count(self):
        assert PatternConfig(pattern="+1 (###) ###-####").placeholder_count == 10


class TestDiscriminatedConfig:
    def test_validates_each_variant(self):
        adapter = TypeAdapter(AnyFormatConfig)
        assert isinstance(adapter.validate_python({"kind": "numeric", "prefix": "$"}), FormatConfig)
        assert isinstance(adapter.validate_python({"kind": "pattern", "pattern": "##"}), PatternConfig)
        custom = adapter.validate_python({"kind": "custom", "format": str.upper})
        assert isinstance(custom, CustomFormatConfig)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            TypeAdapter(AnyFormatConfig).validate_python({"kind": "roman"})


class TestValueModels:
    def test_nan_float_value(self):
        values = ValueObject(formatted_value="", value="", float_value=float("nan"))
        assert math.isnan(values.float_value)
        assert values.name is None

    def test_change_source_values(self):
        assert ChangeSource.EVENT == "event"
        assert ChangeSource.PROP == "prop"

    def test_value_change(self):
        values = ValueObject(formatted_value="$1", value="1", float_value=1.0)
        change = ValueChange(values=values, source="prop")
        assert change.source is ChangeSource.PROP
