"""Resolve a configuration into its formatting strategy."""
from __future__ import annotations

from currency_format.formatting.base import FormatStrategy
from currency_format.formatting.custom import CustomFormat
from currency_format.formatting.numeric import NumericFormat
from currency_format.formatting.pattern import PatternFormat
from currency_format.models.options import CustomFormatConfig, FormatConfig, PatternConfig

STRATEGIES: dict[type, type[FormatStrategy]] = {
    FormatConfig: NumericFormat,
    PatternConfig: PatternFormat,
    CustomFormatConfig: CustomFormat,
}


def build_strategy(config: FormatConfig | PatternConfig | CustomFormatConfig) -> FormatStrategy:
    """Return the strategy for *config*. Unknown config types raise ``TypeError``."""
    strategy_cls = STRATEGIES.get(type(config))
    if strategy_cls is None:
        raise TypeError(f"Unsupported format configuration: {type(config).__name__}")
    return strategy_cls(config)


def resolve_strategy(
    config_or_strategy: FormatConfig | PatternConfig | CustomFormatConfig | FormatStrategy,
) -> FormatStrategy:
    """Accept either a configuration or an already-built strategy."""
    if isinstance(config_or_strategy, FormatStrategy):
        return config_or_strategy
    return build_strategy(config_or_strategy)
