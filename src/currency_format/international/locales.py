"""Currency/locale presets and an explicit registry for custom locales.

Presets describe how a locale writes money: separators, grouping, currency
symbol placement and minor-unit scale. The registry is an ordinary object
owned by whoever needs locale resolution; there is no module-level state to
register into.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from currency_format.config import Settings
from currency_format.models.options import FormatConfig, GroupingScheme
from currency_format.utils.logging import get_logger

logger = get_logger(__name__)


class LocalePreset(BaseModel):
    """Formatting record for one locale/currency pair."""

    model_config = ConfigDict(frozen=True)

    locale: str
    currency: str | None = None
    currency_symbol: str | None = None
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    thousand_separator: str | None = ","
    grouping: GroupingScheme = GroupingScheme.PLAIN3
    decimal_scale: int | None = Field(default=None, ge=0)
    fixed_decimal_scale: bool = False
    prefix: str = ""
    suffix: str = ""
    allow_negative: bool = True

    @model_validator(mode="after")
    def _check_separators(self) -> LocalePreset:
        if self.thousand_separator is not None and self.thousand_separator == self.decimal_separator:
            raise ValueError(f"Locale {self.locale!r} uses the same decimal and thousand separator")
        return self

    def to_format_config(self, **overrides: Any) -> FormatConfig:
        """Build a ``FormatConfig``; keyword arguments override preset fields."""
        fields = self.model_dump(exclude={"locale", "currency", "currency_symbol"})
        fields.update(overrides)
        return FormatConfig(**fields)


LOCALE_PRESETS: dict[str, LocalePreset] = {
    preset.locale: preset
    for preset in (
        LocalePreset(locale="en-US", currency="USD", currency_symbol="$", prefix="$"),
        LocalePreset(
            locale="vi-VN", currency="VND", currency_symbol="₫", suffix=" ₫",
            thousand_separator=".", decimal_separator=",", decimal_scale=0,
        ),
        LocalePreset(
            locale="de-DE", currency="EUR", currency_symbol="€", suffix=" €",
            thousand_separator=".", decimal_separator=",",
        ),
        LocalePreset(locale="ja-JP", currency="JPY", currency_symbol="¥", prefix="¥", decimal_scale=0),
        LocalePreset(
            locale="en-IN", currency="INR", currency_symbol="₹", prefix="₹",
            grouping=GroupingScheme.GROUP2_SCALED,
        ),
        LocalePreset(
            locale="fr-FR", currency="EUR", currency_symbol="€", suffix=" €",
            thousand_separator=" ", decimal_separator=",",
        ),
        LocalePreset(locale="zh-CN", currency="CNY", currency_symbol="¥", prefix="¥"),
        LocalePreset(locale="ko-KR", currency="KRW", currency_symbol="₩", prefix="₩", decimal_scale=0),
        LocalePreset(
            locale="pt-BR", currency="BRL", currency_symbol="R$", prefix="R$ ",
            thousand_separator=".", decimal_separator=",",
        ),
        LocalePreset(locale="en-GB", currency="GBP", currency_symbol="£", prefix="£"),
    )
}


class LocaleRegistry:
    """Resolves locale names to presets. Custom registrations win over presets."""

    def __init__(
        self,
        presets: dict[str, LocalePreset] | None = None,
        fallback_locale: str = "en-US",
        default_locale: str = "en-US",
    ):
        self._presets = dict(LOCALE_PRESETS if presets is None else presets)
        self._custom: dict[str, LocalePreset] = {}
        self._fallback_locale = fallback_locale
        self._default_locale = default_locale

    def register(self, name: str, preset: LocalePreset | dict) -> LocalePreset:
        if isinstance(preset, dict):
            preset = LocalePreset(**{"locale": name, **preset})
        self._custom[name] = preset
        logger.debug("locale_registered", name=name, currency=preset.currency)
        return preset

    def unregister(self, name: str) -> None:
        """Remove a custom locale. Presets cannot be unregistered."""
        if name not in self._custom:
            raise KeyError(f"No custom locale registered as {name!r}")
        del self._custom[name]
        logger.debug("locale_unregistered", name=name)

    def __contains__(self, name: str) -> bool:
        return name in self._custom or name in self._presets

    def names(self) -> list[str]:
        return sorted(set(self._presets) | set(self._custom))

    def get(self, name: str | None = None) -> LocalePreset:
        """Lookup order: custom, preset, then the fallback locale.

        Without a name the registry's default locale is resolved.
        """
        name = name or self._default_locale
        if name in self._custom:
            return self._custom[name]
        if name in self._presets:
            return self._presets[name]
        logger.debug("locale_fallback", requested=name, fallback=self._fallback_locale)
        return self._custom.get(self._fallback_locale) or self._presets[self._fallback_locale]

    def format_config(self, name: str | None = None, **overrides: Any) -> FormatConfig:
        return self.get(name).to_format_config(**overrides)


def default_registry(settings: Settings | None = None) -> LocaleRegistry:
    """A fresh registry with the bundled presets and the configured fallback."""
    settings = settings or Settings()
    return LocaleRegistry(
        fallback_locale=settings.fallback_locale,
        default_locale=settings.default_locale,
    )
