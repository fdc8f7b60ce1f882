"""Menu configuration: catalogs, regional formatting and CSV keyword tables.

The configuration is loaded once at startup from a JSON file and is treated as
read-only afterwards. Every pipeline component receives it explicitly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CANONICAL_LANGUAGE: str = "en"
DEFAULT_CATEGORY_ORDER: float = 999

DEFAULT_WEEKDAY_NAMES: dict[str, list[str]] = {
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    "it": ["Lunedì", "Martedì", "Mercoledì", "Giovedì", "Venerdì", "Sabato", "Domenica"],
}


class ConfigurationError(Exception):
    """Menu configuration is missing or invalid."""


class FrozenModel(BaseModel):
    """Base for immutable configuration sections."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class AppSection(FrozenModel):
    name: str = "Menu"
    csv_language: str = CANONICAL_LANGUAGE


class InputDataSection(FrozenModel):
    csv_number_format: Literal["us", "it"] = "us"


class RegionalConfig(FrozenModel):
    """Locale and currency formatting for prices."""

    locale: str = "it-IT"
    currency: str = "EUR"
    currency_symbol: str = "€"
    decimal_separator: str = ","


class I18nSection(FrozenModel):
    languages: list[str] = Field(default_factory=lambda: ["it", "en"])
    fallback_language: str = CANONICAL_LANGUAGE


class UrlsSection(FrozenModel):
    menu: str = ""


class AllergenEntry(FrozenModel):
    """One canonical allergen: filter key, EU numeric code, icon and CSV column."""

    key: str
    number: int
    icon: str = ""
    column: str = ""

    @property
    def column_name(self) -> str:
        return (self.column or self.key).strip().lower()


class FoodTypeEntry(FrozenModel):
    icon: str = ""
    label: dict[str, str] = Field(default_factory=dict)


class KeywordCatalog(FrozenModel):
    """Canonical keyword -> authored keyword, per keyword class."""

    columns: dict[str, str] = Field(default_factory=dict)
    values: dict[str, str] = Field(default_factory=dict)
    types: dict[str, str] = Field(default_factory=dict)
    days: dict[str, str] = Field(default_factory=dict)


class MenuConfig(FrozenModel):
    """Process-wide menu configuration."""

    app: AppSection = Field(default_factory=AppSection)
    input_data: InputDataSection = Field(default_factory=InputDataSection)
    regional: RegionalConfig = Field(default_factory=RegionalConfig)
    i18n: I18nSection = Field(default_factory=I18nSection)
    urls: UrlsSection = Field(default_factory=UrlsSection)
    allergens: list[AllergenEntry] = Field(default_factory=list)
    food_types: dict[str, FoodTypeEntry] = Field(default_factory=dict)
    weekday_names: dict[str, list[str]] = Field(default_factory=lambda: dict(DEFAULT_WEEKDAY_NAMES))
    csv_keywords: dict[str, KeywordCatalog] = Field(default_factory=dict)

    @field_validator("weekday_names")
    @classmethod
    def _seven_days(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for lang, names in value.items():
            if len(names) != 7:
                raise ValueError(f"weekday_names[{lang}] must list 7 days, got {len(names)}")
        return value

    @property
    def csv_language(self) -> str:
        return self.app.csv_language.strip().lower() or CANONICAL_LANGUAGE

    @property
    def number_format(self) -> str:
        return self.input_data.csv_number_format

    @property
    def languages(self) -> list[str]:
        """Languages carried by localized CSV columns, e.g. ``name_it``."""
        ordered: list[str] = []
        for lang in [*self.i18n.languages, self.i18n.fallback_language]:
            if lang not in ordered:
                ordered.append(lang)
        return ordered

    def keyword_catalog(self) -> KeywordCatalog:
        """Keyword catalog for the CSV authoring language (empty if none)."""
        return self.csv_keywords.get(self.csv_language, KeywordCatalog())

    def language_chain(self, preferred: str | None = None) -> list[str]:
        """Ordered lookup chain: preferred, fallback, then the other sheet languages."""
        chain: list[str] = []
        first = (preferred or "").strip().lower() or self.languages[0]
        for lang in (first, self.i18n.fallback_language, *self.languages):
            if lang not in chain:
                chain.append(lang)
        return chain

    def day_names(self) -> dict[str, list[str]]:
        names = dict(DEFAULT_WEEKDAY_NAMES)
        names.update(self.weekday_names)
        return names


def load_menu_config(path: str | Path) -> MenuConfig:
    """Read and validate the JSON menu configuration."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Menu configuration not found: {config_path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Menu configuration unreadable: {config_path}: {exc}") from exc

    try:
        config = MenuConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Menu configuration invalid: {exc}") from exc

    logger.info(
        "[CONFIG] loaded %s (csv language=%s, %d allergens, %d food types)",
        config_path,
        config.csv_language,
        len(config.allergens),
        len(config.food_types),
    )
    return config
