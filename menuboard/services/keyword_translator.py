"""Translate spreadsheet keywords from the authoring language to canonical English."""

from __future__ import annotations

from collections.abc import Mapping

from menuboard.core.catalog import CANONICAL_LANGUAGE, KeywordCatalog, MenuConfig

TYPE_COLUMN: str = "type"
DAY_COLUMN: str = "day"


def _normalize(token: str | None) -> str:
    return (token or "").strip().lower()


def _reverse(mapping: Mapping[str, str]) -> dict[str, str]:
    """Invert a canonical -> authored table into authored -> canonical."""
    return {_normalize(authored): canonical for canonical, authored in mapping.items() if _normalize(authored)}


class KeywordTranslator:
    """Reverse keyword lookups for one authoring language.

    The catalog maps canonical keywords to the authored ones. When the sheet is
    written in the canonical language every lookup is the identity. Unknown
    keywords always pass through unchanged so partially localized sheets keep
    working.
    """

    def __init__(
        self,
        authoring_language: str,
        catalog: KeywordCatalog | None = None,
        canonical_language: str = CANONICAL_LANGUAGE,
    ) -> None:
        self.authoring_language = _normalize(authoring_language) or canonical_language
        self.canonical_language = canonical_language
        self.is_identity = self.authoring_language == canonical_language or catalog is None

        catalog = catalog or KeywordCatalog()
        self._columns: dict[str, str] = {} if self.is_identity else _reverse(catalog.columns)
        self._values: dict[str, str] = {} if self.is_identity else _reverse(catalog.values)
        self._types: dict[str, str] = {} if self.is_identity else _reverse(catalog.types)
        self._days: dict[str, str] = {} if self.is_identity else _reverse(catalog.days)

    @classmethod
    def from_config(cls, config: MenuConfig) -> "KeywordTranslator":
        return cls(config.csv_language, config.keyword_catalog())

    def translate_header(self, token: str) -> str:
        header = _normalize(token)
        return self._columns.get(header, header)

    def translate_headers(self, tokens: list[str]) -> list[str]:
        return [self.translate_header(token) for token in tokens]

    def translate_value(self, column: str, value: str) -> str:
        """Translate one cell value according to the semantics of its column."""
        if self.is_identity or not value:
            return value
        key = _normalize(value)
        if key in self._values:
            value = self._values[key]
        if column == TYPE_COLUMN and key in self._types:
            value = self._types[key]
        if column == DAY_COLUMN and key in self._days:
            value = self._days[key]
        return value
