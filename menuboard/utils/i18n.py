"""Localized value lookup with an explicit language fallback chain."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def localize(values: Mapping[str, str], languages: Sequence[str], default: str = "") -> str:
    """Return the first non-blank value following ``languages`` in order, else ``default``."""
    for lang in languages:
        value = values.get(lang, "")
        if value and value.strip():
            return value
    return default


def localized_columns(row: Mapping[str, str], prefix: str, languages: Sequence[str]) -> dict[str, str]:
    """Collect ``<prefix>_<lang>`` columns of a row into a per-language dict."""
    result: dict[str, str] = {}
    for lang in languages:
        value = (row.get(f"{prefix}_{lang}") or "").strip()
        if value:
            result[lang] = value
    return result
