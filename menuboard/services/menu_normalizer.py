"""Turn menu table rows into ordered categories of menu items."""

from __future__ import annotations

import logging

from menuboard.core.catalog import DEFAULT_CATEGORY_ORDER, MenuConfig
from menuboard.schemas.menu import AllergenRef, Category, MenuData, MenuItem
from menuboard.services.table_demux import RowRecord
from menuboard.utils.i18n import localized_columns
from menuboard.utils.numbers import parse_number, parse_price

logger = logging.getLogger(__name__)

TRUTHY_TOKENS: frozenset[str] = frozenset({"true", "1", "x", "si", "sì", "yes", "vero"})
DEFAULT_CATEGORY_ID: str = "other"
DEFAULT_DIET: str = "standard"


def is_truthy(value: str | None) -> bool:
    """Exact, case-insensitive match against the known "yes" tokens."""
    if not value:
        return False
    return str(value).strip().lower() in TRUTHY_TOKENS


def _category_id(row: RowRecord, *columns: str) -> str:
    for column in columns:
        value = row.text(column).lower()
        if value:
            return value
    return ""


def build_category_index(
    category_rows: list[RowRecord],
    config: MenuConfig,
) -> dict[str, tuple[dict[str, str], float]]:
    """Map category id -> (localized labels, sort order) from the categories table."""
    index: dict[str, tuple[dict[str, str], float]] = {}
    for row in category_rows:
        category_id = _category_id(row, "category_id", "id")
        if not category_id:
            continue
        order = parse_number(row.text("order"), config.number_format)
        labels = localized_columns(row, "label", config.languages)
        index[category_id] = (labels, float(order) if order is not None else DEFAULT_CATEGORY_ORDER)
    return index


def resolve_allergens(row: RowRecord, config: MenuConfig) -> tuple[AllergenRef, ...]:
    """Allergens flagged on the row, sorted by their numeric code."""
    flagged = [
        AllergenRef(key=entry.key, number=entry.number, icon=entry.icon)
        for entry in config.allergens
        if is_truthy(row.get(entry.column_name))
    ]
    return tuple(sorted(flagged, key=lambda allergen: allergen.number))


def resolve_diet(row: RowRecord, config: MenuConfig) -> str:
    diet = row.text("type").lower()
    if not diet:
        return DEFAULT_DIET
    if config.food_types and diet not in config.food_types:
        logger.debug("Unknown food type %r; using %s", diet, DEFAULT_DIET)
        return DEFAULT_DIET
    return diet


def normalize_menu(
    rows: list[RowRecord],
    category_rows: list[RowRecord],
    config: MenuConfig,
) -> MenuData:
    """Build the category list of one menu table.

    Only active rows are kept; their display order is their position among the
    active rows. Categories are ordered by the categories table and fall back
    to the raw id (label) and the lowest priority (order) when not listed.
    """
    last_sheet_update: str | None = None
    for row in rows:
        stamp = row.text("last_updated")
        if stamp:
            last_sheet_update = stamp

    category_index = build_category_index(category_rows, config)
    grouped: dict[str, list[MenuItem]] = {}

    active_rows = [row for row in rows if is_truthy(row.get("active"))]
    for order, row in enumerate(active_rows):
        category_id = row.text("category").lower() or DEFAULT_CATEGORY_ID
        price, price_display = parse_price(row.get("price"), config.number_format, config.regional)
        item = MenuItem(
            names=localized_columns(row, "name", config.languages),
            descriptions=localized_columns(row, "description", config.languages),
            price=price,
            price_display=price_display,
            order=order,
            allergens=resolve_allergens(row, config),
            diet=resolve_diet(row, config),
            no_gluten_option=is_truthy(row.get("no_gluten_option")),
        )
        grouped.setdefault(category_id, []).append(item)

    categories: list[Category] = []
    for category_id, items in grouped.items():
        labels, sort_order = category_index.get(category_id, ({}, DEFAULT_CATEGORY_ORDER))
        categories.append(
            Category(
                id=category_id,
                labels=labels or {lang: category_id for lang in config.languages},
                order=sort_order,
                items=tuple(items),
            )
        )

    # sorted() is stable: equal orders keep first-seen order.
    categories.sort(key=lambda category: category.order)
    return MenuData(categories=tuple(categories), last_sheet_update=last_sheet_update)
