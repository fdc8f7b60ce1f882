"""Dietary and allergen filtering of normalized menu categories."""

from __future__ import annotations

from collections.abc import Iterable

from menuboard.schemas.filters import FilterSpec
from menuboard.schemas.menu import Category, MenuItem

DIET_ACCEPTS: dict[str, frozenset[str]] = {
    "vegan": frozenset({"vegan"}),
    "vegetarian": frozenset({"vegetarian", "vegan"}),
}


def item_matches(item: MenuItem, spec: FilterSpec) -> bool:
    """Return whether an item survives the diet and allergen filters."""
    accepted = DIET_ACCEPTS.get(spec.diet)
    if accepted is not None and item.diet not in accepted:
        return False
    return not (item.allergen_keys & spec.exclude_allergens)


def apply_filters(categories: Iterable[Category], spec: FilterSpec) -> list[Category]:
    """Return new categories holding only matching items; empty ones are dropped.

    Input categories are never modified.
    """
    if spec.is_empty:
        return [category for category in categories if category.items]

    filtered: list[Category] = []
    for category in categories:
        items = tuple(item for item in category.items if item_matches(item, spec))
        if not items:
            continue
        if len(items) == len(category.items):
            filtered.append(category)
        else:
            filtered.append(category.model_copy(update={"items": items}))
    return filtered
