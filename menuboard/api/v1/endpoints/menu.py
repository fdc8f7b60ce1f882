"""Filtered menu endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from menuboard.api.deps import get_board_state, get_menu_config
from menuboard.core.catalog import MenuConfig
from menuboard.schemas.board import CategoryResponse, MenuItemResponse, MenuResponse
from menuboard.schemas.filters import DietFilter, FilterSpec
from menuboard.schemas.menu import Category, MenuItem
from menuboard.services.board_service import BoardState
from menuboard.services.filter_engine import apply_filters
from menuboard.utils.numbers import format_price

router: APIRouter = APIRouter()
MENU_SECTIONS: set[str] = {"bar", "kitchen"}


def _serialize_item(item: MenuItem, config: MenuConfig, languages: list[str]) -> MenuItemResponse:
    food_type = config.food_types.get(item.diet)
    return MenuItemResponse(
        name=item.name_for(languages),
        description=item.description_for(languages),
        price=format_price(item.price, item.price_display, config.regional),
        order=item.order,
        diet=item.diet,
        diet_icon=food_type.icon if food_type is not None else "",
        allergens=[allergen.number for allergen in item.allergens],
        allergen_keys=[allergen.key for allergen in item.allergens],
        no_gluten_option=item.no_gluten_option,
    )


def _serialize_category(category: Category, config: MenuConfig, languages: list[str]) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        label=category.label_for(languages),
        order=category.order,
        items=[_serialize_item(item, config, languages) for item in category.items],
    )


@router.get("/{section}", response_model=MenuResponse)
def get_menu(
    section: str,
    diet: DietFilter = "all",
    exclude: list[str] = Query(default=[]),
    lang: str | None = None,
    state: BoardState = Depends(get_board_state),
    config: MenuConfig = Depends(get_menu_config),
) -> MenuResponse:
    """Return one menu section after diet and allergen filters."""
    normalized_section = section.strip().lower()
    if normalized_section not in MENU_SECTIONS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown menu section")

    menu = getattr(state.board, normalized_section)
    spec = FilterSpec(diet=diet, exclude_allergens=frozenset(key.strip().lower() for key in exclude if key.strip()))
    languages = config.language_chain(lang)
    return MenuResponse(
        section=normalized_section,
        language=languages[0],
        last_sheet_update=menu.last_sheet_update,
        categories=[_serialize_category(category, config, languages) for category in apply_filters(menu.categories, spec)],
    )
