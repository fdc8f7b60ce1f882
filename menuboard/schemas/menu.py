"""Normalized menu schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from menuboard.utils.i18n import localize


class AllergenRef(BaseModel):
    """Allergen flagged on a menu item."""

    key: str
    number: int
    icon: str = ""

    model_config = ConfigDict(frozen=True)


class MenuItem(BaseModel):
    """One active menu row."""

    names: dict[str, str] = Field(default_factory=dict)
    descriptions: dict[str, str] = Field(default_factory=dict)
    price: Decimal | None = None
    price_display: str = ""
    order: int
    allergens: tuple[AllergenRef, ...] = ()
    diet: str = "standard"
    no_gluten_option: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def allergen_keys(self) -> frozenset[str]:
        return frozenset(allergen.key for allergen in self.allergens)

    def name_for(self, languages: list[str]) -> str:
        return localize(self.names, languages)

    def description_for(self, languages: list[str]) -> str:
        return localize(self.descriptions, languages)


class Category(BaseModel):
    """Menu category with items in sheet order."""

    id: str
    labels: dict[str, str] = Field(default_factory=dict)
    order: float
    items: tuple[MenuItem, ...] = ()

    model_config = ConfigDict(frozen=True)

    def label_for(self, languages: list[str]) -> str:
        return localize(self.labels, languages, default=self.id)


class MenuData(BaseModel):
    """Categories of one menu table plus the sheet freshness stamp."""

    categories: tuple[Category, ...] = ()
    last_sheet_update: str | None = None

    model_config = ConfigDict(frozen=True)
