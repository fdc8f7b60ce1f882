"""Menu filter schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DietFilter = Literal["all", "vegetarian", "vegan"]


class FilterSpec(BaseModel):
    """Dietary preference and allergens to hide."""

    diet: DietFilter = "all"
    exclude_allergens: frozenset[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.diet == "all" and not self.exclude_allergens
