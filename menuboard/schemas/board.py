"""Parsed menu board and HTTP response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from menuboard.schemas.content import ContentData
from menuboard.schemas.menu import MenuData
from menuboard.schemas.timeslot import InfoTimeSlot, TimeSlot, TimeslotsData, UpcomingSlot


class MenuBoard(BaseModel):
    """Everything one parse of the spreadsheet produces."""

    bar: MenuData = MenuData()
    kitchen: MenuData = MenuData()
    timeslots: TimeslotsData = TimeslotsData()
    content: ContentData = ContentData()

    model_config = ConfigDict(frozen=True)


class MenuItemResponse(BaseModel):
    name: str
    description: str
    price: str
    order: int
    diet: str
    diet_icon: str
    allergens: list[int]
    allergen_keys: list[str]
    no_gluten_option: bool


class CategoryResponse(BaseModel):
    id: str
    label: str
    order: float
    items: list[MenuItemResponse]


class MenuResponse(BaseModel):
    section: str
    language: str
    last_sheet_update: str | None
    categories: list[CategoryResponse]


class TimeslotsResponse(BaseModel):
    time_slots: list[TimeSlot]
    time_slots_for_hero: list[TimeSlot]
    time_slots_for_info: list[InfoTimeSlot]


class SlotStatusResponse(BaseModel):
    now: datetime
    show_next_label: bool
    slots: list[UpcomingSlot]


class RefreshResponse(BaseModel):
    origin: str
    using_fallback: bool
    fetched_at: datetime
