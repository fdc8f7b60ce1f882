"""Schema exports."""

from menuboard.schemas.board import MenuBoard
from menuboard.schemas.content import ContentData, ContentItem, MenuHeader
from menuboard.schemas.filters import FilterSpec
from menuboard.schemas.menu import AllergenRef, Category, MenuData, MenuItem
from menuboard.schemas.timeslot import (
    CollapsedRange,
    InfoTimeSlot,
    ScheduleEntry,
    TimeSlot,
    TimeslotsData,
    UpcomingSlot,
)

__all__ = [
    "AllergenRef",
    "Category",
    "CollapsedRange",
    "ContentData",
    "ContentItem",
    "FilterSpec",
    "InfoTimeSlot",
    "MenuBoard",
    "MenuData",
    "MenuHeader",
    "MenuItem",
    "ScheduleEntry",
    "TimeSlot",
    "TimeslotsData",
    "UpcomingSlot",
]
