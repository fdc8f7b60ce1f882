"""Time slot schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from menuboard.utils.i18n import localize


class ScheduleEntry(BaseModel):
    """Opening window of a slot on one weekday (Monday = 1, Sunday = 7)."""

    day: int = Field(ge=1, le=7)
    open: str
    close: str

    model_config = ConfigDict(frozen=True)


class CollapsedRange(BaseModel):
    """Maximal run of consecutive weekdays sharing the same hours."""

    start_day: int
    end_day: int
    open: str
    close: str
    days: dict[str, str] = Field(default_factory=dict)
    times: str

    model_config = ConfigDict(frozen=True)


class TimeSlot(BaseModel):
    """Named opening slot (kitchen, aperitivo, brunch...)."""

    id: str
    labels: dict[str, str] = Field(default_factory=dict)
    is_kitchen: bool = False
    show_in_hero: bool = False
    show_in_info: bool = False
    schedule: tuple[ScheduleEntry, ...] = ()

    model_config = ConfigDict(frozen=True)

    def label_for(self, languages: list[str]) -> str:
        return localize(self.labels, languages, default=self.id)


class InfoTimeSlot(TimeSlot):
    """Time slot shown on the info page with its collapsed schedule."""

    collapsed_schedule: tuple[CollapsedRange, ...] = ()


class TimeslotsData(BaseModel):
    time_slots: tuple[TimeSlot, ...] = ()
    time_slots_for_hero: tuple[TimeSlot, ...] = ()
    time_slots_for_info: tuple[InfoTimeSlot, ...] = ()

    model_config = ConfigDict(frozen=True)


class UpcomingSlot(BaseModel):
    """Status of a hero slot relative to the current instant."""

    slot_id: str
    labels: dict[str, str] = Field(default_factory=dict)
    status: Literal["active", "upcoming"]
    is_kitchen: bool = False
    minutes_until: int = 0

    model_config = ConfigDict(frozen=True)
