"""Time slot normalization, weekly schedule collapsing and live status."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime

from menuboard.core.catalog import MenuConfig
from menuboard.schemas.timeslot import (
    CollapsedRange,
    InfoTimeSlot,
    ScheduleEntry,
    TimeSlot,
    TimeslotsData,
    UpcomingSlot,
)
from menuboard.services.menu_normalizer import is_truthy
from menuboard.services.table_demux import RowRecord
from menuboard.utils.i18n import localized_columns
from menuboard.utils.numbers import parse_time_value
from menuboard.utils.time import hhmm_to_minutes, iso_weekday, minutes_since_midnight

logger = logging.getLogger(__name__)

DAY_NUMBERS: dict[str, int] = {
    "mon": 1, "tue": 2, "wed": 3, "thu": 4, "fri": 5, "sat": 6, "sun": 7,
    "monday": 1, "tuesday": 2, "wednesday": 3, "thursday": 4, "friday": 5, "saturday": 6, "sunday": 7,
}
RANGE_SEPARATOR: str = " – "
UPCOMING_LIMIT: int = 3


def day_number(token: str) -> int | None:
    return DAY_NUMBERS.get(token.strip().lower())


def normalize_timeslots(rows: list[RowRecord], config: MenuConfig) -> TimeslotsData:
    """Group timeslot rows by slot id and build their weekly schedules.

    Slot attributes come from the first row of each slot. Rows without a slot
    id or with an unknown weekday are skipped.
    """
    slots: dict[str, dict] = {}
    for row in rows:
        slot_id = row.text("slot_id").lower()
        day = day_number(row.text("day"))
        if not slot_id or day is None:
            logger.debug("Skipping timeslot row without slot id or weekday: %r", row)
            continue

        slot = slots.get(slot_id)
        if slot is None:
            slot = {
                "id": slot_id,
                "labels": localized_columns(row, "label", config.languages),
                "is_kitchen": is_truthy(row.get("is_kitchen")),
                "show_in_hero": is_truthy(row.get("show_in_hero")),
                "show_in_info": is_truthy(row.get("show_in_info")),
                "schedule": [],
            }
            slots[slot_id] = slot

        open_cell, close_cell = row.text("open"), row.text("close")
        if open_cell and close_cell:
            slot["schedule"].append(
                ScheduleEntry(
                    day=day,
                    open=parse_time_value(open_cell, config.number_format),
                    close=parse_time_value(close_cell, config.number_format),
                )
            )

    time_slots = tuple(
        TimeSlot(**{**slot, "schedule": tuple(slot["schedule"])}) for slot in slots.values()
    )
    day_names = config.day_names()
    return TimeslotsData(
        time_slots=time_slots,
        time_slots_for_hero=tuple(slot for slot in time_slots if slot.show_in_hero),
        time_slots_for_info=tuple(
            InfoTimeSlot(
                **slot.model_dump(),
                collapsed_schedule=collapse_time_slot_days(slot.schedule, day_names),
            )
            for slot in time_slots
            if slot.show_in_info
        ),
    )


def collapse_time_slot_days(
    schedule: Iterable[ScheduleEntry],
    day_names: Mapping[str, Sequence[str]],
) -> tuple[CollapsedRange, ...]:
    """Collapse consecutive weekdays with identical hours into ranges.

    An entry joins the current run only when its weekday directly follows the
    run's end and its (open, close) pair matches. Several entries on the same
    weekday stay separate ranges.
    """
    runs: list[list] = []
    for entry in sorted(schedule, key=lambda item: item.day):
        if runs:
            run = runs[-1]
            if run[1] == entry.day - 1 and (run[2], run[3]) == (entry.open, entry.close):
                run[1] = entry.day
                continue
        runs.append([entry.day, entry.day, entry.open, entry.close])

    collapsed: list[CollapsedRange] = []
    for start_day, end_day, open_time, close_time in runs:
        days: dict[str, str] = {}
        for lang, names in day_names.items():
            start, end = names[start_day - 1], names[end_day - 1]
            days[lang] = start if start_day == end_day else f"{start}{RANGE_SEPARATOR}{end}"
        collapsed.append(
            CollapsedRange(
                start_day=start_day,
                end_day=end_day,
                open=open_time,
                close=close_time,
                days=days,
                times=f"{open_time}{RANGE_SEPARATOR}{close_time}",
            )
        )
    return tuple(collapsed)


def _previous_day(day: int) -> int:
    return 7 if day == 1 else day - 1


def get_upcoming_slots(
    slots: Iterable[TimeSlot],
    now: datetime,
    limit: int = UPCOMING_LIMIT,
) -> list[UpcomingSlot]:
    """Active and upcoming slots for ``now``, active first then soonest.

    A window with ``close < open`` crosses midnight. On its own weekday it is
    active from ``open`` on (and before ``close``), upcoming between ``close``
    and ``open``. On the following weekday it keeps the slot active until
    ``close``.
    """
    today = iso_weekday(now)
    yesterday = _previous_day(today)
    current = minutes_since_midnight(now)

    results: list[UpcomingSlot] = []
    for slot in slots:
        common = {"slot_id": slot.id, "labels": slot.labels, "is_kitchen": slot.is_kitchen}
        for entry in slot.schedule:
            if entry.day not in (today, yesterday):
                continue
            open_minutes = hhmm_to_minutes(entry.open)
            close_minutes = hhmm_to_minutes(entry.close)
            if open_minutes is None or close_minutes is None:
                logger.debug("Slot %s has unparsable hours %s-%s", slot.id, entry.open, entry.close)
                continue
            crosses_midnight = close_minutes < open_minutes

            if entry.day == yesterday:
                if crosses_midnight and current < close_minutes:
                    results.append(UpcomingSlot(status="active", minutes_until=0, **common))
                continue

            if crosses_midnight:
                active = current >= open_minutes or current < close_minutes
            else:
                active = open_minutes <= current < close_minutes
            if active:
                results.append(UpcomingSlot(status="active", minutes_until=0, **common))
            elif current < open_minutes:
                results.append(UpcomingSlot(status="upcoming", minutes_until=open_minutes - current, **common))

    results.sort(key=lambda item: (item.status != "active", item.minutes_until))
    return results[:limit]


def needs_next_label(upcoming: Sequence[UpcomingSlot]) -> bool:
    """The "next" prefix is shown only when nothing is open right now."""
    return bool(upcoming) and not any(item.status == "active" for item in upcoming)
