"""Time slot normalization, collapsing and status tests."""

from datetime import datetime

from menuboard.core.catalog import DEFAULT_WEEKDAY_NAMES, MenuConfig
from menuboard.schemas.timeslot import ScheduleEntry, TimeSlot
from menuboard.services.schedule_normalizer import (
    collapse_time_slot_days,
    get_upcoming_slots,
    needs_next_label,
    normalize_timeslots,
)
from menuboard.services.table_demux import RowRecord

# 2026-10-12 is a Monday, 2026-10-17 a Saturday and 2026-10-18 a Sunday.
MONDAY = datetime(2026, 10, 12)
SATURDAY = datetime(2026, 10, 17)
SUNDAY = datetime(2026, 10, 18)


def _at(day: datetime, hour: int, minute: int = 0) -> datetime:
    return day.replace(hour=hour, minute=minute)


def _slot(slot_id: str, *entries: tuple[int, str, str], is_kitchen: bool = False) -> TimeSlot:
    return TimeSlot(
        id=slot_id,
        labels={"en": slot_id.title()},
        is_kitchen=is_kitchen,
        show_in_hero=True,
        schedule=tuple(ScheduleEntry(day=day, open=open_time, close=close_time) for day, open_time, close_time in entries),
    )


def test_weekday_run_and_single_day_collapse_into_two_ranges() -> None:
    schedule = [ScheduleEntry(day=day, open="09:00", close="17:00") for day in (5, 3, 1, 2, 4)]
    schedule.append(ScheduleEntry(day=6, open="10:00", close="14:00"))

    ranges = collapse_time_slot_days(schedule, DEFAULT_WEEKDAY_NAMES)

    assert len(ranges) == 2
    assert (ranges[0].start_day, ranges[0].end_day) == (1, 5)
    assert ranges[0].days["en"] == "Monday – Friday"
    assert ranges[0].days["it"] == "Lunedì – Venerdì"
    assert ranges[0].times == "09:00 – 17:00"
    assert (ranges[1].start_day, ranges[1].end_day) == (6, 6)
    assert ranges[1].days["en"] == "Saturday"


def test_missing_weekday_splits_matching_hours() -> None:
    schedule = [ScheduleEntry(day=day, open="09:00", close="17:00") for day in (1, 2, 4, 5)]

    ranges = collapse_time_slot_days(schedule, DEFAULT_WEEKDAY_NAMES)

    assert [(r.start_day, r.end_day) for r in ranges] == [(1, 2), (4, 5)]


def test_same_weekday_entries_are_not_merged() -> None:
    schedule = [
        ScheduleEntry(day=1, open="12:00", close="15:00"),
        ScheduleEntry(day=1, open="19:00", close="23:00"),
    ]

    ranges = collapse_time_slot_days(schedule, DEFAULT_WEEKDAY_NAMES)

    assert [r.times for r in ranges] == ["12:00 – 15:00", "19:00 – 23:00"]


def test_empty_schedule_collapses_to_nothing() -> None:
    assert collapse_time_slot_days([], DEFAULT_WEEKDAY_NAMES) == ()


def test_normalize_groups_rows_by_slot_and_builds_subsets() -> None:
    config = MenuConfig.model_validate({"input_data": {"csv_number_format": "it"}})
    rows = [
        RowRecord({"slot_id": "Lunch", "day": "mon", "label_en": "Lunch", "open": "0,5", "close": "15:00",
                   "is_kitchen": "x", "show_in_hero": "x", "show_in_info": "x"}),
        RowRecord({"slot_id": "lunch", "day": "tue", "label_en": "Ignored", "open": "12:00", "close": "15:00",
                   "show_in_hero": ""}),
        RowRecord({"slot_id": "lunch", "day": "wed", "open": "12:00", "close": ""}),
        RowRecord({"slot_id": "late", "day": "Saturday", "label_en": "Late", "open": "22:00", "close": "02:00",
                   "show_in_hero": "x"}),
        RowRecord({"slot_id": "brunch", "day": "someday", "open": "10:00", "close": "12:00"}),
        RowRecord({"slot_id": "", "day": "sun", "open": "10:00", "close": "12:00"}),
    ]

    data = normalize_timeslots(rows, config)

    assert [slot.id for slot in data.time_slots] == ["lunch", "late"]
    lunch = data.time_slots[0]
    assert lunch.labels == {"en": "Lunch"}
    assert lunch.is_kitchen and lunch.show_in_hero and lunch.show_in_info
    assert [(e.day, e.open, e.close) for e in lunch.schedule] == [(1, "12:00", "15:00"), (2, "12:00", "15:00")]
    assert [slot.id for slot in data.time_slots_for_hero] == ["lunch", "late"]
    assert [slot.id for slot in data.time_slots_for_info] == ["lunch"]
    info = data.time_slots_for_info[0]
    assert len(info.collapsed_schedule) == 1
    assert info.collapsed_schedule[0].days["en"] == "Monday – Tuesday"


def test_no_rows_yields_empty_timeslots() -> None:
    data = normalize_timeslots([], MenuConfig())

    assert data.time_slots == ()
    assert data.time_slots_for_hero == ()
    assert data.time_slots_for_info == ()


def test_midnight_crossing_slot_is_active_late_on_its_day() -> None:
    late = _slot("late", (6, "22:00", "02:00"))

    upcoming = get_upcoming_slots([late], _at(SATURDAY, 23, 30))

    assert [(u.slot_id, u.status) for u in upcoming] == [("late", "active")]


def test_midnight_crossing_slot_stays_active_after_midnight_next_day() -> None:
    late = _slot("late", (6, "22:00", "02:00"))

    assert [u.status for u in get_upcoming_slots([late], _at(SUNDAY, 1, 0))] == ["active"]
    assert get_upcoming_slots([late], _at(SUNDAY, 3, 0)) == []


def test_midnight_crossing_slot_is_upcoming_during_the_day() -> None:
    late = _slot("late", (6, "22:00", "02:00"))

    upcoming = get_upcoming_slots([late], _at(SATURDAY, 10, 0))

    assert [(u.status, u.minutes_until) for u in upcoming] == [("upcoming", 720)]


def test_regular_slot_status_over_the_day() -> None:
    lunch = _slot("lunch", (1, "12:00", "15:00"), is_kitchen=True)

    before = get_upcoming_slots([lunch], _at(MONDAY, 10, 15))
    during = get_upcoming_slots([lunch], _at(MONDAY, 12, 0))
    after = get_upcoming_slots([lunch], _at(MONDAY, 15, 0))

    assert [(u.status, u.minutes_until, u.is_kitchen) for u in before] == [("upcoming", 105, True)]
    assert [u.status for u in during] == ["active"]
    assert after == []


def test_slots_on_other_days_are_ignored() -> None:
    lunch = _slot("lunch", (2, "12:00", "15:00"))

    assert get_upcoming_slots([lunch], _at(MONDAY, 10, 0)) == []


def test_results_sort_active_first_then_soonest_and_truncate() -> None:
    slots = [
        _slot("dinner", (1, "19:00", "23:00")),
        _slot("aperitivo", (1, "18:00", "20:00")),
        _slot("breakfast", (1, "07:00", "11:00")),
        _slot("snack", (1, "16:00", "17:00")),
    ]

    upcoming = get_upcoming_slots(slots, _at(MONDAY, 9, 0))

    assert [u.slot_id for u in upcoming] == ["breakfast", "snack", "aperitivo"]
    assert [u.minutes_until for u in upcoming] == [0, 420, 540]


def test_split_service_reports_active_and_upcoming_windows() -> None:
    service = _slot("kitchen", (1, "12:00", "15:00"), (1, "19:00", "23:00"))

    upcoming = get_upcoming_slots([service], _at(MONDAY, 13, 0))

    assert [(u.status, u.minutes_until) for u in upcoming] == [("active", 0), ("upcoming", 360)]


def test_split_service_reports_every_upcoming_window() -> None:
    service = _slot("kitchen", (1, "12:00", "15:00"), (1, "19:00", "23:00"))

    upcoming = get_upcoming_slots([service], _at(MONDAY, 10, 0))

    assert [(u.slot_id, u.status, u.minutes_until) for u in upcoming] == [
        ("kitchen", "upcoming", 120),
        ("kitchen", "upcoming", 540),
    ]


def test_next_label_only_without_active_slots() -> None:
    lunch = _slot("lunch", (1, "12:00", "15:00"))

    assert needs_next_label(get_upcoming_slots([lunch], _at(MONDAY, 10, 0)))
    assert not needs_next_label(get_upcoming_slots([lunch], _at(MONDAY, 13, 0)))
    assert not needs_next_label([])
