"""Opening time slot endpoints."""

from fastapi import APIRouter, Depends

from menuboard.api.deps import get_board_state
from menuboard.schemas.board import SlotStatusResponse, TimeslotsResponse
from menuboard.services.board_service import BoardState
from menuboard.services.schedule_normalizer import get_upcoming_slots, needs_next_label
from menuboard.utils.time import current_local_datetime

router: APIRouter = APIRouter()


@router.get("", response_model=TimeslotsResponse)
def list_timeslots(state: BoardState = Depends(get_board_state)) -> TimeslotsResponse:
    """Return all slots plus the hero and info subsets."""
    timeslots = state.board.timeslots
    return TimeslotsResponse(
        time_slots=list(timeslots.time_slots),
        time_slots_for_hero=list(timeslots.time_slots_for_hero),
        time_slots_for_info=list(timeslots.time_slots_for_info),
    )


@router.get("/status", response_model=SlotStatusResponse)
def get_slot_status(state: BoardState = Depends(get_board_state)) -> SlotStatusResponse:
    """Return hero slots that are open now or open later today."""
    now = current_local_datetime()
    upcoming = get_upcoming_slots(state.board.timeslots.time_slots_for_hero, now)
    return SlotStatusResponse(now=now, show_next_label=needs_next_label(upcoming), slots=upcoming)
