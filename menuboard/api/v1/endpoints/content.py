"""Content block endpoints."""

from fastapi import APIRouter, Depends

from menuboard.api.deps import get_board_state
from menuboard.schemas.content import ContentData
from menuboard.services.board_service import BoardState

router: APIRouter = APIRouter()


@router.get("", response_model=ContentData)
def get_content(state: BoardState = Depends(get_board_state)) -> ContentData:
    """Return menu headers, texts and calls to action."""
    return state.board.content
