"""Board refresh endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from menuboard.api.deps import get_board_service
from menuboard.db.session import get_db
from menuboard.schemas.board import RefreshResponse
from menuboard.services.board_service import BoardService
from menuboard.services.data_source import DataSourceError

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/refresh", response_model=RefreshResponse)
def refresh_board(
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> RefreshResponse:
    """Fetch the sheet again and replace the cached board."""
    try:
        state = service.refresh(db)
    except DataSourceError as exc:
        logger.exception("[BOARD] Refresh failed")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return RefreshResponse(origin=state.origin, using_fallback=state.using_fallback, fetched_at=state.fetched_at)
