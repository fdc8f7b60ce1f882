"""Shared request dependencies for the API routers."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from menuboard.core.catalog import MenuConfig
from menuboard.db.session import get_db
from menuboard.services.board_service import BoardService, BoardState
from menuboard.services.data_source import DataSourceError


def get_menu_config(request: Request) -> MenuConfig:
    return request.app.state.menu_config


def get_board_service(request: Request) -> BoardService:
    return request.app.state.board_service


def get_board_state(
    service: BoardService = Depends(get_board_service),
    db: Session = Depends(get_db),
) -> BoardState:
    """Return the cached board, loading it on first use."""
    try:
        return service.current(db)
    except DataSourceError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
