"""Holds the most recently parsed menu board."""

from __future__ import annotations

import itertools
import logging
import threading
from datetime import datetime, timezone

import httpx
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from menuboard.core.catalog import MenuConfig
from menuboard.core.config import Settings
from menuboard.schemas.board import MenuBoard
from menuboard.services.data_source import fetch_source_text
from menuboard.services.pipeline import build_menu_board

logger = logging.getLogger(__name__)


class BoardState(BaseModel):
    board: MenuBoard
    origin: str
    using_fallback: bool
    fetched_at: datetime

    model_config = ConfigDict(frozen=True)


class BoardService:
    """Refreshes the board from the data source and caches the result.

    A refresh that finishes after a newer one has already been applied is
    discarded, and a failed refresh keeps the previous board.
    """

    def __init__(self, config: MenuConfig, settings: Settings, client: httpx.Client | None = None) -> None:
        self.config = config
        self.settings = settings
        self.client = client
        self._state: BoardState | None = None
        self._generations = itertools.count(1)
        self._applied_generation = 0
        self._lock = threading.Lock()

    @property
    def source_url(self) -> str:
        return self.settings.menu_source_url or self.config.urls.menu

    @property
    def state(self) -> BoardState | None:
        return self._state

    def refresh(self, db: Session) -> BoardState:
        with self._lock:
            generation = next(self._generations)
        source = fetch_source_text(
            db,
            self.source_url,
            self.settings.menu_fallback_csv_path,
            timeout=self.settings.menu_fetch_timeout_seconds,
            client=self.client,
        )
        board = build_menu_board(source.text, self.config)
        state = BoardState(
            board=board,
            origin=source.origin,
            using_fallback=source.using_fallback,
            fetched_at=datetime.now(timezone.utc),
        )
        with self._lock:
            if generation < self._applied_generation:
                logger.info("[BOARD] Discarding stale refresh #%d", generation)
                return self._state or state
            self._applied_generation = generation
            self._state = state
        return state

    def current(self, db: Session) -> BoardState:
        if self._state is None:
            return self.refresh(db)
        return self._state
