"""FastAPI entrypoint for the menu board service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from menuboard.api.v1.api import api_router
from menuboard.core.catalog import load_menu_config
from menuboard.core.config import settings
from menuboard.db import session as db_session
from menuboard.db.base import Base
from menuboard.services.board_service import BoardService

logger = logging.getLogger(__name__)

app = FastAPI(title="Menu Board")
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    # ConfigurationError is fatal: the pipeline never runs without catalogs.
    menu_config = load_menu_config(settings.menu_config_path)
    app.state.menu_config = menu_config
    app.state.board_service = BoardService(menu_config, settings)
    Base.metadata.create_all(bind=db_session.engine)
    logger.info("[BOOTSTRAP] menu source: %s", app.state.board_service.source_url or "local fallback only")


@app.get("/health")
def health(request: Request) -> dict[str, str | bool]:
    service: BoardService | None = getattr(request.app.state, "board_service", None)
    return {"status": "ok", "board_loaded": service is not None and service.state is not None}
