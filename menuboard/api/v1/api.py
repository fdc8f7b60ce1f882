"""API v1 router composition."""

from fastapi import APIRouter

from menuboard.api.v1.endpoints import board, content, menu, timeslots

api_router: APIRouter = APIRouter()
api_router.include_router(menu.router, prefix="/menu", tags=["menu"])
api_router.include_router(timeslots.router, prefix="/timeslots", tags=["timeslots"])
api_router.include_router(content.router, prefix="/content", tags=["content"])
api_router.include_router(board.router, prefix="/board", tags=["board"])
