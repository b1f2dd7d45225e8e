from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from rps_api.db import get_session
from rps_api.domain.game_rules import MAX_MOVE_LENGTH, MoveGenerator
from rps_api.models.schema_models import GameHistoryPageSchema, GameResultSchema
from rps_api.services import game_db
from rps_api.services.game_play import play_round

game_router = APIRouter(prefix="/api/game", tags=["game"])


def get_move_generator(request: Request) -> MoveGenerator:
    return request.app.state.move_generator


class GameAPI:
    @staticmethod
    @game_router.post("/play", response_model=GameResultSchema)
    async def play(
        player_move: str = Query(..., alias="playerMove", max_length=MAX_MOVE_LENGTH),
        move_generator: MoveGenerator = Depends(get_move_generator),
        session: AsyncSession = Depends(get_session),
    ):
        return await play_round(player_move, move_generator, session)


class HistoryAPI:
    @staticmethod
    @game_router.get("/history", response_model=GameHistoryPageSchema)
    async def get_history(
        page: int | None = Query(None),
        page_size: int | None = Query(None, alias="pageSize"),
        session: AsyncSession = Depends(get_session),
    ):
        return await game_db.read_history_page(page, page_size, session)

    @staticmethod
    @game_router.delete("/history")
    async def clear_history(session: AsyncSession = Depends(get_session)):
        await game_db.clear_history(session)
        return Response(status_code=200)
