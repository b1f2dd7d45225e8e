import logging

from sqlalchemy.ext.asyncio import AsyncSession

from rps_api.domain.game_rules import MoveGenerator, normalize_move
from rps_api.models.schema_models import GameResultSchema
from rps_api.services.game_db import record_round


async def play_round(
    player_move: str | None, move_generator: MoveGenerator, session: AsyncSession
) -> GameResultSchema:
    """Resolve one round against a generated move and store it.

    Args:
        player_move (str | None): Move as submitted by the player, any case
        move_generator (MoveGenerator): Source of the computer's move
        session (AsyncSession): Request-scoped session

    Returns:
        GameResultSchema: The stored round result
    """
    player_move = normalize_move(player_move, "player_move")
    computer_move = move_generator.generate()
    result = await record_round(player_move, computer_move, session)
    logging.info(
        f"Round {result.id}: player={player_move} computer={computer_move} winner={result.winner}"
    )
    return result
