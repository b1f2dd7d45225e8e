from typing import List

from sqlalchemy import delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rps_api.domain.game_rules import WINNERS, resolve_winner
from rps_api.models.schema_models import GameResultSchema, HistorySummarySchema
from rps_api.models.schemas import GameResult

# None of these helpers commit; the caller owns the transaction.


class CreateData:
    @staticmethod
    async def add_game_result(
        player_move: str, computer_move: str, session: AsyncSession
    ) -> GameResultSchema:
        """Insert one round result, deriving the winner from the two moves

        Args:
            player_move (str): Canonical player move
            computer_move (str): Generated computer move

        Returns:
            GameResultSchema: The stored row, with id and played_at filled in
        """
        new_result = GameResult(
            player_move=player_move,
            computer_move=computer_move,
            winner=resolve_winner(player_move, computer_move),
        )
        session.add(new_result)
        await session.flush()
        await session.refresh(new_result)
        return GameResultSchema.model_validate(new_result)


class ReadData:
    @staticmethod
    async def read_game_results(
        offset: int, limit: int, session: AsyncSession
    ) -> List[GameResultSchema]:
        """Read a window of round results, most recent first

        Rows sharing a played_at timestamp are ordered by id so paging stays stable.

        Args:
            offset (int): Number of rows to skip
            limit (int): Maximum number of rows to return

        Returns:
            List[GameResultSchema]: Round results in the window
        """
        stmt = (
            select(GameResult)
            .order_by(desc(GameResult.played_at), desc(GameResult.id))
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return [GameResultSchema.model_validate(row) for row in result.scalars().all()]

    @staticmethod
    async def read_history_summary(session: AsyncSession) -> HistorySummarySchema:
        """Count rounds per winner across the whole table

        Returns:
            HistorySummarySchema: Per-winner counts and their total
        """
        stmt = select(GameResult.winner, func.count(GameResult.id)).group_by(GameResult.winner)
        result = await session.execute(stmt)
        counts = {winner: 0 for winner in WINNERS}
        for winner, count in result.all():
            counts[winner] = count
        return HistorySummarySchema(total=sum(counts.values()), **counts)


class DeleteData:
    @staticmethod
    async def delete_game_results(session: AsyncSession) -> int:
        """Delete every round result

        Returns:
            int: Number of deleted rows
        """
        result = await session.execute(delete(GameResult))
        return result.rowcount
