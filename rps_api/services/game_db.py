"""DB service layer for round history use cases.

- Routers should not build queries; they call this module with the request session.
- This layer owns transaction boundaries.
- Driver and SQLAlchemy failures leave here as StorageUnavailableError.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rps_api.crud import CreateData, DeleteData, ReadData
from rps_api.domain.game_rules import normalize_move
from rps_api.domain.pagination import resolve_page_window
from rps_api.exceptions import StorageUnavailableError
from rps_api.models.schema_models import GameHistoryPageSchema, GameResultSchema

STORAGE_ERRORS = (SQLAlchemyError, OSError)


async def record_round(
    player_move: str, computer_move: str, session: AsyncSession
) -> GameResultSchema:
    """Append one round result in its own transaction. The winner is always derived from the moves."""
    player_move = normalize_move(player_move, "player_move")
    computer_move = normalize_move(computer_move, "computer_move")
    try:
        async with session.begin():
            return await CreateData.add_game_result(player_move, computer_move, session)
    except STORAGE_ERRORS as e:
        logging.error(f"Failed to record round: {e}")
        raise StorageUnavailableError("Failed to record round") from e


async def read_history_page(
    page: int | None, page_size: int | None, session: AsyncSession
) -> GameHistoryPageSchema:
    """Read one page of history plus the store-wide summary.

    Both queries run in the same transaction so the items and the counts agree.

    Args:
        page (int | None): Requested page, defaulted/clamped when out of range
        page_size (int | None): Requested page size, defaulted/clamped when out of range
        session (AsyncSession): Request-scoped session

    Returns:
        GameHistoryPageSchema: Items, pagination metadata and summary
    """
    try:
        async with session.begin():
            summary = await ReadData.read_history_summary(session)
            window = resolve_page_window(page, page_size, summary.total)
            items = []
            if window.total_count:
                items = await ReadData.read_game_results(window.offset, window.page_size, session)
    except STORAGE_ERRORS as e:
        logging.error(f"Failed to read history: {e}")
        raise StorageUnavailableError("Failed to read history") from e

    return GameHistoryPageSchema(
        items=items,
        page=window.page,
        page_size=window.page_size,
        total_pages=window.total_pages,
        total_count=window.total_count,
        has_previous=window.has_previous,
        has_next=window.has_next,
        summary=summary,
    )


async def clear_history(session: AsyncSession) -> int:
    """Delete every round result in one transaction."""
    try:
        async with session.begin():
            deleted = await DeleteData.delete_game_results(session)
    except STORAGE_ERRORS as e:
        logging.error(f"Failed to clear history: {e}")
        raise StorageUnavailableError("Failed to clear history") from e
    logging.info(f"Cleared history: {deleted} rounds deleted")
    return deleted
