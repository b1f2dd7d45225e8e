from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class GameResultSchema(BaseModel):
    id: int
    player_move: str
    computer_move: str
    winner: Literal["player", "computer", "draw"]
    played_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("played_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo; they were written as UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class HistorySummarySchema(BaseModel):
    total: int = 0
    player: int = 0
    computer: int = 0
    draw: int = 0


class GameHistoryPageSchema(BaseModel):
    items: List[GameResultSchema]
    page: int
    page_size: int
    total_pages: int
    total_count: int
    has_previous: bool
    has_next: bool
    summary: HistorySummarySchema

    class Config:
        alias_generator = to_camel
        populate_by_name = True
