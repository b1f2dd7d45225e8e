from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import DateTime, Integer, String

from rps_api.domain.game_rules import MAX_MOVE_LENGTH


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class GameResult(Base):
    __tablename__ = "game_results"
    id = Column(Integer, primary_key=True, autoincrement=True)
    player_move = Column(String(MAX_MOVE_LENGTH), nullable=False)
    computer_move = Column(String(16), nullable=False)
    winner = Column(String(16), nullable=False)
    played_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    def __repr__(self):
        return (
            f"<GameResult id={self.id} player={self.player_move} "
            f"computer={self.computer_move} winner={self.winner}>"
        )
