"""Rock-Paper-Scissors rules that are independent from HTTP and DB.

Rule of thumb:
- OK: move normalization, winner resolution, move generation strategies.
- Not OK: touching DB sessions, FastAPI, datetime.now(), etc.
"""

import random
from typing import Protocol

ROCK = "rock"
PAPER = "paper"
SCISSORS = "scissors"

MOVES = (ROCK, PAPER, SCISSORS)

# Column width for stored moves; checked after lowercasing since lower() can grow a string.
MAX_MOVE_LENGTH = 32

PLAYER = "player"
COMPUTER = "computer"
DRAW = "draw"

WINNERS = (PLAYER, COMPUTER, DRAW)

# (player_move, computer_move) pairs won by the player.
PLAYER_WINNING_PAIRS = frozenset(
    {
        (ROCK, SCISSORS),
        (SCISSORS, PAPER),
        (PAPER, ROCK),
    }
)


class InvalidMoveError(ValueError):
    """Raised when a move is missing, empty or not allowed where it is used."""

    def __init__(self, param_name: str, message: str | None = None):
        self.param_name = param_name
        super().__init__(message or f"{param_name} must be a non-empty move")


def normalize_move(move: str | None, param_name: str) -> str:
    """Lowercase a move, rejecting None and empty strings.

    Unknown moves are returned as-is (lowercased); they simply never win.
    Moves longer than MAX_MOVE_LENGTH once lowercased are rejected.

    Args:
        move (str | None): Raw move as submitted
        param_name (str): Reported in the error when the move is invalid

    Returns:
        str: Canonical lowercase move
    """
    if not move:
        raise InvalidMoveError(param_name)
    move = move.lower()
    if len(move) > MAX_MOVE_LENGTH:
        raise InvalidMoveError(
            param_name, f"{param_name} must be at most {MAX_MOVE_LENGTH} characters"
        )
    return move


def resolve_winner(player_move: str | None, computer_move: str | None) -> str:
    """Decide the outcome of one round.

    Args:
        player_move (str | None): The player's move, any case
        computer_move (str | None): The computer's move, any case

    Returns:
        str: "player", "computer" or "draw"
    """
    player = normalize_move(player_move, "player_move")
    computer = normalize_move(computer_move, "computer_move")

    if player == computer:
        return DRAW
    if (player, computer) in PLAYER_WINNING_PAIRS:
        return PLAYER
    return COMPUTER


class MoveGenerator(Protocol):
    def generate(self) -> str: ...


class RandomMoveGenerator:
    """Uniform random choice over all three moves."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def generate(self) -> str:
        # randrange's upper bound is exclusive, so len(MOVES) reaches every index.
        return MOVES[self._rng.randrange(len(MOVES))]


class FixedMoveGenerator:
    """Always plays the same move. Used for reproducible games and tests."""

    def __init__(self, move: str):
        self.move = normalize_move(move, "move")
        if self.move not in MOVES:
            raise InvalidMoveError("move", f"Unsupported move: {move!r}")

    def generate(self) -> str:
        return self.move
