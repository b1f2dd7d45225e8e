import random
from collections import Counter

import pytest

from rps_api.domain.game_rules import (
    MAX_MOVE_LENGTH,
    MOVES,
    FixedMoveGenerator,
    InvalidMoveError,
    RandomMoveGenerator,
    normalize_move,
    resolve_winner,
)


class TestResolveWinner:
    @pytest.mark.parametrize("move", MOVES)
    def test_same_moves_draw(self, move):
        assert resolve_winner(move, move) == "draw"

    @pytest.mark.parametrize(
        "player_move, computer_move",
        [("rock", "scissors"), ("scissors", "paper"), ("paper", "rock")],
    )
    def test_player_wins(self, player_move, computer_move):
        assert resolve_winner(player_move, computer_move) == "player"

    @pytest.mark.parametrize(
        "player_move, computer_move",
        [("scissors", "rock"), ("paper", "scissors"), ("rock", "paper")],
    )
    def test_computer_wins(self, player_move, computer_move):
        assert resolve_winner(player_move, computer_move) == "computer"

    def test_case_insensitive(self):
        assert resolve_winner("RoCk", "SCISSORS") == "player"
        assert resolve_winner("PAPER", "paper") == "draw"

    def test_unknown_move_loses(self):
        assert resolve_winner("lizard", "rock") == "computer"
        assert resolve_winner("spock", "scissors") == "computer"

    @pytest.mark.parametrize(
        "player_move, computer_move, param_name",
        [
            (None, "rock", "player_move"),
            ("", "rock", "player_move"),
            ("rock", None, "computer_move"),
            ("rock", "", "computer_move"),
        ],
    )
    def test_missing_move_rejected(self, player_move, computer_move, param_name):
        with pytest.raises(InvalidMoveError) as exc_info:
            resolve_winner(player_move, computer_move)
        assert exc_info.value.param_name == param_name
        assert param_name in str(exc_info.value)

    def test_move_length_checked_after_lowercasing(self):
        assert normalize_move("A" * MAX_MOVE_LENGTH, "player_move") == "a" * MAX_MOVE_LENGTH
        # "\u0130" lowercases to two code points.
        with pytest.raises(InvalidMoveError) as exc_info:
            normalize_move("\u0130" * MAX_MOVE_LENGTH, "player_move")
        assert exc_info.value.param_name == "player_move"

    def test_invalid_move_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_winner(None, None)


class TestMoveGenerators:
    def test_random_moves_are_valid(self):
        generator = RandomMoveGenerator()
        for _ in range(200):
            assert generator.generate() in MOVES

    def test_random_moves_cover_every_move(self):
        generator = RandomMoveGenerator(random.Random(1234))
        counts = Counter(generator.generate() for _ in range(3000))
        assert set(counts) == set(MOVES)
        # Roughly uniform: each move near 1000 of 3000 draws.
        for move in MOVES:
            assert 800 < counts[move] < 1200

    def test_unseeded_random_moves_cover_every_move(self):
        generator = RandomMoveGenerator()
        assert {generator.generate() for _ in range(1000)} == set(MOVES)

    def test_fixed_generator(self):
        generator = FixedMoveGenerator("Paper")
        assert [generator.generate() for _ in range(3)] == ["paper"] * 3

    @pytest.mark.parametrize("move", ["", "lizard"])
    def test_fixed_generator_rejects_bad_moves(self, move):
        with pytest.raises(InvalidMoveError):
            FixedMoveGenerator(move)
