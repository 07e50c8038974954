# Area: Resolver Tests
"""Tests for winner computation."""

import pytest
from rps_contract._resolver.enums import GameResult, Move
from rps_contract._resolver.outcome import BEATS, resolve


class TestResolve:
    """Tests for resolve() over every move pair."""

    @pytest.mark.parametrize(
        "host_move, opponent_move, expected",
        [
            (Move.ROCK, Move.ROCK, GameResult.TIE),
            (Move.ROCK, Move.PAPER, GameResult.OPPONENT_WINS),
            (Move.ROCK, Move.SCISSORS, GameResult.HOST_WINS),
            (Move.PAPER, Move.ROCK, GameResult.HOST_WINS),
            (Move.PAPER, Move.PAPER, GameResult.TIE),
            (Move.PAPER, Move.SCISSORS, GameResult.OPPONENT_WINS),
            (Move.SCISSORS, Move.ROCK, GameResult.OPPONENT_WINS),
            (Move.SCISSORS, Move.PAPER, GameResult.HOST_WINS),
            (Move.SCISSORS, Move.SCISSORS, GameResult.TIE),
        ],
    )
    def test_all_nine_pairs(self, host_move, opponent_move, expected):
        assert resolve(host_move, opponent_move) == expected

    def test_swapping_sides_swaps_winner(self):
        """Test that the result is symmetric between host and opponent."""
        mirror = {
            GameResult.HOST_WINS: GameResult.OPPONENT_WINS,
            GameResult.OPPONENT_WINS: GameResult.HOST_WINS,
            GameResult.TIE: GameResult.TIE,
        }
        for a in Move:
            for b in Move:
                assert resolve(b, a) == mirror[resolve(a, b)]

    def test_every_move_beats_exactly_one_other(self):
        assert set(BEATS) == set(Move)
        assert set(BEATS.values()) == set(Move)
        for move, beaten in BEATS.items():
            assert move != beaten
