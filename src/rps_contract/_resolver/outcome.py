# Area: Resolver
"""
rps_contract._resolver.outcome — Winner Computation
===================================================

Pure winner computation for a pair of moves.
"""

from typing import Dict

from .enums import GameResult, Move

# Each move and the move it defeats
BEATS: Dict[Move, Move] = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}


def resolve(host_move: Move, opponent_move: Move) -> GameResult:
    """
    Decide a match from the host's and the opponent's moves.

    Total over all nine move pairs; never raises for valid Move values.
    """
    if host_move == opponent_move:
        return GameResult.TIE
    if BEATS[host_move] == opponent_move:
        return GameResult.HOST_WINS
    return GameResult.OPPONENT_WINS
