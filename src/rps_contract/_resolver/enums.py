# Area: Resolver
"""
rps_contract._resolver.enums — Match Enums
==========================================

Defines the move and result vocabularies plus the phases and events
of the per-host match state machine.
"""

from enum import Enum


class Move(str, Enum):
    """A single Rock-Paper-Scissors throw."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class GameResult(str, Enum):
    """Outcome of a resolved match, seen from the host's side."""
    HOST_WINS = "host_wins"
    OPPONENT_WINS = "opponent_wins"
    TIE = "tie"


class GamePhase(str, Enum):
    """
    Phases of a single host's match record.

    State transitions:
    NOT_STARTED -> AWAITING_OPPONENT_MOVE (on START_GAME)
    AWAITING_OPPONENT_MOVE -> AWAITING_OPPONENT_MOVE (on START_GAME)
    AWAITING_OPPONENT_MOVE -> RESOLVED (on SUBMIT_MOVE)
    RESOLVED -> AWAITING_OPPONENT_MOVE (on START_GAME)
    """
    NOT_STARTED = "not_started"
    AWAITING_OPPONENT_MOVE = "awaiting_opponent_move"
    RESOLVED = "resolved"


class GameEvent(str, Enum):
    """
    Events that move a match record between phases.

    - START_GAME: the contract owner starts (or restarts) a match
    - SUBMIT_MOVE: the invited opponent commits their move
    """
    START_GAME = "start_game"
    SUBMIT_MOVE = "submit_move"
