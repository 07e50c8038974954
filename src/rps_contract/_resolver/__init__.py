# Area: Resolver
"""
Match Resolver - pure match logic.

This package handles:
- Winner computation for a pair of moves
- Authorization of start-game and submit-move
- The explicit phase state machine for a match record
"""

from .enums import GameEvent, GamePhase, GameResult, Move
from .game_state import GameState, Ownership
from .outcome import resolve
from .addresses import AddressValidator, canonicalize, validate_address
from .state_machine import can_transition, next_phase
from .transitions import start_game, submit_move

__all__ = [
    "GameEvent",
    "GamePhase",
    "GameResult",
    "Move",
    "GameState",
    "Ownership",
    "resolve",
    "AddressValidator",
    "validate_address",
    "canonicalize",
    "can_transition",
    "next_phase",
    "start_game",
    "submit_move",
]
