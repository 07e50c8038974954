# Area: Resolver
"""
rps_contract._resolver.state_machine — Match Phase Transitions
==============================================================

Transition table for a host's match record. The resolver consults it
before building a new GameState so that an event arriving in the wrong
phase is rejected before any field is touched.
"""

import logging
from typing import Dict

from .enums import GameEvent, GamePhase

logger = logging.getLogger("rps_contract.resolver.state_machine")


# Valid phase transitions: {current_phase: {event: next_phase}}
TRANSITIONS: Dict[GamePhase, Dict[GameEvent, GamePhase]] = {
    GamePhase.NOT_STARTED: {
        GameEvent.START_GAME: GamePhase.AWAITING_OPPONENT_MOVE,
    },
    GamePhase.AWAITING_OPPONENT_MOVE: {
        GameEvent.START_GAME: GamePhase.AWAITING_OPPONENT_MOVE,
        GameEvent.SUBMIT_MOVE: GamePhase.RESOLVED,
    },
    GamePhase.RESOLVED: {
        GameEvent.START_GAME: GamePhase.AWAITING_OPPONENT_MOVE,
    },
}


def can_transition(phase: GamePhase, event: GameEvent) -> bool:
    """
    Check if an event is accepted in the given phase.

    Args:
        phase: Current phase of the match record
        event: The event to check

    Returns:
        True if the transition is valid, False otherwise
    """
    return event in TRANSITIONS.get(phase, {})


def next_phase(phase: GamePhase, event: GameEvent) -> GamePhase:
    """
    Compute the phase that follows an event.

    Args:
        phase: Current phase of the match record
        event: The event triggering the transition

    Returns:
        The phase after the transition

    Raises:
        ValueError: If the event is not accepted in the current phase
    """
    if not can_transition(phase, event):
        raise ValueError(f"Invalid transition: {event.value} from {phase.value}")

    new_phase = TRANSITIONS[phase][event]
    logger.debug(f"Phase: {phase.value} → {new_phase.value} on {event.value}")
    return new_phase
