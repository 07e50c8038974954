# Area: Resolver
"""
rps_contract._resolver.transitions — Legal Match Transitions
============================================================

Authorization and transition logic for start-game and submit-move.
Both functions are pure: they take the record loaded inside the
registry transaction and either return the record to write or raise
a contract error, in which case nothing is written.
"""

import logging
from typing import Optional

from ..errors import (
    GameAlreadyResolvedError,
    NotFoundError,
    UnauthorizedError,
)
from .addresses import AddressValidator, canonicalize
from .enums import GameEvent, Move
from .game_state import GameState, Ownership
from .outcome import resolve
from .state_machine import next_phase

logger = logging.getLogger("rps_contract.resolver")


def start_game(
    current: Optional[GameState],
    caller: str,
    ownership: Optional[Ownership],
    opponent: str,
    host_move: Move,
    address_validator: AddressValidator,
) -> GameState:
    """
    Build the record for a newly started (or restarted) match.

    Checks, in order:
    1. The opponent address passes validation (InvalidAddressError)
    2. The contract has been instantiated (NotFoundError)
    3. The caller is the contract owner (UnauthorizedError)

    The host is preserved from the existing record, or is the caller
    when no record exists. The opponent move and result are cleared so
    a terminal record can be restarted.
    """
    opponent = canonicalize(opponent, address_validator)

    if ownership is None:
        raise NotFoundError("ownership")
    if caller != ownership.owner:
        raise UnauthorizedError(caller, "owner", expected=ownership.owner)

    if current is None:
        host = caller
        phase = next_phase(GameState.new(host).phase, GameEvent.START_GAME)
    else:
        host = current.host
        phase = next_phase(current.phase, GameEvent.START_GAME)

    return GameState(
        host=host,
        opponent=opponent,
        host_move=host_move,
        opponent_move=None,
        game_result=None,
        phase=phase,
    )


def submit_move(
    current: Optional[GameState],
    caller: str,
    move: Move,
    host: str,
) -> GameState:
    """
    Record the opponent's move and resolve the match.

    Checks, in order:
    1. A record exists for the host (NotFoundError)
    2. The caller is the record's opponent (UnauthorizedError)
    3. The match has no result yet (GameAlreadyResolvedError)
    """
    if current is None:
        raise NotFoundError("game", host)
    if current.opponent is None or caller != current.opponent:
        raise UnauthorizedError(caller, "opponent", expected=current.opponent)
    if current.game_result is not None:
        raise GameAlreadyResolvedError(current.host, current.game_result.value)

    phase = next_phase(current.phase, GameEvent.SUBMIT_MOVE)
    result = resolve(current.host_move, move)
    logger.info(
        f"[{current.host}] {current.host_move.value} vs {move.value} → {result.value}"
    )

    return GameState(
        host=current.host,
        opponent=current.opponent,
        host_move=current.host_move,
        opponent_move=move,
        game_result=result,
        phase=phase,
    )
