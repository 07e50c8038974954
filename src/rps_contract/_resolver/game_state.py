# Area: Resolver
"""
rps_contract._resolver.game_state — Match Records
=================================================

Defines the GameState record stored per host identity and the
single Ownership record set when the contract is instantiated.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .enums import GamePhase, GameResult, Move


@dataclass(frozen=True)
class Ownership:
    """
    Contract-wide ownership record.

    Attributes:
        owner: Identity that instantiated the contract and may start games
    """

    owner: str


@dataclass(frozen=True)
class GameState:
    """
    One host's match record.

    Records are immutable; every transition builds a new GameState.
    The phase tag always agrees with which optional fields are set
    (see check_invariants).

    Attributes:
        host: Identity that owns this record (the storage key)
        opponent: Identity invited by the host, once a game has started
        host_move: Host's committed move, set together with opponent
        opponent_move: Opponent's committed move
        game_result: Outcome, set once both moves are present
        phase: Explicit state-machine tag for the record
    """

    host: str
    opponent: Optional[str] = None
    host_move: Optional[Move] = None
    opponent_move: Optional[Move] = None
    game_result: Optional[GameResult] = None
    phase: GamePhase = GamePhase.NOT_STARTED

    @classmethod
    def new(cls, host: str) -> "GameState":
        """Create the empty record written at instantiation."""
        return cls(host=host)

    @property
    def is_terminal(self) -> bool:
        return self.phase == GamePhase.RESOLVED

    def check_invariants(self) -> None:
        """
        Verify that the optional fields agree with the phase tag.

        Raises:
            ValueError: If the record is in an impossible configuration
        """
        if not self.host:
            raise ValueError("host must be set")

        fields_set = (
            self.opponent is not None,
            self.host_move is not None,
            self.opponent_move is not None,
            self.game_result is not None,
        )
        expected = {
            GamePhase.NOT_STARTED: (False, False, False, False),
            GamePhase.AWAITING_OPPONENT_MOVE: (True, True, False, False),
            GamePhase.RESOLVED: (True, True, True, True),
        }[self.phase]

        if fields_set != expected:
            raise ValueError(
                f"Record for {self.host!r} in phase {self.phase.value} has "
                f"opponent/host_move/opponent_move/game_result set={fields_set}"
            )

    def to_row(self) -> Dict[str, Any]:
        """Flatten into column values for the registry."""
        return {
            "host": self.host,
            "opponent": self.opponent,
            "host_move": _value(self.host_move),
            "opponent_move": _value(self.opponent_move),
            "game_result": _value(self.game_result),
            "phase": self.phase.value,
        }

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "GameState":
        """Rebuild a record from registry column values."""
        return cls(
            host=row["host"],
            opponent=row.get("opponent"),
            host_move=_enum(Move, row.get("host_move")),
            opponent_move=_enum(Move, row.get("opponent_move")),
            game_result=_enum(GameResult, row.get("game_result")),
            phase=GamePhase(row.get("phase") or GamePhase.NOT_STARTED.value),
        )


def _value(member):
    return None if member is None else member.value


def _enum(enum_cls, raw):
    return None if raw is None else enum_cls(raw)
