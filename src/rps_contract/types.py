"""
rps_contract.types — Message and response models
=================================================

Pydantic models for every message the contract accepts and every
response it returns. Execute and query messages are externally
tagged by their snake_case variant name, e.g.::

    {"start_game": {"opponent": "bob", "host_move": "rock"}}
    {"submit_move": {"move": "scissors"}}
    {"get_owner": {}}

All types are exported from the main package:

    from rps_contract import ExecuteMsg, QueryMsg, MoveResponse, ...
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._resolver.enums import GamePhase, GameResult, Move


class _Message(BaseModel):
    model_config = ConfigDict(extra="forbid")


class _TaggedUnion(_Message):
    """Base for externally tagged messages: exactly one field is set."""

    @model_validator(mode="after")
    def _exactly_one_variant(self):
        set_fields = [name for name in type(self).model_fields if getattr(self, name) is not None]
        if len(set_fields) != 1:
            variants = ", ".join(type(self).model_fields)
            raise ValueError(
                f"expected exactly one of ({variants}), got {len(set_fields)}"
            )
        return self

    @property
    def variant_name(self) -> str:
        for name in type(self).model_fields:
            if getattr(self, name) is not None:
                return name
        raise AssertionError("validated message has no variant")

    @property
    def variant(self) -> BaseModel:
        return getattr(self, self.variant_name)

    def to_wire(self) -> Dict[str, Any]:
        return {self.variant_name: self.variant.model_dump(mode="json", exclude_none=True)}


# ============================================
# Instantiate
# ============================================

class InstantiateMsg(_Message):
    """Instantiate takes no payload; the owner is the sender."""


# ============================================
# Execute
# ============================================

class StartGame(_Message):
    """Owner invites an opponent and commits the host move."""
    opponent: str
    host_move: Move


class SubmitMove(_Message):
    """Opponent commits their move.

    Fields
    ------
    move : Move
        The opponent's throw.
    host : str, optional
        Host key of the match. Defaults to the contract owner.
    """
    move: Move
    host: Optional[str] = None


class ExecuteMsg(_TaggedUnion):
    start_game: Optional[StartGame] = None
    submit_move: Optional[SubmitMove] = None


# ============================================
# Query
# ============================================

class HostKey(_Message):
    """Selects a match record. Defaults to the sender's own record."""
    host: Optional[str] = None


class GetMove(HostKey):
    pass


class GetOpponent(HostKey):
    pass


class GetResult(HostKey):
    pass


class GetGame(HostKey):
    pass


class GetOwner(_Message):
    pass


class QueryMsg(_TaggedUnion):
    get_move: Optional[GetMove] = None
    get_opponent: Optional[GetOpponent] = None
    get_owner: Optional[GetOwner] = None
    get_result: Optional[GetResult] = None
    get_game: Optional[GetGame] = None


# ============================================
# Responses
# ============================================

class MoveResponse(BaseModel):
    move_type: Move


class OpponentResponse(BaseModel):
    opponent: str


class OwnerResponse(BaseModel):
    owner: str


class ResultResponse(BaseModel):
    game_result: GameResult


class GameStateResponse(BaseModel):
    """Full match record for a host."""
    host: str
    opponent: Optional[str] = None
    host_move: Optional[Move] = None
    opponent_move: Optional[Move] = None
    game_result: Optional[GameResult] = None
    phase: GamePhase


class Attribute(BaseModel):
    key: str
    value: str


class ContractResponse(BaseModel):
    """Descriptive attributes emitted by instantiate and execute."""
    attributes: List[Attribute] = Field(default_factory=list)

    def add_attribute(self, key: str, value: Any) -> "ContractResponse":
        if hasattr(value, "value"):
            value = value.value
        self.attributes.append(Attribute(key=key, value=str(value)))
        return self

    def attribute(self, key: str) -> Optional[str]:
        for attr in self.attributes:
            if attr.key == key:
                return attr.value
        return None

    def as_dict(self) -> Dict[str, str]:
        return {attr.key: attr.value for attr in self.attributes}
