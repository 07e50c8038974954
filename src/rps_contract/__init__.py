"""
rps_contract — Rock-Paper-Scissors Match Contract
==================================================

Authorization and turn resolution for a two-player Rock-Paper-Scissors
match whose state lives in a key-value registry keyed by host identity.

Quick Start:
    from rps_contract import Contract, ExecuteMsg, QueryMsg

    contract = Contract(db_path="rps.db")
    contract.instantiate(sender="alice")
    contract.execute("alice", ExecuteMsg.model_validate(
        {"start_game": {"opponent": "bob", "host_move": "rock"}}
    ))
    contract.execute("bob", ExecuteMsg.model_validate(
        {"submit_move": {"move": "scissors"}}
    ))
    contract.query("alice", QueryMsg.model_validate({"get_result": {}}))

Error Handling
--------------
Every rejected operation raises a subclass of RpsContractError whose
``kind`` attribute is an ErrorKind. Nothing is written when an
operation fails.
"""

from .contract import Contract
from .errors import (
    ErrorKind,
    RpsContractError,
    InvalidAddressError,
    UnauthorizedError,
    NotFoundError,
    GameAlreadyResolvedError,
    StorageFailureError,
)
from ._resolver import GamePhase, GameResult, GameState, Move, Ownership, resolve, validate_address
from .schema import export_schemas
from .types import (
    # Messages
    InstantiateMsg,
    ExecuteMsg,
    StartGame,
    SubmitMove,
    QueryMsg,
    GetMove,
    GetOpponent,
    GetOwner,
    GetResult,
    GetGame,
    # Responses
    Attribute,
    ContractResponse,
    MoveResponse,
    OpponentResponse,
    OwnerResponse,
    ResultResponse,
    GameStateResponse,
)

__all__ = [
    # Main classes
    "Contract",
    "GameState",
    "Ownership",
    "Move",
    "GameResult",
    "GamePhase",
    "resolve",
    "validate_address",
    "export_schemas",
    # Errors
    "ErrorKind",
    "RpsContractError",
    "InvalidAddressError",
    "UnauthorizedError",
    "NotFoundError",
    "GameAlreadyResolvedError",
    "StorageFailureError",
    # Messages
    "InstantiateMsg",
    "ExecuteMsg",
    "StartGame",
    "SubmitMove",
    "QueryMsg",
    "GetMove",
    "GetOpponent",
    "GetOwner",
    "GetResult",
    "GetGame",
    # Responses
    "Attribute",
    "ContractResponse",
    "MoveResponse",
    "OpponentResponse",
    "OwnerResponse",
    "ResultResponse",
    "GameStateResponse",
]
__version__ = "1.0.0"
