"""
rps_contract.contract — Contract entry points
==============================================

The Contract ties the registry to the match resolver. It exposes the
three entry points a hosting runtime calls:

    contract = Contract(db_path="rps.db")
    contract.instantiate(sender="alice")
    contract.execute("alice", ExecuteMsg(start_game=StartGame(...)))
    contract.query("alice", QueryMsg(get_move=GetMove()))

Every mutating operation runs as one registry transaction: the current
record and the ownership row are loaded inside it, the resolver decides
the transition, and the new record is written before the transaction
commits. A rejected operation writes nothing.
"""

from __future__ import annotations
import logging
from typing import Callable, Dict

from pydantic import BaseModel

from ._registry import GameRepository, OwnershipRepository, init_database
from ._resolver import (
    AddressValidator,
    GameState,
    Ownership,
    canonicalize,
    start_game,
    submit_move,
    validate_address,
)
from .errors import NotFoundError, RpsContractError
from .types import (
    ContractResponse,
    ExecuteMsg,
    GameStateResponse,
    MoveResponse,
    OpponentResponse,
    OwnerResponse,
    QueryMsg,
    ResultResponse,
    StartGame,
    SubmitMove,
)

logger = logging.getLogger("rps_contract.contract")


class Contract:
    """
    One contract instance backed by a SQLite registry.

    Args:
        db_path: Path to the SQLite database file
        address_validator: Callable returning the canonical form of an
            identity, raising InvalidAddressError (or ValueError) when it
            is malformed
    """

    def __init__(
        self,
        db_path: str = "rps_contract.db",
        address_validator: AddressValidator = validate_address,
    ):
        self.db_path = db_path
        self.address_validator = address_validator
        init_database(db_path)
        self.games = GameRepository(db_path)
        self.ownership = OwnershipRepository(db_path)

        self._execute_handlers: Dict[str, Callable[[str, BaseModel], ContractResponse]] = {
            "start_game": self._try_start_game,
            "submit_move": self._try_submit_move,
        }
        self._query_handlers: Dict[str, Callable[[str, BaseModel], BaseModel]] = {
            "get_move": self._query_move,
            "get_opponent": self._query_opponent,
            "get_owner": self._query_owner,
            "get_result": self._query_result,
            "get_game": self._query_game,
        }

    # ── Entry points ─────────────────────────────────────────

    def instantiate(self, sender: str) -> ContractResponse:
        """
        Record the sender as contract owner and create their empty record.

        Raises:
            InvalidAddressError: If the sender fails address validation
            StorageFailureError: If the contract was already instantiated
        """
        sender = self._canonical(sender)
        with self.games.transaction() as conn:
            self.ownership.save(Ownership(owner=sender), conn=conn)
            self.games.save(sender, GameState.new(sender), conn=conn)

        logger.info(f"Contract instantiated by {sender}")
        return (
            ContractResponse()
            .add_attribute("method", "instantiate")
            .add_attribute("owner", sender)
        )

    def execute(self, sender: str, msg: ExecuteMsg) -> ContractResponse:
        """Dispatch an execute message on behalf of sender."""
        handler = self._execute_handlers[msg.variant_name]
        try:
            return handler(self._canonical(sender), msg.variant)
        except RpsContractError as e:
            logger.warning(f"{msg.variant_name} by {sender} rejected: {e}")
            raise

    def query(self, sender: str, msg: QueryMsg) -> BaseModel:
        """Answer a read-only query on behalf of sender."""
        handler = self._query_handlers[msg.variant_name]
        return handler(sender, msg.variant)

    # ── Identities ───────────────────────────────────────────

    def _canonical(self, address: str) -> str:
        """Identities are compared and used as keys only in canonical form."""
        return canonicalize(address, self.address_validator)

    # ── Execute handlers ─────────────────────────────────────

    def _try_start_game(self, sender: str, msg: StartGame) -> ContractResponse:
        with self.games.transaction() as conn:
            ownership = self.ownership.load(conn=conn)
            state = self.games.update(
                sender,
                lambda current: start_game(
                    current,
                    caller=sender,
                    ownership=ownership,
                    opponent=msg.opponent,
                    host_move=msg.host_move,
                    address_validator=self.address_validator,
                ),
                conn=conn,
            )

        logger.info(f"[{state.host}] Game started against {state.opponent}")
        return ContractResponse().add_attribute("method", "start_game")

    def _try_submit_move(self, sender: str, msg: SubmitMove) -> ContractResponse:
        with self.games.transaction() as conn:
            if msg.host is None:
                ownership = self.ownership.load(conn=conn)
                if ownership is None:
                    raise NotFoundError("ownership")
                host = ownership.owner
            else:
                host = self._canonical(msg.host)
            state = self.games.update(
                host,
                lambda current: submit_move(current, caller=sender, move=msg.move, host=host),
                conn=conn,
            )

        response = ContractResponse().add_attribute("method", "submit_move")
        if state.game_result is not None:
            response.add_attribute("result", state.game_result)
        return response

    # ── Query handlers ───────────────────────────────────────

    def _host_key(self, sender: str, msg) -> str:
        """Canonical host key of a query; an omitted host means the sender."""
        return self._canonical(sender if msg.host is None else msg.host)

    def _load_game(self, host: str) -> GameState:
        state = self.games.load(host)
        if state is None:
            raise NotFoundError("game", host)
        return state

    def _query_move(self, sender: str, msg) -> MoveResponse:
        host = self._host_key(sender, msg)
        state = self._load_game(host)
        if state.host_move is None:
            raise NotFoundError("host move", host)
        return MoveResponse(move_type=state.host_move)

    def _query_opponent(self, sender: str, msg) -> OpponentResponse:
        host = self._host_key(sender, msg)
        state = self._load_game(host)
        if state.opponent is None:
            raise NotFoundError("opponent", host)
        return OpponentResponse(opponent=state.opponent)

    def _query_owner(self, sender: str, msg) -> OwnerResponse:
        ownership = self.ownership.load()
        if ownership is None:
            raise NotFoundError("ownership")
        return OwnerResponse(owner=ownership.owner)

    def _query_result(self, sender: str, msg) -> ResultResponse:
        host = self._host_key(sender, msg)
        state = self._load_game(host)
        if state.game_result is None:
            raise NotFoundError("game result", host)
        return ResultResponse(game_result=state.game_result)

    def _query_game(self, sender: str, msg) -> GameStateResponse:
        state = self._load_game(self._host_key(sender, msg))
        return GameStateResponse(
            host=state.host,
            opponent=state.opponent,
            host_move=state.host_move,
            opponent_move=state.opponent_move,
            game_result=state.game_result,
            phase=state.phase,
        )
