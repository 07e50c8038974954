# Area: Registry
"""
rps_contract._registry.repo_games — Game Registry
=================================================

Repository for the game_states table: one match record per host
identity, with load, save and an atomic read-modify-write update.
"""

import logging
import sqlite3
from typing import Callable, Optional

from ..errors import StorageFailureError
from .._resolver.game_state import GameState
from .database import BaseRepository

logger = logging.getLogger("rps_contract.registry.games")

Mutator = Callable[[Optional[GameState]], GameState]


class GameRepository(BaseRepository):
    """
    Repository for game_states table.

    Keys are host identities. Records are checked against the phase
    invariants on both read and write, so a corrupt row surfaces as
    StorageFailureError instead of flowing into the resolver.
    """

    def load(
        self, host: str, conn: Optional[sqlite3.Connection] = None
    ) -> Optional[GameState]:
        """
        Get the record stored for a host.

        Args:
            host: Host identity (the record key)
            conn: Connection of an open transaction, if any

        Returns:
            GameState or None if the host has no record
        """
        query = """
            SELECT host, opponent, host_move, opponent_move, game_result, phase
            FROM game_states WHERE host = ?
        """
        row = self._execute_one(query, (host,), conn=conn)
        if row is None:
            return None
        try:
            state = GameState.from_row(row)
            state.check_invariants()
        except ValueError as e:
            raise StorageFailureError(f"Corrupt game record for {host!r}", cause=e) from e
        return state

    def save(
        self, host: str, state: GameState, conn: Optional[sqlite3.Connection] = None
    ) -> None:
        """
        Write the record for a host, replacing any previous one.

        Args:
            host: Host identity (the record key)
            state: Record to store; its host must match the key
            conn: Connection of an open transaction, if any
        """
        if state.host != host:
            raise StorageFailureError(
                f"Record host {state.host!r} does not match key {host!r}"
            )
        try:
            state.check_invariants()
        except ValueError as e:
            raise StorageFailureError(f"Refusing to store invalid record for {host!r}", cause=e) from e

        row = state.to_row()
        query = """
            INSERT INTO game_states
            (host, opponent, host_move, opponent_move, game_result, phase)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(host) DO UPDATE SET
                opponent = excluded.opponent,
                host_move = excluded.host_move,
                opponent_move = excluded.opponent_move,
                game_result = excluded.game_result,
                phase = excluded.phase,
                updated_at = CURRENT_TIMESTAMP
        """
        self._execute(query, (
            row["host"],
            row["opponent"],
            row["host_move"],
            row["opponent_move"],
            row["game_result"],
            row["phase"],
        ), conn=conn)

    def update(
        self,
        host: str,
        mutator: Mutator,
        conn: Optional[sqlite3.Connection] = None,
    ) -> GameState:
        """
        Atomically load, transform and store the record for a host.

        The mutator receives the current record (or None) and returns
        the record to store. If it raises, nothing is written and the
        exception propagates unchanged.

        Args:
            host: Host identity (the record key)
            mutator: Function computing the new record
            conn: Connection of an already open transaction; when omitted
                the update runs in its own transaction

        Returns:
            The stored record
        """
        if conn is None:
            with self.transaction() as tx:
                return self.update(host, mutator, conn=tx)

        current = self.load(host, conn=conn)
        new_state = mutator(current)
        self.save(host, new_state, conn=conn)
        logger.debug(f"[{host}] Stored record in phase {new_state.phase.value}")
        return new_state
