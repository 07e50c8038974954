# Area: Registry
"""
rps_contract._registry.repo_ownership — Ownership Repository
============================================================

Repository for the single-row ownership table. The owner is written
once at instantiation and never changed afterwards.
"""

import sqlite3
from typing import Optional

from ..errors import StorageFailureError
from .._resolver.game_state import Ownership
from .database import BaseRepository


class OwnershipRepository(BaseRepository):
    """Repository for ownership table."""

    def load(self, conn: Optional[sqlite3.Connection] = None) -> Optional[Ownership]:
        """
        Get the ownership record.

        Returns:
            Ownership or None if the contract was never instantiated
        """
        row = self._execute_one("SELECT owner FROM ownership WHERE id = 1", conn=conn)
        if row is None:
            return None
        return Ownership(owner=row["owner"])

    def save(self, ownership: Ownership, conn: Optional[sqlite3.Connection] = None) -> None:
        """
        Record the contract owner.

        Raises:
            StorageFailureError: If an owner is already recorded
        """
        existing = self.load(conn=conn)
        if existing is not None:
            raise StorageFailureError(
                f"Ownership already recorded for {existing.owner!r}"
            )
        self._execute(
            "INSERT INTO ownership (id, owner) VALUES (1, ?)",
            (ownership.owner,),
            conn=conn,
        )
