# Area: Registry
"""
Game Registry - SQLite persistence for match records.

This package handles:
- Database initialization
- Per-host game records with atomic update
- The contract's single ownership record
"""

from .database import BaseRepository, get_connection, init_database
from .repo_games import GameRepository
from .repo_ownership import OwnershipRepository

__all__ = [
    "BaseRepository",
    "get_connection",
    "init_database",
    "GameRepository",
    "OwnershipRepository",
]
