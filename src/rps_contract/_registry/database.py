# Area: Registry
"""
rps_contract._registry.database — Database Initialization
=========================================================

Handles SQLite database initialization, connection management and
the transaction scope that makes registry updates atomic.
"""

import sqlite3
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..errors import StorageFailureError

logger = logging.getLogger("rps_contract.registry.database")

# Path to schema file
SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def get_connection(db_path: str = "rps_contract.db") -> sqlite3.Connection:
    """
    Get a database connection.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with row factory set
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str = "rps_contract.db") -> None:
    """
    Initialize the database with schema.

    Safe to call repeatedly; tables are only created when missing.

    Args:
        db_path: Path to the SQLite database file

    Raises:
        StorageFailureError: If the schema cannot be applied
    """
    try:
        conn = get_connection(db_path)
    except sqlite3.Error as e:
        raise StorageFailureError(f"Cannot open database at {db_path}", cause=e) from e
    try:
        with open(SCHEMA_PATH, "r") as f:
            schema = f.read()
        conn.executescript(schema)
        conn.commit()
        logger.info(f"Database initialized at {db_path}")
    except sqlite3.Error as e:
        raise StorageFailureError(f"Cannot initialize database at {db_path}", cause=e) from e
    finally:
        conn.close()


class BaseRepository:
    """
    Base class for database repositories.

    Provides common database operations and connection management.
    Every query helper accepts an optional connection so that several
    repositories can take part in one transaction.
    """

    def __init__(self, db_path: str = "rps_contract.db"):
        """
        Initialize repository.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        """Get a database connection."""
        try:
            return get_connection(self.db_path)
        except sqlite3.Error as e:
            raise StorageFailureError(f"Cannot open database at {self.db_path}", cause=e) from e

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Open a write transaction.

        The database is locked for writing with BEGIN IMMEDIATE, so no
        other operation can commit to it until this scope exits. The
        transaction commits on normal exit and rolls back if the body
        raises; the exception is re-raised.

        Yields:
            Connection to pass to repository methods as ``conn``
        """
        conn = self._get_conn()
        conn.isolation_level = None
        try:
            conn.execute("BEGIN IMMEDIATE")
            yield conn
            conn.execute("COMMIT")
        except sqlite3.Error as e:
            _rollback(conn)
            raise StorageFailureError("Transaction failed", cause=e) from e
        except BaseException:
            _rollback(conn)
            raise
        finally:
            conn.close()

    def _execute(
        self,
        query: str,
        params: tuple = (),
        fetch: bool = False,
        conn: Optional[sqlite3.Connection] = None,
    ) -> Optional[list]:
        """
        Execute a query.

        Args:
            query: SQL query string
            params: Query parameters
            fetch: If True, fetch and return results
            conn: Connection of an open transaction; when omitted a
                connection is opened, committed and closed here

        Returns:
            Query results if fetch=True, else None

        Raises:
            StorageFailureError: If SQLite reports an error
        """
        owns_conn = conn is None
        if owns_conn:
            conn = self._get_conn()
        try:
            cursor = conn.execute(query, params)
            if fetch:
                return [dict(row) for row in cursor.fetchall()]
            if owns_conn:
                conn.commit()
            return None
        except sqlite3.Error as e:
            raise StorageFailureError(f"Query failed: {e}", cause=e) from e
        finally:
            if owns_conn:
                conn.close()

    def _execute_one(
        self,
        query: str,
        params: tuple = (),
        conn: Optional[sqlite3.Connection] = None,
    ) -> Optional[dict]:
        """Execute query and return single result."""
        results = self._execute(query, params, fetch=True, conn=conn)
        return results[0] if results else None


def _rollback(conn: sqlite3.Connection) -> None:
    if conn.in_transaction:
        conn.execute("ROLLBACK")
