"""
rps_contract.errors — Contract exception classes
=================================================

Defines the closed exception hierarchy raised by contract operations.
Each exception carries an ErrorKind tag and enough context for
structured logging and for the CLI to map it to an exit code.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional
import json


class ErrorKind(str, Enum):
    """Distinguishes every failure a contract operation can report."""
    INVALID_ADDRESS = "invalid_address"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    GAME_ALREADY_RESOLVED = "game_already_resolved"
    STORAGE_FAILURE = "storage_failure"


class RpsContractError(Exception):
    """Base exception for all contract errors."""

    kind: ErrorKind

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.kind.value,
            "message": self.message,
            "context": dict(self.context),
        }

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type=self.kind.value.upper(),
            message=self.message,
            context=self.context,
        )


class InvalidAddressError(RpsContractError):
    """Raised when a supplied identity fails address validation."""

    kind = ErrorKind.INVALID_ADDRESS

    def __init__(self, address: str, reason: Optional[str] = None):
        self.address = address
        self.reason = reason
        message = f"Invalid address {address!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, address=address)


class UnauthorizedError(RpsContractError):
    """Raised when the caller does not hold the role an operation requires."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, caller: str, required_role: str, expected: Optional[str] = None):
        self.caller = caller
        self.required_role = required_role
        self.expected = expected
        super().__init__(
            f"Caller {caller!r} is not the {required_role}",
            caller=caller,
            required_role=required_role,
            expected=expected,
        )


class NotFoundError(RpsContractError):
    """Raised when a record, or a field of a record, has not been populated."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, what: str, key: Optional[str] = None):
        self.what = what
        self.key = key
        if key is None:
            message = f"{what} not found"
        else:
            message = f"{what} not found for {key!r}"
        super().__init__(message, what=what, key=key)


class GameAlreadyResolvedError(RpsContractError):
    """Raised when a move is submitted to a match that already has a result."""

    kind = ErrorKind.GAME_ALREADY_RESOLVED

    def __init__(self, host: str, game_result: str):
        self.host = host
        self.game_result = game_result
        super().__init__(
            f"Game hosted by {host!r} is already resolved ({game_result})",
            host=host,
            game_result=game_result,
        )


class StorageFailureError(RpsContractError):
    """Raised when the registry's underlying store fails or holds a corrupt record."""

    kind = ErrorKind.STORAGE_FAILURE

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(
            message,
            cause=None if cause is None else f"{type(cause).__name__}: {cause}",
        )


def _format_error_block(
    error_type: str,
    message: str,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " CONTRACT ERROR — OPERATION REJECTED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        lines.append(_indent_json(context))

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    formatted = json.dumps(data, indent=indent, default=str, sort_keys=True)
    return "\n".join(" " + line for line in formatted.split("\n"))
