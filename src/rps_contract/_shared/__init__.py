# Area: Shared
"""
Shared utilities used by the contract and the CLI.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_contract_error,
)

__all__ = [
    "setup_logging",
    "log_contract_error",
]
