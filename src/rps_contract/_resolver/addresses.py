# Area: Resolver
"""
rps_contract._resolver.addresses — Address Validation
=====================================================

The contract treats address validation as an injected capability:
any callable that takes a raw identity string and returns its
canonical form, raising InvalidAddressError when it is malformed.
validate_address is the default used by the CLI.
"""

import re
from typing import Callable

from ..errors import InvalidAddressError

AddressValidator = Callable[[str], str]

MIN_ADDRESS_LENGTH = 3
MAX_ADDRESS_LENGTH = 90

_ADDRESS_PATTERN = re.compile(r"^[A-Za-z0-9._:@/-]+$")


def validate_address(address: str) -> str:
    """
    Validate a raw identity string and return it unchanged.

    Raises:
        InvalidAddressError: If the address is empty, out of bounds,
            or contains characters outside the allowed set
    """
    if not isinstance(address, str) or not address:
        raise InvalidAddressError(str(address or ""), "address is empty")
    if len(address) < MIN_ADDRESS_LENGTH:
        raise InvalidAddressError(address, f"shorter than {MIN_ADDRESS_LENGTH} characters")
    if len(address) > MAX_ADDRESS_LENGTH:
        raise InvalidAddressError(address, f"longer than {MAX_ADDRESS_LENGTH} characters")
    if not _ADDRESS_PATTERN.match(address):
        raise InvalidAddressError(address, "contains invalid characters")
    return address


def canonicalize(address: str, validator: AddressValidator) -> str:
    """
    Run an injected validator and return the canonical address.

    Identities are compared and used as registry keys only in this form.

    Raises:
        InvalidAddressError: If the validator rejects the address
    """
    try:
        return validator(address)
    except ValueError as e:
        # Plain validators may signal rejection with ValueError
        raise InvalidAddressError(address, str(e)) from e
