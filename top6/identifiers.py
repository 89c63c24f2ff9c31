"""
Top6 Codec: Identifier Validation

Identifiers are 20-byte account references rendered as 0x-prefixed hex.
The all-zero identifier is reserved as the empty-slot placeholder and is
never accepted as an occupant.
"""

import re
from typing import Union

from web3 import Web3

from .errors import InvalidIdentifier

ADDRESS_SIZE = 20

ZERO_ADDRESS = "0x" + "00" * ADDRESS_SIZE
ZERO_ADDRESS_BYTES = bytes(ADDRESS_SIZE)

_HEX_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")

AddressLike = Union[str, bytes, bytearray]


def _is_mixed_case(hex_body: str) -> bool:
    return hex_body != hex_body.lower() and hex_body != hex_body.upper()


def _raw_bytes(value: AddressLike, strict_checksum: bool) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_SIZE:
            raise InvalidIdentifier(
                f"Identifier must be {ADDRESS_SIZE} bytes, got {len(value)}"
            )
        return bytes(value)

    if not isinstance(value, str):
        raise InvalidIdentifier(f"Unsupported identifier type: {type(value).__name__}")

    if not _HEX_ADDRESS.match(value):
        raise InvalidIdentifier(f"Not a 0x-prefixed 40 hex character address: {value!r}")

    # All-lower or all-upper input carries no checksum
    if strict_checksum and _is_mixed_case(value[2:]) and not Web3.is_checksum_address(value):
        raise InvalidIdentifier(f"Checksum mismatch for address {value}")

    return bytes.fromhex(value[2:])


def to_identifier_bytes(value: AddressLike, strict_checksum: bool = False) -> bytes:
    """
    Convert an occupant identifier to its 20 raw bytes.

    Args:
        value: 20 bytes, or a 0x-prefixed 40 hex character string
        strict_checksum: Enforce EIP-55 on mixed-case strings

    Returns:
        The 20 identifier bytes

    Raises:
        InvalidIdentifier: If the value has the wrong shape, fails the
            checksum, or is the reserved zero placeholder
    """
    raw = _raw_bytes(value, strict_checksum)
    if raw == ZERO_ADDRESS_BYTES:
        raise InvalidIdentifier("The zero address is reserved for empty slots")
    return raw


def checksum(raw: bytes) -> str:
    """Render 20 raw bytes as an EIP-55 checksummed address."""
    return Web3.to_checksum_address("0x" + raw.hex())


def normalize_address(value: AddressLike, strict_checksum: bool = False) -> str:
    """
    Normalize an address to its checksummed form.

    Raises:
        InvalidIdentifier: If the value is not a usable occupant address
    """
    return checksum(to_identifier_bytes(value, strict_checksum))


def is_valid_address(value: AddressLike, strict_checksum: bool = False) -> bool:
    try:
        to_identifier_bytes(value, strict_checksum)
    except InvalidIdentifier:
        return False
    return True


def is_placeholder(value: AddressLike) -> bool:
    """True if value is the all-zero identifier in any accepted form."""
    try:
        return _raw_bytes(value, strict_checksum=False) == ZERO_ADDRESS_BYTES
    except InvalidIdentifier:
        return False
