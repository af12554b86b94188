from __future__ import annotations

from typing import Optional

from eth_utils import is_checksum_address, is_hex_address, to_checksum_address

from ..domain.errors import InvalidRecipientError


def is_well_formed_address(value: object) -> bool:
    """``0x``-prefixed 20-byte hex; mixed case must be a valid EIP-55 checksum."""
    if not isinstance(value, str) or not value.startswith("0x"):
        return False
    if not is_hex_address(value):
        return False
    body = value[2:]
    if body != body.lower() and body != body.upper():
        return is_checksum_address(value)
    return True


def normalize_address(value: Optional[str]) -> str:
    """Return the EIP-55 checksum form of ``value``.

    All-lowercase and all-uppercase hex are accepted; mixed case must carry a
    valid checksum.

    Raises:
        InvalidRecipientError: If the address is missing or malformed.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecipientError("Recipient address is required")
    candidate = value.strip()
    if not is_well_formed_address(candidate):
        raise InvalidRecipientError(f"Invalid recipient address: {candidate}")
    return to_checksum_address(candidate)


def validate_recipient(recipient: Optional[str], sender: Optional[str] = None) -> str:
    """Validate the stream recipient and return it checksummed.

    Raises:
        InvalidRecipientError: If the recipient is malformed or equals the sender.
    """
    checksummed = normalize_address(recipient)
    if sender is not None and checksummed.lower() == sender.lower():
        raise InvalidRecipientError("Recipient cannot be the streaming wallet itself")
    return checksummed
