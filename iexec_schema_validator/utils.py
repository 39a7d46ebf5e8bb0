"""
Primitive format checks used by the iExec schemas.

These are plain predicates: they never raise, they return True or False.
"""
import re
from typing import Any

import semver
from dateutil.parser import isoparse
from web3 import Web3

ADDRESS_REGEX = re.compile(r"(0x)?[0-9a-f]{40}", re.IGNORECASE)
LOWER_ADDRESS_REGEX = re.compile(r"(0x)?[0-9a-f]{40}")
UPPER_ADDRESS_REGEX = re.compile(r"(0x)?[0-9A-F]{40}")

BYTES32_LENGTH = 66


def _strip_hex_prefix(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def is_checksum_address(address: str) -> bool:
    """
    Verify the mixed-case checksum of a 40 hex digit address.

    The nth hex digit must be uppercase when the nth nibble of
    keccak256(lowercase address) is greater than 7, lowercase otherwise.

    Args:
        address: Address with or without 0x prefix, already known to be 40 hex digits

    Returns:
        True if every digit has the expected case
    """
    digits = _strip_hex_prefix(address)
    address_hash = bytes(Web3.keccak(text=digits.lower())).hex()
    for i in range(40):
        nibble = int(address_hash[i], 16)
        if nibble > 7 and digits[i].upper() != digits[i]:
            return False
        if nibble <= 7 and digits[i].lower() != digits[i]:
            return False
    return True


def is_eth_address(value: Any) -> bool:
    """
    Check whether a value is a valid Ethereum address.

    All-lowercase and all-uppercase addresses are accepted as non-checksummed.
    Mixed-case addresses must carry a valid checksum.

    Args:
        value: Candidate address

    Returns:
        True if the value is a valid address
    """
    if not isinstance(value, str) or not ADDRESS_REGEX.fullmatch(value):
        return False
    if LOWER_ADDRESS_REGEX.fullmatch(value) or UPPER_ADDRESS_REGEX.fullmatch(value):
        return True
    return is_checksum_address(value)


def is_bytes32(value: Any) -> bool:
    """
    Check whether a value looks like a bytes32 hex string.

    Only the length (66) and the 0x prefix are checked, the digits are not.
    """
    return isinstance(value, str) and len(value) == BYTES32_LENGTH and value[:2] == "0x"


def is_semver(value: Any) -> bool:
    """Check whether a value is a valid semantic version string."""
    return isinstance(value, str) and semver.Version.is_valid(value)


def is_iso_date(value: Any) -> bool:
    """
    Check whether a value is an ISO 8601 date or date-time string.

    Reduced precision ("2019", "2019-06"), ordinal ("2019-163") and week
    ("2019-W24-3") dates are accepted, as are basic formats and fractions
    of any length.

    Args:
        value: Candidate date string, e.g. "2019-03-04" or "2019-03-04T10:00:00Z"

    Returns:
        True if the string parses as an ISO 8601 date
    """
    if not isinstance(value, str) or not value:
        return False
    try:
        isoparse(value)
    except (ValueError, OverflowError):
        return False
    return True
