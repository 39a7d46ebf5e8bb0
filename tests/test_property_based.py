"""
Property-based tests for the primitive format checks.

These tests verify that properties hold true across many random inputs.
"""
import re

from hypothesis import given, settings, strategies as st
from web3 import Web3

from iexec_schema_validator.utils import is_bytes32, is_eth_address

ADDRESS_PATTERN = re.compile(r"(0x)?[0-9a-f]{40}", re.IGNORECASE)

prefix_strategy = st.sampled_from(["", "0x"])
lower_digits_strategy = st.text(alphabet="0123456789abcdef", min_size=40, max_size=40)
upper_digits_strategy = st.text(alphabet="0123456789ABCDEF", min_size=40, max_size=40)


@given(prefix=prefix_strategy, digits=lower_digits_strategy)
def test_lowercase_addresses_are_valid(prefix, digits):
    assert is_eth_address(prefix + digits)


@given(prefix=prefix_strategy, digits=upper_digits_strategy)
def test_uppercase_addresses_are_valid(prefix, digits):
    assert is_eth_address(prefix + digits)


@settings(max_examples=50)
@given(digits=lower_digits_strategy)
def test_checksummed_addresses_are_valid(digits):
    """Addresses checksummed by web3 pass the mixed-case check"""
    address = Web3.to_checksum_address("0x" + digits)
    assert is_eth_address(address)
    assert is_eth_address(address[2:])


@given(value=st.text(max_size=60))
def test_non_addresses_are_invalid(value):
    """Strings that are not 40 hex digits are rejected"""
    if ADDRESS_PATTERN.fullmatch(value):
        return
    assert not is_eth_address(value)


@given(body=st.text(min_size=64, max_size=64))
def test_bytes32_checks_length_and_prefix_only(body):
    assert is_bytes32("0x" + body)
    assert not is_bytes32(body)
