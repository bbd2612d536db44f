"""
Unit and identifier conversions for contract arguments.

Asset identifiers are stored on-chain as right-padded ``bytes32`` values of
a short UTF-8 symbol, and USD amounts use fixed-point integers with 30
decimals. These helpers build those values from human readable input.
"""

from decimal import Decimal
from typing import Union

BYTES32_LENGTH = 32
USD_DECIMALS = 30
WAD_DECIMALS = 18


def format_bytes32_string(text: str) -> bytes:
    """
    Encode a short string as a right zero-padded bytes32 value.

    Args:
        text: UTF-8 string of at most 31 bytes

    Returns:
        32 byte value

    Raises:
        ValueError: If the encoded string does not leave room for a null terminator
    """
    encoded = text.encode("utf-8")
    if len(encoded) > BYTES32_LENGTH - 1:
        raise ValueError(f"bytes32 string must be less than 32 bytes: {text!r}")
    return encoded.ljust(BYTES32_LENGTH, b"\x00")


def parse_bytes32_string(value: bytes) -> str:
    """
    Decode a bytes32 value produced by ``format_bytes32_string``.

    Args:
        value: 32 byte value

    Returns:
        The string up to the first null byte

    Raises:
        ValueError: If the value is not 32 bytes or has no null terminator
    """
    if len(value) != BYTES32_LENGTH:
        raise ValueError(f"invalid bytes32 length: {len(value)}")
    terminator = value.find(b"\x00")
    if terminator < 0:
        raise ValueError("invalid bytes32 string: no null terminator")
    return value[:terminator].decode("utf-8")


def parse_units(amount: Union[str, int, Decimal], decimals: int) -> int:
    """Scale a decimal amount to a fixed-point integer with ``decimals`` places."""
    scaled = Decimal(str(amount)) * (Decimal(10) ** decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"{amount} has more than {decimals} decimal places")
    return int(scaled)


def usd(amount: Union[str, int, Decimal]) -> int:
    """USD amount in the protocol's 30-decimal fixed point."""
    return parse_units(amount, USD_DECIMALS)
