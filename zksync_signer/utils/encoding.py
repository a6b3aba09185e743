"""Encoding and decoding utilities for zkSync signing."""

from typing import Union

from ..constants import ACCOUNT_ID_LENGTH, NONCE_LENGTH
from ..exceptions import SerializationError, ValidationError
from ..types.common import HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "add_hex_prefix",
    "remove_hex_prefix",
    "int_to_bytes",
    "bytes_to_int",
    "nonce_to_bytes",
    "account_id_to_bytes",
]


def add_hex_prefix(hex_str: str) -> HexStr:
    """Prepend 0x unless already present."""
    if hex_str.startswith(("0x", "0X")):
        return HexStr(hex_str)
    return HexStr(f"0x{hex_str}")


def remove_hex_prefix(hex_str: str) -> str:
    """Strip a leading 0x if present."""
    if hex_str.startswith(("0x", "0X")):
        return hex_str[2:]
    return hex_str


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.
    
    Args:
        hex_str: Hex string with or without 0x prefix
        
    Returns:
        Decoded bytes
        
    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        return bytes.fromhex(remove_hex_prefix(hex_str))
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = True) -> HexStr:
    """
    Convert bytes to lowercase hex string.
    
    Args:
        data: Bytes to encode
        prefix: Add 0x prefix
        
    Returns:
        Hex string
    """
    hex_str = bytes(data).hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def int_to_bytes(value: int, length: int) -> bytes:
    """
    Convert unsigned integer to big-endian bytes of fixed length.
    
    Args:
        value: Integer value
        length: Number of bytes
        
    Returns:
        Encoded bytes
        
    Raises:
        SerializationError: If value is negative or does not fit
    """
    try:
        return value.to_bytes(length, byteorder="big", signed=False)
    except OverflowError as e:
        raise SerializationError(
            f"Value {value} does not fit in {length} unsigned bytes"
        ) from e


def bytes_to_int(data: bytes) -> int:
    """Convert big-endian bytes to unsigned integer."""
    return int.from_bytes(data, byteorder="big", signed=False)


def nonce_to_bytes(nonce: int) -> bytes:
    """Encode nonce as 4 big-endian bytes."""
    return int_to_bytes(nonce, NONCE_LENGTH)


def account_id_to_bytes(account_id: int) -> bytes:
    """Encode account id as 4 big-endian bytes."""
    return int_to_bytes(account_id, ACCOUNT_ID_LENGTH)
