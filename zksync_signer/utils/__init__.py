"""Utility functions for zkSync signing."""

from ..utils.encoding import (
    hex_to_bytes,
    bytes_to_hex,
    add_hex_prefix,
    remove_hex_prefix,
    int_to_bytes,
    bytes_to_int,
    nonce_to_bytes,
    account_id_to_bytes,
)
from ..utils.formatting import format_amount, to_decimal, parse_amount

__all__ = [
    # Encoding
    "hex_to_bytes",
    "bytes_to_hex",
    "add_hex_prefix",
    "remove_hex_prefix",
    "int_to_bytes",
    "bytes_to_int",
    "nonce_to_bytes",
    "account_id_to_bytes",
    
    # Formatting
    "format_amount",
    "to_decimal",
    "parse_amount",
]
