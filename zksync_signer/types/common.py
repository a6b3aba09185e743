"""Common type definitions for zkSync signing."""

from typing import NewType, Union

__all__ = [
    "HexStr",
    "Address",
    "PubKeyHashStr",
    "TokenId",
    "Seed",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Address = NewType("Address", str)
"""Ethereum address string (0x + 40 hex)."""

PubKeyHashStr = NewType("PubKeyHashStr", str)
"""Public key hash in "sync:" form."""

TokenId = NewType("TokenId", int)
"""zkSync token id."""

# Key derivation
Seed = Union[bytes, bytearray]
"""Raw bytes used as deterministic input to private key derivation."""
