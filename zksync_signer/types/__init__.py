"""Type definitions for zkSync signing."""

# Common types
from ..types.common import (
    HexStr,
    Address,
    PubKeyHashStr,
    TokenId,
    Seed,
)

# Token types
from ..types.token import Token, ETH

__all__ = [
    # Common
    "HexStr",
    "Address",
    "PubKeyHashStr",
    "TokenId",
    "Seed",
    
    # Token
    "Token",
    "ETH",
]
