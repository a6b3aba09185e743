"""Cryptographic types for zkSync signing."""

from ..crypto.keys import PrivateKey, PublicKey, PublicKeyHash, ZkSignature
from ..crypto.provider import CryptoProvider

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",
    "PublicKeyHash",
    "ZkSignature",
    
    # Backend
    "CryptoProvider",
]
