"""Cryptographic provider interface for zkSync key derivation."""

from abc import ABC, abstractmethod

from ..crypto.keys import PrivateKey, PublicKey, PublicKeyHash

__all__ = ["CryptoProvider"]


class CryptoProvider(ABC):
    """
    Abstract zkSync cryptography backend.
    
    Wraps the curve and hash primitives used by zkSync. Implementations
    raise an exception of any type when an operation fails; callers in
    this package turn those failures into package errors.
    """
    
    @abstractmethod
    def derive_private_key(self, seed: bytes) -> PrivateKey:
        """
        Derive a private key from seed bytes.
        
        Args:
            seed: Seed bytes (any length the backend accepts)
            
        Returns:
            Derived PrivateKey
        """
        raise NotImplementedError
        
    @abstractmethod
    def derive_public_key(self, private_key: PrivateKey) -> PublicKey:
        """Derive packed public key from a private key."""
        raise NotImplementedError
        
    @abstractmethod
    def derive_public_key_hash(self, public_key: PublicKey) -> PublicKeyHash:
        """Hash a public key into its compact form."""
        raise NotImplementedError
        
    @abstractmethod
    def sign(self, private_key: PrivateKey, message: bytes) -> bytes:
        """
        Sign message bytes.
        
        Returns:
            64-byte signature
        """
        raise NotImplementedError
        
    def __repr__(self) -> str:
        """String representation of provider."""
        return f"{self.__class__.__name__}()"
