"""zkSync signer exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "ZkSyncError",
    "ValidationError",
    "IncorrectDataLengthError",
    "CryptoError",
    "InvalidPrivateKeyError",
    "InvalidSignatureTypeError",
    "SerializationError",
    "WalletError",
]


class ZkSyncError(Exception):
    """Base exception for all zkSync signer errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(ZkSyncError):
    """Raised when validation fails."""
    pass


class IncorrectDataLengthError(ValidationError):
    """Raised when raw key material has the wrong number of bytes."""
    
    def __init__(
        self, 
        expected: int, 
        actual: int, 
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Incorrect data length: expected {expected} bytes, got {actual}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class CryptoError(ZkSyncError):
    """Raised when cryptographic operation fails."""
    pass


class InvalidPrivateKeyError(CryptoError):
    """Raised when the crypto provider rejects a private key or seed."""
    
    def __init__(self, message: str = "Invalid private key") -> None:
        super().__init__(message)


class InvalidSignatureTypeError(CryptoError):
    """Raised when a wallet signature uses an unsupported scheme."""
    
    def __init__(
        self, 
        signature_type: Any, 
        message: Optional[str] = None
    ) -> None:
        if message is None:
            type_name = getattr(signature_type, "value", signature_type)
            message = f"Invalid signature type: {type_name}"
        super().__init__(message, data=signature_type)
        self.signature_type = signature_type


class SerializationError(ZkSyncError):
    """Raised when serialization/deserialization fails."""
    pass


class WalletError(ZkSyncError):
    """Raised when wallet operation fails."""
    pass
