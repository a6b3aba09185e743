"""Key material for zkSync accounts."""

from dataclasses import dataclass
from typing import Union

from ..constants import (
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    PUBLIC_KEY_HASH_LENGTH,
    SIGNATURE_LENGTH,
    PUBKEY_HASH_PREFIX,
)
from ..exceptions import IncorrectDataLengthError, ValidationError
from ..types.common import HexStr, PubKeyHashStr
from ..utils.encoding import bytes_to_hex, hex_to_bytes

__all__ = ["PrivateKey", "PublicKey", "PublicKeyHash", "ZkSignature"]


def _normalize(key: Union[bytes, bytearray, str], length: int) -> bytes:
    """Decode hex if needed and enforce exact length."""
    if isinstance(key, str):
        key = hex_to_bytes(key)
    elif not isinstance(key, (bytes, bytearray)):
        raise ValidationError(f"Key must be bytes or hex string, got {type(key).__name__}")
        
    key = bytes(key)
    if len(key) != length:
        raise IncorrectDataLengthError(length, len(key))
    return key


class _FixedBytes:
    """Immutable fixed-length byte value."""
    
    LENGTH = 0
    
    __slots__ = ("_data",)
    
    def __init__(self, data: Union[bytes, bytearray, str]) -> None:
        object.__setattr__(self, "_data", _normalize(data, self.LENGTH))
        
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")
        
    def __copy__(self) -> "_FixedBytes":
        return self
        
    def __deepcopy__(self, memo: dict) -> "_FixedBytes":
        return self
        
    def __bytes__(self) -> bytes:
        return self._data
        
    def __len__(self) -> int:
        return len(self._data)
        
    def hex(self) -> HexStr:
        """Get value as 0x-prefixed hex string."""
        return bytes_to_hex(self._data)
        
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if type(other) is not type(self):
            return False
        return self._data == other._data
        
    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._data))
        
    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}({self.hex()})"


class PrivateKey(_FixedBytes):
    """
    zkSync private key.
    
    Holds exactly 32 raw bytes. Any other length is rejected with
    IncorrectDataLengthError when the key is constructed.
    """
    
    LENGTH = PRIVATE_KEY_LENGTH
    
    __slots__ = ()
    
    @property
    def secret(self) -> bytes:
        """Get private key as bytes."""
        return self._data
        
    def __repr__(self) -> str:
        """String representation."""
        # Show first and last 4 chars of hex for security
        hex_str = self._data.hex()
        masked = f"{hex_str[:4]}...{hex_str[-4:]}"
        return f"PrivateKey({masked})"


class PublicKey(_FixedBytes):
    """Packed zkSync public key."""
    
    LENGTH = PUBLIC_KEY_LENGTH
    
    __slots__ = ()


class PublicKeyHash(_FixedBytes):
    """
    Compact hash of a zkSync public key.
    
    Its textual form is the "sync:" prefixed lowercase hex used by the
    network to reference the key.
    """
    
    LENGTH = PUBLIC_KEY_HASH_LENGTH
    
    __slots__ = ()
    
    @classmethod
    def from_string(cls, value: str) -> "PublicKeyHash":
        """
        Parse public key hash text.
        
        Args:
            value: Hash as "sync:<hex>", "0x<hex>" or bare hex
            
        Returns:
            PublicKeyHash instance
            
        Raises:
            ValidationError: If text is not valid hex
            IncorrectDataLengthError: If hash has the wrong length
        """
        if value.startswith(PUBKEY_HASH_PREFIX):
            value = value[len(PUBKEY_HASH_PREFIX):]
        return cls(value)
        
    @property
    def address(self) -> PubKeyHashStr:
        """Get hash in sync: form."""
        return PubKeyHashStr(f"{PUBKEY_HASH_PREFIX}{self._data.hex()}")
        
    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class ZkSignature:
    """Signature produced with a zkSync private key."""
    
    pub_key: PublicKey
    signature: bytes
    
    def __post_init__(self) -> None:
        if len(self.signature) != SIGNATURE_LENGTH:
            raise IncorrectDataLengthError(SIGNATURE_LENGTH, len(self.signature))
            
    @property
    def pub_key_hex(self) -> HexStr:
        """Get public key as hex without prefix."""
        return bytes_to_hex(bytes(self.pub_key), prefix=False)
        
    @property
    def signature_hex(self) -> HexStr:
        """Get signature as hex without prefix."""
        return bytes_to_hex(self.signature, prefix=False)
