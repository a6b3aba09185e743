"""zkSync account signer."""

import logging
from typing import Callable, TypeVar, Union

from ..constants import ChainIdLike, PRIVATE_KEY_LENGTH
from ..crypto.keys import PrivateKey, PublicKey, PublicKeyHash, ZkSignature
from ..crypto.provider import CryptoProvider
from ..exceptions import (
    CryptoError,
    IncorrectDataLengthError,
    InvalidPrivateKeyError,
    InvalidSignatureTypeError,
)
from ..signer.eth import EthSigner, SignatureType
from ..signer.messages import zk_account_message
from ..types.common import PubKeyHashStr, Seed
from ..utils.encoding import hex_to_bytes

__all__ = ["ZkSigner"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _derive(step: str, operation: Callable[[], T]) -> T:
    """Run a provider call, reporting any failure as an invalid key."""
    try:
        return operation()
    except Exception as e:
        logger.debug(f"Provider failed to {step}: {e}")
        raise InvalidPrivateKeyError(f"Invalid private key: failed to {step}") from e


class ZkSigner:
    """
    Signer for a zkSync account.
    
    Holds the private key, packed public key and public key hash of one
    account. The triple is derived once on construction and never changes,
    so an instance can be shared between threads without locking.
    """
    
    __slots__ = ("_private_key", "_public_key", "_public_key_hash", "_provider")
    
    def __init__(self, private_key: PrivateKey, provider: CryptoProvider) -> None:
        """
        Initialize signer from a private key.
        
        Args:
            private_key: zkSync private key
            provider: Crypto backend deriving the public parts
            
        Raises:
            InvalidPrivateKeyError: If the provider rejects the key
        """
        public_key = _derive(
            "derive public key", lambda: provider.derive_public_key(private_key)
        )
        public_key_hash = _derive(
            "derive public key hash", lambda: provider.derive_public_key_hash(public_key)
        )
        
        object.__setattr__(self, "_private_key", private_key)
        object.__setattr__(self, "_public_key", public_key)
        object.__setattr__(self, "_public_key_hash", public_key_hash)
        object.__setattr__(self, "_provider", provider)
        
        logger.info(f"Created zkSync signer: {public_key_hash.address}")
        
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ZkSigner is immutable")
        
    def __copy__(self) -> "ZkSigner":
        return self
        
    def __deepcopy__(self, memo: dict) -> "ZkSigner":
        return self
        
    @classmethod
    def from_private_key(
        cls,
        private_key: PrivateKey,
        provider: CryptoProvider
    ) -> "ZkSigner":
        """Create signer from a private key."""
        return cls(private_key, provider)
        
    @classmethod
    def from_seed(cls, seed: Seed, provider: CryptoProvider) -> "ZkSigner":
        """
        Create signer from seed bytes.
        
        The same seed always yields the same key triple.
        
        Args:
            seed: Seed bytes
            provider: Crypto backend
            
        Returns:
            New ZkSigner instance
            
        Raises:
            InvalidPrivateKeyError: If the provider cannot derive a key
        """
        private_key = _derive(
            "derive private key from seed",
            lambda: provider.derive_private_key(bytes(seed)),
        )
        return cls(private_key, provider)
        
    @classmethod
    def from_raw_bytes(
        cls,
        raw: Union[bytes, str],
        provider: CryptoProvider
    ) -> "ZkSigner":
        """
        Create signer from raw private key bytes.
        
        Args:
            raw: 32 private key bytes or their hex
            provider: Crypto backend
            
        Returns:
            New ZkSigner instance
            
        Raises:
            IncorrectDataLengthError: If raw is not 32 bytes long
            InvalidPrivateKeyError: If the provider rejects the key
        """
        if isinstance(raw, str):
            raw = hex_to_bytes(raw)
            
        if len(raw) != PRIVATE_KEY_LENGTH:
            raise IncorrectDataLengthError(PRIVATE_KEY_LENGTH, len(raw))
            
        return cls(PrivateKey(raw), provider)
        
    @classmethod
    def from_eth_signer(
        cls,
        eth_signer: EthSigner,
        chain_id: ChainIdLike,
        provider: CryptoProvider
    ) -> "ZkSigner":
        """
        Create signer from an Ethereum wallet signature.
        
        The wallet signs a fixed message and the signature is used as seed,
        so the same wallet always regains the same zkSync key.
        
        Args:
            eth_signer: Wallet signer
            chain_id: Network the account lives on
            provider: Crypto backend
            
        Returns:
            New ZkSigner instance
            
        Raises:
            InvalidSignatureTypeError: If the wallet did not return a
                personal signature
            ValidationError: If the signature is not valid hex
            InvalidPrivateKeyError: If the provider cannot derive a key
        """
        message = zk_account_message(chain_id)
        signature = eth_signer.sign_message(message)
        
        if signature.type != SignatureType.ETHEREUM_SIGNATURE:
            raise InvalidSignatureTypeError(signature.type)
            
        logger.debug(f"Deriving zkSync key from wallet signature on chain {int(chain_id)}")
        return cls.from_seed(hex_to_bytes(signature.signature), provider)
        
    @property
    def private_key(self) -> PrivateKey:
        """Get private key."""
        return self._private_key
        
    @property
    def public_key(self) -> PublicKey:
        """Get packed public key."""
        return self._public_key
        
    @property
    def public_key_hash(self) -> PublicKeyHash:
        """Get public key hash."""
        return self._public_key_hash
        
    @property
    def public_key_hash_address(self) -> PubKeyHashStr:
        """Get public key hash in sync: form."""
        return self._public_key_hash.address
        
    def sign(self, message: bytes) -> ZkSignature:
        """
        Sign message bytes with the zkSync key.
        
        Args:
            message: Serialized transaction bytes
            
        Returns:
            ZkSignature carrying the public key and signature
            
        Raises:
            CryptoError: If signing fails
        """
        try:
            signature = self._provider.sign(self._private_key, bytes(message))
        except Exception as e:
            raise CryptoError(f"Signing failed: {e}") from e
        return ZkSignature(pub_key=self._public_key, signature=bytes(signature))
        
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, ZkSigner):
            return False
        return (
            self._private_key == other._private_key
            and self._public_key == other._public_key
            and self._public_key_hash == other._public_key_hash
        )
        
    def __hash__(self) -> int:
        return hash((self._private_key, self._public_key, self._public_key_hash))
        
    def __repr__(self) -> str:
        """String representation."""
        return f"ZkSigner({self._public_key_hash.address})"
