"""Ethereum wallet signers used to confirm zkSync operations."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union

from coincurve import PrivateKey as SecpPrivateKey
from eth_utils import keccak, to_checksum_address

from ..constants import ETH_MESSAGE_PREFIX, ETH_SIGNATURE_LENGTH, PRIVATE_KEY_LENGTH
from ..exceptions import IncorrectDataLengthError, ValidationError, WalletError
from ..types.common import Address, HexStr
from ..utils.encoding import add_hex_prefix, bytes_to_hex, hex_to_bytes

__all__ = [
    "SignatureType",
    "EthSignature",
    "EthSigner",
    "PrivateKeyEthSigner",
    "hash_personal_message",
]

logger = logging.getLogger(__name__)


class SignatureType(str, Enum):
    """Schemes a wallet may sign with."""
    
    ETHEREUM_SIGNATURE = "EthereumSignature"  # EIP-191 personal sign
    EIP1271_SIGNATURE = "EIP1271Signature"    # Smart contract wallet


@dataclass(frozen=True)
class EthSignature:
    """Signature returned by a wallet."""
    
    signature: HexStr
    type: SignatureType = SignatureType.ETHEREUM_SIGNATURE
    
    def __post_init__(self) -> None:
        """Normalize signature to 0x-prefixed hex."""
        object.__setattr__(self, "signature", add_hex_prefix(self.signature))
        
    def to_bytes(self) -> bytes:
        """Decode signature payload."""
        return hex_to_bytes(self.signature)


class EthSigner(ABC):
    """
    Abstract Ethereum wallet signer.
    
    A wallet holds the account's Ethereum key and shows messages to the
    user for confirmation before signing them. Hardware or remote wallets
    may block while waiting; retries and timeouts are theirs to handle.
    """
    
    @property
    @abstractmethod
    def address(self) -> Address:
        """Get the wallet's Ethereum address."""
        raise NotImplementedError
        
    @abstractmethod
    def sign_message(self, message: str) -> EthSignature:
        """
        Sign a UTF-8 message.
        
        Args:
            message: Message text shown to the user
            
        Returns:
            EthSignature with the signature and its scheme
        """
        raise NotImplementedError
        
    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(address={self.address})"


def hash_personal_message(message: Union[str, bytes]) -> bytes:
    """
    Hash message the way eth_sign/personal_sign do (EIP-191).
    
    Args:
        message: Message text or bytes
        
    Returns:
        32-byte keccak256 digest
    """
    if isinstance(message, str):
        message = message.encode("utf-8")
        
    prefix = ETH_MESSAGE_PREFIX + str(len(message)).encode("ascii")
    return keccak(prefix + message)


class PrivateKeyEthSigner(EthSigner):
    """
    Wallet signer backed by a local secp256k1 private key.
    
    Produces deterministic (RFC 6979) personal signatures, so the same key
    always yields the same zkSync account seed.
    """
    
    def __init__(self, private_key: Union[bytes, str]) -> None:
        """
        Initialize signer.
        
        Args:
            private_key: 32-byte Ethereum private key or its hex
            
        Raises:
            ValidationError: If key is malformed or outside the curve order
        """
        if isinstance(private_key, str):
            private_key = hex_to_bytes(private_key)
            
        if len(private_key) != PRIVATE_KEY_LENGTH:
            raise IncorrectDataLengthError(PRIVATE_KEY_LENGTH, len(private_key))
            
        try:
            self._key = SecpPrivateKey(bytes(private_key))
        except ValueError as e:
            raise ValidationError(f"Invalid Ethereum private key: {e}") from e
            
        public_point = self._key.public_key.format(compressed=False)
        self._address = Address(to_checksum_address(bytes_to_hex(keccak(public_point[1:])[-20:])))
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        
    @property
    def address(self) -> Address:
        """Get EIP-55 checksummed address."""
        return self._address
        
    def sign_message(self, message: str) -> EthSignature:
        """
        Sign message with EIP-191 personal sign.
        
        Returns:
            EthSignature with r || s || v payload, v being 27 or 28
            
        Raises:
            WalletError: If signing fails
        """
        message_hash = hash_personal_message(message)
        
        try:
            recoverable = self._key.sign_recoverable(message_hash, hasher=None)
        except Exception as e:
            raise WalletError(f"Signing failed: {e}") from e
            
        # coincurve returns r || s || recovery id
        if len(recoverable) != ETH_SIGNATURE_LENGTH:
            raise WalletError(f"Unexpected signature length: {len(recoverable)}")
        signature = recoverable[:64] + bytes([recoverable[64] + 27])
            
        self._logger.debug(f"Signed personal message for {self._address}")
        return EthSignature(bytes_to_hex(signature), SignatureType.ETHEREUM_SIGNATURE)
