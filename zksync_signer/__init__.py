"""
zkSync Signer Python Library

Key derivation and signed-message construction for zkSync accounts:
derives the zkSync key pair from a seed, raw key bytes or an Ethereum
wallet signature, and builds the exact texts wallets sign to confirm
change-pubkey, transfer and withdraw operations.
"""

from typing import Optional

from .constants import ChainId
from .exceptions import (
    ZkSyncError,
    ValidationError,
    IncorrectDataLengthError,
    CryptoError,
    InvalidPrivateKeyError,
    InvalidSignatureTypeError,
    SerializationError,
    WalletError,
)
from .crypto import CryptoProvider, PrivateKey, PublicKey, PublicKeyHash, ZkSignature
from .signer import (
    EthSigner,
    EthSignature,
    SignatureType,
    PrivateKeyEthSigner,
    ZkSigner,
    create_change_pub_key_message,
    create_transfer_message,
    create_withdraw_message,
)
from .types import Token, ETH
from .utils import format_amount

__version__ = "1.0.0"
__author__ = "zkSync Signer Python Library"

__all__ = [
    # Network
    "ChainId",
    
    # Exceptions
    "ZkSyncError",
    "ValidationError",
    "IncorrectDataLengthError",
    "CryptoError",
    "InvalidPrivateKeyError",
    "InvalidSignatureTypeError",
    "SerializationError",
    "WalletError",
    
    # Crypto
    "CryptoProvider",
    "PrivateKey",
    "PublicKey",
    "PublicKeyHash",
    "ZkSignature",
    
    # Signers
    "EthSigner",
    "EthSignature",
    "SignatureType",
    "PrivateKeyEthSigner",
    "ZkSigner",
    
    # Entry point
    "connect_wallet",
    
    # Messages
    "create_change_pub_key_message",
    "create_transfer_message",
    "create_withdraw_message",
    "format_amount",
    
    # Types
    "Token",
    "ETH",
]


def connect_wallet(
    eth_signer: EthSigner,
    provider: CryptoProvider,
    chain_id: Optional[ChainId] = None,
) -> ZkSigner:
    """
    Derive the zkSync signer owned by an Ethereum wallet.
    
    Args:
        eth_signer: Wallet signer asked to sign the account message
        provider: zkSync crypto backend
        chain_id: Network (default: mainnet)
        
    Returns:
        ZkSigner for the wallet's zkSync account
        
    Example:
        >>> wallet = PrivateKeyEthSigner(eth_key)
        >>> signer = zksync_signer.connect_wallet(wallet, provider, ChainId.RINKEBY)
    """
    return ZkSigner.from_eth_signer(
        eth_signer,
        ChainId.MAINNET if chain_id is None else chain_id,
        provider,
    )
