"""Signers and signed messages for zkSync accounts."""

from ..signer.eth import (
    SignatureType,
    EthSignature,
    EthSigner,
    PrivateKeyEthSigner,
    hash_personal_message,
)
from ..signer.messages import (
    zk_account_message,
    create_change_pub_key_message,
    create_transfer_message,
    create_withdraw_message,
)
from ..signer.zk import ZkSigner

__all__ = [
    # Wallet signers
    "SignatureType",
    "EthSignature",
    "EthSigner",
    "PrivateKeyEthSigner",
    "hash_personal_message",
    
    # Messages
    "zk_account_message",
    "create_change_pub_key_message",
    "create_transfer_message",
    "create_withdraw_message",
    
    # zkSync signer
    "ZkSigner",
]
