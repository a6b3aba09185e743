"""Human-readable messages signed by the wallet for zkSync operations."""

import re
from typing import Union

from ..constants import (
    ChainIdLike,
    ChainId,
    PUBKEY_HASH_PREFIX,
    TRUSTED_CLIENT_NOTICE,
    ZK_ACCOUNT_MESSAGE,
    chain_id_value,
)
from ..crypto.keys import PublicKeyHash
from ..exceptions import ValidationError
from ..types.token import Token
from ..utils.encoding import account_id_to_bytes, bytes_to_hex, nonce_to_bytes
from ..utils.validation import validate_amount, validate_uint32

__all__ = [
    "zk_account_message",
    "create_change_pub_key_message",
    "create_transfer_message",
    "create_withdraw_message",
]


PUB_KEY_HASH_HEX_PATTERN = re.compile(r"[0-9a-f]+", re.ASCII)


def zk_account_message(chain_id: ChainIdLike = ChainId.MAINNET) -> str:
    """
    Message whose signature seeds the zkSync account key.
    
    Mainnet uses the bare text; any other chain gets its id appended.
    """
    chain = chain_id_value(chain_id)
    if chain == ChainId.MAINNET:
        return ZK_ACCOUNT_MESSAGE
    return f"{ZK_ACCOUNT_MESSAGE}\nChain ID: {chain}."


def create_change_pub_key_message(
    pub_key_hash: Union[str, PublicKeyHash],
    nonce: int,
    account_id: int
) -> str:
    """
    Build the message authorizing a new signing key for an account.
    
    Args:
        pub_key_hash: New public key hash, "sync:" prefix optional
        nonce: Account nonce
        account_id: Account id
        
    Returns:
        Message text
        
    Raises:
        ValidationError: If the hash is not hex
        SerializationError: If nonce or account id does not fit 4 bytes
    """
    pub_key_hash = str(pub_key_hash)
    if pub_key_hash.startswith(PUBKEY_HASH_PREFIX):
        pub_key_hash = pub_key_hash[len(PUBKEY_HASH_PREFIX):]
    pub_key_hash = pub_key_hash.lower()
    if not PUB_KEY_HASH_HEX_PATTERN.fullmatch(pub_key_hash):
        raise ValidationError(f"Invalid public key hash: {pub_key_hash!r}")
    
    nonce_hex = bytes_to_hex(nonce_to_bytes(nonce))
    account_id_hex = bytes_to_hex(account_id_to_bytes(account_id))
    
    return (
        "Register zkSync pubkey:\n"
        "\n"
        f"{pub_key_hash}\n"
        f"nonce: {nonce_hex}\n"
        f"account id: {account_id_hex}\n"
        "\n"
        f"{TRUSTED_CLIENT_NOTICE}"
    )


def _operation_message(
    operation: str,
    to: str,
    account_id: int,
    nonce: int,
    amount: int,
    token: Token,
    fee: int
) -> str:
    validate_uint32(account_id, "Account id")
    validate_uint32(nonce, "Nonce")
    validate_amount(amount)
    validate_amount(fee)
    
    return (
        f"{operation} {token.format_amount(amount)} {token.symbol}\n"
        f"To: {to.lower()}\n"
        f"Nonce: {nonce}\n"
        f"Fee: {token.format_amount(fee)} {token.symbol}\n"
        f"Account Id: {account_id}"
    )


def create_transfer_message(
    to: str,
    account_id: int,
    nonce: int,
    amount: int,
    token: Token,
    fee: int
) -> str:
    """
    Build the confirmation message for a transfer.
    
    Args:
        to: Recipient address (shown lowercased)
        account_id: Sender account id
        nonce: Sender nonce
        amount: Amount in token's smallest unit
        token: Transferred token
        fee: Fee in token's smallest unit
        
    Returns:
        Message text

    Raises:
        ValidationError: If a field is negative or nonce/account id
            exceeds 32 bits
    """
    return _operation_message("Transfer", to, account_id, nonce, amount, token, fee)


def create_withdraw_message(
    to: str,
    account_id: int,
    nonce: int,
    amount: int,
    token: Token,
    fee: int
) -> str:
    """Build the confirmation message for a withdrawal to Ethereum."""
    return _operation_message("Withdraw", to, account_id, nonce, amount, token, fee)
