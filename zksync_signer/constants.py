"""Constants for the zkSync signing core."""

from enum import IntEnum
from typing import Union

__all__ = [
    "ChainId",
    "ChainIdLike",
    "chain_id_value",
    "PRIVATE_KEY_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "PUBLIC_KEY_HASH_LENGTH",
    "SIGNATURE_LENGTH",
    "ETH_SIGNATURE_LENGTH",
    "NONCE_LENGTH",
    "ACCOUNT_ID_LENGTH",
    "ZERO_ADDRESS",
    "PUBKEY_HASH_PREFIX",
    "ZK_ACCOUNT_MESSAGE",
    "TRUSTED_CLIENT_NOTICE",
    "ETH_MESSAGE_PREFIX",
]


class ChainId(IntEnum):
    """Ethereum networks zkSync is deployed on."""
    
    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    LOCALHOST = 9


# Any other network is identified by its plain numeric id
ChainIdLike = Union[ChainId, int]


def chain_id_value(chain_id: ChainIdLike) -> int:
    """Get numeric id of a chain."""
    return int(chain_id)


# Key material sizes (bytes)
PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
PUBLIC_KEY_HASH_LENGTH = 20
SIGNATURE_LENGTH = 64
ETH_SIGNATURE_LENGTH = 65

# Fixed widths of encoded transaction fields
NONCE_LENGTH = 4
ACCOUNT_ID_LENGTH = 4

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
PUBKEY_HASH_PREFIX = "sync:"

# Signed texts. These are hashed by the wallet, so they must stay byte-stable.
TRUSTED_CLIENT_NOTICE = "Only sign this message for a trusted client!"
ZK_ACCOUNT_MESSAGE = f"Access zkSync account.\n\n{TRUSTED_CLIENT_NOTICE}"

# EIP-191 personal message prefix
ETH_MESSAGE_PREFIX = b"\x19Ethereum Signed Message:\n"
