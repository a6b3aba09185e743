import pytest
from coincurve import PublicKey as SecpPublicKey

from zksync_signer.exceptions import IncorrectDataLengthError, ValidationError, WalletError
from zksync_signer.signer.eth import (
    EthSignature, PrivateKeyEthSigner, SignatureType, hash_personal_message
)
from zksync_signer.utils.encoding import hex_to_bytes

# Well-known development key (first Hardhat/Anvil account)
DEV_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def test_address_derivation():
    signer = PrivateKeyEthSigner(DEV_KEY)
    assert signer.address == DEV_ADDRESS
    assert PrivateKeyEthSigner(hex_to_bytes(DEV_KEY)).address == DEV_ADDRESS


def test_invalid_keys():
    with pytest.raises(IncorrectDataLengthError):
        PrivateKeyEthSigner(b"\x01" * 31)
    with pytest.raises(ValidationError):
        PrivateKeyEthSigner(b"\x00" * 32)


def test_personal_message_hash_prefix():
    assert hash_personal_message("hi") == hash_personal_message(b"hi")
    assert len(hash_personal_message("hi")) == 32
    assert hash_personal_message("hi") != hash_personal_message("hi ")


def test_signature_is_deterministic_and_recoverable():
    signer = PrivateKeyEthSigner(DEV_KEY)
    message = "Access zkSync account.\n\nOnly sign this message for a trusted client!"
    signature = signer.sign_message(message)
    assert signature.type == SignatureType.ETHEREUM_SIGNATURE
    assert signature.signature.startswith("0x")
    assert signer.sign_message(message) == signature

    raw = signature.to_bytes()
    assert len(raw) == 65
    assert raw[64] in (27, 28)

    recovered = SecpPublicKey.from_signature_and_message(
        raw[:64] + bytes([raw[64] - 27]), hash_personal_message(message), hasher=None
    )
    expected = SecpPublicKey.from_secret(hex_to_bytes(DEV_KEY))
    assert recovered.format() == expected.format()


def test_eth_signature_normalizes_prefix():
    signature = EthSignature("abcd")
    assert signature.signature == "0xabcd"
    assert signature.type == SignatureType.ETHEREUM_SIGNATURE
    assert signature.to_bytes() == b"\xab\xcd"


class ShortSignatureKey:
    def sign_recoverable(self, message, hasher=None):
        return b"\x01" * 64


def test_unexpected_signature_length():
    signer = PrivateKeyEthSigner(DEV_KEY)
    signer._key = ShortSignatureKey()
    with pytest.raises(WalletError):
        signer.sign_message("hello")
