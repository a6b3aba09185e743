import hashlib

import pytest

from zksync_signer.crypto import CryptoProvider, PrivateKey, PublicKey, PublicKeyHash


class FakeProvider(CryptoProvider):
    """Deterministic hash-based stand-in for the zkSync curve backend."""

    def __init__(self):
        self.calls = []

    def derive_private_key(self, seed):
        self.calls.append("derive_private_key")
        if not seed:
            raise ValueError("empty seed")
        return PrivateKey(hashlib.sha256(b"priv" + seed).digest())

    def derive_public_key(self, private_key):
        self.calls.append("derive_public_key")
        if bytes(private_key) == b"\x00" * 32:
            raise ValueError("zero key")
        return PublicKey(hashlib.sha256(b"pub" + bytes(private_key)).digest())

    def derive_public_key_hash(self, public_key):
        self.calls.append("derive_public_key_hash")
        return PublicKeyHash(hashlib.sha256(bytes(public_key)).digest()[:20])

    def sign(self, private_key, message):
        self.calls.append("sign")
        return hashlib.sha512(bytes(private_key) + message).digest()


@pytest.fixture
def provider():
    return FakeProvider()
