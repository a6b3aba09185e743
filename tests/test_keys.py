import copy

import pytest

from zksync_signer.crypto.keys import PrivateKey, PublicKey, PublicKeyHash, ZkSignature
from zksync_signer.exceptions import IncorrectDataLengthError, ValidationError


def test_private_key_length_is_enforced():
    key = PrivateKey(b"\x01" * 32)
    assert key.secret == b"\x01" * 32
    assert len(key) == 32
    with pytest.raises(IncorrectDataLengthError) as exc:
        PrivateKey(b"\x01" * 31)
    assert exc.value.expected == 32
    assert exc.value.actual == 31


def test_private_key_from_hex_and_masking():
    key = PrivateKey("0x" + "ab" * 32)
    assert key == PrivateKey(b"\xab" * 32)
    assert repr(key) == "PrivateKey(abab...abab)"
    with pytest.raises(ValidationError):
        PrivateKey("0xzz")


def test_keys_are_immutable():
    key = PublicKey(b"\x02" * 32)
    with pytest.raises(AttributeError):
        key._data = b"\x03" * 32
    assert bytes(key) == b"\x02" * 32


def test_key_types_do_not_compare_equal():
    assert PrivateKey(b"\x02" * 32) != PublicKey(b"\x02" * 32)


def test_public_key_hash_string_forms():
    pkh = PublicKeyHash(bytes(range(20)))
    assert pkh.address == "sync:" + bytes(range(20)).hex()
    assert str(pkh) == pkh.address
    assert PublicKeyHash.from_string(pkh.address) == pkh
    assert PublicKeyHash.from_string(bytes(range(20)).hex().upper()) == pkh
    with pytest.raises(IncorrectDataLengthError):
        PublicKeyHash.from_string("sync:abcd")


def test_zk_signature():
    pub = PublicKey(b"\x05" * 32)
    sig = ZkSignature(pub_key=pub, signature=b"\x06" * 64)
    assert sig.pub_key_hex == "05" * 32
    assert sig.signature_hex == "06" * 64
    with pytest.raises(IncorrectDataLengthError):
        ZkSignature(pub_key=pub, signature=b"\x06" * 63)


def test_keys_can_be_copied():
    key = PrivateKey(b"\x01" * 32)
    assert copy.copy(key) == key
    assert copy.deepcopy(key) == key
    pkh = PublicKeyHash(b"\x02" * 20)
    assert copy.deepcopy({"hash": pkh})["hash"] == pkh
