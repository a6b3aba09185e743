import pytest

from zksync_signer.exceptions import SerializationError, ValidationError
from zksync_signer.utils.encoding import (
    hex_to_bytes, bytes_to_hex, add_hex_prefix, remove_hex_prefix,
    int_to_bytes, bytes_to_int, nonce_to_bytes, account_id_to_bytes
)


def test_nonce_encoding():
    assert nonce_to_bytes(1) == b"\x00\x00\x00\x01"
    assert bytes_to_hex(nonce_to_bytes(1)) == "0x00000001"
    assert bytes_to_hex(account_id_to_bytes(0xABCDEF)) == "0x00abcdef"


def test_fixed_width_bounds():
    assert bytes_to_hex(nonce_to_bytes(2**32 - 1)) == "0xffffffff"
    with pytest.raises(SerializationError):
        nonce_to_bytes(2**32)
    with pytest.raises(SerializationError):
        account_id_to_bytes(-1)
    with pytest.raises(SerializationError):
        int_to_bytes(256, 1)


def test_bytes_int_conversion():
    assert int_to_bytes(258, 2) == b"\x01\x02"
    assert bytes_to_int(b"\x01\x02") == 258


def test_hex_helpers():
    data = b"\x00\x01\xde\xad\xbe\xef"
    assert bytes_to_hex(data) == "0x0001deadbeef"
    assert bytes_to_hex(data, prefix=False) == "0001deadbeef"
    assert hex_to_bytes("0x0001DEADBEEF") == data
    assert hex_to_bytes("0001deadbeef") == data
    assert add_hex_prefix("ab") == "0xab"
    assert add_hex_prefix("0xab") == "0xab"
    assert remove_hex_prefix("0xab") == "ab"
    assert remove_hex_prefix("ab") == "ab"
    with pytest.raises(ValidationError):
        hex_to_bytes("zzzz")
