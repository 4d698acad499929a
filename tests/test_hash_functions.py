"""
Tests for the hash functions and the Sha256dHash digest
"""
from secrets import token_bytes

import pytest

from bitcoin_network import Sha256dHash, hash256, sha256, GENESIS_HEADERS, BITCOIN_GENESIS, TESTNET_GENESIS, \
    REGTEST_GENESIS


def test_hash256():
    data = token_bytes(64)
    assert hash256(data) == sha256(sha256(data))
    assert sha256(b'').hex() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_from_hex_reverses_bytes():
    digest = Sha256dHash.from_hex("00" * 31 + "01")
    assert digest.to_bytes() == b'\x01' + b'\x00' * 31
    assert digest.hex() == "00" * 31 + "01"
    assert str(digest) == digest.hex()
    assert repr(digest) == f"Sha256dHash('{digest.hex()}')"


def test_random_digest():
    raw = token_bytes(32)
    digest = Sha256dHash(raw)
    assert Sha256dHash.from_hex(digest.hex()) == digest
    assert hash(digest) == hash(Sha256dHash(raw))
    assert digest != raw


def test_bad_digests():
    with pytest.raises(ValueError):
        Sha256dHash(token_bytes(31))
    with pytest.raises(ValueError):
        Sha256dHash.from_hex("zz" * 32)
    with pytest.raises(ValueError):
        Sha256dHash.from_hex("00" * 33)


@pytest.mark.parametrize("genesis", [BITCOIN_GENESIS, TESTNET_GENESIS, REGTEST_GENESIS])
def test_genesis_headers_hash_to_genesis(genesis):
    header = GENESIS_HEADERS[genesis]
    assert len(header) == 80
    assert Sha256dHash.hash(header) == genesis, f"Genesis header does not hash to {genesis}"
