"""
Tests for ChainParams
"""
from dataclasses import FrozenInstanceError, replace

import pytest

from bitcoin_network import ChainParams, BITCOIN_PARAMS, TESTNET_PARAMS, SIGNET_PARAMS, REGTEST_PARAMS


def test_pow_limit_int():
    assert BITCOIN_PARAMS.pow_limit_int == (2 ** 256 - 1) >> 32
    assert REGTEST_PARAMS.pow_limit_int == (2 ** 256 - 1) >> 1
    assert SIGNET_PARAMS.pow_limit_int == int("00000377ae" + "00" * 27, 16)


def test_retarget_flags():
    assert not BITCOIN_PARAMS.allow_min_difficulty_blocks and not BITCOIN_PARAMS.no_pow_retargeting
    assert TESTNET_PARAMS.allow_min_difficulty_blocks and not TESTNET_PARAMS.no_pow_retargeting
    assert not SIGNET_PARAMS.allow_min_difficulty_blocks
    assert REGTEST_PARAMS.allow_min_difficulty_blocks and REGTEST_PARAMS.no_pow_retargeting


def test_activation_heights():
    assert BITCOIN_PARAMS.bip34_height == 227931
    assert BITCOIN_PARAMS.bip65_height == 388381
    assert BITCOIN_PARAMS.bip66_height == 363725
    assert REGTEST_PARAMS.bip34_height == 100000000
    assert BITCOIN_PARAMS.rule_change_activation_threshold == 1916
    assert REGTEST_PARAMS.miner_confirmation_window == 144


def test_frozen():
    with pytest.raises(FrozenInstanceError):
        BITCOIN_PARAMS.bip34_height = 0  # type: ignore


def test_pow_limit_validation():
    with pytest.raises(ValueError):
        replace(BITCOIN_PARAMS, pow_limit=(0, 0, 0))
    with pytest.raises(ValueError):
        replace(BITCOIN_PARAMS, pow_limit=(0, 0, 0, 1 << 64))


def test_pow_limit_list_is_stored_as_tuple():
    params = replace(BITCOIN_PARAMS, pow_limit=[1, 2, 3, 4])
    assert params.pow_limit == (1, 2, 3, 4)
    assert isinstance(params, ChainParams)
    assert hash(params) == hash(replace(BITCOIN_PARAMS, pow_limit=(1, 2, 3, 4)))


def test_to_dict():
    data = REGTEST_PARAMS.to_dict()
    assert data["no_pow_retargeting"] is True
    assert data["pow_limit"] == "7f" + "ff" * 31
    assert data["pow_target_timespan"] == 14 * 24 * 60 * 60
