"""
Tests for JSON encoding of networks
"""
import json

import pytest

from bitcoin_network import Network, Bitcoin, BitcoinSignet, DataEncodingError, UnknownNetworkError, \
    network_to_json, network_from_json


def test_closed_registry_json():
    networks = [Network.BITCOIN, Network.LITECOIN_TESTNET, Network.VERTCOIN]
    encoded = network_to_json(networks)
    assert json.loads(encoded) == ["bitcoin", "litecoin-testnet", "vertcoin"]
    assert network_from_json(encoded) == networks


def test_single_network_json():
    assert network_to_json(Network.TESTNET) == '"testnet"'
    assert network_from_json('"testnet"') is Network.TESTNET


def test_open_registry_json():
    handles = [Bitcoin.new(), BitcoinSignet.new()]
    encoded = network_to_json(handles)
    assert json.loads(encoded) == ["bitcoin", "bitcoin-signet"]
    assert network_from_json(encoded, open_registry=True) == handles


def test_open_registry_with_downstream_network(litecoin, extended_networks):
    assert network_from_json('"litecoin"', open_registry=True, networks=extended_networks) == litecoin


def test_unknown_name():
    with pytest.raises(UnknownNetworkError):
        network_from_json('["bitcoin", "foobar"]')
    with pytest.raises(UnknownNetworkError):
        network_from_json('"testnet"', open_registry=True)


def test_bad_json():
    with pytest.raises(DataEncodingError):
        network_from_json('[1, 2]')
    with pytest.raises(DataEncodingError):
        network_from_json('not json')
    with pytest.raises(DataEncodingError):
        network_to_json("bitcoin")  # type: ignore
