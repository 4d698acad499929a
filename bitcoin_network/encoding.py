"""
JSON encoding of networks. A network is written as its canonical name string and read back by name.
"""
import json
from typing import Union

from bitcoin_network.core import DataEncodingError
from bitcoin_network.networks import NetworkHandle, parse_network
from bitcoin_network.registry import Network

__all__ = ["network_to_json", "network_from_json"]

AnyNetwork = Union[Network, NetworkHandle]


def _encode(network: AnyNetwork) -> str:
    if isinstance(network, Network):
        return network.canonical_name()
    if isinstance(network, NetworkHandle):
        return network.name()
    raise DataEncodingError(f"Cannot encode {type(network).__name__} as a network")


def network_to_json(value: Union[AnyNetwork, list, tuple]) -> str:
    """
    Serialize a network, or a list of networks, to JSON
    """
    if isinstance(value, (list, tuple)):
        return json.dumps([_encode(n) for n in value])
    return json.dumps(_encode(value))


def network_from_json(text: str, open_registry: bool = False, networks=None):
    """
    Deserialize a network, or a list of networks, from JSON.

    Closed registry names are parsed with Network.parse. With open_registry=True, names are parsed into
    NetworkHandle values, searching networks (the built-in Bitcoin networks by default). Unknown names raise
    UnknownNetworkError.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataEncodingError(f"Invalid network JSON: {e}") from e

    def decode(item):
        if not isinstance(item, str):
            raise DataEncodingError(f"Expected network name string, got {type(item).__name__}")
        if open_registry:
            return parse_network(item, networks)
        return Network.parse(item)

    if isinstance(data, list):
        return [decode(item) for item in data]
    return decode(data)
