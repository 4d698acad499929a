"""
Reverse lookups over the open registry.

The built-in networks are searched by default. Code defining its own networks passes its own ordered collection of
factories (anything returning a NetworkHandle or a NetworkConstants when called, such as a MarkerNetwork subclass or
its new method); nothing is registered globally.
"""
from typing import Callable, Iterable, Optional, Union

from bitcoin_network.core import NETWORK, UnknownNetworkError, get_logger
from bitcoin_network.networks.bitcoin import Bitcoin, BitcoinTestnet, BitcoinSignet, BitcoinRegtest
from bitcoin_network.networks.constants import NetworkConstants
from bitcoin_network.networks.handle import NetworkHandle

__all__ = ["KNOWN_NETWORKS", "find_network", "from_hrp", "from_magic", "from_magic_bytes", "from_name",
           "parse_network", "default_network"]

logger = get_logger(__name__)

NetworkFactory = Callable[[], Union[NetworkHandle, NetworkConstants]]

# Lookup order: the first match wins
KNOWN_NETWORKS: tuple = (Bitcoin.new, BitcoinTestnet.new, BitcoinSignet.new, BitcoinRegtest.new)


def _as_handle(factory: NetworkFactory) -> NetworkHandle:
    network = factory()
    if isinstance(network, NetworkHandle):
        return network
    return NetworkHandle(network)


def find_network(predicate: Callable[[NetworkHandle], bool],
                 networks: Optional[Iterable[NetworkFactory]] = None) -> Optional[NetworkHandle]:
    """
    Return a handle for the first network satisfying the predicate, or None.

    Args:
        predicate: test applied to each candidate handle
        networks: ordered factories to search, KNOWN_NETWORKS when not given
    """
    for factory in (KNOWN_NETWORKS if networks is None else networks):
        handle = _as_handle(factory)
        if predicate(handle):
            return handle
    return None


def _lookup(field: str, value, predicate, networks) -> Optional[NetworkHandle]:
    handle = find_network(predicate, networks)
    if handle is None:
        logger.debug(f"No known network with {field} {value!r}")
    return handle


def from_hrp(hrp: str, networks: Optional[Iterable[NetworkFactory]] = None) -> Optional[NetworkHandle]:
    return _lookup("hrp", hrp, lambda n: n.hrp() == hrp, networks)


def from_magic(magic: int, networks: Optional[Iterable[NetworkFactory]] = None) -> Optional[NetworkHandle]:
    return _lookup("magic", magic, lambda n: n.magic() == magic, networks)


def from_magic_bytes(magic_bytes: bytes,
                     networks: Optional[Iterable[NetworkFactory]] = None) -> Optional[NetworkHandle]:
    return _lookup("magic bytes", magic_bytes, lambda n: n.magic_bytes() == magic_bytes, networks)


def from_name(name: str, networks: Optional[Iterable[NetworkFactory]] = None) -> Optional[NetworkHandle]:
    return _lookup("name", name, lambda n: n.name() == name, networks)


def parse_network(name: str, networks: Optional[Iterable[NetworkFactory]] = None) -> NetworkHandle:
    """
    Text decoding of a canonical name. Unlike from_name, raises UnknownNetworkError.
    """
    handle = from_name(name, networks)
    if handle is None:
        raise UnknownNetworkError(name)
    return handle


def default_network() -> NetworkHandle:
    return parse_network(NETWORK.DEFAULT)
