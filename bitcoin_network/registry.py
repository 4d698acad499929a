"""
The closed network registry.

Network is a fixed enumeration. Each property has exactly one forward table keyed by Network, and every table is
checked on import to cover every member. Reverse lookups are never written by hand: each one is find() composed with
the matching forward accessor, so adding a member only ever means adding a row to each table.
"""
from enum import Enum, auto
from types import MappingProxyType
from typing import Callable, Mapping, Optional, TypeVar

from bitcoin_network.chain_params import ChainParams, BITCOIN_PARAMS, TESTNET_PARAMS, REGTEST_PARAMS
from bitcoin_network.core import NETWORK, IncompleteNetworkTableError, MissingNetworkDataError, \
    UnknownNetworkError, get_logger
from bitcoin_network.crypto import Sha256dHash
from bitcoin_network.genesis import BITCOIN_GENESIS, TESTNET_GENESIS, REGTEST_GENESIS

__all__ = ["NetworkType", "Network", "ALL_NETWORKS", "require_every_network"]

logger = get_logger(__name__)

V = TypeVar("V")


class NetworkType(Enum):
    """Class of a network"""
    MAINNET = "mainnet"  # production
    TESTNET = "testnet"  # public test network
    SIGNET = "signet"  # test network with signed blocks
    REGTEST = "regtest"  # private test network


class Network(Enum):
    """
    The cryptocurrency to act on. Adding a member requires a row in every table below.
    """
    BITCOIN = auto()
    TESTNET = auto()
    BITCOIN_REGTEST = auto()
    LITECOIN = auto()
    LITECOIN_TESTNET = auto()
    VERTCOIN = auto()
    VERTCOIN_TESTNET = auto()

    # --- Forward mappings --- #

    def hrp(self) -> str:
        """Human-readable part of bech32 addresses, as maintained in SLIP-0173"""
        return _HRP[self]

    def magic(self) -> int:
        """Message start as a u32"""
        return _MAGIC[self]

    def magic_bytes(self) -> bytes:
        """Message start as it appears on the wire"""
        return self.magic().to_bytes(NETWORK.MAGIC_BYTES, NETWORK.MAGIC_BYTEORDER)

    def canonical_name(self) -> str:
        return _NAME[self]

    def network_type(self) -> NetworkType:
        return _NETWORK_TYPE[self]

    def chain_params(self) -> ChainParams:
        """
        Consensus parameters. Raises MissingNetworkDataError for networks without parameter data.
        """
        params = _CHAIN_PARAMS[self]
        if params is None:
            raise MissingNetworkDataError(self, "chain params")
        return params

    def genesis_block(self) -> Sha256dHash:
        genesis = _GENESIS[self]
        if genesis is None:
            raise MissingNetworkDataError(self, "genesis block")
        return genesis

    def __str__(self):
        return self.canonical_name()

    # --- Reverse mappings --- #

    @classmethod
    def find(cls, predicate: Callable[["Network"], bool]) -> Optional["Network"]:
        """
        Return the first network in ALL_NETWORKS satisfying the predicate, or None if none does.
        """
        return next((n for n in ALL_NETWORKS if predicate(n)), None)

    @classmethod
    def from_hrp(cls, hrp: str) -> Optional["Network"]:
        return cls._lookup("hrp", hrp, lambda n: n.hrp() == hrp)

    @classmethod
    def from_magic(cls, magic: int) -> Optional["Network"]:
        return cls._lookup("magic", magic, lambda n: n.magic() == magic)

    @classmethod
    def from_magic_bytes(cls, magic_bytes: bytes) -> Optional["Network"]:
        return cls._lookup("magic bytes", magic_bytes, lambda n: n.magic_bytes() == magic_bytes)

    @classmethod
    def from_name(cls, name: str) -> Optional["Network"]:
        return cls._lookup("name", name, lambda n: n.canonical_name() == name)

    @classmethod
    def parse(cls, name: str) -> "Network":
        """
        Text decoding of a canonical name. Unlike from_name, raises UnknownNetworkError.
        """
        network = cls.from_name(name)
        if network is None:
            raise UnknownNetworkError(name)
        return network

    @classmethod
    def default(cls) -> "Network":
        return cls.parse(NETWORK.DEFAULT)

    @classmethod
    def _lookup(cls, field: str, value, predicate: Callable[["Network"], bool]) -> Optional["Network"]:
        network = cls.find(predicate)
        if network is None:
            logger.debug(f"No known network with {field} {value!r}")
        return network


# The known networks in lookup order. Built from the enumeration itself so it can never miss a member.
ALL_NETWORKS = tuple(Network)


def require_every_network(field: str, table: Mapping[Network, V]) -> Mapping[Network, V]:
    """
    Return a read-only copy of table after checking its keys are exactly the Network members.
    """
    missing = [n.name for n in Network if n not in table]
    foreign = [k for k in table if not isinstance(k, Network)]
    if missing or foreign:
        raise IncompleteNetworkTableError(f"{field} table is incomplete: missing={missing}, foreign={foreign}")
    return MappingProxyType(dict(table))


# --- Forward tables --- #

_HRP = require_every_network("hrp", {
    Network.BITCOIN: "bc",
    Network.TESTNET: "tb",
    Network.BITCOIN_REGTEST: "bcrt",
    Network.LITECOIN: "ltc",
    Network.LITECOIN_TESTNET: "tltc",
    Network.VERTCOIN: "vtc",
    Network.VERTCOIN_TESTNET: "tvtc",
})

_MAGIC = require_every_network("magic", {
    # https://github.com/bitcoin/bitcoin/blob/ce650182f4d9847423202789856e6e5f499151f8/src/chainparams.cpp#L115
    Network.BITCOIN: 0xD9B4BEF9,
    Network.TESTNET: 0x0709110B,
    Network.BITCOIN_REGTEST: 0xDAB5BFFA,

    # https://github.com/litecoin-project/litecoin/blob/42dddc2f9ef5bdc8369a3c7552e70b974b9d1764/src/chainparams.cpp#L114
    Network.LITECOIN: 0xDBB6C0FB,
    Network.LITECOIN_TESTNET: 0xF1C8D2FD,

    # https://github.com/vertcoin-project/vertcoin-core/blob/3b3701e7a76d4fe6d2d7459b6f39a9570ca65b19/src/chainparams.cpp#L114
    # Vertcoin mainnet shares its magic with bitcoin regtest, which comes first in lookups
    Network.VERTCOIN: 0xDAB5BFFA,
    Network.VERTCOIN_TESTNET: 0x74726576,
})

_NAME = require_every_network("name", {
    Network.BITCOIN: "bitcoin",
    Network.TESTNET: "testnet",  # only 'testnet' for compatibility reasons
    Network.BITCOIN_REGTEST: "bitcoin-regtest",
    Network.LITECOIN: "litecoin",
    Network.LITECOIN_TESTNET: "litecoin-testnet",
    Network.VERTCOIN: "vertcoin",
    Network.VERTCOIN_TESTNET: "vertcoin-testnet",
})

_NETWORK_TYPE = require_every_network("network type", {
    Network.BITCOIN: NetworkType.MAINNET,
    Network.TESTNET: NetworkType.TESTNET,
    Network.BITCOIN_REGTEST: NetworkType.REGTEST,
    Network.LITECOIN: NetworkType.MAINNET,
    Network.LITECOIN_TESTNET: NetworkType.TESTNET,
    Network.VERTCOIN: NetworkType.MAINNET,
    Network.VERTCOIN_TESTNET: NetworkType.TESTNET,
})

# None marks data not supplied yet
_CHAIN_PARAMS = require_every_network("chain params", {
    Network.BITCOIN: BITCOIN_PARAMS,
    Network.TESTNET: TESTNET_PARAMS,
    Network.BITCOIN_REGTEST: REGTEST_PARAMS,
    Network.LITECOIN: None,
    Network.LITECOIN_TESTNET: None,
    Network.VERTCOIN: None,
    Network.VERTCOIN_TESTNET: None,
})

_GENESIS = require_every_network("genesis block", {
    Network.BITCOIN: BITCOIN_GENESIS,
    Network.TESTNET: TESTNET_GENESIS,
    Network.BITCOIN_REGTEST: REGTEST_GENESIS,
    Network.LITECOIN: None,
    Network.LITECOIN_TESTNET: None,
    Network.VERTCOIN: None,
    Network.VERTCOIN_TESTNET: None,
})
