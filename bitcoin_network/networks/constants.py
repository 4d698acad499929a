"""
The NetworkConstants interface every network implements.

A network is a stateless object answering for its constants. Downstream code adds networks by implementing this
interface; nothing in this package needs to know about them.
"""
from abc import ABC, abstractmethod

from bitcoin_network.chain_params import ChainParams
from bitcoin_network.core import NETWORK
from bitcoin_network.crypto import Sha256dHash
from bitcoin_network.registry import NetworkType

__all__ = ["NetworkConstants"]


class NetworkConstants(ABC):
    """
    Abstract base class for the constants of a single network
    """
    __slots__ = ()

    @abstractmethod
    def hrp(self) -> str:
        """Human-readable part of bech32 addresses"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement hrp()")

    @abstractmethod
    def p2pk_prefix(self) -> int:
        raise NotImplementedError(f"{self.__class__.__name__} must implement p2pk_prefix()")

    @abstractmethod
    def p2pkh_prefix(self) -> int:
        raise NotImplementedError(f"{self.__class__.__name__} must implement p2pkh_prefix()")

    @abstractmethod
    def p2sh_prefix(self) -> int:
        raise NotImplementedError(f"{self.__class__.__name__} must implement p2sh_prefix()")

    @abstractmethod
    def xpub_prefix(self) -> bytes:
        """4-byte version of serialized extended public keys"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement xpub_prefix()")

    @abstractmethod
    def xpriv_prefix(self) -> bytes:
        """4-byte version of serialized extended private keys"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement xpriv_prefix()")

    @abstractmethod
    def wif_prefix(self) -> int:
        raise NotImplementedError(f"{self.__class__.__name__} must implement wif_prefix()")

    @abstractmethod
    def magic(self) -> int:
        """Message start as a u32"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement magic()")

    @abstractmethod
    def name(self) -> str:
        """Canonical lowercase, hyphenated name"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement name()")

    @abstractmethod
    def network_type(self) -> NetworkType:
        raise NotImplementedError(f"{self.__class__.__name__} must implement network_type()")

    @abstractmethod
    def chain_params(self) -> ChainParams:
        raise NotImplementedError(f"{self.__class__.__name__} must implement chain_params()")

    @abstractmethod
    def genesis_block(self) -> Sha256dHash:
        raise NotImplementedError(f"{self.__class__.__name__} must implement genesis_block()")

    @abstractmethod
    def clone_boxed(self) -> "NetworkConstants":
        """
        Return a new instance of the same concrete network. NetworkHandle copies itself through this method.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement clone_boxed()")

    def magic_bytes(self) -> bytes:
        """Message start as it appears on the wire"""
        return self.magic().to_bytes(NETWORK.MAGIC_BYTES, NETWORK.MAGIC_BYTEORDER)
