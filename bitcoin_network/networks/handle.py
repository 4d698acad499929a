"""
NetworkHandle: a value type owning one NetworkConstants implementation.
"""
from bitcoin_network.chain_params import ChainParams
from bitcoin_network.crypto import Sha256dHash
from bitcoin_network.networks.constants import NetworkConstants
from bitcoin_network.registry import NetworkType

__all__ = ["NetworkHandle", "MarkerNetwork"]


class NetworkHandle:
    """
    Forwards every NetworkConstants accessor to the network it owns.

    Copies are made by asking the owned network for a fresh instance of itself, so two handles never share a network
    object. Equality, hashing and formatting only look at name().
    """
    __slots__ = ("_network",)

    def __init__(self, network: NetworkConstants):
        if not isinstance(network, NetworkConstants):
            raise TypeError(f"NetworkHandle needs a NetworkConstants implementation, got {type(network).__name__}")
        self._network = network

    # --- Accessors --- #

    def hrp(self) -> str:
        return self._network.hrp()

    def p2pk_prefix(self) -> int:
        return self._network.p2pk_prefix()

    def p2pkh_prefix(self) -> int:
        return self._network.p2pkh_prefix()

    def p2sh_prefix(self) -> int:
        return self._network.p2sh_prefix()

    def xpub_prefix(self) -> bytes:
        return self._network.xpub_prefix()

    def xpriv_prefix(self) -> bytes:
        return self._network.xpriv_prefix()

    def wif_prefix(self) -> int:
        return self._network.wif_prefix()

    def magic(self) -> int:
        return self._network.magic()

    def magic_bytes(self) -> bytes:
        return self._network.magic_bytes()

    def name(self) -> str:
        return self._network.name()

    def network_type(self) -> NetworkType:
        return self._network.network_type()

    def chain_params(self) -> ChainParams:
        return self._network.chain_params()

    def genesis_block(self) -> Sha256dHash:
        return self._network.genesis_block()

    # --- Value semantics --- #

    def clone(self) -> "NetworkHandle":
        duplicate = self._network.clone_boxed()
        if not isinstance(duplicate, NetworkConstants):
            raise TypeError(f"{type(self._network).__name__}.clone_boxed() returned {type(duplicate).__name__}")
        return NetworkHandle(duplicate)

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def __eq__(self, other) -> bool:
        if not isinstance(other, NetworkHandle):
            return NotImplemented
        return self.name() == other.name()

    def __hash__(self):
        return hash(self.name())

    def __str__(self):
        return self.name()

    def __repr__(self):
        return self.name()


class MarkerNetwork(NetworkConstants):
    """
    Base for networks without any runtime state: subclasses return their constants as literals.
    """
    __slots__ = ()

    @classmethod
    def new(cls) -> NetworkHandle:
        """Create a NetworkHandle for this network"""
        return NetworkHandle(cls())

    def clone_boxed(self) -> NetworkConstants:
        return self.__class__()
