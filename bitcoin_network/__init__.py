"""
Constants for bitcoin-like cryptocurrency networks: bech32 human-readable parts, message start magic, address and
key version bytes, genesis block hashes and consensus parameters.

Two registries are provided:
    -registry.Network: a closed enumeration with lookups by hrp, magic and name
    -networks: an open set of NetworkConstants implementations used through NetworkHandle
"""
from bitcoin_network.chain_params import *
from bitcoin_network.core import *
from bitcoin_network.crypto import *
from bitcoin_network.encoding import *
from bitcoin_network.genesis import *
from bitcoin_network.networks import *
from bitcoin_network.registry import *

__version__ = "0.1.0"
