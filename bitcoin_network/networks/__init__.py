"""
The open network registry.

Networks implement NetworkConstants and are used through NetworkHandle values. Adding a network means writing a new
NetworkConstants implementation; see MarkerNetwork for stateless networks.
"""

# networks/__init__.py
from bitcoin_network.networks.constants import *
from bitcoin_network.networks.handle import *
from bitcoin_network.networks.bitcoin import *
from bitcoin_network.networks.lookup import *
