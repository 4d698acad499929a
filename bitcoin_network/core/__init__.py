"""
Contains the core elements that are used within bitcoin_network

Core:
    -Provides the reference formats for network constants
    -Provides custom exceptions for lookups and missing network data
    -Provides the logger factory
"""
# core/__init__.py
from bitcoin_network.core.exceptions import *
from bitcoin_network.core.formats import *
from bitcoin_network.core.logging import *
