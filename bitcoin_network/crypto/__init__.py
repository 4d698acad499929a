"""
crypto folder used to house the hash functions and the digest type for genesis block hashes
"""

# crypto/__init__.py
from bitcoin_network.crypto.hash_functions import *
