"""
Genesis block hashes, decoded once on import.

The 80-byte genesis headers are kept beside the hashes so the two can be checked against each other.
"""
from bitcoin_network.crypto import Sha256dHash

__all__ = ["BITCOIN_GENESIS", "TESTNET_GENESIS", "SIGNET_GENESIS", "REGTEST_GENESIS", "GENESIS_HEADERS"]

BITCOIN_GENESIS = Sha256dHash.from_hex("000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f")
TESTNET_GENESIS = Sha256dHash.from_hex("000000000933ea01ad0ee984209779baaec3ced90fa3f408719526f8d77f4943")
SIGNET_GENESIS = Sha256dHash.from_hex("00000008819873e925422c1ff0f99f7cc9bbb232af63a077a480a3633bee1ef6")
REGTEST_GENESIS = Sha256dHash.from_hex("0f9188f13cb7b2c71f2a335e3a4fc328bf5beb436012afca590b1a11466e2206")

_MERKLE_ROOT = "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a"
_HEADER_PREFIX = "01000000" + "00" * 32 + _MERKLE_ROOT

# time | bits | nonce, little-endian
GENESIS_HEADERS = {
    BITCOIN_GENESIS: bytes.fromhex(_HEADER_PREFIX + "29ab5f49" + "ffff001d" + "1dac2b7c"),
    TESTNET_GENESIS: bytes.fromhex(_HEADER_PREFIX + "dae5494d" + "ffff001d" + "1aa4ae18"),
    REGTEST_GENESIS: bytes.fromhex(_HEADER_PREFIX + "dae5494d" + "ffff7f20" + "02000000"),
}
