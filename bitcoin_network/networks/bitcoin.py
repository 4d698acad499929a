"""
The Bitcoin networks.

Each network is a stateless marker class. Create one with its new() factory, which returns a NetworkHandle.
"""
from bitcoin_network.chain_params import ChainParams, BITCOIN_PARAMS, TESTNET_PARAMS, SIGNET_PARAMS, REGTEST_PARAMS
from bitcoin_network.crypto import Sha256dHash
from bitcoin_network.genesis import BITCOIN_GENESIS, TESTNET_GENESIS, SIGNET_GENESIS, REGTEST_GENESIS
from bitcoin_network.networks.handle import MarkerNetwork
from bitcoin_network.registry import NetworkType

__all__ = ["Bitcoin", "BitcoinTestnet", "BitcoinSignet", "BitcoinRegtest"]

# BIP32 versions
XPUB = bytes.fromhex("0488b21e")
XPRV = bytes.fromhex("0488ade4")
TPUB = bytes.fromhex("043587cf")
TPRV = bytes.fromhex("04358394")


class Bitcoin(MarkerNetwork):
    """Bitcoin mainnet"""
    __slots__ = ()

    def hrp(self) -> str:
        return "bc"

    def p2pk_prefix(self) -> int:
        return 0

    def p2pkh_prefix(self) -> int:
        return 0

    def p2sh_prefix(self) -> int:
        return 5

    def xpub_prefix(self) -> bytes:
        return XPUB

    def xpriv_prefix(self) -> bytes:
        return XPRV

    def wif_prefix(self) -> int:
        return 128

    def magic(self) -> int:
        return 0xD9B4BEF9

    def name(self) -> str:
        return "bitcoin"

    def network_type(self) -> NetworkType:
        return NetworkType.MAINNET

    def chain_params(self) -> ChainParams:
        return BITCOIN_PARAMS

    def genesis_block(self) -> Sha256dHash:
        return BITCOIN_GENESIS


class BitcoinTestnet(MarkerNetwork):
    """Bitcoin testnet3"""
    __slots__ = ()

    def hrp(self) -> str:
        return "tb"

    def p2pk_prefix(self) -> int:
        return 111

    def p2pkh_prefix(self) -> int:
        return 111

    def p2sh_prefix(self) -> int:
        return 196

    def xpub_prefix(self) -> bytes:
        return TPUB

    def xpriv_prefix(self) -> bytes:
        return TPRV

    def wif_prefix(self) -> int:
        return 239

    def magic(self) -> int:
        return 0x0709110B

    def name(self) -> str:
        return "bitcoin-testnet"

    def network_type(self) -> NetworkType:
        return NetworkType.TESTNET

    def chain_params(self) -> ChainParams:
        return TESTNET_PARAMS

    def genesis_block(self) -> Sha256dHash:
        return TESTNET_GENESIS


class BitcoinSignet(MarkerNetwork):
    """
    The default Bitcoin signet. Addresses and keys are encoded as on testnet, so hrp "tb" resolves to testnet in
    lookups.
    """
    __slots__ = ()

    def hrp(self) -> str:
        return "tb"

    def p2pk_prefix(self) -> int:
        return 111

    def p2pkh_prefix(self) -> int:
        return 111

    def p2sh_prefix(self) -> int:
        return 196

    def xpub_prefix(self) -> bytes:
        return TPUB

    def xpriv_prefix(self) -> bytes:
        return TPRV

    def wif_prefix(self) -> int:
        return 239

    def magic(self) -> int:
        return 0x40CF030A

    def name(self) -> str:
        return "bitcoin-signet"

    def network_type(self) -> NetworkType:
        return NetworkType.SIGNET

    def chain_params(self) -> ChainParams:
        return SIGNET_PARAMS

    def genesis_block(self) -> Sha256dHash:
        return SIGNET_GENESIS


class BitcoinRegtest(MarkerNetwork):
    """Bitcoin regression test network"""
    __slots__ = ()

    def hrp(self) -> str:
        return "bcrt"

    def p2pk_prefix(self) -> int:
        return 111

    def p2pkh_prefix(self) -> int:
        return 111

    def p2sh_prefix(self) -> int:
        return 196

    def xpub_prefix(self) -> bytes:
        return TPUB

    def xpriv_prefix(self) -> bytes:
        return TPRV

    def wif_prefix(self) -> int:
        return 239

    def magic(self) -> int:
        return 0xDAB5BFFA

    def name(self) -> str:
        return "bitcoin-regtest"

    def network_type(self) -> NetworkType:
        return NetworkType.REGTEST

    def chain_params(self) -> ChainParams:
        return REGTEST_PARAMS

    def genesis_block(self) -> Sha256dHash:
        return REGTEST_GENESIS
