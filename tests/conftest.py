"""
Fixtures used in the tests
"""
import pytest

from bitcoin_network import ChainParams, MarkerNetwork, NetworkType, Sha256dHash, KNOWN_NETWORKS

__all__ = ["Litecoin"]


class Litecoin(MarkerNetwork):
    """
    A network defined outside the package, the way downstream code extends the open registry
    """
    __slots__ = ()

    def hrp(self) -> str:
        return "ltc"

    def p2pk_prefix(self) -> int:
        return 48

    def p2pkh_prefix(self) -> int:
        return 48

    def p2sh_prefix(self) -> int:
        return 50

    def xpub_prefix(self) -> bytes:
        return bytes.fromhex("019da462")

    def xpriv_prefix(self) -> bytes:
        return bytes.fromhex("019d9cfe")

    def wif_prefix(self) -> int:
        return 176

    def magic(self) -> int:
        return 0xDBB6C0FB

    def name(self) -> str:
        return "litecoin"

    def network_type(self) -> NetworkType:
        return NetworkType.MAINNET

    def chain_params(self) -> ChainParams:
        return ChainParams(
            bip16_time=1333238400,
            bip34_height=710000,
            bip65_height=918684,
            bip66_height=811879,
            rule_change_activation_threshold=6048,
            miner_confirmation_window=8064,
            pow_limit=(0xffffffffffffffff, 0xffffffffffffffff, 0xffffffffffffffff, 0x00000fffffffffff),
            pow_target_spacing=150,
            pow_target_timespan=int(3.5 * 24 * 60 * 60),
            allow_min_difficulty_blocks=False,
            no_pow_retargeting=False,
        )

    def genesis_block(self) -> Sha256dHash:
        return Sha256dHash.from_hex("12a765e31ffd4059bada1e25190f6e98c99d9714d334efa41a195a7e7e04bfe2")


@pytest.fixture()
def litecoin():
    return Litecoin.new()


@pytest.fixture()
def extended_networks():
    """The built-in networks followed by the downstream one"""
    return KNOWN_NETWORKS + (Litecoin,)
