"""
Consensus parameters attached to each network. Values mirror Bitcoin Core's chainparams.cpp.
"""
from dataclasses import dataclass
from typing import Tuple

from bitcoin_network.core import NETWORK

__all__ = ["ChainParams", "BITCOIN_PARAMS", "TESTNET_PARAMS", "SIGNET_PARAMS", "REGTEST_PARAMS"]

POW_TARGET_SPACING = 10 * 60  # 10 minutes
POW_TARGET_TIMESPAN = 14 * 24 * 60 * 60  # 2 weeks
BIP16_TIME = 1333238400  # Apr 1 2012


@dataclass(frozen=True)
class ChainParams:
    """
    Rule change thresholds and proof of work settings for a network.

    pow_limit holds the 256-bit maximum target as four 64-bit words, least significant word first.
    """
    bip16_time: int
    bip34_height: int
    bip65_height: int
    bip66_height: int
    rule_change_activation_threshold: int
    miner_confirmation_window: int
    pow_limit: Tuple[int, int, int, int]
    pow_target_spacing: int
    pow_target_timespan: int
    allow_min_difficulty_blocks: bool
    no_pow_retargeting: bool

    def __post_init__(self):
        # --- Validation --- #
        if len(self.pow_limit) != NETWORK.POW_LIMIT_WORDS:
            raise ValueError(f"pow_limit needs {NETWORK.POW_LIMIT_WORDS} words, got {len(self.pow_limit)}")
        if any(not 0 <= word <= NETWORK.MAX_WORD for word in self.pow_limit):
            raise ValueError("pow_limit words must fit in 64 bits")
        object.__setattr__(self, "pow_limit", tuple(self.pow_limit))

    @property
    def pow_limit_int(self) -> int:
        """The pow_limit words joined into a single integer"""
        return sum(word << (NETWORK.WORD_BITS * i) for i, word in enumerate(self.pow_limit))

    def to_dict(self) -> dict:
        return {
            "bip16_time": self.bip16_time,
            "bip34_height": self.bip34_height,
            "bip65_height": self.bip65_height,
            "bip66_height": self.bip66_height,
            "rule_change_activation_threshold": self.rule_change_activation_threshold,
            "miner_confirmation_window": self.miner_confirmation_window,
            "pow_limit": format(self.pow_limit_int, "064x"),
            "pow_target_spacing": self.pow_target_spacing,
            "pow_target_timespan": self.pow_target_timespan,
            "allow_min_difficulty_blocks": self.allow_min_difficulty_blocks,
            "no_pow_retargeting": self.no_pow_retargeting,
        }


BITCOIN_PARAMS = ChainParams(
    bip16_time=BIP16_TIME,
    bip34_height=227931,  # 000000000000024b89b42a942fe0d9fea3bb44ab7bd1b19115dd6a759c0808b8
    bip65_height=388381,  # 000000000000000004c2b624ed5d7756c508d90fd0da2c7c679febfa6c4735f0
    bip66_height=363725,  # 00000000000000000379eaa19dce8c9b722d46ae6a57c2f1a988119488b50931
    rule_change_activation_threshold=1916,  # 95%
    miner_confirmation_window=2016,
    pow_limit=(0xffffffffffffffff, 0xffffffffffffffff, 0xffffffffffffffff, 0x00000000ffffffff),
    pow_target_spacing=POW_TARGET_SPACING,
    pow_target_timespan=POW_TARGET_TIMESPAN,
    allow_min_difficulty_blocks=False,
    no_pow_retargeting=False,
)

TESTNET_PARAMS = ChainParams(
    bip16_time=BIP16_TIME,
    bip34_height=21111,  # 0000000023b3a96d3484e5abb3755c413e7d41500f8e2a5c3f0dd01299cd8ef8
    bip65_height=581885,  # 00000000007f6655f22f98e72ed80d8b06dc761d5da09df0fa1dc4be4f861eb6
    bip66_height=330776,  # 000000002104c8c45e99a8853285a3b592602a3ccde2b832481da85e9e4ba182
    rule_change_activation_threshold=1512,  # 75%
    miner_confirmation_window=2016,
    pow_limit=(0xffffffffffffffff, 0xffffffffffffffff, 0xffffffffffffffff, 0x00000000ffffffff),
    pow_target_spacing=POW_TARGET_SPACING,
    pow_target_timespan=POW_TARGET_TIMESPAN,
    allow_min_difficulty_blocks=True,
    no_pow_retargeting=False,
)

# All soft forks are active from the first block on signet
SIGNET_PARAMS = ChainParams(
    bip16_time=BIP16_TIME,
    bip34_height=1,
    bip65_height=1,
    bip66_height=1,
    rule_change_activation_threshold=1815,  # 90%
    miner_confirmation_window=2016,
    pow_limit=(0, 0, 0, 0x00000377ae000000),
    pow_target_spacing=POW_TARGET_SPACING,
    pow_target_timespan=POW_TARGET_TIMESPAN,
    allow_min_difficulty_blocks=False,
    no_pow_retargeting=False,
)

REGTEST_PARAMS = ChainParams(
    bip16_time=BIP16_TIME,
    bip34_height=100000000,  # not activated on regtest
    bip65_height=1351,
    bip66_height=1251,  # used only in rpc tests
    rule_change_activation_threshold=108,  # 75%
    miner_confirmation_window=144,
    pow_limit=(0xffffffffffffffff, 0xffffffffffffffff, 0xffffffffffffffff, 0x7fffffffffffffff),
    pow_target_spacing=POW_TARGET_SPACING,
    pow_target_timespan=POW_TARGET_TIMESPAN,
    allow_min_difficulty_blocks=True,
    no_pow_retargeting=True,
)
