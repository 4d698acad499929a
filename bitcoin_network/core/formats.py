"""
The network constant formats
"""
from typing import Final

__all__ = ["NETWORK", "LOGGING"]


class NETWORK:
    """
    Sizes and defaults shared by both network registries
    """
    MAGIC_BYTES: Final[int] = 4
    MAGIC_BYTEORDER: Final[str] = "little"  # wire order of the message start
    VERSION_BYTES: Final[int] = 4  # xpub / xprv version prefix
    HASH_BYTES: Final[int] = 32
    POW_LIMIT_WORDS: Final[int] = 4
    WORD_BITS: Final[int] = 64
    MAX_WORD: Final[int] = 0xffffffffffffffff
    DEFAULT: Final[str] = "bitcoin"


class LOGGING:
    """
    Defaults for package loggers. Lookups only log at DEBUG, so library users see nothing unless they ask.
    """
    LEVEL: Final[str] = "WARNING"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
