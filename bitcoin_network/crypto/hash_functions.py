"""
Hash functions and the double-SHA256 digest used for block hashes
"""
import hashlib

from bitcoin_network.core import NETWORK

__all__ = ["sha256", "hash256", "Sha256dHash"]


# HASHLIB
def sha256(encoded_data: bytes) -> bytes:
    return hashlib.sha256(encoded_data).digest()


def hash256(encoded_data: bytes) -> bytes:
    return sha256(sha256(encoded_data))


class Sha256dHash:
    """
    A 32-byte double-SHA256 digest.

    The bytes are held in internal (little-endian) order, the order hash256 produces. Block explorers and node RPCs
    display block hashes byte-reversed, which is the order from_hex() accepts and hex() returns.
    """
    __slots__ = ("_digest",)

    def __init__(self, digest: bytes):
        if len(digest) != NETWORK.HASH_BYTES:
            raise ValueError(f"Sha256dHash needs {NETWORK.HASH_BYTES} bytes, got {len(digest)}")
        self._digest = bytes(digest)

    @classmethod
    def hash(cls, data: bytes) -> "Sha256dHash":
        return cls(hash256(data))

    @classmethod
    def from_hex(cls, display_hex: str) -> "Sha256dHash":
        """
        Decode a display-order hex string
        """
        return cls(bytes.fromhex(display_hex)[::-1])

    def to_bytes(self) -> bytes:
        return self._digest

    def hex(self) -> str:
        return self._digest[::-1].hex()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sha256dHash):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self):
        return hash(self._digest)

    def __str__(self):
        return self.hex()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.hex()!r})"
