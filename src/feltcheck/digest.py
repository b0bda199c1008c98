"""
BLAKE2s Digest Accumulator

Keyless streaming hash over an ordered sequence of byte buffers. The
sequence is one logical message: feeding a then b gives the same digest
as feeding a + b, and reordering buffers changes it.

Digests are rendered as "0x" + lowercase hex.
"""

from __future__ import annotations
import hashlib
from typing import Iterable

DEFAULT_DIGEST_SIZE = 32


class Blake2sAccumulator:
    """
    Streaming BLAKE2s hasher.

    Finalization is terminal: later updates or a second finalize raise.

    Example:
        >>> acc = Blake2sAccumulator()
        >>> acc.update(b"\\x01" * 32).update(b"\\x02" * 32)
        >>> digest = acc.finalize()
    """

    def __init__(self, digest_size: int = DEFAULT_DIGEST_SIZE):
        self._hasher = hashlib.blake2s(digest_size=digest_size)
        self._digest_size = digest_size
        self._finalized = False

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def update(self, buffer: bytes) -> 'Blake2sAccumulator':
        """Absorb one buffer."""
        if self._finalized:
            raise RuntimeError("Cannot update finalized accumulator")
        self._hasher.update(buffer)
        return self

    def finalize(self) -> str:
        """Return the 0x-prefixed hex digest."""
        if self._finalized:
            raise RuntimeError("Already finalized")
        self._finalized = True
        digest = '0x' + self._hasher.hexdigest()
        self._hasher = None
        return digest


def blake2s_hex(
    buffers: Iterable[bytes],
    digest_size: int = DEFAULT_DIGEST_SIZE
) -> str:
    """Digest an ordered sequence of buffers in one call."""
    acc = Blake2sAccumulator(digest_size)
    for buffer in buffers:
        acc.update(buffer)
    return acc.finalize()
