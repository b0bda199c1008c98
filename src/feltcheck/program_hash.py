"""
Program Hash Comparison

Confirms that the bytecode a proof claims to have executed is the
bytecode of the executable the user supplied.

    claimed:    PMV      -> 32-byte LE buffer                -> BLAKE2s
    executable: hex word -> felt -> 32-byte LE buffer         -> BLAKE2s

Both sides hash the same buffer representation, so equal programs give
equal digests.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from .digest import Blake2sAccumulator, DEFAULT_DIGEST_SIZE
from .field import felt_to_bytes, hex_to_felt
from .memory import pmv_to_bytes_le


class HashMatch(Enum):
    """Outcome of a program hash comparison."""
    NO_CLAIM = 'no_claim'
    MATCH = 'match'
    MISMATCH = 'mismatch'


@dataclass(frozen=True)
class ProgramHashComparison:
    """
    Both digests plus the comparison status.

    Digests are None when the proof carries no program claim.
    """
    status: HashMatch
    claimed_hash: Optional[str] = None
    executable_hash: Optional[str] = None

    @property
    def matches(self) -> bool:
        return self.status is HashMatch.MATCH


def claimed_program_hash(
    claimed: Iterable,
    digest_size: int = DEFAULT_DIGEST_SIZE
) -> str:
    """Digest of the program bytecode claimed in a proof."""
    acc = Blake2sAccumulator(digest_size)
    for pmv in claimed:
        acc.update(pmv_to_bytes_le(pmv))
    return acc.finalize()


def executable_program_hash(
    bytecode: Iterable[str],
    digest_size: int = DEFAULT_DIGEST_SIZE
) -> str:
    """Digest of an executable's hex bytecode words."""
    acc = Blake2sAccumulator(digest_size)
    for word in bytecode:
        acc.update(felt_to_bytes(hex_to_felt(word)))
    return acc.finalize()


def compare_program_hashes(
    claimed: Sequence,
    bytecode: Sequence[str],
    digest_size: int = DEFAULT_DIGEST_SIZE
) -> ProgramHashComparison:
    """
    Compare a proof's claimed bytecode with an executable's bytecode.

    Args:
        claimed: PublicMemoryValues (or raw [id, words] pairs) from the proof
        bytecode: Hex words from the executable
        digest_size: BLAKE2s output size in bytes

    Returns:
        ProgramHashComparison; NO_CLAIM when claimed is empty

    Raises:
        InvalidShapeError: On a malformed memory value
        InvalidFormatError: On an unparseable hex word
    """
    if len(claimed) == 0:
        return ProgramHashComparison(status=HashMatch.NO_CLAIM)

    claimed_hash = claimed_program_hash(claimed, digest_size)
    executable_hash = executable_program_hash(bytecode, digest_size)
    status = HashMatch.MATCH if claimed_hash == executable_hash else HashMatch.MISMATCH
    return ProgramHashComparison(
        status=status,
        claimed_hash=claimed_hash,
        executable_hash=executable_hash,
    )
