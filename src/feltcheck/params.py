"""
Check Parameters

CheckParams holds the knobs for hashing and output display. Instances are
immutable and hashable.
"""

from dataclasses import dataclass

from .digest import DEFAULT_DIGEST_SIZE

RADIXES = ('dec', 'hex')


@dataclass(frozen=True)
class CheckParams:
    """Settings shared by the session and the CLI."""

    digest_size: int = DEFAULT_DIGEST_SIZE
    """BLAKE2s output size in bytes (1..32)."""

    reduce_outputs: bool = False
    """Reduce out-of-range claimed outputs mod p before display."""

    output_radix: str = 'dec'
    """Display radix for field elements: 'dec' or 'hex'."""

    def __post_init__(self):
        if not 1 <= self.digest_size <= 32:
            raise ValueError(f"digest_size must be in 1..32, got {self.digest_size}")
        if self.output_radix not in RADIXES:
            raise ValueError(
                f"output_radix must be one of {RADIXES}, got {self.output_radix!r}"
            )
