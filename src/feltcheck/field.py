"""
Stark Field Codec

Field: F_p where p = 2^251 + 17 * 2^192 + 1

Conversions between:
- eight 32-bit words (the engine's native memory cell payload)
- 32-byte little-endian buffers
- unsigned 256-bit magnitudes
- canonical field elements in [0, p)

Two policies are kept apart:
- Masking: silent truncation (words to 32 bits, values to 256 bits)
- Rejection: hard failure on wrong shape, length, format or domain
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING

from .errors import (
    InvalidShapeError,
    InvalidLengthError,
    InvalidFormatError,
    InvalidDomainError,
)

if TYPE_CHECKING:
    from .memory import PublicMemoryValue


# Stark prime: p = 2^251 + 17 * 2^192 + 1
FELT_PRIME = (1 << 251) + 17 * (1 << 192) + 1

FELT_BYTES = 32
WORDS_PER_FELT = 8

_U32_MASK = 0xFFFFFFFF
_U256_MASK = (1 << 256) - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


# =============================================================================
# Buffer Conversions
# =============================================================================

def words_to_bytes_le(words: Sequence[int]) -> bytes:
    """
    Pack eight 32-bit words into a 32-byte little-endian buffer.

    Word i occupies bytes [4i, 4i+4). Each word is masked to 32 bits first;
    higher bits are dropped, not rejected.

    Raises:
        InvalidShapeError: If words does not contain exactly 8 entries
    """
    if isinstance(words, (str, bytes)) or not hasattr(words, '__len__'):
        raise InvalidShapeError("Expected a sequence of 8 u32 words")
    if len(words) != WORDS_PER_FELT:
        raise InvalidShapeError(
            f"Expected {WORDS_PER_FELT} u32 words, got {len(words)}"
        )

    out = bytearray(FELT_BYTES)
    for i, word in enumerate(words):
        if isinstance(word, bool) or not isinstance(word, int):
            raise InvalidShapeError(
                f"Word {i} must be an int, got {type(word).__name__}"
            )
        out[4 * i:4 * i + 4] = (word & _U32_MASK).to_bytes(4, 'little')
    return bytes(out)


def bytes_le_to_int(buffer: bytes) -> int:
    """
    Interpret a 32-byte buffer as a little-endian unsigned integer.

    Raises:
        InvalidLengthError: If buffer is not exactly 32 bytes
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise InvalidLengthError(
            f"Expected {FELT_BYTES} bytes, got {type(buffer).__name__}"
        )
    if len(buffer) != FELT_BYTES:
        raise InvalidLengthError(
            f"Expected {FELT_BYTES} bytes, got {len(buffer)}"
        )
    return int.from_bytes(buffer, 'little')


def felt_to_bytes(value: int) -> bytes:
    """
    Serialize a non-negative integer to 32 bytes (little-endian).

    Only the low 256 bits are kept.

    Raises:
        InvalidDomainError: If value is negative or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDomainError(
            f"Field element must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidDomainError("Field element must be non-negative")
    return (value & _U256_MASK).to_bytes(FELT_BYTES, 'little')


# =============================================================================
# Field Element Construction
# =============================================================================

@dataclass(frozen=True)
class FeltConversion:
    """
    Result of converting a memory cell to a field element.

    is_valid reports whether the raw value was already in [0, p). It is
    computed before any reduction, so a reduced value still carries
    is_valid=False when its source was out of range.
    """
    value: int
    is_valid: bool


def is_canonical(value: int) -> bool:
    """True if value lies in [0, p)."""
    return 0 <= value < FELT_PRIME


def pmv_to_felt(
    pmv: Union['PublicMemoryValue', Sequence],
    reduce: bool = False
) -> FeltConversion:
    """
    Convert a public memory value to a field element.

    Args:
        pmv: PublicMemoryValue or raw [id, words] pair
        reduce: Reduce mod p when the raw value is out of range

    Returns:
        FeltConversion with the (possibly reduced) value and the
        pre-reduction validity flag
    """
    from .memory import pmv_to_bytes_le

    value = bytes_le_to_int(pmv_to_bytes_le(pmv))
    valid = is_canonical(value)
    if reduce and not valid:
        value %= FELT_PRIME
    return FeltConversion(value=value, is_valid=valid)


def hex_to_felt(text: str) -> int:
    """
    Parse a hex string and reduce it into [0, p).

    Accepted form: optional surrounding whitespace, optional sign, optional
    0x/0X prefix, hex digits. Negative values map to their canonical
    positive representative.

    "" and whitespace yield 0; a sign with nothing after it is an error.

    Raises:
        InvalidFormatError: On a non-string, a lone sign or non-hex digits
    """
    if not isinstance(text, str):
        raise InvalidFormatError(
            f"Hex value must be a string, got {type(text).__name__}"
        )
    s = text.strip()
    if not s:
        return 0

    negative = False
    if s[0] in '+-':
        negative = s[0] == '-'
        s = s[1:].strip()
        if not s:
            raise InvalidFormatError(f"Invalid hex string after sign: {text!r}")

    if s[:2] in ('0x', '0X'):
        s = s[2:]
    if not s:
        return 0
    if not _HEX_DIGITS.issuperset(s):
        raise InvalidFormatError(f"Invalid hex digits: {text!r}")
    if len(s) % 2 == 1:
        s = '0' + s

    magnitude = int(s, 16)
    # Python's % already returns the non-negative representative
    return (-magnitude if negative else magnitude) % FELT_PRIME


# =============================================================================
# Display
# =============================================================================

def format_felt(value: int, radix: str = 'dec') -> str:
    """Render a field element as decimal or 0x-prefixed lowercase hex."""
    if radix == 'dec':
        return str(value)
    if radix == 'hex':
        return hex(value)
    raise ValueError(f"Unknown radix: {radix!r} (expected 'dec' or 'hex')")
