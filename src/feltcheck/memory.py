"""
Public Memory Values

The proving engine emits each public memory cell as a JSON pair:

    [id, [w0, w1, w2, w3, w4, w5, w6, w7]]

id is a segment tag and plays no part in hashing. The eight u32 words are
the little-endian limbs of one field element.

Malformed cells fail immediately. A skipped cell would silently change
a program hash.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple, Union

from .errors import InvalidShapeError
from .field import WORDS_PER_FELT, words_to_bytes_le

_DECIMAL_WORD = re.compile(r'-?[0-9]+', re.ASCII)
_HEX_WORD = re.compile(r'0[xX][0-9a-fA-F]+', re.ASCII)


def _coerce_word(word: Any) -> int:
    """
    Accept ints and the strings some encoders emit for them.

    Strings are decimal (leading zeros allowed) or 0x-prefixed hex.
    """
    if isinstance(word, bool):
        raise InvalidShapeError("Memory word must be an integer, got bool")
    if isinstance(word, int):
        return word
    if isinstance(word, str):
        s = word.strip()
        if _DECIMAL_WORD.fullmatch(s):
            return int(s, 10)
        if _HEX_WORD.fullmatch(s):
            return int(s[2:], 16)
        raise InvalidShapeError(f"Memory word is not an integer: {word!r}")
    raise InvalidShapeError(
        f"Memory word must be an integer, got {type(word).__name__}"
    )


@dataclass(frozen=True)
class PublicMemoryValue:
    """One public memory cell: segment id plus eight u32 words."""
    id: int
    words: Tuple[int, ...]

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise InvalidShapeError(f"Memory value id must be an int: {self.id!r}")
        if isinstance(self.words, (str, bytes)) or not isinstance(self.words, (list, tuple)):
            raise InvalidShapeError("Memory value words must be a list of 8 u32 words")
        if len(self.words) != WORDS_PER_FELT:
            raise InvalidShapeError(
                f"Expected {WORDS_PER_FELT} u32 words, got {len(self.words)}"
            )
        object.__setattr__(self, 'words', tuple(_coerce_word(w) for w in self.words))

    @classmethod
    def from_json(cls, obj: Any) -> PublicMemoryValue:
        """Parse the [id, [w0..w7]] pair used in proof documents."""
        if isinstance(obj, cls):
            return obj
        if not isinstance(obj, (list, tuple)) or len(obj) != 2:
            raise InvalidShapeError(
                f"Expected [id, words] pair, got {type(obj).__name__}"
            )
        pmv_id, words = obj
        return cls(id=pmv_id, words=words)

    def to_json(self) -> List[Any]:
        return [self.id, list(self.words)]

    def to_bytes(self) -> bytes:
        """32-byte little-endian buffer of the words."""
        return words_to_bytes_le(self.words)


def pmv_to_bytes_le(pmv: Union[PublicMemoryValue, Sequence]) -> bytes:
    """Convert a memory value (or raw JSON pair) to its 32-byte buffer."""
    return PublicMemoryValue.from_json(pmv).to_bytes()


def parse_public_memory(items: Iterable[Any]) -> List[PublicMemoryValue]:
    """Parse a JSON list of memory cells, failing on the first bad one."""
    return [PublicMemoryValue.from_json(item) for item in items]
