"""
Executable and proof documents.

Only the fields below are read; the rest of each document is left
unvalidated.

    executable: program.bytecode                       -> [hex word, ...]
    proof:      claim.public_data.public_memory.program -> [[id, words], ...]
                claim.public_data.public_memory.output  -> [[id, words], ...]
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import DocumentError
from .memory import PublicMemoryValue, parse_public_memory

Document = Dict[str, Any]

_PUBLIC_MEMORY_PATH = ('claim', 'public_data', 'public_memory')


def load_json(source: Union[str, bytes, Document]) -> Document:
    """Parse JSON text into a document; dicts pass through unchanged."""
    if isinstance(source, dict):
        return source
    try:
        document = json.loads(source)
    except (TypeError, ValueError) as e:
        raise DocumentError(f"Invalid JSON: {e}") from e
    if not isinstance(document, dict):
        raise DocumentError(
            f"Expected a JSON object, got {type(document).__name__}"
        )
    return document


def read_document(path: Union[str, Path]) -> Document:
    """Read and parse a JSON document from disk."""
    path = Path(path)
    with path.open('r', encoding='utf-8') as handle:
        return load_json(handle.read())


def _lookup(document: Document, keys) -> Any:
    node: Any = document
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _list_field(document: Document, keys) -> List[Any]:
    value = _lookup(load_json(document), keys)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DocumentError(
            f"Field {'.'.join(keys)} must be a list, got {type(value).__name__}"
        )
    return value


def executable_bytecode(document: Union[str, bytes, Document]) -> List[str]:
    """Hex bytecode words of an executable."""
    words = _list_field(document, ('program', 'bytecode'))
    for i, word in enumerate(words):
        if not isinstance(word, str):
            raise DocumentError(
                f"Bytecode word {i} must be a hex string, got {type(word).__name__}"
            )
    return words


def claimed_program(document: Union[str, bytes, Document]) -> List[PublicMemoryValue]:
    """Program bytecode claimed by a proof."""
    return parse_public_memory(_list_field(document, _PUBLIC_MEMORY_PATH + ('program',)))


def claimed_outputs(document: Union[str, bytes, Document]) -> List[PublicMemoryValue]:
    """Outputs claimed by a proof."""
    return parse_public_memory(_list_field(document, _PUBLIC_MEMORY_PATH + ('output',)))
