"""
feltcheck: Program Hash Checks for Stark Proofs

Confirms that the program bytecode claimed inside a proof is the bytecode
of the executable you supplied:

    claimed PMVs -> 32-byte LE buffers          -> BLAKE2s
    hex bytecode -> felts -> 32-byte LE buffers -> BLAKE2s

Equal digests mean the proof is about the supplied program.

Usage:
    from feltcheck import compare_program_hashes, claimed_program, executable_bytecode

    result = compare_program_hashes(
        claimed_program(proof_json),
        executable_bytecode(executable_json),
    )
    if result.matches:
        print(result.claimed_hash)

    # Field codec
    from feltcheck import hex_to_felt, felt_to_bytes, pmv_to_felt
    felt_to_bytes(hex_to_felt("-0x1"))
"""

# Errors
from .errors import (
    FeltCheckError,
    CodecError,
    InvalidShapeError,
    InvalidLengthError,
    InvalidFormatError,
    InvalidDomainError,
    DocumentError,
    ArgumentError,
    EngineError,
)

# Field codec
from .field import (
    FELT_PRIME,
    FeltConversion,
    words_to_bytes_le,
    bytes_le_to_int,
    felt_to_bytes,
    pmv_to_felt,
    hex_to_felt,
    is_canonical,
    format_felt,
)

# Memory values
from .memory import PublicMemoryValue, pmv_to_bytes_le, parse_public_memory

# Digest
from .digest import Blake2sAccumulator, blake2s_hex

# Comparison
from .program_hash import (
    HashMatch,
    ProgramHashComparison,
    claimed_program_hash,
    executable_program_hash,
    compare_program_hashes,
)

# Documents
from .documents import (
    load_json,
    read_document,
    executable_bytecode,
    claimed_program,
    claimed_outputs,
)

# Params and engine session
from .params import CheckParams
from .engine import (
    ProvingEngine,
    ProofSession,
    ExecutionResult,
    ProofResult,
    VerificationResult,
    parse_arguments,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "FeltCheckError",
    "CodecError",
    "InvalidShapeError",
    "InvalidLengthError",
    "InvalidFormatError",
    "InvalidDomainError",
    "DocumentError",
    "ArgumentError",
    "EngineError",
    # Field codec
    "FELT_PRIME",
    "FeltConversion",
    "words_to_bytes_le",
    "bytes_le_to_int",
    "felt_to_bytes",
    "pmv_to_felt",
    "hex_to_felt",
    "is_canonical",
    "format_felt",
    # Memory values
    "PublicMemoryValue",
    "pmv_to_bytes_le",
    "parse_public_memory",
    # Digest
    "Blake2sAccumulator",
    "blake2s_hex",
    # Comparison
    "HashMatch",
    "ProgramHashComparison",
    "claimed_program_hash",
    "executable_program_hash",
    "compare_program_hashes",
    # Documents
    "load_json",
    "read_document",
    "executable_bytecode",
    "claimed_program",
    "claimed_outputs",
    # Params and engine session
    "CheckParams",
    "ProvingEngine",
    "ProofSession",
    "ExecutionResult",
    "ProofResult",
    "VerificationResult",
    "parse_arguments",
]
