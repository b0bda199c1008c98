"""
Exception hierarchy for feltcheck.

Codec errors are local input errors. They are raised immediately and
never retried, logged or replaced by a default value.
"""


class FeltCheckError(Exception):
    """Base exception for all feltcheck errors."""
    pass


class CodecError(FeltCheckError, ValueError):
    """Malformed input to the field codec or memory adapter."""
    pass


class InvalidShapeError(CodecError):
    """A words array does not hold exactly 8 entries."""
    pass


class InvalidLengthError(CodecError):
    """A byte buffer is not exactly 32 bytes long."""
    pass


class InvalidFormatError(CodecError):
    """A hex string cannot be parsed."""
    pass


class InvalidDomainError(CodecError):
    """A value is outside the domain of the operation (e.g. negative)."""
    pass


class DocumentError(FeltCheckError, ValueError):
    """
    Raised when an executable or proof document cannot be read.

    This indicates:
    - Invalid JSON text
    - A top level that is not a JSON object
    - A bytecode or memory field of the wrong type
    """
    pass


class ArgumentError(FeltCheckError, ValueError):
    """Raised when program arguments are not comma-separated integers."""
    pass


class EngineError(FeltCheckError):
    """
    Raised when the proving engine fails to execute, prove or verify.

    The original engine exception is available as ``__cause__``.
    """
    pass
