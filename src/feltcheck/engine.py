"""
Proving Engine Session

The proving engine is an external capability with three operations:

    execute(executable, *args) -> prover input
    prove(prover input)        -> proof (JSON text)
    verify(proof, pedersen)    -> verdict

ProofSession drives one executable through execute -> prove -> verify,
times each step and exposes the claimed outputs and the program hash
check for the resulting proof.
"""

from __future__ import annotations
import logging
import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .documents import Document, claimed_outputs, claimed_program, executable_bytecode, load_json
from .errors import ArgumentError, EngineError
from .field import format_felt, pmv_to_felt
from .params import CheckParams
from .program_hash import ProgramHashComparison, compare_program_hashes

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r'-?[0-9]+', re.ASCII)


def parse_arguments(text: str) -> List[int]:
    """
    Parse comma-separated program arguments.

    Blank input means no arguments.

    Raises:
        ArgumentError: On an empty item or an item that is not an integer
    """
    if not text.strip():
        return []

    args = []
    for item in text.split(','):
        item = item.strip()
        if not item:
            raise ArgumentError("Empty argument found")
        if not _INTEGER.fullmatch(item):
            raise ArgumentError(f'Invalid argument: "{item}" is not a valid integer')
        args.append(int(item))
    return args


# =============================================================================
# ENGINE INTERFACE
# =============================================================================

class ProvingEngine(ABC):
    """Opaque execute/prove/verify backend."""

    @abstractmethod
    def execute(self, executable: str, *args: int) -> str:
        """Run the executable and return the serialized prover input."""
        pass

    @abstractmethod
    def prove(self, prover_input: str) -> str:
        """Generate a proof (JSON text) from a prover input."""
        pass

    @abstractmethod
    def verify(self, proof: str, with_pedersen: bool) -> bool:
        """Check a proof."""
        pass

    def contains_pedersen_builtin(self, prover_input: str) -> bool:
        """Whether the execution used the Pedersen builtin."""
        return False


@dataclass
class ExecutionResult:
    prover_input: str
    execution_ms: float
    with_pedersen: bool = False


@dataclass
class ProofResult:
    proof: str
    proving_ms: float


@dataclass
class VerificationResult:
    verdict: bool
    verification_ms: float


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


# =============================================================================
# SESSION
# =============================================================================

class ProofSession:
    """
    One executable moving through execute -> prove -> verify.

    Each step requires the previous one. Loading a new executable clears
    all results.
    """

    def __init__(
        self,
        engine: ProvingEngine,
        executable: str,
        params: Optional[CheckParams] = None
    ):
        self.engine = engine
        self.params = params or CheckParams()
        self.load(executable)

    def load(self, executable: str) -> None:
        """Select an executable and reset results."""
        load_json(executable)
        self.executable = executable
        self.execution: Optional[ExecutionResult] = None
        self.proof: Optional[ProofResult] = None
        self.verification: Optional[VerificationResult] = None

    def execute(self, args: Optional[List[int]] = None) -> ExecutionResult:
        args = list(args or [])
        start = time.perf_counter()
        try:
            prover_input = self.engine.execute(self.executable, *args)
        except Exception as e:
            logger.error("Execution failed: %s", e)
            raise EngineError(f"Execution failed: {e}") from e
        elapsed = _elapsed_ms(start)
        pedersen = self.engine.contains_pedersen_builtin(prover_input)

        self.execution = ExecutionResult(prover_input, elapsed, pedersen)
        self.proof = None
        self.verification = None
        logger.info(
            "Program executed in %.0fms%s",
            elapsed, " (Pedersen builtin)" if pedersen else ""
        )
        return self.execution

    def prove(self) -> ProofResult:
        if self.execution is None:
            raise RuntimeError("Cannot prove before executing")
        start = time.perf_counter()
        try:
            proof = self.engine.prove(self.execution.prover_input)
        except Exception as e:
            logger.error("Proof generation failed: %s", e)
            raise EngineError(f"Proof generation failed: {e}") from e
        elapsed = _elapsed_ms(start)

        self.proof = ProofResult(proof, elapsed)
        self.verification = None
        logger.info("Proof generated in %.0fms", elapsed)
        return self.proof

    def verify(self) -> VerificationResult:
        if self.proof is None:
            raise RuntimeError("Cannot verify before proving")
        start = time.perf_counter()
        try:
            verdict = self.engine.verify(self.proof.proof, self.execution.with_pedersen)
        except Exception as e:
            logger.error("Verification failed: %s", e)
            raise EngineError(f"Verification failed: {e}") from e
        elapsed = _elapsed_ms(start)

        self.verification = VerificationResult(bool(verdict), elapsed)
        if verdict:
            logger.info("Proof verified in %.0fms", elapsed)
        else:
            logger.warning("Proof rejected in %.0fms", elapsed)
        return self.verification

    def _proof_document(self) -> Document:
        if self.proof is None:
            raise RuntimeError("No proof available")
        return load_json(self.proof.proof)

    def claimed_outputs(self) -> List[str]:
        """Claimed outputs rendered per params."""
        rendered = []
        for pmv in claimed_outputs(self._proof_document()):
            felt = pmv_to_felt(pmv, reduce=self.params.reduce_outputs)
            rendered.append(format_felt(felt.value, self.params.output_radix))
        return rendered

    def program_hash(self) -> ProgramHashComparison:
        """Compare the proof's claimed bytecode with the loaded executable."""
        comparison = compare_program_hashes(
            claimed_program(self._proof_document()),
            executable_bytecode(self.executable),
            self.params.digest_size,
        )
        logger.debug("Program hash check: %s", comparison.status.value)
        return comparison
