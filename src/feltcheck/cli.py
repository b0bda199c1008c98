"""
feltcheck command line interface.

Usage:
    feltcheck felt [--radix dec|hex] [--] HEX
    feltcheck hash-program EXECUTABLE  [--digest-size N]
    feltcheck outputs PROOF            [--reduce] [--radix dec|hex]
    feltcheck compare PROOF EXECUTABLE [--digest-size N]

Exit codes for compare: 0 match, 1 mismatch, 2 no claim.
Any feltcheck error exits with 3.
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .documents import claimed_outputs, claimed_program, executable_bytecode, read_document
from .errors import FeltCheckError
from .field import format_felt, hex_to_felt, pmv_to_felt
from .params import CheckParams, RADIXES
from .program_hash import HashMatch, compare_program_hashes, executable_program_hash

logger = logging.getLogger(__name__)

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_NO_CLAIM = 2
EXIT_ERROR = 3

_COMPARE_EXIT = {
    HashMatch.MATCH: EXIT_MATCH,
    HashMatch.MISMATCH: EXIT_MISMATCH,
    HashMatch.NO_CLAIM: EXIT_NO_CLAIM,
}


def cmd_felt(args: argparse.Namespace) -> int:
    print(format_felt(hex_to_felt(args.hex), args.radix))
    return 0


def cmd_hash_program(args: argparse.Namespace) -> int:
    params = CheckParams(digest_size=args.digest_size)
    bytecode = executable_bytecode(read_document(args.executable))
    logger.debug("Hashing %d bytecode words", len(bytecode))
    print(executable_program_hash(bytecode, params.digest_size))
    return 0


def cmd_outputs(args: argparse.Namespace) -> int:
    params = CheckParams(reduce_outputs=args.reduce, output_radix=args.radix)
    outputs = claimed_outputs(read_document(args.proof))
    if not outputs:
        print("No outputs claimed")
        return 0
    for i, pmv in enumerate(outputs):
        felt = pmv_to_felt(pmv, reduce=params.reduce_outputs)
        if not felt.is_valid:
            logger.warning("Output %d is not a canonical field element", i)
        print(f"[{i}]: {format_felt(felt.value, params.output_radix)}")
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    params = CheckParams(digest_size=args.digest_size)
    claimed = claimed_program(read_document(args.proof))
    bytecode = executable_bytecode(read_document(args.executable))
    result = compare_program_hashes(claimed, bytecode, params.digest_size)

    if result.status is HashMatch.NO_CLAIM:
        print("No program bytecode in claim")
    else:
        print(f"Claimed:    {result.claimed_hash}")
        print(f"Executable: {result.executable_hash}")
        print(f"Match:      {'yes' if result.matches else 'no'}")
    return _COMPARE_EXIT[result.status]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='feltcheck',
        description='Check that a proof claims the program you supplied',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    feltcheck compare proof.json fib.executable.json
    feltcheck outputs proof.json --radix hex
    feltcheck felt -- -0x1            # "--" before a signed operand
        """
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('felt', help='Parse a hex string into a field element')
    p.add_argument('hex', help='Hex value, optionally signed and 0x-prefixed')
    p.add_argument('--radix', choices=RADIXES, default='dec')
    p.set_defaults(func=cmd_felt)

    p = sub.add_parser('hash-program', help='Hash an executable\'s bytecode')
    p.add_argument('executable', type=Path)
    p.add_argument('--digest-size', type=int, default=32)
    p.set_defaults(func=cmd_hash_program)

    p = sub.add_parser('outputs', help='Show outputs claimed by a proof')
    p.add_argument('proof', type=Path)
    p.add_argument('--reduce', action='store_true', help='Reduce outputs mod p')
    p.add_argument('--radix', choices=RADIXES, default='dec')
    p.set_defaults(func=cmd_outputs)

    p = sub.add_parser('compare', help='Compare claimed and executable program hashes')
    p.add_argument('proof', type=Path)
    p.add_argument('executable', type=Path)
    p.add_argument('--digest-size', type=int, default=32)
    p.set_defaults(func=cmd_compare)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        return args.func(args)
    except (FeltCheckError, OSError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
