#!/usr/bin/env python3
"""Example CLI that derives a program derived address from seed literals.

    $ python examples/derive.py TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA \\
          u8[5,6] 'String[Hello, world!]' u8[10]
    A89GCYdsataUVrFDbrV416NEZnFZoa6X4CR5ZdSPJohC.255
"""

import argparse
import logging
import sys

from solpda import (
    PdaNotFoundError,
    SolpdaError,
    derive_pda,
    format_pda,
    resolve_address,
    to_base58,
    to_byte_array,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute a Solana program derived address")
    parser.add_argument(
        "--no-bump-seed",
        action="store_true",
        help="Hash the seeds once without appending a bump seed",
    )
    parser.add_argument(
        "--bytes",
        action="store_true",
        help="Print addresses as a byte array instead of base58",
    )
    parser.add_argument(
        "--pubkey",
        action="store_true",
        help="Only resolve and print the program id",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument(
        "program_id",
        help="Base58 address, 32-byte array, or key file contents of the program",
    )
    parser.add_argument("seeds", nargs="*", help="Seed literals, e.g. u8[1,2] or String[abc]")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        program_id = resolve_address(args.program_id)
    except SolpdaError as e:
        print(f"Invalid program id: {e}", file=sys.stderr)
        sys.exit(2)

    if args.pubkey:
        print(to_byte_array(program_id) if args.bytes else to_base58(program_id))
        return

    if not args.seeds:
        parser.error("at least one seed is required")

    try:
        result = derive_pda(program_id, args.seeds, no_bump_seed=args.no_bump_seed)
    except PdaNotFoundError:
        print("Cannot find PDA, consider allowing bump seed", file=sys.stderr)
        sys.exit(1)
    except SolpdaError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    print(format_pda(result, as_bytes=args.bytes))


if __name__ == "__main__":
    main()
