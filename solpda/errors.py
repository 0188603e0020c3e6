"""Error types raised while parsing seeds, decoding addresses and searching for PDAs."""

from __future__ import annotations

from typing import Any


class SolpdaError(Exception):
    """Base class for all solpda errors."""


class MalformedSeedError(SolpdaError, ValueError):
    """A seed literal could not be parsed or encoded."""

    def __init__(self, literal: str, reason: str) -> None:
        super().__init__(f"invalid seed {literal!r}: {reason}")
        self.literal = literal
        self.reason = reason


class InvalidAddressError(SolpdaError, ValueError):
    """Text (or raw bytes) did not decode to a 32-byte address."""

    def __init__(self, text: Any, reason: str) -> None:
        super().__init__(f"invalid address {text!r}: {reason}")
        self.text = text
        self.reason = reason


class PdaNotFoundError(SolpdaError, LookupError):
    """No off-curve candidate was found for the given program and seeds.

    Raised both when the single no-bump attempt lands on the curve and when
    all 256 bump seeds are exhausted.
    """

    def __init__(self, program_id: Any, no_bump_seed: bool) -> None:
        if no_bump_seed:
            msg = f"pda not found for program {program_id} without bump seed"
        else:
            msg = f"pda not found for program {program_id}: all bump seeds exhausted"
        super().__init__(msg)
        self.program_id = program_id
        self.no_bump_seed = no_bump_seed
