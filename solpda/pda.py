"""Program derived address hashing and bump seed search."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.config import MAX_BUMP_SEED, PDA_MARKER
from solpda.curve import is_on_curve
from solpda.errors import PdaNotFoundError
from solpda.seeds import Seed, encode_seeds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PdaResult:
    address: Pubkey
    bump: Optional[int]


def hash_candidate(
    seed_bytes: bytes, bump: Optional[int], program_id: Pubkey
) -> bytes:
    """SHA-256 of ``seeds || [bump] || program_id || "ProgramDerivedAddress"``.

    With ``bump=None`` no bump byte is hashed at all.
    """
    h = hashlib.sha256()
    h.update(seed_bytes)
    if bump is not None:
        if not 0 <= bump <= MAX_BUMP_SEED:
            raise ValueError(f"bump seed out of range: {bump}")
        h.update(bytes([bump]))
    h.update(bytes(program_id))
    h.update(PDA_MARKER)
    return h.digest()


def try_find_pda(
    program_id: Pubkey, seed_bytes: bytes, bump: Optional[int]
) -> Optional[Pubkey]:
    """Return the candidate address, or None if it lies on the curve."""
    digest = hash_candidate(seed_bytes, bump, program_id)
    if is_on_curve(digest):
        return None
    return Pubkey.from_bytes(digest)


def find_pda(
    program_id: Pubkey, seed_bytes: bytes, no_bump_seed: bool = False
) -> PdaResult:
    """Find the PDA for already-encoded seeds.

    Bump seeds are tried from 255 down to 0 and the first off-curve hash
    wins, matching Solana's ``find_program_address``. With
    ``no_bump_seed`` a single attempt is made without a bump byte.
    Raises PdaNotFoundError when no candidate is off-curve.
    """
    if no_bump_seed:
        address = try_find_pda(program_id, seed_bytes, None)
        if address is None:
            logger.debug("no-bump candidate for %s is on curve", program_id)
            raise PdaNotFoundError(program_id, no_bump_seed=True)
        return PdaResult(address, None)

    for bump in range(MAX_BUMP_SEED, -1, -1):
        address = try_find_pda(program_id, seed_bytes, bump)
        if address is not None:
            logger.debug("found pda %s for %s with bump %d", address, program_id, bump)
            return PdaResult(address, bump)
    raise PdaNotFoundError(program_id, no_bump_seed=False)


def derive_pda(
    program_id: Pubkey,
    seeds: Iterable[Union[str, Seed]],
    no_bump_seed: bool = False,
) -> PdaResult:
    """Encode seed literals and find the resulting PDA."""
    return find_pda(program_id, encode_seeds(seeds), no_bump_seed)
