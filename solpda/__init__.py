from solpda.address import (
    format_pda,
    from_base58,
    from_byte_array,
    from_keypair_array,
    resolve_address,
    to_base58,
    to_byte_array,
)
from solpda.config import (
    KEYPAIR_BYTES,
    MAX_BUMP_SEED,
    PDA_MARKER,
    PROGRAM_IDS,
    PUBKEY_BYTES,
)
from solpda.curve import is_on_curve
from solpda.errors import (
    InvalidAddressError,
    MalformedSeedError,
    PdaNotFoundError,
    SolpdaError,
)
from solpda.pda import (
    PdaResult,
    derive_pda,
    find_pda,
    hash_candidate,
    try_find_pda,
)
from solpda.seeds import (
    IntSeed,
    PubkeySeed,
    Seed,
    Sha256Seed,
    StringSeed,
    encode_seed,
    encode_seeds,
    make_seed,
    parse_seed,
)

__all__ = [
    "KEYPAIR_BYTES",
    "MAX_BUMP_SEED",
    "PDA_MARKER",
    "PROGRAM_IDS",
    "PUBKEY_BYTES",
    "InvalidAddressError",
    "MalformedSeedError",
    "PdaNotFoundError",
    "SolpdaError",
    "IntSeed",
    "PubkeySeed",
    "Seed",
    "Sha256Seed",
    "StringSeed",
    "PdaResult",
    "derive_pda",
    "encode_seed",
    "encode_seeds",
    "find_pda",
    "format_pda",
    "from_base58",
    "from_byte_array",
    "from_keypair_array",
    "hash_candidate",
    "is_on_curve",
    "make_seed",
    "parse_seed",
    "resolve_address",
    "to_base58",
    "to_byte_array",
    "try_find_pda",
]
