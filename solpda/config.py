"""Protocol constants and well-known program ids for PDA derivation."""

PDA_MARKER = b"ProgramDerivedAddress"

PUBKEY_BYTES = 32
KEYPAIR_BYTES = 64
MAX_BUMP_SEED = 255

PROGRAM_IDS = {
    "system": "11111111111111111111111111111111",
    "spl-token": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
    "spl-associated-token": "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL",
}
