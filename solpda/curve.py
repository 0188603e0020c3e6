"""Ed25519 curve membership test for 32-byte candidates."""

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.config import PUBKEY_BYTES
from solpda.errors import InvalidAddressError


def is_on_curve(data: bytes) -> bool:
    """Return True if ``data`` decompresses to a valid edwards25519 point.

    Any 32-byte pattern is accepted; malformed point encodings are simply
    off-curve. Decompression is done by curve25519-dalek via solders.
    """
    if len(data) != PUBKEY_BYTES:
        raise InvalidAddressError(
            data, f"curve point must be {PUBKEY_BYTES} bytes, got {len(data)}"
        )
    return Pubkey.from_bytes(bytes(data)).is_on_curve()
