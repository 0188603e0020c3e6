"""Text forms of 32-byte addresses: base58, byte arrays and keypair arrays."""

from __future__ import annotations

from typing import TYPE_CHECKING

import base58  # type: ignore[import-untyped]
from solders.keypair import Keypair  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.config import KEYPAIR_BYTES, PUBKEY_BYTES
from solpda.errors import InvalidAddressError

_B58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))

if TYPE_CHECKING:
    from solpda.pda import PdaResult


def parse_uint_list(payload: str, bits: int) -> list[int]:
    """Parse a comma-separated list of unsigned decimals that fit in ``bits``.

    Spaces are ignored. Raises ValueError on an empty token, a non-digit
    character or a value out of range.
    """
    limit = 1 << bits
    values = []
    for token in payload.replace(" ", "").split(","):
        if not token or not (token.isascii() and token.isdigit()):
            raise ValueError(f"not an unsigned integer: {token!r}")
        v = int(token)
        if v >= limit:
            raise ValueError(f"value {v} out of range for u{bits}")
        values.append(v)
    return values


def _parse_byte_array(text: str) -> bytes:
    body = text.strip()
    if not (body.startswith("[") and body.endswith("]")):
        raise InvalidAddressError(text, "expected a bracketed byte array")
    try:
        return bytes(parse_uint_list(body[1:-1], 8))
    except ValueError as e:
        raise InvalidAddressError(text, str(e)) from e


def from_base58(text: str) -> Pubkey:
    bad = [c for c in text if c not in _B58_CHARS]
    if bad:
        raise InvalidAddressError(text, f"invalid base58 character {bad[0]!r}")
    try:
        raw = base58.b58decode(text)
    except ValueError as e:
        raise InvalidAddressError(text, str(e)) from e
    if len(raw) != PUBKEY_BYTES:
        raise InvalidAddressError(
            text, f"decoded to {len(raw)} bytes, want {PUBKEY_BYTES}"
        )
    return Pubkey.from_bytes(raw)


def to_base58(address: Pubkey) -> str:
    return base58.b58encode(bytes(address)).decode("ascii")


def from_byte_array(text: str) -> Pubkey:
    """Parse ``[b0,b1,...,b31]`` into an address."""
    raw = _parse_byte_array(text)
    if len(raw) != PUBKEY_BYTES:
        raise InvalidAddressError(
            text, f"incorrect number of bytes in public key: {len(raw)}"
        )
    return Pubkey.from_bytes(raw)


def from_keypair_array(text: str) -> Pubkey:
    """Return the public half of a key file's ``[secret..., public...]`` array."""
    raw = _parse_byte_array(text)
    if len(raw) != KEYPAIR_BYTES:
        raise InvalidAddressError(
            text, f"keypair has {len(raw)} bytes, want {KEYPAIR_BYTES}"
        )
    try:
        keypair = Keypair.from_bytes(raw)
    except ValueError as e:
        raise InvalidAddressError(text, str(e)) from e
    return keypair.pubkey()


def to_byte_array(address: Pubkey) -> str:
    return "[" + ",".join(str(b) for b in bytes(address)) + "]"


def resolve_address(text: str) -> Pubkey:
    """Resolve a program id given as keypair contents, base58 or a byte array."""
    reasons = []
    for decode in (from_keypair_array, from_base58, from_byte_array):
        try:
            return decode(text)
        except InvalidAddressError as e:
            reasons.append(e.reason)
            last = e
    raise InvalidAddressError(
        text,
        "not a keypair array, base58 address or 32-byte array ("
        + "; ".join(reasons)
        + ")",
    ) from last


def format_pda(result: PdaResult, as_bytes: bool = False) -> str:
    """Render a PDA result as ``ADDRESS`` or ``ADDRESS.BUMP``."""
    if as_bytes:
        text = to_byte_array(result.address)
    else:
        text = to_base58(result.address)
    if result.bump is not None:
        text = f"{text}.{result.bump}"
    return text
