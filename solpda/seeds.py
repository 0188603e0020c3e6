"""Seed literal parsing and encoding.

A seed literal is written ``TAG[payload]``:

    u8[1,2,3]          each value as 1 byte
    u16[..] u32[..]    each value as 2 / 4 / 8 bytes, little-endian
    u64[..]
    String[text]       UTF-8 bytes of ``text``
    Pubkey[base58]     the 32 raw address bytes
    Sha256[SEED]       SHA-256 digest of another seed's encoding

Literals are parsed into a small tree of dataclasses and then encoded, so
``Sha256`` may nest to any depth.
"""

from __future__ import annotations

import hashlib
import logging
import struct
from dataclasses import dataclass
from typing import Iterable, Union

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.address import from_base58, parse_uint_list
from solpda.errors import InvalidAddressError, MalformedSeedError

logger = logging.getLogger(__name__)

_INT_FORMATS = {8: "<B", 16: "<H", 32: "<I", 64: "<Q"}
_SHA256_PREFIX = "Sha256["


@dataclass(frozen=True)
class IntSeed:
    width: int
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width not in _INT_FORMATS:
            raise ValueError(f"unsupported integer width: {self.width}")
        limit = 1 << self.width
        for v in self.values:
            if not 0 <= v < limit:
                raise ValueError(f"value {v} out of range for u{self.width}")


@dataclass(frozen=True)
class StringSeed:
    value: str


@dataclass(frozen=True)
class PubkeySeed:
    address: Pubkey


@dataclass(frozen=True)
class Sha256Seed:
    inner: Seed


Seed = Union[IntSeed, StringSeed, PubkeySeed, Sha256Seed]


def _parse_ints(literal: str, payload: str, width: int) -> IntSeed:
    try:
        return IntSeed(width, tuple(parse_uint_list(payload, width)))
    except ValueError as e:
        raise MalformedSeedError(literal, str(e)) from e


def _parse_string(literal: str, payload: str) -> StringSeed:
    try:
        payload.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedSeedError(literal, f"not valid UTF-8: {e.reason}") from e
    return StringSeed(payload)


def _parse_pubkey(literal: str, payload: str) -> PubkeySeed:
    try:
        return PubkeySeed(from_base58(payload))
    except InvalidAddressError as e:
        raise MalformedSeedError(literal, e.reason) from e


_PARSERS = {
    "u8": lambda lit, body: _parse_ints(lit, body, 8),
    "u16": lambda lit, body: _parse_ints(lit, body, 16),
    "u32": lambda lit, body: _parse_ints(lit, body, 32),
    "u64": lambda lit, body: _parse_ints(lit, body, 64),
    "String": _parse_string,
    "Pubkey": _parse_pubkey,
}


def parse_seed(literal: str) -> Seed:
    """Parse one ``TAG[payload]`` literal. Raises MalformedSeedError.

    ``Sha256[...]`` wrappers are peeled off in a loop, so nesting depth is
    not bounded by the interpreter's recursion limit.
    """
    start, end, depth = 0, len(literal), 0
    while literal.startswith(_SHA256_PREFIX, start, end) and literal.endswith(
        "]", start, end
    ):
        start += len(_SHA256_PREFIX)
        end -= 1
        depth += 1
    inner = literal[start:end]

    if not inner.endswith("]"):
        raise MalformedSeedError(inner, "missing closing ']'")
    tag, sep, body = inner[:-1].partition("[")
    if not sep:
        raise MalformedSeedError(inner, "missing opening '['")
    parser = _PARSERS.get(tag)
    if parser is None:
        raise MalformedSeedError(inner, f"unknown seed type {tag!r}")

    seed = parser(inner, body)
    for _ in range(depth):
        seed = Sha256Seed(seed)
    return seed


def encode_seed(seed: Seed) -> bytes:
    depth = 0
    while isinstance(seed, Sha256Seed):
        seed = seed.inner
        depth += 1

    if isinstance(seed, IntSeed):
        fmt = _INT_FORMATS[seed.width]
        encoded = b"".join(struct.pack(fmt, v) for v in seed.values)
    elif isinstance(seed, StringSeed):
        encoded = seed.value.encode("utf-8")
    elif isinstance(seed, PubkeySeed):
        encoded = bytes(seed.address)
    else:
        raise TypeError(f"not a seed: {seed!r}")

    for _ in range(depth):
        encoded = hashlib.sha256(encoded).digest()
    return encoded


def make_seed(literal: str) -> bytes:
    return encode_seed(parse_seed(literal))


def encode_seeds(seeds: Iterable[Union[str, Seed]]) -> bytes:
    """Encode seeds in order and concatenate them.

    Strings are parsed as literals first; the first malformed literal aborts
    the whole encoding.
    """
    out = bytearray()
    for seed in seeds:
        if isinstance(seed, str):
            seed = parse_seed(seed)
        encoded = encode_seed(seed)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s seed -> %s", type(seed).__name__, encoded.hex())
        out += encoded
    return bytes(out)
