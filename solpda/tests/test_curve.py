"""Curve membership tests."""

import hashlib

import pytest
from solders.keypair import Keypair  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.curve import is_on_curve
from solpda.errors import InvalidAddressError

PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")


def test_keypair_public_key_is_on_curve():
    for _ in range(4):
        assert is_on_curve(bytes(Keypair().pubkey()))


def test_identity_point_is_on_curve():
    assert is_on_curve(b"\x01" + bytes(31))


def test_pda_is_off_curve():
    addr, _ = Pubkey.find_program_address([b"vault"], PROGRAM_ID)
    assert not is_on_curve(bytes(addr))


def test_total_over_arbitrary_bytes():
    patterns = [bytes(32), b"\xff" * 32, b"\x80" * 32, bytes(range(32))]
    patterns += [hashlib.sha256(bytes([i])).digest() for i in range(64)]
    for data in patterns:
        assert isinstance(is_on_curve(data), bool)


def test_accepts_bytearray():
    assert is_on_curve(bytearray(b"\x01" + bytes(31)))


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_rejects_wrong_length(length):
    with pytest.raises(InvalidAddressError):
        is_on_curve(bytes(length))
