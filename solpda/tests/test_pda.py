"""PDA hashing and bump seed search tests."""

import hashlib

import pytest
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.address import to_byte_array
from solpda.config import PDA_MARKER, PROGRAM_IDS
from solpda.curve import is_on_curve
from solpda.errors import MalformedSeedError, PdaNotFoundError
from solpda.pda import (
    PdaResult,
    derive_pda,
    find_pda,
    hash_candidate,
    try_find_pda,
)
from solpda.seeds import encode_seeds

PROGRAM_ID = Pubkey.from_string(PROGRAM_IDS["spl-token"])
HELLO_SEEDS = ["u8[5,6]", "String[Hello, world!]"]


class TestHashCandidate:
    def test_layout_with_bump(self):
        seed = b"\x05\x06Hello, world!"
        expected = hashlib.sha256(
            seed + b"\xfe" + bytes(PROGRAM_ID) + b"ProgramDerivedAddress"
        ).digest()
        assert hash_candidate(seed, 254, PROGRAM_ID) == expected

    def test_layout_without_bump(self):
        expected = hashlib.sha256(b"abc" + bytes(PROGRAM_ID) + PDA_MARKER).digest()
        assert hash_candidate(b"abc", None, PROGRAM_ID) == expected

    def test_no_bump_differs_from_any_bump(self):
        no_bump = hash_candidate(b"abc", None, PROGRAM_ID)
        for bump in (0, 1, 128, 255):
            assert hash_candidate(b"abc", bump, PROGRAM_ID) != no_bump

    def test_bump_zero_is_not_absent(self):
        assert hash_candidate(b"", 0, PROGRAM_ID) != hash_candidate(b"", None, PROGRAM_ID)

    @pytest.mark.parametrize("bump", [-1, 256])
    def test_rejects_out_of_range_bump(self, bump):
        with pytest.raises(ValueError):
            hash_candidate(b"abc", bump, PROGRAM_ID)


class TestTryFindPda:
    def test_off_curve_candidate(self):
        seed = encode_seeds(HELLO_SEEDS)
        addr = try_find_pda(PROGRAM_ID, seed, 255)
        assert addr is not None
        assert not is_on_curve(bytes(addr))

    def test_on_curve_candidate(self):
        seed = encode_seeds(HELLO_SEEDS)
        assert try_find_pda(PROGRAM_ID, seed, None) is None


class TestFindPda:
    def test_bump_search_known_vector(self):
        result = find_pda(PROGRAM_ID, encode_seeds(HELLO_SEEDS))
        assert result.bump == 255
        assert to_byte_array(result.address) == (
            "[181,99,247,119,206,49,238,212,128,158,162,102,53,7,236,105,"
            "123,108,5,22,43,79,12,70,149,227,221,110,66,137,233,124]"
        )

    def test_bump_search_known_base58(self):
        result = derive_pda(PROGRAM_ID, HELLO_SEEDS + ["u8[10]"])
        assert result == PdaResult(
            Pubkey.from_string("A89GCYdsataUVrFDbrV416NEZnFZoa6X4CR5ZdSPJohC"), 255
        )

    def test_no_bump_known_vector(self):
        result = derive_pda(PROGRAM_ID, HELLO_SEEDS + ["u8[10]"], no_bump_seed=True)
        assert result.bump is None
        assert to_byte_array(result.address) == (
            "[42,46,105,65,231,188,62,57,241,154,124,211,106,133,201,219,"
            "254,69,136,17,107,6,180,194,222,36,56,108,166,70,47,226]"
        )

    def test_no_bump_not_found(self):
        with pytest.raises(PdaNotFoundError) as exc:
            derive_pda(PROGRAM_ID, HELLO_SEEDS, no_bump_seed=True)
        assert exc.value.no_bump_seed is True
        assert exc.value.program_id == PROGRAM_ID
        assert not isinstance(exc.value, ValueError)

    def test_deterministic(self):
        seed = encode_seeds(["String[vault]", "u64[42]"])
        assert find_pda(PROGRAM_ID, seed) == find_pda(PROGRAM_ID, seed)

    @pytest.mark.parametrize(
        "seeds",
        [
            [b"vault"],
            [b"metadata", bytes(PROGRAM_ID)],
            [b"a" * 32],
            [b""],
        ],
    )
    def test_matches_solders(self, seeds):
        expected_addr, expected_bump = Pubkey.find_program_address(seeds, PROGRAM_ID)
        result = find_pda(PROGRAM_ID, b"".join(seeds))
        assert result == PdaResult(expected_addr, expected_bump)

    def test_returns_largest_off_curve_bump(self):
        seed = encode_seeds(["String[largest]"])
        result = find_pda(PROGRAM_ID, seed)
        for bump in range(255, result.bump, -1):
            assert try_find_pda(PROGRAM_ID, seed, bump) is None
        assert try_find_pda(PROGRAM_ID, seed, result.bump) == result.address

    def test_skips_on_curve_bumps(self, monkeypatch):
        import solpda.pda as pda

        tried = []

        def fake_is_on_curve(data):
            tried.append(data)
            return len(tried) <= 3

        monkeypatch.setattr(pda, "is_on_curve", fake_is_on_curve)
        result = pda.find_pda(PROGRAM_ID, b"seed")
        assert result.bump == 252
        assert bytes(result.address) == hash_candidate(b"seed", 252, PROGRAM_ID)

    def test_exhaustion(self, monkeypatch):
        import solpda.pda as pda

        calls = []

        def always_on_curve(data):
            calls.append(data)
            return True

        monkeypatch.setattr(pda, "is_on_curve", always_on_curve)
        with pytest.raises(PdaNotFoundError) as exc:
            pda.find_pda(PROGRAM_ID, b"seed")
        assert exc.value.no_bump_seed is False
        assert len(calls) == 256


class TestDerivePda:
    def test_matches_manual_encoding(self):
        seeds = ["u16[513]", "Sha256[String[x]]"]
        assert derive_pda(PROGRAM_ID, seeds) == find_pda(PROGRAM_ID, encode_seeds(seeds))

    def test_malformed_seed_is_not_not_found(self):
        with pytest.raises(MalformedSeedError):
            derive_pda(PROGRAM_ID, ["u8[1]", "u8[999]"])
