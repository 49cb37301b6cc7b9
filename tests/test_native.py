import hashlib
import random

import pytest

from zksha256.constants import IV, K, initial_state, round_constants
from zksha256.errors import FormatError, InvariantViolation
from zksha256.helpers import pad, to_bits
from zksha256.native import NativeSha256
from zksha256.sha_round import sha_round
from zksha256.types import field_for

EMPTY = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
ZERO_BYTE = "6e340b9cffb37a989ca544e6bb780a2c78901d3fb33738768511a30617afa01d"


def test_constants_tables(field):
    h = initial_state(field)
    k = round_constants(field)
    assert [w.to_int() for w in h] == list(IV)
    assert [w.to_int() for w in k] == list(K)
    # built once per field
    assert initial_state(field) is h
    assert round_constants(field) is k


def test_empty_message(field):
    assert NativeSha256(field).hash(b"").hex() == EMPTY


def test_zero_byte(field):
    digest = NativeSha256(field).hash(b"\x00")
    assert digest.hex() == ZERO_BYTE
    assert digest.to_bytes() == hashlib.sha256(b"\x00").digest()


def test_abc(field):
    digest = NativeSha256(field).hash(b"abc")
    assert digest.words()[0] == 0xba7816bf
    assert digest.hex() == hashlib.sha256(b"abc").hexdigest()


@pytest.mark.parametrize("n", [55, 56, 64])
def test_block_boundaries(field, n):
    message = bytes(range(n))
    assert NativeSha256(field).hash(message).hex() == hashlib.sha256(message).hexdigest()


def test_hash_hex(field):
    rng = random.Random(3)
    message = bytes(rng.randrange(256) for _ in range(64))
    digest = NativeSha256(field).hash_hex(message.hex())
    assert digest.hex() == hashlib.sha256(message).hexdigest()


def test_hash_hex_rejects_malformed(field):
    with pytest.raises(FormatError):
        NativeSha256(field).hash_hex("abc")
    with pytest.raises(FormatError):
        NativeSha256(field).hash_hex("xy")


def test_hash_padded(field):
    padded, _ = pad(to_bits(b"circuit", field), field=field)
    digest = NativeSha256(field).hash_padded(padded)
    assert digest.hex() == hashlib.sha256(b"circuit").hexdigest()


def test_hash_padded_rejects_misaligned(field):
    padded, _ = pad(to_bits(b"circuit", field), field=field)
    with pytest.raises(InvariantViolation):
        NativeSha256(field).hash_padded(padded[:-1])


def test_other_field_gives_same_digest():
    message = b"The quick brown fox"
    expected = hashlib.sha256(message).hexdigest()
    assert NativeSha256(field_for("pasta")).hash(message).hex() == expected
    assert NativeSha256(field_for("bn256")).hash(message).hex() == expected


def test_sha_round_accepts_words(field):
    padded, _ = pad(to_bits(b"abc", field), field=field)
    from_bits = sha_round(padded, initial_state(field), field)
    words = [padded[i:i + 32] for i in range(0, 512, 32)]
    from_words = sha_round(words, initial_state(field), field)
    assert from_bits == from_words


def test_hash_padded_rejects_non_binary(field):
    padded, _ = pad(to_bits(b"circuit", field), field=field)
    padded[0] = field(2)
    with pytest.raises(FormatError):
        NativeSha256(field).hash_padded(padded)


def test_sha_round_rejects_non_binary_words(field):
    padded, _ = pad(to_bits(b"abc", field), field=field)
    words = [list(padded[i:i + 32]) for i in range(0, 512, 32)]
    words[3][7] = field(5)
    with pytest.raises(FormatError):
        sha_round(words, initial_state(field), field)
