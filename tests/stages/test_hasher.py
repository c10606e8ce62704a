"""Tests for input hashing."""

import pytest

from identicon.stages.hasher import hash_to_bytes, DIGEST_SIZE
from tests.helpers.vectors import APPLE_HASH, BALL_HASH

pytestmark = pytest.mark.unit


def test_reference_vector_apple():
    assert hash_to_bytes("apple") == APPLE_HASH


def test_reference_vector_ball():
    assert hash_to_bytes("ball") == BALL_HASH


@pytest.mark.parametrize("text", ["", "a", "apple", "x" * 10_000, "日本語", "\x00\xff"])
def test_digest_is_fixed_length_bytes(text):
    digest = hash_to_bytes(text)
    assert len(digest) == DIGEST_SIZE == 16
    assert all(0 <= b <= 255 for b in digest)


def test_empty_string_is_valid():
    # md5("") = d41d8cd98f00b204e9800998ecf8427e
    assert hash_to_bytes("") == list(bytes.fromhex("d41d8cd98f00b204e9800998ecf8427e"))


def test_str_is_hashed_as_utf8_bytes():
    assert hash_to_bytes("café") == hash_to_bytes("café".encode("utf-8"))


def test_no_unicode_normalization():
    composed = "\u00e9"
    decomposed = "e\u0301"
    assert hash_to_bytes(composed) != hash_to_bytes(decomposed)


def test_deterministic():
    assert hash_to_bytes("ball") == hash_to_bytes("ball")


@pytest.mark.parametrize("algorithm", ["blake2b", "blake2s"])
def test_blake2_variants_are_16_bytes(algorithm):
    digest = hash_to_bytes("apple", algorithm=algorithm)
    assert len(digest) == 16
    assert digest != APPLE_HASH


def test_key_changes_blake2_digest():
    plain = hash_to_bytes("apple", algorithm="blake2b")
    keyed = hash_to_bytes("apple", algorithm="blake2b", key=b"secret")
    assert plain != keyed
    assert keyed == hash_to_bytes("apple", algorithm="blake2b", key=b"secret")


def test_md5_rejects_key():
    with pytest.raises(ValueError, match="md5"):
        hash_to_bytes("apple", key=b"secret")


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError, match="Unknown hash algorithm"):
        hash_to_bytes("apple", algorithm="sha1")
