import pytest

from _helpers import h
from merkle_engine.errors import UnsupportedAlgorithm
from merkle_engine.hasher import SUPPORTED_ALGORITHMS, Hasher, resolve_algorithm


def test_default_is_sha256():
    hasher = Hasher()
    assert hasher.algorithm == "sha256"
    assert hasher.digest_size == 32
    assert hasher.hex_length == 64
    assert hasher.hash("hello") == h("hello")


def test_text_is_utf8():
    assert Hasher().hash("héllo") == Hasher().hash("héllo".encode("utf-8"))


def test_hash_pair_concatenates_hex_text():
    hasher = Hasher()
    a, b = hasher.hash("a"), hasher.hash("b")
    assert hasher.hash_pair(a, b) == h(a + b)
    assert hasher.hash_pair(a, b) != hasher.hash_pair(b, a)


@pytest.mark.parametrize("name", sorted(SUPPORTED_ALGORITHMS))
def test_supported_algorithms(name):
    hasher = Hasher(name)
    assert hasher.is_digest(hasher.hash(b"x"))


def test_names_are_case_insensitive():
    assert resolve_algorithm(" SHA512 ") == "sha512"


@pytest.mark.parametrize("name", ["md4", "shake_128", "", "sha-256", None])
def test_unsupported(name):
    with pytest.raises(UnsupportedAlgorithm):
        Hasher(name)


def test_is_digest():
    hasher = Hasher()
    d = hasher.hash("x")
    assert hasher.is_digest(d)
    assert not hasher.is_digest(d.upper())
    assert not hasher.is_digest(d[:-1])
    assert not hasher.is_digest(d[:-1] + "g")
    assert not hasher.is_digest(d.encode())
    assert not Hasher("sha512").is_digest(d)


def test_rejects_non_bytes_input():
    with pytest.raises(TypeError):
        Hasher().hash(123)


def test_equality():
    assert Hasher("sha256") == Hasher("SHA256")
    assert Hasher("sha256") != Hasher("sha512")
