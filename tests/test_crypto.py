import pytest

from evmstate.crypto import keccak256, rlp_encode


def test_keccak_empty():
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_keccak_is_deterministic_and_32_bytes():
    assert len(keccak256(b"abc")) == 32
    assert keccak256(b"abc") == keccak256(bytearray(b"abc"))
    assert keccak256(b"abc") != keccak256(b"abd")


def test_rlp_short_string():
    assert rlp_encode(b"dog") == b"\x83dog"


def test_rlp_single_low_byte_is_itself():
    assert rlp_encode(b"\x7f") == b"\x7f"
    assert rlp_encode(b"\x80")[1:] == b"\x80"


def test_rlp_zero_and_empty():
    assert rlp_encode(0) == rlp_encode(b"")
    assert rlp_encode([]) == b"\xc0"


def test_rlp_integer_matches_big_endian_bytes():
    assert rlp_encode(1024) == rlp_encode((1024).to_bytes(2, "big"))
    assert rlp_encode(15) == b"\x0f"


def test_rlp_long_string_prefix():
    payload = b"a" * 56
    encoded = rlp_encode(payload)
    assert encoded.endswith(payload)
    assert len(encoded) == len(payload) + 2
    assert encoded[1] == len(payload)


def test_rlp_list_concatenates_items():
    encoded = rlp_encode([b"cat", b"dog"])
    body = rlp_encode(b"cat") + rlp_encode(b"dog")
    assert encoded[1:] == body
    assert encoded[0] - 0xC0 == len(body)


def test_rlp_nested_list():
    inner = rlp_encode([b"x"])
    assert rlp_encode([[b"x"]])[1:] == inner


def test_rlp_rejects_bad_items():
    with pytest.raises(ValueError):
        rlp_encode(-1)
    with pytest.raises(TypeError):
        rlp_encode("text")
    with pytest.raises(TypeError):
        rlp_encode(True)