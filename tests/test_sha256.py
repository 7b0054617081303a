import hashlib

import pytest

from dmrlink.sha256 import SHA256, sha256_digest


@pytest.mark.parametrize("length", [0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000])
def test_digest_matches_reference(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert sha256_digest(data) == hashlib.sha256(data).digest()


def test_known_digest_of_abc():
    assert sha256_digest(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_digest_size():
    assert len(sha256_digest(b"hello")) == 32


@pytest.mark.parametrize("chunk", [1, 5, 63, 64, 65, 200])
def test_incremental_equals_one_shot(chunk):
    data = bytes(range(256)) * 3
    ctx = SHA256()
    for start in range(0, len(data), chunk):
        ctx.process_bytes(data[start:start + chunk])
    assert ctx.finish() == sha256_digest(data)


def test_process_block_then_bytes():
    data = bytes(range(200))
    ctx = SHA256()
    ctx.process_block(data[:128])
    ctx.process_bytes(data[128:])
    assert ctx.finish() == hashlib.sha256(data).digest()


def test_process_block_rejects_partial_block():
    with pytest.raises(ValueError):
        SHA256().process_block(b"x" * 65)


def test_read_after_reset_gives_initial_state():
    ctx = SHA256()
    ctx.process_bytes(b"some data" * 20)
    ctx.reset()
    assert ctx.read() == bytes.fromhex(
        "6a09e667bb67ae853c6ef372a54ff53a510e527f9b05688c1f83d9ab5be0cd19"
    )


def test_buffer_resets_previous_state():
    ctx = SHA256()
    ctx.process_bytes(b"junk that should be discarded")
    assert ctx.buffer(b"message") == hashlib.sha256(b"message").digest()


def test_context_reusable_after_buffer():
    ctx = SHA256()
    first = ctx.buffer(b"one")
    second = ctx.buffer(b"two")
    assert first == hashlib.sha256(b"one").digest()
    assert second == hashlib.sha256(b"two").digest()


def test_accepts_bytearray():
    data = bytearray(b"payload" * 30)
    assert sha256_digest(data) == hashlib.sha256(bytes(data)).digest()