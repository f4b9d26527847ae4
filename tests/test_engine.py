import hashlib

import pytest

from sha1digest import Sha1, sha1, sha1_hex
from sha1digest.constants import BLOCK_SIZE, DIGEST_SIZE

KNOWN_VECTORS = [
	(b"", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
	(b"The quick brown fox jumps over the lazy dog", "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"),
	(b"The quick brown fox jumps over the lazy cog", "de9f2c7fd25e1b3afad3e85a0bd17d9b100db4b3"),
	(b"testing\n", "9801739daae44ec5293d4e1f53d3f4d2d426d91c"),
	(b"x" * 57, "025ecbd5d70f8fb3c5457cd96bab13fda305dc59"),
	(b"abc", "a9993e364706816aba3e25717850c26c9cd0d89d"),
	(
		b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
		"84983e441c3bd26ebaae4aa1f95129e5e54670f1",
	),
]


@pytest.mark.parametrize("data, expected", KNOWN_VECTORS)
def test_known_vectors(hasher, data, expected):
	hasher.update(data)
	assert hasher.hexdigest() == expected


@pytest.mark.parametrize("data, expected", KNOWN_VECTORS)
def test_reused_engine_after_reset(hasher, data, expected):
	hasher.update(b"garbage that reset must forget" * 5)
	hasher.reset()
	hasher.update(data)
	assert hasher.hexdigest() == expected
	assert hasher.digest() == Sha1(data, batched=hasher.batched).digest()


def test_multiple_updates(hasher):
	hasher.update(b"The quick brown ")
	hasher.update(b"fox jumps over ")
	hasher.update(b"the lazy dog")
	assert hasher.hexdigest() == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"


def test_loop():
	m = Sha1()
	for _ in range(3):
		m.reset()
		for _ in range(1000):
			m.update(b"The quick brown fox jumps over the lazy dog.")
		assert m.hexdigest() == "7ca27655f67fceaa78ed2e645a81c7f1d6e249d2"


def test_loop_batched():
	m = Sha1(batched=True)
	for _ in range(1000):
		m.input(b"The quick brown fox jumps over the lazy dog.")
	assert m.hex() == "7ca27655f67fceaa78ed2e645a81c7f1d6e249d2"


@pytest.mark.parametrize("size", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 129, 1000])
def test_boundaries_match_hashlib(hasher, size):
	data = bytes(i & 0xFF for i in range(size))
	hasher.update(data)
	assert hasher.digest() == hashlib.sha1(data).digest()


@pytest.mark.parametrize(
	"size, final_blocks",
	[(0, 1), (55, 1), (56, 2), (63, 2), (64, 1), (65, 1), (119, 1), (120, 2), (128, 1)],
)
def test_padding_block_count(size, final_blocks):
	m = Sha1(b"a" * size)
	calls = []
	inner = m._compress

	def counting(state, block):
		calls.append(len(block))
		return inner(state, block)

	m._compress = counting
	m.digest()
	assert calls == [BLOCK_SIZE] * final_blocks


def test_chunk_invariance(hasher, rng):
	data = bytes(rng.getrandbits(8) for _ in range(777))
	expected = hashlib.sha1(data).hexdigest()

	for _ in range(20):
		m = Sha1(batched=hasher.batched)
		offset = 0
		while offset < len(data):
			step = rng.randint(0, 150)
			m.update(data[offset : offset + step])
			offset += step
		assert m.hexdigest() == expected


def test_every_two_way_split():
	data = bytes(range(200))
	expected = Sha1(data).digest()
	for cut in range(len(data) + 1):
		m = Sha1()
		m.update(data[:cut])
		m.update(data[cut:])
		assert m.digest() == expected


def test_zero_length_update_is_noop():
	m = Sha1(b"abc")
	m.update(b"")
	m.update(bytearray())
	assert m.hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_digest_is_repeatable(hasher):
	hasher.update(b"The quick brown fox")
	first = hasher.digest()
	assert hasher.digest() == first
	assert len(first) == DIGEST_SIZE


def test_input_after_digest_continues_stream(hasher):
	hasher.update(b"The quick brown fox")
	hasher.digest()
	hasher.update(b" jumps over the lazy dog")
	assert hasher.hexdigest() == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"


def test_copy_is_independent(hasher):
	hasher.update(b"The quick brown fox")
	clone = hasher.copy()
	clone.update(b" jumps over the lazy cog")
	hasher.update(b" jumps over the lazy dog")
	assert hasher.hexdigest() == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"
	assert clone.hexdigest() == "de9f2c7fd25e1b3afad3e85a0bd17d9b100db4b3"
	assert clone.batched == hasher.batched


def test_update_chains():
	assert Sha1().update(b"ab").update(b"c").hexdigest() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_accepts_buffer_types():
	expected = sha1(b"abc")
	assert Sha1(bytearray(b"abc")).digest() == expected
	assert Sha1(memoryview(b"abc")).digest() == expected


@pytest.mark.parametrize("bad", ["abc", 123, None, [1, 2, 3]])
def test_rejects_non_bytes(bad):
	with pytest.raises(TypeError):
		Sha1().update(bad)


def test_rejects_wide_memoryview():
	view = memoryview(bytearray(8)).cast("I")
	with pytest.raises(TypeError):
		Sha1().update(view)


def test_helpers():
	assert sha1(b"") == bytes.fromhex("da39a3ee5e6b4b0d3255bfef95601890afd80709")
	assert sha1_hex(b"testing\n") == "9801739daae44ec5293d4e1f53d3f4d2d426d91c"
	assert sha1(b"abc") == hashlib.sha1(b"abc").digest()


def test_hex_format():
	out = Sha1(b"The quick brown fox jumps over the lazy dog").hexdigest()
	assert len(out) == 40
	assert out == out.lower()
	assert all(ch in "0123456789abcdef" for ch in out)


def test_attributes():
	m = Sha1()
	assert m.name == "sha1"
	assert m.digest_size == 20
	assert m.block_size == 64


def test_pending_buffer_stays_below_block_size(rng):
	m = Sha1()
	for _ in range(50):
		m.update(bytes(rng.randint(0, 200)))
		assert 0 <= len(m._unprocessed) < BLOCK_SIZE
