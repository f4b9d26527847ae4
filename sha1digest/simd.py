"""Four-rounds-at-a-time SHA-1 compression.

Mirrors the data flow of the x86 SHA extensions (``sha1rnds4``,
``sha1msg1``, ``sha1msg2``, ``sha1nexte``) with 4-word ``uint32`` vectors.
Results are bit-identical to :func:`sha1digest.compress.compress`.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .compress import left_rotate
from .constants import BLOCK_SIZE, K0, K1, K2, K3, WORD_MASK, State

Vector = np.ndarray
RoundFunction = Callable[[int, int, int], int]


def _vector(words) -> Vector:
	return np.array(words, dtype=np.uint32)


def _rotate_vector(x: Vector, count: int) -> Vector:
	return (x << np.uint32(count)) | (x >> np.uint32(32 - count))


def choose(b: int, c: int, d: int) -> int:
	return d ^ (b & (c ^ d))


def parity(b: int, c: int, d: int) -> int:
	return b ^ c ^ d


def majority(b: int, c: int, d: int) -> int:
	return (b & c) ^ (b & d) ^ (c & d)


ROUND_GROUPS: tuple[tuple[RoundFunction, Vector], ...] = (
	(choose, _vector((K0,) * 4)),
	(parity, _vector((K1,) * 4)),
	(majority, _vector((K2,) * 4)),
	(parity, _vector((K3,) * 4)),
)


def first_add(e: int, w: Vector) -> Vector:
	out = w.copy()
	out[0] = (e + int(w[0])) & WORD_MASK
	return out


def first_half(abcd: Vector, msg: Vector) -> Vector:
	# e of the next group is a of the previous one rotated by 30
	return first_add(left_rotate(int(abcd[0]), 30), msg)


def sha1msg1(a: Vector, b: Vector) -> Vector:
	return a ^ np.concatenate((a[2:], b[:2]))


def sha1msg2(a: Vector, b: Vector) -> Vector:
	tail = np.zeros(4, dtype=np.uint32)
	tail[:3] = b[1:]
	x = a ^ tail
	out = _rotate_vector(x, 1)
	# w19 depends on w16 from this same group
	out[3] = left_rotate(int(x[3]) ^ int(out[0]), 1)
	return out


def schedule(v0: Vector, v1: Vector, v2: Vector, v3: Vector) -> Vector:
	return sha1msg2(sha1msg1(v0, v1) ^ v2, v3)


def rounds4(abcd: Vector, msg: Vector, f: RoundFunction) -> Vector:
	a, b, c, d = (int(x) for x in abcd)
	t, u, v, w = (int(x) for x in msg)

	e = (left_rotate(a, 5) + f(b, c, d) + t) & WORD_MASK
	b = left_rotate(b, 30)

	d = (d + left_rotate(e, 5) + f(a, b, c) + u) & WORD_MASK
	a = left_rotate(a, 30)

	c = (c + left_rotate(d, 5) + f(e, a, b) + v) & WORD_MASK
	e = left_rotate(e, 30)

	b = (b + left_rotate(c, 5) + f(d, e, a) + w) & WORD_MASK
	d = left_rotate(d, 30)

	return _vector((b, c, d, e))


def digest_round_x4(abcd: Vector, work: Vector, group: int) -> Vector:
	if not 0 <= group < len(ROUND_GROUPS):
		raise ValueError(f"Unknown round group: {group}")
	f, k = ROUND_GROUPS[group]
	return rounds4(abcd, work + k, f)


def compress_x4(state: State, block: bytes) -> State:
	if len(block) != BLOCK_SIZE:
		raise ValueError("Block size must be exactly 64 bytes")

	w = list(np.frombuffer(block, dtype=">u4").astype(np.uint32).reshape(4, 4))
	previous = _vector(state[:4])
	current = digest_round_x4(previous, first_add(state[4], w[0]), 0)

	for group in range(1, 20):
		if group >= 4:
			w.append(schedule(w[group - 4], w[group - 3], w[group - 2], w[group - 1]))
		work = first_half(previous, w[group])
		previous, current = current, digest_round_x4(current, work, group // 5)

	a, b, c, d = (int(x) for x in current)
	e = left_rotate(int(previous[0]), 30)
	return (
		(state[0] + a) & WORD_MASK,
		(state[1] + b) & WORD_MASK,
		(state[2] + c) & WORD_MASK,
		(state[3] + d) & WORD_MASK,
		(state[4] + e) & WORD_MASK,
	)
