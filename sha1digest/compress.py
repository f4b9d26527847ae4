import struct

from .constants import BLOCK_SIZE, K0, K1, K2, K3, WORD_MASK, State

_BLOCK_WORDS = struct.Struct(">16I")


def left_rotate(value: int, count: int) -> int:
	return ((value << count) | (value >> (32 - count))) & WORD_MASK


def expand(block: bytes) -> list[int]:
	"""Load the 16 big-endian words of ``block`` and extend them to 80."""
	w = list(_BLOCK_WORDS.unpack(block))
	for i in range(16, 80):
		w.append(left_rotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
	return w


def compress(state: State, block: bytes) -> State:
	"""Mix one 64-byte block into ``state`` and return the new state."""
	if len(block) != BLOCK_SIZE:
		raise ValueError("Block size must be exactly 64 bytes")

	w = expand(block)
	a, b, c, d, e = state

	for i in range(80):
		if i < 20:
			f = (b & c) | ((~b & WORD_MASK) & d)
			k = K0
		elif i < 40:
			f = b ^ c ^ d
			k = K1
		elif i < 60:
			f = (b & c) | (b & d) | (c & d)
			k = K2
		else:
			f = b ^ c ^ d
			k = K3

		temp = (left_rotate(a, 5) + f + e + k + w[i]) & WORD_MASK
		e = d
		d = c
		c = left_rotate(b, 30)
		b = a
		a = temp

	return (
		(state[0] + a) & WORD_MASK,
		(state[1] + b) & WORD_MASK,
		(state[2] + c) & WORD_MASK,
		(state[3] + d) & WORD_MASK,
		(state[4] + e) & WORD_MASK,
	)
