from __future__ import annotations

import logging
import struct
from typing import Union

from .compress import compress
from .constants import BLOCK_SIZE, DIGEST_SIZE, INITIAL_STATE, LENGTH_MASK, State
from .simd import compress_x4

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview]

_LENGTH_SUFFIX = struct.Struct(">Q")
_DIGEST_WORDS = struct.Struct(">5I")


def _to_bytes(data: BufferLike) -> bytes:
	"""Return the input as bytes, raising ``TypeError`` for unsupported types."""

	if isinstance(data, (bytes, bytearray)):
		return bytes(data)

	if isinstance(data, memoryview):
		if data.format not in ("B", "b", "c"):
			raise TypeError("memoryview must be of a byte-oriented format")
		return data.tobytes()

	raise TypeError(f"data must be bytes-like, not {type(data).__name__}")


class Sha1:
	"""Incremental SHA-1.

	Input may arrive in any number of chunks; ``digest`` works on a copy of
	the running state so the engine keeps accepting input afterwards.
	"""

	name: str = "sha1"
	block_size: int = BLOCK_SIZE
	digest_size: int = DIGEST_SIZE

	def __init__(self, data: BufferLike | None = None, *, batched: bool = False):
		self.batched = batched
		self._compress = compress_x4 if batched else compress
		self._state: State = INITIAL_STATE
		self._unprocessed = b""
		self._bit_length = 0

		if data is not None:
			self.update(data)

	def reset(self) -> "Sha1":
		logger.debug("resetting sha1 state after %d bits", self._bit_length)
		self._state = INITIAL_STATE
		self._unprocessed = b""
		self._bit_length = 0
		return self

	def update(self, data: BufferLike) -> "Sha1":
		buffer = self._unprocessed + _to_bytes(data)
		end = len(buffer) - len(buffer) % self.block_size

		state = self._state
		for offset in range(0, end, self.block_size):
			state = self._compress(state, buffer[offset : offset + self.block_size])
			self._bit_length += self.block_size * 8

		self._state = state
		self._unprocessed = buffer[end:]
		return self

	def digest(self) -> bytes:
		unprocessed = self._unprocessed
		total_bits = (self._bit_length + len(unprocessed) * 8) & LENGTH_MASK

		padding = b"\x80" + b"\x00" * ((55 - len(unprocessed)) % self.block_size)
		final_message = unprocessed + padding + _LENGTH_SUFFIX.pack(total_bits)

		state = self._state
		for offset in range(0, len(final_message), self.block_size):
			state = self._compress(state, final_message[offset : offset + self.block_size])

		return _DIGEST_WORDS.pack(*state)

	def hexdigest(self) -> str:
		return self.digest().hex()

	input = update
	finish = digest
	hex = hexdigest

	def copy(self) -> "Sha1":
		clone = Sha1(batched=self.batched)
		clone._state = self._state
		clone._unprocessed = self._unprocessed
		clone._bit_length = self._bit_length
		return clone


def sha1(data: BufferLike) -> bytes:
	"""Return the SHA-1 digest for ``data`` as raw bytes."""
	return Sha1(data).digest()


def sha1_hex(data: BufferLike) -> str:
	return Sha1(data).hexdigest()
