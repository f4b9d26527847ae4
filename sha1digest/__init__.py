"""Pure Python incremental SHA-1."""

from .compress import compress
from .engine import Sha1, sha1, sha1_hex
from .simd import compress_x4

__all__ = ["Sha1", "compress", "compress_x4", "sha1", "sha1_hex"]
