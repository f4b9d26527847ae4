from __future__ import annotations

import argparse
import hashlib
import logging
import shutil
import subprocess
import sys
import time
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional, Sequence

from . import settings
from .engine import Sha1
from .logger import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def open_source(src: Optional[Path]) -> BinaryIO:
	if src is None or str(src) == "-":
		return sys.stdin.buffer
	return src.open("rb")


def iter_chunks(stream: BinaryIO, buffer_size: int) -> Iterator[bytes]:
	return iter(lambda: stream.read(buffer_size), b"")


def digest_file(src: Optional[Path], buffer_size: int, batched: bool = False) -> Sha1:
	hasher = Sha1(batched=batched)
	stream = open_source(src)
	try:
		for chunk in iter_chunks(stream, buffer_size):
			hasher.update(chunk)
	finally:
		if stream is not sys.stdin.buffer:
			stream.close()
	logger.info("hashed %s", src or "<stdin>")
	return hasher


def read_all(src: Optional[Path]) -> bytes:
	if src is None or str(src) == "-":
		return sys.stdin.buffer.read()
	return src.read_bytes()


def throughput(size: int, seconds: float) -> str:
	if seconds <= 0:
		return "inf MB/s"
	return f"{size / seconds / 1000000.0:.2f} MB/s"


def timed(desc: str, func: Callable[[], None], size: int) -> float:
	start = time.perf_counter()
	func()
	elapsed = time.perf_counter() - start
	logger.info("%s took %.6fs", desc, elapsed)
	print(f"{desc}: {throughput(size, elapsed)}")
	return elapsed


def run_sha1sum(data: bytes) -> None:
	subprocess.run(["sha1sum"], input=data, check=True)


def run_bench(data: bytes, without_sha1sum: bool = False) -> dict[str, float]:
	results: dict[str, float] = {}

	if without_sha1sum:
		logger.info("sha1sum timing disabled")
	elif shutil.which("sha1sum") is None:
		logger.warning("sha1sum program not found, skipping")
	else:
		results["sha1sum program"] = timed("sha1sum program", lambda: run_sha1sum(data), len(data))

	results["sha1digest"] = timed(
		"sha1digest",
		lambda: print(Sha1(data).hexdigest()),
		len(data),
	)
	results["sha1digest batched"] = timed(
		"sha1digest batched",
		lambda: print(Sha1(data, batched=True).hexdigest()),
		len(data),
	)
	results["hashlib"] = timed(
		"hashlib",
		lambda: print(hashlib.sha1(data).hexdigest()),
		len(data),
	)
	return results


def positive_int(text: str) -> int:
	try:
		value = int(text)
	except ValueError as exc:
		raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from exc
	if value <= 0:
		raise argparse.ArgumentTypeError(f"must be positive: {value}")
	return value


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="sha1digest",
		description="Compute SHA-1 digests with a pure Python engine",
	)
	parser.add_argument(
		"--log-level",
		type=str.upper,
		choices=LOG_LEVELS,
		default=settings.LOG_LEVEL,
		help=f"Logging level (default: {settings.LOG_LEVEL})",
	)
	subparsers = parser.add_subparsers(dest="command", required=True)

	digest_parser = subparsers.add_parser("digest", help="Hash a file or standard input")
	digest_parser.add_argument("src", type=Path, nargs="?", help="Input file, '-' or omitted for stdin")
	digest_parser.add_argument("--encoding", choices=("hex", "raw"), default="hex")
	digest_parser.add_argument("--output", type=Path, help="Write the digest here instead of stdout")
	digest_parser.add_argument(
		"--batched",
		action="store_true",
		help="Use the four-rounds-at-a-time compression",
	)
	digest_parser.add_argument(
		"--buffer-size",
		type=positive_int,
		default=settings.BUFFER_SIZE,
		help=f"Read size in bytes (default: {settings.BUFFER_SIZE})",
	)

	bench_parser = subparsers.add_parser("bench", help="Time SHA-1 implementations on one input")
	bench_parser.add_argument("src", type=Path, nargs="?", help="Input file, '-' or omitted for stdin")
	bench_parser.add_argument(
		"--without-sha1sum",
		action="store_true",
		help="Skip the external sha1sum program",
	)

	return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
	parser = build_parser()
	args = parser.parse_args(argv)
	if args.log_level not in LOG_LEVELS:
		parser.error(f"unknown log level: {args.log_level}")
	setup_logging(args.log_level)

	if args.command == "digest":
		try:
			hasher = digest_file(args.src, args.buffer_size, args.batched)
		except OSError as exc:
			parser.error(str(exc))

		if args.output:
			try:
				if args.encoding == "hex":
					args.output.write_text(hasher.hexdigest(), "ascii")
				else:
					args.output.write_bytes(hasher.digest())
			except OSError as exc:
				parser.error(str(exc))
		elif args.encoding == "hex":
			print(hasher.hexdigest())
		else:
			sys.stdout.buffer.write(hasher.digest())
			sys.stdout.flush()
	else:
		try:
			data = read_all(args.src)
		except OSError as exc:
			parser.error(str(exc))
		logger.info("read %d bytes", len(data))
		run_bench(data, args.without_sha1sum or settings.WITHOUT_SHA1SUM)
