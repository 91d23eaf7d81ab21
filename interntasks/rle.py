"""Run-length encoding of byte data, single- and multi-threaded."""

from __future__ import annotations

import argparse
import itertools
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import BinaryIO

MAX_RUN = 255
TEST_LINE = b"This is a test line with some repeated characters aaaaaaaand some more...\n"

PathLike = str | os.PathLike[str]


class RLEError(ValueError):
    """Raised for malformed encoded data or unusable files."""


def compress(data: bytes) -> bytes:
    """Encode data as (byte, count) pairs with counts of at most 255."""
    out = bytearray()
    for value, group in itertools.groupby(data):
        remaining = sum(1 for _ in group)
        while remaining:
            take = min(remaining, MAX_RUN)
            out += bytes((value, take))
            remaining -= take
    return bytes(out)


def decompress(data: bytes) -> bytes:
    """Expand (byte, count) pairs back into the original data."""
    if len(data) % 2:
        raise RLEError("Invalid RLE data")
    return b"".join(bytes((value,)) * count for value, count in zip(data[0::2], data[1::2]))


_CODECS = {True: compress, False: decompress}
_LABELS = {True: "Compression", False: "Decompression"}


def _read_input(path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise RLEError("Cannot open input file") from exc


def _open_output(path: PathLike) -> BinaryIO:
    try:
        return open(path, "wb")
    except OSError as exc:
        raise RLEError("Cannot open output file") from exc


def _split(data: bytes, parts: int, encoding: bool) -> list[bytes]:
    """Cut data into parts without splitting a run (encoding) or a pair (decoding)."""
    size = len(data)
    chunk_size = size // parts
    bounds = [0]
    for index in range(1, parts):
        start = max(index * chunk_size, bounds[-1])
        if encoding:
            while 0 < start < size and data[start] == data[start - 1]:
                start += 1
        elif start % 2:
            start += 1
        bounds.append(min(start, size))
    bounds.append(size)
    return [data[begin:end] for begin, end in itertools.pairwise(bounds)]


def process_file(
    input_path: PathLike, output_path: PathLike, compress: bool, thread_count: int
) -> bytes:
    """Encode or decode a file using several worker threads; return what was written."""
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    encoding = bool(compress)
    data = _read_input(input_path)
    with _open_output(output_path) as out:
        codec = _CODECS[encoding]
        started = time.perf_counter()
        chunks = _split(data, thread_count, encoding)
        with ThreadPoolExecutor(max_workers=thread_count) as pool:
            result = b"".join(pool.map(codec, chunks))
        out.write(result)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
    print(f"{_LABELS[encoding]} with {thread_count} threads took: {elapsed_ms} ms")
    return result


def process_file_single_thread(
    input_path: PathLike, output_path: PathLike, compress: bool
) -> bytes:
    """Encode or decode a file in the calling thread; return what was written."""
    encoding = bool(compress)
    data = _read_input(input_path)
    with _open_output(output_path) as out:
        started = time.perf_counter()
        result = _CODECS[encoding](data)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        out.write(result)
    print(f"{_LABELS[encoding]} (single-threaded) took: {elapsed_ms} ms")
    return result


def _read_or_empty(path: PathLike) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""


def validate_files(original: PathLike, decompressed: PathLike) -> bool:
    """Report whether two files hold the same bytes; unreadable files count as empty."""
    original_content = _read_or_empty(original)
    decompressed_content = _read_or_empty(decompressed)
    if original_content == decompressed_content:
        print("Validation successful: files match")
        return True
    print("Validation failed: files differ")
    print(f"Original size: {len(original_content)}")
    print(f"Decompressed size: {len(decompressed_content)}")
    return False


def main(argv: list[str] | None = None) -> int:
    """Generate a test file and compare single- and multi-threaded runs."""
    parser = argparse.ArgumentParser(description="Run-length encoding benchmark.")
    parser.add_argument("--directory", default=".", help="where the files are written")
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--lines", type=int, default=100000)
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    input_file = directory / "input.txt"
    compressed_file = directory / "compressed.rle"
    decompressed_file = directory / "decompressed.txt"

    try:
        input_file.write_bytes(TEST_LINE * args.lines)

        print("=== Single-threaded ===")
        process_file_single_thread(input_file, compressed_file, True)
        process_file_single_thread(compressed_file, decompressed_file, False)
        validate_files(input_file, decompressed_file)

        print(f"\n=== Multi-threaded ({args.threads} threads) ===")
        process_file(input_file, compressed_file, True, args.threads)
        process_file(compressed_file, decompressed_file, False, args.threads)
        validate_files(input_file, decompressed_file)
    except (RLEError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())