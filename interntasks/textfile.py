"""Write, append to and read back a small text file."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

DEFAULT_PATH = "intern.txt"
INITIAL_LINES = ("ABC", "PQR")
APPENDED_LINES = ("XYZ",)


def _write_lines(path: Path, lines: tuple[str, ...], mode: str) -> None:
    with path.open(mode, encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def write_append_read(path: str | os.PathLike[str] = DEFAULT_PATH) -> list[str]:
    """Write two lines, append a third, and return the file's lines.

    Raises OSError when the file cannot be opened.
    """
    target = Path(path)
    _write_lines(target, INITIAL_LINES, "w")
    _write_lines(target, APPENDED_LINES, "a")
    with target.open("r", encoding="utf-8") as handle:
        return handle.read().splitlines()


def main(argv: list[str] | None = None) -> int:
    """Run the write/append/read sequence and print the file's lines."""
    parser = argparse.ArgumentParser(description="Write, append and read a text file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        lines = write_append_read(args.path)
    except OSError:
        print("Unable to open the file!")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())