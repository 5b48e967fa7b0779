#!/usr/bin/env python3
"""
Minimal line search for a single file.

Usage:
  minigrep <query> <file_path> [--ignore-case]

Features:
- Prints every line of the file that contains the query, in file order
- Case-insensitive search with --ignore-case or the IGNORE_CASE variable
- Direct Python API: search_file(query, path, ignore_case=...)
- No dependencies
"""

__version__ = "0.1.0"

import os
import sys
from typing import IO, Iterator, List, Optional, Sequence

from minigrep_config import USAGE, Config, ConfigParseError, build

ENCODING = "utf-8"


class FileReadError(Exception):
    """Raised when the target file cannot be read as text."""

    def __init__(self, path: str, cause: BaseException) -> None:
        # OSError messages already name the file.
        named = isinstance(cause, OSError) and cause.filename is not None
        super().__init__(str(cause) if named else f"{path}: {cause}")
        self.path = path
        self.cause = cause


def iter_lines(contents: str) -> Iterator[str]:
    # Only "\n" ends a line; a "\r" directly before it belongs to the terminator.
    pieces = contents.split("\n")
    tail = pieces.pop()
    for piece in pieces:
        yield piece[:-1] if piece.endswith("\r") else piece
    if tail:
        yield tail


def search(query: str, contents: str) -> List[str]:
    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> List[str]:
    needle = query.lower()
    return [line for line in iter_lines(contents) if needle in line.lower()]


def read_contents(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding=ENCODING, newline="") as handle:
            return handle.read()
    except (OSError, ValueError) as exc:
        raise FileReadError(file_path, exc) from exc


def search_file(query: str, file_path: str, *, ignore_case: bool = False) -> List[str]:
    """Return the lines of ``file_path`` that contain ``query``.

    Raises FileReadError if the path is unusable or the file is missing,
    unreadable, a directory or not valid UTF-8.
    """
    contents = read_contents(file_path)
    if ignore_case:
        return search_case_insensitive(query, contents)
    return search(query, contents)


def run(config: Config, *, stream: Optional[IO[str]] = None) -> None:
    """Print the matching lines of ``config.file_path``.

    Output is rendered in full before anything is written. On the process
    stdout the UTF-8 bytes go straight to the binary buffer, so the console
    encoding cannot reject a line halfway through the results.
    """
    results = search_file(config.query, config.file_path, ignore_case=config.ignore_case)
    out = stream if stream is not None else sys.stdout
    binary = getattr(out, "buffer", None) if stream is None else None
    if binary is None:
        out.write("".join(line + "\n" for line in results))
        out.flush()
        return
    out.flush()
    binary.write("".join(line + os.linesep for line in results).encode(ENCODING))
    binary.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv if argv is None else argv

    try:
        config = build(args)
    except ConfigParseError as exc:
        print(f"[error] problem parsing arguments: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    try:
        run(config)
    except FileReadError as exc:
        print(f"[error] application error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
