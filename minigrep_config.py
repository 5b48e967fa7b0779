"""Command-line configuration for minigrep."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

IGNORE_CASE_FLAG = "--ignore-case"
IGNORE_CASE_ENV = "IGNORE_CASE"
USAGE = f"Usage: minigrep <query> <file_path> [{IGNORE_CASE_FLAG}]"


class ConfigParseError(ValueError):
    """Raised when the command line does not describe a search."""


class MissingQueryError(ConfigParseError):
    def __init__(self) -> None:
        super().__init__("Didn't get a query string")


class MissingFilePathError(ConfigParseError):
    def __init__(self) -> None:
        super().__init__("Didn't get a filepath")


@dataclass(frozen=True)
class Config:
    query: str
    file_path: str
    ignore_case: bool = False


def build(args: Iterable[str], *, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a Config from argv-style tokens.

    The first token is the program name and is skipped. The next two are the
    query and the file path, taken positionally even when they look like
    flags. Only tokens after those two are scanned for ``--ignore-case``;
    without the flag, the presence of ``IGNORE_CASE`` in the environment
    turns case-insensitive search on regardless of its value.
    """
    tokens = iter(args)
    next(tokens, None)

    query = next(tokens, None)
    if query is None:
        raise MissingQueryError()

    file_path = next(tokens, None)
    if file_path is None:
        raise MissingFilePathError()

    env = os.environ if environ is None else environ
    ignore_case = any(arg == IGNORE_CASE_FLAG for arg in tokens) or IGNORE_CASE_ENV in env

    return Config(query=query, file_path=file_path, ignore_case=ignore_case)
