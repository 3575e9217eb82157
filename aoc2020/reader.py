"""Reading puzzle input files."""

from __future__ import annotations

import os
import re
from pathlib import Path

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def read_lines(filename: str | os.PathLike[str]) -> list[str]:
    """Return the file's lines after trimming whitespace around the whole content.

    Raises OSError if the file cannot be read.
    """
    content = Path(filename).read_bytes().decode("utf-8", errors="replace")
    return content.strip().split("\n")


def _parse_int(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def read_integers(filename: str | os.PathLike[str]) -> list[int]:
    """Return the integers found one per line; lines that are not integers are skipped.

    Raises OSError if the file cannot be read.
    """
    parsed = (_parse_int(line) for line in read_lines(filename))
    return [value for value in parsed if value is not None]