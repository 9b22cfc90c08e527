"""File system helpers for reading sysfs and procfs values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from itertools import islice

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Jiffies:
    """CPU time counters: the total and the part spent working."""

    total: int = -1
    working: int = -1


def exists(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` can be stat'ed."""
    return os.path.exists(path)


def get_directory_entries(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in directory ``path``, or an empty list if it cannot be read."""
    try:
        return os.listdir(path)
    except OSError:
        return []


def _read_first_line(path: str | os.PathLike[str]) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return stream.readline().rstrip("\n")
    except OSError:
        return None


def get_specs_by_file_path(path: str | os.PathLike[str]) -> int:
    """Read the integer at the start of the first line of ``path``.

    Returns -1 if the file cannot be read or does not start with a number.
    """
    line = _read_first_line(path)
    if line is None:
        return -1
    match = _LEADING_INT.match(line)
    if match is None:
        return -1
    return int(match.group(1))


def get_jiffies(index: int, stat_path: str | os.PathLike[str] = "/proc/stat") -> Jiffies:
    """Read the jiffies of line ``index`` of the kernel stat file.

    Line 0 is the aggregate of all CPUs; line ``n`` is logical CPU ``n - 1``.
    Returns an empty :class:`Jiffies` if the file cannot be opened.
    """
    try:
        with open(stat_path, encoding="utf-8", errors="replace") as stream:
            line = next(islice(stream, index, None), "")
    except OSError:
        return Jiffies()

    fields = line.split()
    if len(fields) < 11:
        raise ValueError(f"malformed stat line {index}: {line!r}")
    try:
        values = [int(field) for field in fields[1:11]]
    except ValueError as exc:
        raise ValueError(f"malformed stat line {index}: {line!r}") from exc
    return Jiffies(total=sum(values), working=sum(values[:3]))