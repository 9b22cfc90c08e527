"""System memory sizes read from ``/proc/meminfo``."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from hwreport.stringutils import split, strip

MEMINFO_PATH = "/proc/meminfo"
UNKNOWN = "<unknown>"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class MemInfo:
    """Total, free and available memory in bytes; -1 when unknown."""

    total: int = -1
    free: int = -1
    available: int = -1


def _sysconf(name: str) -> int:
    try:
        return os.sysconf(name)
    except (AttributeError, ValueError, OSError):
        return -1


def _fill_from_sysconf(info: MemInfo) -> None:
    pages = _sysconf("SC_PHYS_PAGES")
    available_pages = _sysconf("SC_AVPHYS_PAGES")
    page_size = _sysconf("SC_PAGESIZE")
    if pages > 0 and page_size > 0:
        info.total = pages * page_size
    if available_pages > 0 and page_size > 0:
        info.available = available_pages * page_size


def _parse_kib(line: str) -> int | None:
    parts = split(line, ":")
    if len(parts) != 2:
        return None
    value = strip(parts[1])
    space = value.find(" ")
    if space == -1:
        return None
    match = _LEADING_INT.match(value[:space])
    if match is None:
        raise ValueError(f"invalid memory value: {line!r}")
    return int(match.group(1)) * 1024


def parse_meminfo(path: str | os.PathLike[str] = MEMINFO_PATH) -> MemInfo:
    """Read total, free and available memory from ``path``.

    When the file cannot be opened, or ends before total or available memory
    is found, the values reported by ``sysconf`` are used instead.
    """
    info = MemInfo()
    try:
        stream = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError:
        _fill_from_sysconf(info)
        return info
    with stream:
        lines = (raw[:-1] if raw.endswith("\n") else raw for raw in stream)
        while -1 in (info.total, info.available, info.free):
            line = next(lines, None)
            if line is None:
                if info.total == -1 or info.available == -1:
                    _fill_from_sysconf(info)
                return info
            if line.startswith("MemTotal"):
                info.total = _value_or(line, info.total)
            elif line.startswith("MemFree"):
                info.free = _value_or(line, info.free)
            elif line.startswith("MemAvailable"):
                info.available = _value_or(line, info.available)
    return info


def _value_or(line: str, current: int) -> int:
    value = _parse_kib(line)
    return current if value is None else value


class RAM:
    """System memory. Only the total size is known besides free and available memory."""

    def __init__(self, meminfo_path: str | os.PathLike[str] = MEMINFO_PATH) -> None:
        self.meminfo_path = meminfo_path
        self.vendor = UNKNOWN
        self.name = UNKNOWN
        self.model = UNKNOWN
        self.serial_number = UNKNOWN
        self.total_bytes = parse_meminfo(meminfo_path).total
        self.frequency_hz = -1

    def __repr__(self) -> str:
        return f"RAM(total_bytes={self.total_bytes!r})"

    def free_bytes(self) -> int:
        """Return the currently free memory in bytes, or -1."""
        return parse_meminfo(self.meminfo_path).free

    def available_bytes(self) -> int:
        """Return the currently available memory in bytes, or -1."""
        return parse_meminfo(self.meminfo_path).available