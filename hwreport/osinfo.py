"""Operating system name, version, kernel release, word size and byte order."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from hwreport.filesystem import exists

OS_RELEASE_PATH = "/etc/os-release"
LOADER_64_PATH = "/lib64/ld-linux-x86-64.so.2"
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class OS:
    """Facts about the running operating system."""

    name: str = ""
    version: str = ""
    kernel: str = ""
    is_32bit: bool = False
    is_64bit: bool = False
    is_big_endian: bool = False
    is_little_endian: bool = False


def _unquote_value(line: str) -> str:
    value = line[line.find("=") + 1 :]
    return value[1:-1]


def _read_os_release(path: str | os.PathLike[str]) -> tuple[str, str]:
    try:
        stream = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError:
        return "Linux", UNKNOWN
    name = version = ""
    with stream:
        for raw in stream:
            line = raw[:-1] if raw.endswith("\n") else raw
            if line.startswith("PRETTY_NAME"):
                name = _unquote_value(line)
            if line.startswith("VERSION"):
                version = _unquote_value(line)
    return name, version


def _kernel_release() -> str:
    try:
        return os.uname().release
    except (AttributeError, OSError):
        return UNKNOWN


def detect_os(
    os_release_path: str | os.PathLike[str] = OS_RELEASE_PATH,
    loader_path: str | os.PathLike[str] = LOADER_64_PATH,
) -> OS:
    """Describe the running system.

    Name and version come from ``os_release_path`` (the last line starting
    with ``VERSION`` wins); the system counts as 64 bit when ``loader_path``
    exists.
    """
    name, version = _read_os_release(os_release_path)
    is_64bit = exists(loader_path)
    return OS(
        name=name,
        version=version,
        kernel=_kernel_release(),
        is_32bit=not is_64bit,
        is_64bit=is_64bit,
        is_big_endian=sys.byteorder == "big",
        is_little_endian=sys.byteorder == "little",
    )