"""Main board identification read from the DMI tables exposed by the kernel."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

DMI_CANDIDATES = ("/sys/devices/virtual/dmi/", "/sys/class/dmi/")
UNKNOWN = "<unknown>"


@dataclass(frozen=True)
class MainBoard:
    """Vendor, name, version and serial number of the main board."""

    vendor: str = UNKNOWN
    name: str = UNKNOWN
    version: str = UNKNOWN
    serial_number: str = UNKNOWN


def get_dmi_by_name(name: str, candidates: Iterable[str | os.PathLike[str]] = DMI_CANDIDATES) -> str:
    """Return the first non-empty line of ``<candidate>/id/<name>``, trying each candidate in turn."""
    for base in candidates:
        try:
            with open(os.path.join(base, "id", name), encoding="utf-8", errors="replace", newline="") as stream:
                line = stream.readline()
        except OSError:
            continue
        value = line[:-1] if line.endswith("\n") else line
        if value:
            return value
    return UNKNOWN


def read_mainboard(candidates: Iterable[str | os.PathLike[str]] = DMI_CANDIDATES) -> MainBoard:
    """Read the board's DMI entries into a :class:`MainBoard`."""
    candidates = tuple(candidates)
    return MainBoard(
        vendor=get_dmi_by_name("board_vendor", candidates),
        name=get_dmi_by_name("board_name", candidates),
        version=get_dmi_by_name("board_version", candidates),
        serial_number=get_dmi_by_name("board_serial", candidates),
    )